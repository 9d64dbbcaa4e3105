"""
セッションレジストリ
セッションハンドルから操作中のアカウントIDを解決する
"""

from ...core.exceptions import UnknownSessionError


class SessionRegistry:
    """
    インメモリのセッション管理

    ハンドルは "session1", "session2", ... の連番。永続化はしない。
    """

    def __init__(self):
        self._sessions: dict[str, str] = {}
        self._counter = 0

    def open(self, account_id: str) -> str:
        """新しいセッションを発行"""
        self._counter += 1
        session_id = f"session{self._counter}"
        self._sessions[session_id] = account_id
        return session_id

    def current_account(self, session_id: str) -> str:
        """セッションに紐づくアカウントIDを取得"""
        account_id = self._sessions.get(session_id)
        if account_id is None:
            raise UnknownSessionError(session_id)
        return account_id

    def invalidate_account(self, account_id: str) -> int:
        """アカウントの全セッションを無効化"""
        stale = [sid for sid, owner in self._sessions.items() if owner == account_id]
        for session_id in stale:
            del self._sessions[session_id]
        return len(stale)

    def clear(self) -> None:
        self._sessions.clear()
        self._counter = 0
