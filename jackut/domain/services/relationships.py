"""
関係性グラフ
アカウント間の友人申請・憧れ・片思い・敵の遷移ルールを管理する

グラフ自体は副作用を持たない。相互片思いの通知などは
呼び出し側（InteractionService）の責務。
"""

from typing import Any

from ...core.exceptions import (
    AlreadyDeclaredError,
    AlreadyFriendsError,
    InteractionBlockedError,
    RequestAlreadyPendingError,
    SelfRelationError,
    UnknownAccountError,
)
from ..models.relationship import RelationKind, RelationshipState
from .directory import AccountDirectory


class RelationshipGraph:
    """
    関係性グラフ

    状態遷移:
        友人: Unrelated → Pending → Friends（Friendsは終端）
        憧れ/片思い/敵: Absent → Declared（Declaredは終端）
    敵関係はどちら向きでも、そのペアの憧れ・片思い登録をブロックする。
    """

    def __init__(self, directory: AccountDirectory):
        self.directory = directory
        self._states: dict[str, RelationshipState] = {}

    def state_for(self, account_id: str) -> RelationshipState:
        """アカウントの関係状態を取得（なければ作成）"""
        state = self._states.get(account_id)
        if state is None:
            state = RelationshipState(account_id=account_id)
            self._states[account_id] = state
        return state

    def _peek(self, account_id: str) -> RelationshipState | None:
        return self._states.get(account_id)

    def _ensure_known(self, *account_ids: str) -> None:
        for account_id in account_ids:
            if not self.directory.exists(account_id):
                raise UnknownAccountError(account_id)

    # === 友人 ===

    def request_friendship(self, requester: str, target: str) -> bool:
        """
        友人申請

        相手から既に申請を受けている場合は承認として扱い、双方を友人にする。

        Returns:
            bool: 友人関係が成立した場合True、申請が保留された場合False
        """
        self._ensure_known(requester, target)
        if requester == target:
            raise SelfRelationError("friend", actor=requester)

        mine = self.state_for(requester)
        theirs = self.state_for(target)

        if target in mine.friends:
            raise AlreadyFriendsError(actor=requester, target=target)
        if requester in theirs.pending_requests:
            raise RequestAlreadyPendingError(actor=requester, target=target)

        if target in mine.pending_requests:
            del mine.pending_requests[target]
            mine.friends[target] = None
            theirs.friends[requester] = None
            return True

        theirs.pending_requests[requester] = None
        return False

    # === 一方向の関係 ===

    def _check_enemies(self, actor: str, target: str) -> None:
        if self.is_enemy(actor, target) or self.is_enemy(target, actor):
            raise InteractionBlockedError(
                self.directory.get(target).name, actor=actor, target=target
            )

    def _declare(self, kind: RelationKind, actor: str, target: str) -> None:
        self._ensure_known(actor, target)
        if actor == target:
            raise SelfRelationError(kind.value, actor=actor)
        if kind is not RelationKind.ENEMY:
            self._check_enemies(actor, target)

        relation = self.state_for(actor).relation_set(kind)
        if target in relation:
            raise AlreadyDeclaredError(kind.value, actor=actor, target=target)
        relation[target] = None

    def declare_idol(self, actor: str, target: str) -> None:
        self._declare(RelationKind.IDOL, actor, target)

    def declare_crush(self, actor: str, target: str) -> bool:
        """
        片思いを登録

        Returns:
            bool: 相手も actor を片思い登録済み（相互）ならTrue
        """
        self._declare(RelationKind.CRUSH, actor, target)
        return self.is_crush(target, actor)

    def declare_enemy(self, actor: str, target: str) -> None:
        self._declare(RelationKind.ENEMY, actor, target)

    # === 参照系（未知のIDでも失敗しない） ===

    def _has(self, kind: str, owner: str, other: str) -> bool:
        state = self._peek(owner)
        return state is not None and other in getattr(state, kind)

    def is_friend(self, account_id: str, other: str) -> bool:
        return self._has("friends", account_id, other)

    def has_pending_request(self, account_id: str, requester: str) -> bool:
        return self._has("pending_requests", account_id, requester)

    def is_idol(self, fan: str, idol: str) -> bool:
        return self._has("idols", fan, idol)

    def is_crush(self, account_id: str, crush: str) -> bool:
        return self._has("crushes", account_id, crush)

    def is_enemy(self, account_id: str, enemy: str) -> bool:
        return self._has("enemies", account_id, enemy)

    def _list(self, kind: str, account_id: str) -> list[str]:
        state = self._peek(account_id)
        return list(getattr(state, kind)) if state else []

    def friends_of(self, account_id: str) -> list[str]:
        return self._list("friends", account_id)

    def pending_requests_of(self, account_id: str) -> list[str]:
        return self._list("pending_requests", account_id)

    def idols_of(self, account_id: str) -> list[str]:
        return self._list("idols", account_id)

    def crushes_of(self, account_id: str) -> list[str]:
        return self._list("crushes", account_id)

    def enemies_of(self, account_id: str) -> list[str]:
        return self._list("enemies", account_id)

    def fans_of(self, idol: str) -> list[str]:
        """idol を憧れとして登録しているアカウント"""
        return [
            state.account_id for state in self._states.values()
            if idol in state.idols
        ]

    # === 削除・永続化 ===

    def remove_account(self, account_id: str) -> None:
        """アカウントへの全参照と自身の状態を削除（冪等）"""
        self._states.pop(account_id, None)
        for state in self._states.values():
            state.forget(account_id)

    def clear(self) -> None:
        self._states.clear()

    def to_list(self) -> list[dict[str, Any]]:
        return [state.to_dict() for state in self._states.values()]

    def restore(self, states: list[dict[str, Any]]) -> None:
        self._states = {}
        for data in states:
            state = RelationshipState.from_dict(data)
            self._states[state.account_id] = state
