"""
ソーシャルネットワーク状態
プロセス全体の可変状態を1つのインスタンスにまとめる
"""

from typing import Any

from ..models.account import Account
from .communities import CommunityRegistry
from .directory import AccountDirectory
from .mailbox import Mailbox
from .relationships import RelationshipGraph
from .sessions import SessionRegistry

SNAPSHOT_VERSION = 1


class SocialNetwork:
    """
    アカウント・セッション・関係性・メールボックス・コミュニティの所有者

    明示的に生成し、reset() で初期状態へ戻す。
    セッションはスナップショットに含めない。
    """

    def __init__(self):
        self.directory = AccountDirectory()
        self.sessions = SessionRegistry()
        self.graph = RelationshipGraph(self.directory)
        self.mailbox = Mailbox()
        self.communities = CommunityRegistry()

    def reset(self) -> None:
        """全データを消去"""
        self.directory.clear()
        self.sessions.clear()
        self.graph.clear()
        self.mailbox.clear()
        self.communities.clear()

    def to_snapshot(self) -> dict[str, Any]:
        return {
            "version": SNAPSHOT_VERSION,
            "accounts": [account.to_dict() for account in self.directory],
            "relationships": self.graph.to_list(),
            "mailboxes": self.mailbox.to_dict(),
            "communities": self.communities.to_list(),
        }

    def restore(self, snapshot: dict[str, Any]) -> None:
        """スナップショットから状態を復元（セッションは破棄）"""
        self.reset()
        for data in snapshot.get("accounts", []):
            self.directory.create(Account.from_dict(data))
        self.graph.restore(snapshot.get("relationships", []))
        self.mailbox.restore(snapshot.get("mailboxes", {}))
        self.communities.restore(snapshot.get("communities", []))
