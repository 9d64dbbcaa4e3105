"""
関係性モデル
アカウントごとの友人・ファン・片思い・敵の関係集合
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class RelationKind(Enum):
    """一方向の関係種別"""
    IDOL = "idol"       # 憧れ（ファンとして登録）
    CRUSH = "crush"     # 片思い（相互なら通知）
    ENEMY = "enemy"     # 敵（憧れ・片思いをブロック）


@dataclass
class RelationshipState:
    """
    アカウント1件分の関係状態

    集合は挿入順を保つため dict をキーのみで使う。
    friends と pending_requests に同じIDが同時に入ることはない。
    """

    account_id: str
    friends: dict[str, None] = field(default_factory=dict)
    pending_requests: dict[str, None] = field(default_factory=dict)
    idols: dict[str, None] = field(default_factory=dict)
    crushes: dict[str, None] = field(default_factory=dict)
    enemies: dict[str, None] = field(default_factory=dict)

    def relation_set(self, kind: RelationKind) -> dict[str, None]:
        """関係種別に対応する集合を取得"""
        if kind is RelationKind.IDOL:
            return self.idols
        if kind is RelationKind.CRUSH:
            return self.crushes
        return self.enemies

    def all_sets(self) -> tuple[dict[str, None], ...]:
        return (self.friends, self.pending_requests, self.idols, self.crushes, self.enemies)

    def forget(self, account_id: str) -> None:
        """指定アカウントへの参照をすべて削除"""
        for relation in self.all_sets():
            relation.pop(account_id, None)

    def to_dict(self) -> dict[str, Any]:
        return {
            "account_id": self.account_id,
            "friends": list(self.friends),
            "pending_requests": list(self.pending_requests),
            "idols": list(self.idols),
            "crushes": list(self.crushes),
            "enemies": list(self.enemies),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RelationshipState":
        return cls(
            account_id=data["account_id"],
            friends=dict.fromkeys(data.get("friends", [])),
            pending_requests=dict.fromkeys(data.get("pending_requests", [])),
            idols=dict.fromkeys(data.get("idols", [])),
            crushes=dict.fromkeys(data.get("crushes", [])),
            enemies=dict.fromkeys(data.get("enemies", [])),
        )
