"""
コミュニティモデル
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Any

from .message import Message


@dataclass
class Community:
    """
    コミュニティ

    members は参加順。各メンバーは必ず1つのキューを持つ。
    """

    name: str
    description: str
    owner: str
    members: list[str] = field(default_factory=list)
    queues: dict[str, deque[Message]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.members:
            self.members.append(self.owner)
        for member in self.members:
            self.queues.setdefault(member, deque())

    def is_member(self, account_id: str) -> bool:
        return account_id in self.queues

    def add_member(self, account_id: str) -> None:
        self.members.append(account_id)
        self.queues[account_id] = deque()

    def remove_member(self, account_id: str) -> None:
        if account_id in self.queues:
            self.members.remove(account_id)
            del self.queues[account_id]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "owner": self.owner,
            "members": list(self.members),
            "queues": {
                member: [m.to_dict() for m in queue]
                for member, queue in self.queues.items()
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Community":
        queues = {
            member: deque(Message.from_dict(m) for m in messages)
            for member, messages in data.get("queues", {}).items()
        }
        return cls(
            name=data["name"],
            description=data.get("description", ""),
            owner=data["owner"],
            members=list(data.get("members", [])),
            queues=queues,
        )
