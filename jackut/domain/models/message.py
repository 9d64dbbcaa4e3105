"""
メッセージモデル
"""

from dataclasses import dataclass
from typing import Any

# システム通知の送信者ID
SYSTEM_SENDER = "jackut"

MESSAGE_PREFIX = "Mensagem de"


@dataclass(frozen=True)
class Message:
    """
    配送済みメッセージ

    表示用テキストとは別に送信者IDを保持し、送信者単位で削除できるようにする。
    """

    sender: str
    content: str
    system: bool = False

    @classmethod
    def from_system(cls, content: str) -> "Message":
        return cls(sender=SYSTEM_SENDER, content=content, system=True)

    def render(self) -> str:
        """表示用テキスト"""
        if self.system:
            return self.content
        return f"{MESSAGE_PREFIX} {self.sender}: {self.content}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "sender": self.sender,
            "content": self.content,
            "system": self.system,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Message":
        return cls(
            sender=data["sender"],
            content=data["content"],
            system=data.get("system", False),
        )
