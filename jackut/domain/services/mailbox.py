"""
メールボックス
アカウントごとの FIFO メッセージキュー
"""

from collections import deque
from typing import Any

from ...core.exceptions import NoMessagesError
from ..models.message import Message


class Mailbox:
    """
    個人宛メッセージの配送と取り出し

    取り出しは破壊的かつ厳密に FIFO。
    """

    def __init__(self):
        self._queues: dict[str, deque[Message]] = {}

    def deliver(self, recipient: str, message: Message) -> None:
        self._queues.setdefault(recipient, deque()).append(message)

    def consume(self, owner: str) -> Message:
        """最も古い未読メッセージを取り出す"""
        queue = self._queues.get(owner)
        if not queue:
            raise NoMessagesError("Não há recados.")
        return queue.popleft()

    def pending_count(self, owner: str) -> int:
        return len(self._queues.get(owner, ()))

    def purge_from(self, owner: str, sender: str) -> int:
        """sender が送信した未読メッセージを削除し、削除件数を返す"""
        queue = self._queues.get(owner)
        if not queue:
            return 0
        kept = deque(m for m in queue if m.system or m.sender != sender)
        removed = len(queue) - len(kept)
        self._queues[owner] = kept
        return removed

    def discard(self, owner: str) -> None:
        self._queues.pop(owner, None)

    def owners(self) -> list[str]:
        return list(self._queues)

    def clear(self) -> None:
        self._queues.clear()

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {
            owner: [m.to_dict() for m in queue]
            for owner, queue in self._queues.items()
            if queue
        }

    def restore(self, data: dict[str, list[dict[str, Any]]]) -> None:
        self._queues = {
            owner: deque(Message.from_dict(m) for m in messages)
            for owner, messages in data.items()
        }
