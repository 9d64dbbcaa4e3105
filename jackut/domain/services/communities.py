"""
コミュニティレジストリ
コミュニティの作成・参加・退会とブロードキャスト配送

参加時にメンバー用キューを割り当て、ブロードキャスト時は
その時点のメンバーを順に走査して配送する。
"""

from typing import Any

from ...core.exceptions import (
    AlreadyMemberError,
    DuplicateNameError,
    NoMessagesError,
    SenderNotMemberError,
    UnknownCommunityError,
)
from ..models.community import Community
from ..models.message import Message


class CommunityRegistry:
    """システム全体のコミュニティ集合（作成順を保持）"""

    def __init__(self):
        self._communities: dict[str, Community] = {}

    def __len__(self) -> int:
        return len(self._communities)

    def exists(self, name: str) -> bool:
        return name in self._communities

    def get(self, name: str) -> Community:
        community = self._communities.get(name)
        if community is None:
            raise UnknownCommunityError(name)
        return community

    def all(self) -> list[Community]:
        return list(self._communities.values())

    def create(self, name: str, description: str, owner: str) -> Community:
        if name in self._communities:
            raise DuplicateNameError(name)
        community = Community(name=name, description=description, owner=owner)
        self._communities[name] = community
        return community

    def join(self, name: str, account_id: str) -> Community:
        community = self.get(name)
        if community.is_member(account_id):
            raise AlreadyMemberError(name)
        community.add_member(account_id)
        return community

    def broadcast(self, name: str, sender: str, text: str) -> int:
        """
        全メンバー（送信者を含む）のキューへ配送

        Returns:
            int: 配送先の人数
        """
        community = self.get(name)
        if not community.is_member(sender):
            raise SenderNotMemberError(name)

        message = Message(sender=sender, content=text)
        for member in community.members:
            community.queues[member].append(message)
        return len(community.members)

    def leave_or_evict(self, name: str, account_id: str) -> bool:
        """
        メンバーを削除

        オーナーの場合はコミュニティごと削除する（オーナー権限は移譲しない）。

        Returns:
            bool: コミュニティ自体が削除された場合True
        """
        community = self.get(name)
        if community.owner == account_id:
            del self._communities[name]
            return True
        if not community.is_member(account_id):
            raise SenderNotMemberError(name)
        community.remove_member(account_id)
        return False

    def read_next(self, account_id: str) -> Message:
        """
        参加中コミュニティのうち、名前の昇順で最初に未読があるキューから1件取り出す
        """
        for community in sorted(self.communities_of(account_id), key=lambda c: c.name):
            try:
                return self._consume(community, account_id)
            except NoMessagesError:
                continue
        raise NoMessagesError()

    @staticmethod
    def _consume(community: Community, account_id: str) -> Message:
        queue = community.queues.get(account_id)
        if not queue:
            raise NoMessagesError()
        return queue.popleft()

    def communities_of(self, account_id: str) -> list[Community]:
        """アカウントが参加しているコミュニティ（作成順）"""
        return [c for c in self._communities.values() if c.is_member(account_id)]

    def members_of(self, name: str) -> list[str]:
        return list(self.get(name).members)

    def purge_from(self, sender: str) -> int:
        """全コミュニティの未読キューから sender のメッセージを削除"""
        removed = 0
        for community in self._communities.values():
            for member, queue in community.queues.items():
                kept = [m for m in queue if m.sender != sender]
                removed += len(queue) - len(kept)
                queue.clear()
                queue.extend(kept)
        return removed

    def remove_account(self, account_id: str) -> list[str]:
        """
        アカウント削除時の後始末

        Returns:
            list[str]: 削除されたコミュニティ名（オーナーだったもの）
        """
        deleted = []
        for community in list(self._communities.values()):
            if community.owner == account_id:
                del self._communities[community.name]
                deleted.append(community.name)
            else:
                community.remove_member(account_id)
        return deleted

    def clear(self) -> None:
        self._communities.clear()

    def to_list(self) -> list[dict[str, Any]]:
        return [c.to_dict() for c in self._communities.values()]

    def restore(self, communities: list[dict[str, Any]]) -> None:
        self._communities = {}
        for data in communities:
            community = Community.from_dict(data)
            self._communities[community.name] = community
