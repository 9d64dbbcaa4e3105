"""
コミュニティレジストリのテスト
"""

import pytest

from jackut.core.exceptions import (
    AlreadyMemberError,
    DuplicateNameError,
    NoMessagesError,
    SenderNotMemberError,
    UnknownCommunityError,
)
from jackut.domain.services.communities import CommunityRegistry


class TestCommunityRegistry:
    """CommunityRegistry のテスト"""

    def setup_method(self):
        self.registry = CommunityRegistry()
        self.registry.create("C", "descricao", "alice")

    def test_create_duplicate_name(self):
        with pytest.raises(DuplicateNameError):
            self.registry.create("C", "outra", "bob")

    def test_join(self):
        self.registry.join("C", "bob")
        assert self.registry.members_of("C") == ["alice", "bob"]

        with pytest.raises(AlreadyMemberError):
            self.registry.join("C", "bob")
        with pytest.raises(AlreadyMemberError):
            self.registry.join("C", "alice")
        with pytest.raises(UnknownCommunityError):
            self.registry.join("nope", "bob")

    def test_broadcast_fans_out_to_members_only(self):
        """送信者を含む全メンバーに届き、非メンバーには届かない"""
        self.registry.join("C", "bob")

        assert self.registry.broadcast("C", "alice", "hi") == 2

        assert self.registry.read_next("alice").render() == "Mensagem de alice: hi"
        assert self.registry.read_next("bob").render() == "Mensagem de alice: hi"
        with pytest.raises(NoMessagesError):
            self.registry.read_next("carol")

    def test_broadcast_requires_membership(self):
        with pytest.raises(SenderNotMemberError):
            self.registry.broadcast("C", "carol", "hi")
        with pytest.raises(UnknownCommunityError):
            self.registry.broadcast("nope", "alice", "hi")

    def test_late_joiner_gets_no_history(self):
        """参加前のメッセージは届かない"""
        self.registry.broadcast("C", "alice", "antes")
        self.registry.join("C", "bob")
        self.registry.broadcast("C", "alice", "depois")

        assert self.registry.read_next("bob").content == "depois"
        with pytest.raises(NoMessagesError):
            self.registry.read_next("bob")

    def test_read_next_scans_by_name(self):
        """空のキューは飛ばして、名前順で次のコミュニティを読む"""
        self.registry.create("B", "", "bob")
        self.registry.create("A", "", "bob")
        self.registry.join("C", "bob")

        self.registry.broadcast("C", "alice", "from C")
        self.registry.broadcast("B", "bob", "from B")

        assert self.registry.read_next("bob").content == "from B"
        assert self.registry.read_next("bob").content == "from C"
        with pytest.raises(NoMessagesError):
            self.registry.read_next("bob")

    def test_member_leaves(self):
        self.registry.join("C", "bob")
        self.registry.broadcast("C", "alice", "hi")

        assert self.registry.leave_or_evict("C", "bob") is False

        assert self.registry.members_of("C") == ["alice"]
        with pytest.raises(NoMessagesError):
            self.registry.read_next("bob")

    def test_owner_leaving_deletes_community(self):
        """オーナーが抜けるとコミュニティごと消える（権限移譲なし）"""
        self.registry.join("C", "bob")
        self.registry.broadcast("C", "alice", "hi")

        assert self.registry.leave_or_evict("C", "alice") is True

        assert not self.registry.exists("C")
        assert self.registry.communities_of("bob") == []
        with pytest.raises(NoMessagesError):
            self.registry.read_next("bob")

    def test_leave_when_not_member(self):
        with pytest.raises(SenderNotMemberError):
            self.registry.leave_or_evict("C", "carol")

    def test_remove_account(self):
        self.registry.create("D", "", "bob")
        self.registry.join("D", "alice")
        self.registry.join("C", "bob")

        deleted = self.registry.remove_account("alice")

        assert deleted == ["C"]
        assert self.registry.members_of("D") == ["bob"]

    def test_purge_from_sender(self):
        self.registry.join("C", "bob")
        self.registry.broadcast("C", "alice", "1")
        self.registry.broadcast("C", "bob", "2")

        assert self.registry.purge_from("alice") == 2

        assert self.registry.read_next("alice").content == "2"
        assert self.registry.read_next("bob").content == "2"
