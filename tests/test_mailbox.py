"""
メールボックスのテスト
"""

import pytest

from jackut.core.exceptions import NoMessagesError
from jackut.domain.models.message import Message
from jackut.domain.services.mailbox import Mailbox


class TestMailbox:
    """Mailbox のテスト"""

    def setup_method(self):
        self.mailbox = Mailbox()

    def test_fifo_consumption(self):
        """配送順に取り出され、空になると NoMessages"""
        self.mailbox.deliver("x", Message(sender="a", content="m1"))
        self.mailbox.deliver("x", Message(sender="a", content="m2"))

        assert self.mailbox.consume("x").content == "m1"
        assert self.mailbox.consume("x").content == "m2"
        with pytest.raises(NoMessagesError):
            self.mailbox.consume("x")

    def test_consume_unknown_owner(self):
        with pytest.raises(NoMessagesError) as exc_info:
            self.mailbox.consume("nobody")
        assert exc_info.value.message == "Não há recados."

    def test_queues_are_per_owner(self):
        self.mailbox.deliver("x", Message(sender="a", content="para x"))
        self.mailbox.deliver("y", Message(sender="a", content="para y"))

        assert self.mailbox.consume("y").content == "para y"
        assert self.mailbox.pending_count("x") == 1

    def test_purge_matches_sender_not_text(self):
        """削除は送信者IDで判定する（本文の接頭辞では判定しない）"""
        self.mailbox.deliver("x", Message(sender="ana", content="m1"))
        self.mailbox.deliver("x", Message(sender="anabel", content="Mensagem de ana: falso"))
        self.mailbox.deliver("x", Message(sender="ana", content="m2"))
        self.mailbox.deliver("x", Message(sender="bia", content="m3"))

        removed = self.mailbox.purge_from("x", "ana")

        assert removed == 2
        assert self.mailbox.consume("x").sender == "anabel"
        assert self.mailbox.consume("x").content == "m3"

    def test_purge_keeps_system_messages(self):
        self.mailbox.deliver("x", Message.from_system("aviso"))
        assert self.mailbox.purge_from("x", "jackut") == 0
        assert self.mailbox.consume("x").content == "aviso"

    def test_snapshot_roundtrip_skips_empty_queues(self):
        self.mailbox.deliver("x", Message(sender="a", content="m1"))
        self.mailbox.deliver("y", Message(sender="a", content="m2"))
        self.mailbox.consume("y")

        data = self.mailbox.to_dict()
        assert list(data) == ["x"]

        restored = Mailbox()
        restored.restore(data)
        assert restored.consume("x").render() == "Mensagem de a: m1"
