"""
インタラクションサービス
アカウント・関係性・メールボックス・コミュニティを組み合わせたユースケース

すべてのユースケースは1つの粗いロックの下で実行され、
変更が成功した場合のみスナップショットを永続化する。
永続化の失敗はログに記録するだけで、メモリ上の変更は巻き戻さない。
"""

import threading
from typing import Any

from ...core.exceptions import (
    AttributeNotFilledError,
    InvalidCredentialsError,
    InvalidLoginError,
    InvalidPasswordError,
    SelfMessageError,
    UnknownAccountError,
)
from ...core.logging import get_logger, log_business_event, log_error
from ..models.account import Account
from ..models.message import Message
from ..ports.storage_port import ISnapshotStorage
from .network import SocialNetwork

logger = get_logger(__name__)

# 表示名を変更する特別な属性名
NAME_ATTRIBUTE = "name"

MATCH_NOTIFICATION = "{name} é seu paquera - Recado do Jackut."


class InteractionService:
    """
    Jackut のユースケース層

    自身は可変状態を持たず、SocialNetwork を参照して操作する。
    セッションハンドルを受け取る操作は、最初に操作者のアカウントを解決する。
    """

    def __init__(
        self,
        network: SocialNetwork | None = None,
        storage: ISnapshotStorage | None = None,
        restore: bool = True,
    ):
        self.network = network or SocialNetwork()
        self.storage = storage
        self._lock = threading.RLock()

        if storage is not None and restore:
            snapshot = storage.load()
            if snapshot:
                self.network.restore(snapshot)
                logger.info(
                    f"Snapshot restored: {len(self.network.directory)} account(s), "
                    f"{len(self.network.communities)} community(ies)"
                )

    # === 内部ヘルパー ===

    def _resolve(self, session_id: str) -> str:
        return self.network.sessions.current_account(session_id)

    def _account(self, account_id: str) -> Account:
        return self.network.directory.get(account_id)

    def _persist(self) -> None:
        if self.storage is None:
            return
        try:
            self.storage.save(self.network.to_snapshot())
        except Exception as e:
            log_error(logger, e, {"operation": "persist"})

    def _commit(self, event: str, account_id: str | None = None, **kwargs: Any) -> None:
        """変更成功時の共通処理"""
        log_business_event(logger, event, account_id=account_id, **kwargs)
        self._persist()

    # === アカウント・セッション ===

    def create_account(self, login: str, password: str, name: str) -> Account:
        if not login or not login.strip():
            raise InvalidLoginError()
        if not password or not password.strip():
            raise InvalidPasswordError()

        with self._lock:
            account = self.network.directory.create(Account.create(login, password, name))
            self._commit("account_created", account_id=login)
            return account

    def open_session(self, login: str, password: str) -> str:
        with self._lock:
            if not login or not password or not self.network.directory.exists(login):
                raise InvalidCredentialsError()
            if not self._account(login).check_password(password):
                raise InvalidCredentialsError()
            session_id = self.network.sessions.open(login)
            log_business_event(logger, "session_opened", account_id=login)
            return session_id

    def current_account(self, session_id: str) -> str:
        with self._lock:
            return self._resolve(session_id)

    def edit_profile(self, session_id: str, attribute: str, value: str) -> None:
        """属性 name は表示名の変更、それ以外はプロフィール属性の設定"""
        with self._lock:
            account = self._account(self._resolve(session_id))
            if attribute.lower() == NAME_ATTRIBUTE:
                account.name = value
            else:
                account.attributes[attribute] = value
            self._commit("profile_edited", account_id=account.account_id, attribute=attribute)

    def get_attribute(self, account_id: str, attribute: str) -> str:
        with self._lock:
            account = self._account(account_id)
            if attribute.lower() == NAME_ATTRIBUTE:
                return account.name
            if attribute not in account.attributes:
                raise AttributeNotFilledError(attribute, account_id=account_id)
            return account.attributes[attribute]

    # === 友人 ===

    def add_friend(self, session_id: str, target: str) -> bool:
        """
        友人申請（相手からの申請がある場合は承認）

        Returns:
            bool: 友人関係が成立した場合True
        """
        with self._lock:
            actor = self._resolve(session_id)
            accepted = self.network.graph.request_friendship(actor, target)
            self._commit(
                "friendship_accepted" if accepted else "friendship_requested",
                account_id=actor, target=target,
            )
            return accepted

    def is_friend(self, account_id: str, other: str) -> bool:
        with self._lock:
            self._account(account_id)
            return self.network.graph.is_friend(account_id, other)

    def get_friends(self, account_id: str) -> list[str]:
        with self._lock:
            self._account(account_id)
            return self.network.graph.friends_of(account_id)

    def get_pending_requests(self, account_id: str) -> list[str]:
        with self._lock:
            self._account(account_id)
            return self.network.graph.pending_requests_of(account_id)

    # === 憧れ・片思い・敵 ===

    def add_idol(self, session_id: str, target: str) -> None:
        with self._lock:
            actor = self._resolve(session_id)
            self.network.graph.declare_idol(actor, target)
            self._commit("idol_declared", account_id=actor, target=target)

    def add_crush(self, session_id: str, target: str) -> bool:
        """
        片思いを登録

        相互の片思いになった場合、双方にシステム通知を送る。

        Returns:
            bool: 相互の片思いになった場合True
        """
        with self._lock:
            actor = self._resolve(session_id)
            mutual = self.network.graph.declare_crush(actor, target)
            if mutual:
                actor_name = self._account(actor).name
                target_name = self._account(target).name
                self.network.mailbox.deliver(
                    target, Message.from_system(MATCH_NOTIFICATION.format(name=actor_name))
                )
                self.network.mailbox.deliver(
                    actor, Message.from_system(MATCH_NOTIFICATION.format(name=target_name))
                )
            self._commit("crush_declared", account_id=actor, target=target, mutual=mutual)
            return mutual

    def add_enemy(self, session_id: str, target: str) -> None:
        with self._lock:
            actor = self._resolve(session_id)
            self.network.graph.declare_enemy(actor, target)
            self._commit("enemy_declared", account_id=actor, target=target)

    def is_fan(self, fan: str, idol: str) -> bool:
        with self._lock:
            self._account(fan)
            return self.network.graph.is_idol(fan, idol)

    def is_crush(self, account_id: str, crush: str) -> bool:
        with self._lock:
            self._account(account_id)
            return self.network.graph.is_crush(account_id, crush)

    def is_enemy(self, account_id: str, enemy: str) -> bool:
        with self._lock:
            self._account(account_id)
            return self.network.graph.is_enemy(account_id, enemy)

    def get_fans(self, idol: str) -> list[str]:
        with self._lock:
            self._account(idol)
            return self.network.graph.fans_of(idol)

    def get_idols(self, account_id: str) -> list[str]:
        with self._lock:
            self._account(account_id)
            return self.network.graph.idols_of(account_id)

    def get_crushes(self, account_id: str) -> list[str]:
        with self._lock:
            self._account(account_id)
            return self.network.graph.crushes_of(account_id)

    def get_enemies(self, account_id: str) -> list[str]:
        with self._lock:
            self._account(account_id)
            return self.network.graph.enemies_of(account_id)

    # === 個人宛メッセージ ===

    def send_message(self, session_id: str, recipient: str, text: str) -> None:
        with self._lock:
            sender = self._resolve(session_id)
            if sender == recipient:
                raise SelfMessageError()
            if not self.network.directory.exists(recipient):
                raise UnknownAccountError(recipient)
            self.network.mailbox.deliver(recipient, Message(sender=sender, content=text))
            self._commit("message_sent", account_id=sender, recipient=recipient)

    def read_message(self, session_id: str) -> str:
        with self._lock:
            owner = self._resolve(session_id)
            message = self.network.mailbox.consume(owner)
            self._commit("message_read", account_id=owner)
            return message.render()

    # === コミュニティ ===

    def create_community(self, session_id: str, name: str, description: str) -> None:
        with self._lock:
            owner = self._resolve(session_id)
            self.network.communities.create(name, description, owner)
            self._commit("community_created", account_id=owner, community=name)

    def join_community(self, session_id: str, name: str) -> None:
        with self._lock:
            account_id = self._resolve(session_id)
            self.network.communities.join(name, account_id)
            self._commit("community_joined", account_id=account_id, community=name)

    def send_community_message(self, session_id: str, name: str, text: str) -> int:
        with self._lock:
            sender = self._resolve(session_id)
            delivered = self.network.communities.broadcast(name, sender, text)
            self._commit(
                "community_message_sent", account_id=sender,
                community=name, recipients=delivered,
            )
            return delivered

    def read_community_message(self, session_id: str) -> str:
        with self._lock:
            account_id = self._resolve(session_id)
            message = self.network.communities.read_next(account_id)
            self._commit("community_message_read", account_id=account_id)
            return message.render()

    def leave_community(self, session_id: str, name: str) -> bool:
        """
        コミュニティから退会

        Returns:
            bool: オーナーの退会によりコミュニティが削除された場合True
        """
        with self._lock:
            account_id = self._resolve(session_id)
            deleted = self.network.communities.leave_or_evict(name, account_id)
            self._commit(
                "community_deleted" if deleted else "community_left",
                account_id=account_id, community=name,
            )
            return deleted

    def get_community_description(self, name: str) -> str:
        with self._lock:
            return self.network.communities.get(name).description

    def get_community_owner(self, name: str) -> str:
        with self._lock:
            return self.network.communities.get(name).owner

    def get_community_members(self, name: str) -> list[str]:
        with self._lock:
            return self.network.communities.members_of(name)

    def get_account_communities(self, account_id: str) -> list[str]:
        with self._lock:
            self._account(account_id)
            return [c.name for c in self.network.communities.communities_of(account_id)]

    # === アカウント削除・リセット ===

    def remove_account(self, session_id: str) -> None:
        """
        アカウントを削除

        オーナーのコミュニティは削除、それ以外は退会させ、
        他アカウント宛の未読メッセージと関係集合から痕跡を消す。
        """
        with self._lock:
            actor = self._resolve(session_id)
            network = self.network

            deleted = network.communities.remove_account(actor)
            purged = network.communities.purge_from(actor)
            for other in network.directory.ids():
                if other != actor:
                    purged += network.mailbox.purge_from(other, actor)
            network.mailbox.discard(actor)
            network.graph.remove_account(actor)
            network.directory.delete(actor)
            network.sessions.invalidate_account(actor)

            self._commit(
                "account_removed", account_id=actor,
                deleted_communities=deleted, purged_messages=purged,
            )

    def reset(self) -> None:
        """全データを消去し、空の状態を永続化"""
        with self._lock:
            self.network.reset()
            self._commit("system_reset")

    def summary(self) -> dict[str, int]:
        """件数サマリー"""
        with self._lock:
            network = self.network
            return {
                "accounts": len(network.directory),
                "communities": len(network.communities),
                "queued_messages": sum(
                    network.mailbox.pending_count(owner) for owner in network.mailbox.owners()
                ),
            }
