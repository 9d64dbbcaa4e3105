"""
Domain Models
Jackut のドメインモデル
"""

from .account import Account, hash_password
from .community import Community
from .message import MESSAGE_PREFIX, SYSTEM_SENDER, Message
from .relationship import RelationKind, RelationshipState

__all__ = [
    # アカウント
    "Account",
    "hash_password",
    # 関係性
    "RelationKind",
    "RelationshipState",
    # メッセージ
    "Message",
    "MESSAGE_PREFIX",
    "SYSTEM_SENDER",
    # コミュニティ
    "Community",
]
