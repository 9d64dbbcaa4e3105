"""
Jackut Domain Layer
コアビジネスロジックとドメインモデル
"""

from __future__ import annotations

from .models import (
    Account,
    Community,
    Message,
    RelationKind,
    RelationshipState,
)

__all__ = [
    # アカウント
    "Account",
    # 関係性
    "RelationKind",
    "RelationshipState",
    # メッセージ・コミュニティ
    "Message",
    "Community",
]
