"""
Domain Services
ビジネスロジックサービス
"""

from .communities import CommunityRegistry
from .directory import AccountDirectory
from .interaction import InteractionService
from .mailbox import Mailbox
from .network import SocialNetwork
from .relationships import RelationshipGraph
from .sessions import SessionRegistry

__all__ = [
    "AccountDirectory",
    "SessionRegistry",
    "RelationshipGraph",
    "Mailbox",
    "CommunityRegistry",
    "SocialNetwork",
    "InteractionService",
]
