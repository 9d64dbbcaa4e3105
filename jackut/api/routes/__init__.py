"""
API Routes
エンドポイント定義
"""

from .accounts import router as accounts_router
from .admin import router as admin_router
from .communities import router as communities_router
from .messages import router as messages_router
from .relationships import router as relationships_router

__all__ = [
    "accounts_router",
    "relationships_router",
    "messages_router",
    "communities_router",
    "admin_router",
]
