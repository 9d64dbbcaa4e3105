"""
Jackut API - メインアプリケーション
"""

from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import Depends, FastAPI
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from .auth import RequestLoggingMiddleware, jackut_exception_handler
from .dependencies import get_service
from .routes import (
    accounts_router,
    admin_router,
    communities_router,
    messages_router,
    relationships_router,
)
from .schemas import HealthResponse
from ..core.config import get_settings
from ..core.exceptions import JackutException
from ..core.logging import JackutLogger, get_logger
from ..domain.services.interaction import InteractionService

# ログシステムを初期化
JackutLogger.configure(get_settings().log_level)
logger = get_logger("api.main")

# バージョン
API_VERSION = "1.0.0"


class APIVersionMiddleware(BaseHTTPMiddleware):
    """APIバージョンをレスポンスヘッダーに追加"""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-API-Version"] = API_VERSION
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """アプリケーションライフサイクル"""
    settings = get_settings()

    # 起動時
    logger.info(f"Jackut API v{API_VERSION} starting...")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"Storage backend: {settings.storage.backend} ({settings.snapshot_path})")

    # 最初のリクエストより前にサービスを生成してスナップショットを復元
    summary = get_service().summary()
    logger.info(f"Loaded {summary['accounts']} account(s), {summary['communities']} community(ies)")

    yield

    logger.info("Jackut API shutting down...")


def create_app() -> FastAPI:
    """FastAPIアプリケーションを作成"""
    application = FastAPI(
        title="Jackut API",
        description=(
            "小さなソーシャルネットワーク\n\n"
            "**機能:**\n"
            "- 友人申請・ファン・片思い・敵\n"
            "- 個人宛メッセージ\n"
            "- コミュニティへのブロードキャスト\n"
        ),
        version=API_VERSION,
        lifespan=lifespan,
    )

    # ミドルウェア（実行順序: 下から上）
    application.add_middleware(RequestLoggingMiddleware)
    application.add_middleware(APIVersionMiddleware)

    application.add_exception_handler(JackutException, jackut_exception_handler)

    # ルーター登録
    application.include_router(accounts_router)
    application.include_router(relationships_router)
    application.include_router(messages_router)
    application.include_router(communities_router)
    application.include_router(admin_router)

    @application.get("/v1/health", response_model=HealthResponse)
    def health(service: InteractionService = Depends(get_service)) -> HealthResponse:
        """ヘルスチェック"""
        return HealthResponse(
            status="healthy",
            timestamp=datetime.now(),
            version=API_VERSION,
            components=service.summary(),
        )

    return application


# デフォルトアプリケーションインスタンス
app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
