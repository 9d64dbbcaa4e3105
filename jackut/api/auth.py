"""
API セッション認証・ミドルウェア

- X-Session-Id ヘッダーによるセッションハンドルの受け取り
- リクエストログ
- エラーレスポンスへの変換
"""

from __future__ import annotations

import time
from collections.abc import Callable

from fastapi import Request, Security
from fastapi.security import APIKeyHeader
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from ..core.exceptions import (
    AccountAlreadyExistsError,
    AlreadyDeclaredError,
    AlreadyFriendsError,
    AlreadyMemberError,
    AttributeNotFilledError,
    AuthenticationError,
    DuplicateNameError,
    InteractionBlockedError,
    JackutException,
    NoMessagesError,
    RequestAlreadyPendingError,
    SelfMessageError,
    SelfRelationError,
    SenderNotMemberError,
    UnknownAccountError,
    UnknownCommunityError,
    UnknownSessionError,
    ValidationError,
)
from ..core.logging import get_logger, log_request, log_response
from .schemas import ErrorResponse

logger = get_logger("api.auth")

SESSION_HEADER = "X-Session-Id"

# === セッション ===

session_header = APIKeyHeader(name=SESSION_HEADER, auto_error=False)


def require_session(
    session_id: str | None = Security(session_header),
) -> str:
    """
    セッションハンドルを取得

    ヘッダーがない場合は UnknownSessionError。
    ハンドル自体の検証はサービス層で行う。
    """
    if not session_id:
        raise UnknownSessionError()
    return session_id


# === エラーレスポンス ===

# MRO を辿って最初に見つかったステータスを使う
_STATUS_BY_ERROR: dict[type[JackutException], int] = {
    UnknownAccountError: 404,
    UnknownCommunityError: 404,
    NoMessagesError: 404,
    AttributeNotFilledError: 404,
    AuthenticationError: 401,
    ValidationError: 400,
    SelfRelationError: 400,
    SelfMessageError: 400,
    InteractionBlockedError: 403,
    SenderNotMemberError: 403,
    AccountAlreadyExistsError: 409,
    AlreadyFriendsError: 409,
    RequestAlreadyPendingError: 409,
    AlreadyDeclaredError: 409,
    DuplicateNameError: 409,
    AlreadyMemberError: 409,
}


def status_for(error: JackutException) -> int:
    """例外に対応する HTTP ステータス"""
    for cls in type(error).__mro__:
        if cls in _STATUS_BY_ERROR:
            return _STATUS_BY_ERROR[cls]
    return 400


async def jackut_exception_handler(request: Request, exc: JackutException) -> JSONResponse:
    """JackutException を JSON エラーレスポンスに変換"""
    status_code = status_for(exc)
    logger.info(
        f"Request rejected: {exc.error_code}",
        extra={"event_type": "rejected", "endpoint": request.url.path, "status_code": status_code},
    )
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            error=exc.error_code, message=exc.message, details=exc.details,
        ).model_dump(),
    )


# === ミドルウェア ===


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """リクエスト・レスポンスを構造化ログに記録"""

    async def dispatch(self, request: Request, call_next: Callable):
        started = time.perf_counter()
        log_request(logger, request.url.path, method=request.method)
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        log_response(logger, request.url.path, response.status_code, duration_ms)
        return response
