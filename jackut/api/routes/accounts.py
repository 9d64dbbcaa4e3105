"""
アカウント・セッション・プロフィールエンドポイント
"""

from fastapi import APIRouter, Depends

from ..auth import require_session
from ..dependencies import get_service
from ..schemas import (
    AccountListResponse,
    AccountResponse,
    AttributeResponse,
    CreateAccountRequest,
    OpenSessionRequest,
    ProfileUpdateRequest,
    SessionResponse,
    StatusResponse,
)
from ...domain.services.interaction import InteractionService

router = APIRouter(prefix="/v1", tags=["accounts"])


@router.post("/accounts", response_model=AccountResponse, status_code=201)
def create_account(
    request: CreateAccountRequest,
    service: InteractionService = Depends(get_service),
) -> AccountResponse:
    """アカウントを作成"""
    account = service.create_account(request.login, request.password, request.name)
    return AccountResponse(login=account.account_id, name=account.name)


@router.post("/sessions", response_model=SessionResponse)
def open_session(
    request: OpenSessionRequest,
    service: InteractionService = Depends(get_service),
) -> SessionResponse:
    """ログインしてセッションハンドルを取得"""
    return SessionResponse(session_id=service.open_session(request.login, request.password))


@router.put("/profile", response_model=StatusResponse)
def edit_profile(
    request: ProfileUpdateRequest,
    session_id: str = Depends(require_session),
    service: InteractionService = Depends(get_service),
) -> StatusResponse:
    """プロフィール属性を更新"""
    service.edit_profile(session_id, request.attribute, request.value)
    return StatusResponse(message="Profile updated")


@router.get("/accounts/{login}/attributes/{attribute}", response_model=AttributeResponse)
def get_attribute(
    login: str,
    attribute: str,
    service: InteractionService = Depends(get_service),
) -> AttributeResponse:
    value = service.get_attribute(login, attribute)
    return AttributeResponse(login=login, attribute=attribute, value=value)


@router.get("/accounts/{login}/communities", response_model=AccountListResponse)
def get_account_communities(
    login: str,
    service: InteractionService = Depends(get_service),
) -> AccountListResponse:
    """参加中のコミュニティ一覧"""
    return AccountListResponse(login=login, items=service.get_account_communities(login))


@router.delete("/accounts/me", response_model=StatusResponse)
def remove_account(
    session_id: str = Depends(require_session),
    service: InteractionService = Depends(get_service),
) -> StatusResponse:
    """
    自分のアカウントを削除

    オーナーのコミュニティは削除され、送信済みの未読メッセージも消える。
    """
    service.remove_account(session_id)
    return StatusResponse(message="Account removed")
