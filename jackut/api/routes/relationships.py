"""
関係性エンドポイント
友人申請・ファン・片思い・敵
"""

from fastapi import APIRouter, Depends

from ..auth import require_session
from ..dependencies import get_service
from ..schemas import (
    AccountListResponse,
    CrushResponse,
    FriendRequestResponse,
    RelationCheckResponse,
    StatusResponse,
)
from ...domain.services.interaction import InteractionService

router = APIRouter(prefix="/v1", tags=["relationships"])


# === 登録系 ===


@router.post("/friends/{target}", response_model=FriendRequestResponse)
def add_friend(
    target: str,
    session_id: str = Depends(require_session),
    service: InteractionService = Depends(get_service),
) -> FriendRequestResponse:
    """
    友人申請

    相手から申請を受けている場合は承認となり、status=friends を返す。
    """
    accepted = service.add_friend(session_id, target)
    return FriendRequestResponse(target=target, status="friends" if accepted else "pending")


@router.post("/idols/{target}", response_model=StatusResponse)
def add_idol(
    target: str,
    session_id: str = Depends(require_session),
    service: InteractionService = Depends(get_service),
) -> StatusResponse:
    service.add_idol(session_id, target)
    return StatusResponse()


@router.post("/crushes/{target}", response_model=CrushResponse)
def add_crush(
    target: str,
    session_id: str = Depends(require_session),
    service: InteractionService = Depends(get_service),
) -> CrushResponse:
    """片思いを登録（相互の場合は双方に通知が届く）"""
    return CrushResponse(target=target, mutual=service.add_crush(session_id, target))


@router.post("/enemies/{target}", response_model=StatusResponse)
def add_enemy(
    target: str,
    session_id: str = Depends(require_session),
    service: InteractionService = Depends(get_service),
) -> StatusResponse:
    service.add_enemy(session_id, target)
    return StatusResponse()


# === 参照系 ===


@router.get("/accounts/{login}/friends", response_model=AccountListResponse)
def get_friends(
    login: str,
    service: InteractionService = Depends(get_service),
) -> AccountListResponse:
    return AccountListResponse(login=login, items=service.get_friends(login))


@router.get("/accounts/{login}/friends/{other}", response_model=RelationCheckResponse)
def is_friend(
    login: str,
    other: str,
    service: InteractionService = Depends(get_service),
) -> RelationCheckResponse:
    return RelationCheckResponse(login=login, other=other, related=service.is_friend(login, other))


@router.get("/accounts/{login}/fans", response_model=AccountListResponse)
def get_fans(
    login: str,
    service: InteractionService = Depends(get_service),
) -> AccountListResponse:
    return AccountListResponse(login=login, items=service.get_fans(login))


@router.get("/accounts/{login}/idols", response_model=AccountListResponse)
def get_idols(
    login: str,
    service: InteractionService = Depends(get_service),
) -> AccountListResponse:
    return AccountListResponse(login=login, items=service.get_idols(login))


@router.get("/accounts/{login}/crushes", response_model=AccountListResponse)
def get_crushes(
    login: str,
    service: InteractionService = Depends(get_service),
) -> AccountListResponse:
    return AccountListResponse(login=login, items=service.get_crushes(login))


@router.get("/accounts/{login}/enemies", response_model=AccountListResponse)
def get_enemies(
    login: str,
    service: InteractionService = Depends(get_service),
) -> AccountListResponse:
    return AccountListResponse(login=login, items=service.get_enemies(login))
