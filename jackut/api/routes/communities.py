"""
コミュニティエンドポイント
"""

from fastapi import APIRouter, Depends

from ..auth import require_session
from ..dependencies import get_service
from ..schemas import (
    BroadcastResponse,
    CommunityCreateRequest,
    CommunityResponse,
    LeaveResponse,
    MessageRequest,
    MessageResponse,
    StatusResponse,
)
from ...domain.services.interaction import InteractionService

router = APIRouter(prefix="/v1/communities", tags=["communities"])


def _describe(service: InteractionService, name: str) -> CommunityResponse:
    return CommunityResponse(
        name=name,
        description=service.get_community_description(name),
        owner=service.get_community_owner(name),
        members=service.get_community_members(name),
    )


@router.post("", response_model=CommunityResponse, status_code=201)
def create_community(
    request: CommunityCreateRequest,
    session_id: str = Depends(require_session),
    service: InteractionService = Depends(get_service),
) -> CommunityResponse:
    service.create_community(session_id, request.name, request.description)
    return _describe(service, request.name)


@router.post("/messages/read", response_model=MessageResponse)
def read_community_message(
    session_id: str = Depends(require_session),
    service: InteractionService = Depends(get_service),
) -> MessageResponse:
    """
    参加中コミュニティの未読メッセージを1件取り出す

    コミュニティ名の昇順で、最初に未読があるものから読む。
    """
    return MessageResponse(message=service.read_community_message(session_id))


@router.get("/{name}", response_model=CommunityResponse)
def get_community(
    name: str,
    service: InteractionService = Depends(get_service),
) -> CommunityResponse:
    return _describe(service, name)


@router.post("/{name}/members", response_model=StatusResponse)
def join_community(
    name: str,
    session_id: str = Depends(require_session),
    service: InteractionService = Depends(get_service),
) -> StatusResponse:
    service.join_community(session_id, name)
    return StatusResponse()


@router.delete("/{name}/members/me", response_model=LeaveResponse)
def leave_community(
    name: str,
    session_id: str = Depends(require_session),
    service: InteractionService = Depends(get_service),
) -> LeaveResponse:
    """退会（オーナーの場合はコミュニティごと削除）"""
    return LeaveResponse(community=name, deleted=service.leave_community(session_id, name))


@router.post("/{name}/messages", response_model=BroadcastResponse)
def send_community_message(
    name: str,
    request: MessageRequest,
    session_id: str = Depends(require_session),
    service: InteractionService = Depends(get_service),
) -> BroadcastResponse:
    recipients = service.send_community_message(session_id, name, request.text)
    return BroadcastResponse(community=name, recipients=recipients)
