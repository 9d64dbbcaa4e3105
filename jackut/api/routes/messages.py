"""
個人宛メッセージエンドポイント
"""

from fastapi import APIRouter, Depends

from ..auth import require_session
from ..dependencies import get_service
from ..schemas import MessageRequest, MessageResponse, StatusResponse
from ...domain.services.interaction import InteractionService

router = APIRouter(prefix="/v1/messages", tags=["messages"])


@router.post("/read", response_model=MessageResponse)
def read_message(
    session_id: str = Depends(require_session),
    service: InteractionService = Depends(get_service),
) -> MessageResponse:
    """最も古い未読メッセージを1件取り出す（既読にすると消える）"""
    return MessageResponse(message=service.read_message(session_id))


@router.post("/{recipient}", response_model=StatusResponse)
def send_message(
    recipient: str,
    request: MessageRequest,
    session_id: str = Depends(require_session),
    service: InteractionService = Depends(get_service),
) -> StatusResponse:
    service.send_message(session_id, recipient, request.text)
    return StatusResponse()
