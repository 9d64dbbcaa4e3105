"""
管理エンドポイント
"""

from fastapi import APIRouter, Depends

from ..dependencies import get_service
from ..schemas import StatusResponse
from ...domain.services.interaction import InteractionService

router = APIRouter(prefix="/v1/admin", tags=["admin"])


@router.post("/reset", response_model=StatusResponse)
def reset_system(
    service: InteractionService = Depends(get_service),
) -> StatusResponse:
    """全データを消去（セッションも無効化）"""
    service.reset()
    return StatusResponse(message="System reset")
