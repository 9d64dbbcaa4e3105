"""
API Schemas
Pydanticモデル定義
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

# === アカウント・セッション ===


class CreateAccountRequest(BaseModel):
    """アカウント作成リクエスト"""

    login: str = Field(..., description="ログインID")
    password: str = Field(..., description="パスワード")
    name: str = Field("", description="表示名")


class AccountResponse(BaseModel):
    """アカウント情報"""

    login: str
    name: str


class OpenSessionRequest(BaseModel):
    """セッション開始リクエスト"""

    login: str
    password: str


class SessionResponse(BaseModel):
    """セッション開始レスポンス"""

    session_id: str


class ProfileUpdateRequest(BaseModel):
    """プロフィール更新リクエスト（attribute=name で表示名変更）"""

    attribute: str = Field(..., min_length=1)
    value: str


class AttributeResponse(BaseModel):
    login: str
    attribute: str
    value: str


# === 関係性 ===


class FriendRequestResponse(BaseModel):
    """友人申請結果"""

    target: str
    status: str = Field(..., description="friends（成立）または pending（承認待ち）")


class CrushResponse(BaseModel):
    target: str
    mutual: bool


class RelationCheckResponse(BaseModel):
    login: str
    other: str
    related: bool


class AccountListResponse(BaseModel):
    """アカウントID一覧"""

    login: str
    items: list[str]


# === メッセージ ===


class MessageRequest(BaseModel):
    text: str = Field(..., description="メッセージ本文")


class MessageResponse(BaseModel):
    message: str


# === コミュニティ ===


class CommunityCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, description="コミュニティ名（一意）")
    description: str = Field("", description="説明")


class CommunityResponse(BaseModel):
    name: str
    description: str
    owner: str
    members: list[str]


class BroadcastResponse(BaseModel):
    community: str
    recipients: int


class LeaveResponse(BaseModel):
    community: str
    deleted: bool = Field(..., description="オーナー退会によりコミュニティが削除されたか")


# === 共通 ===


class StatusResponse(BaseModel):
    status: str = "ok"
    message: str | None = None


class ErrorResponse(BaseModel):
    """エラーレスポンス"""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    """ヘルスチェックレスポンス"""

    status: str
    timestamp: datetime
    version: str
    components: dict[str, int]
