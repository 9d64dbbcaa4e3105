"""
統合設定管理

pydantic-settings を使用した型安全な設定管理
- 環境変数から自動読み込み
- バリデーション付き
- デフォルト値対応
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """スナップショット永続化設定"""

    model_config = SettingsConfigDict(env_prefix="JACKUT_STORAGE_")

    backend: str = Field(default="file", description="ストレージ種別 (file / memory)")
    snapshot_file: str = Field(default="jackut.json", description="スナップショットファイル名")

    @field_validator("backend")
    @classmethod
    def validate_backend(cls, v: str) -> str:
        v = v.lower()
        if v not in ("file", "memory"):
            raise ValueError(f"unsupported storage backend: {v}")
        return v


class JackutSettings(BaseSettings):
    """Jackut 全体設定"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 基本設定
    data_dir: str = Field(default="data", alias="JACKUT_DATA_DIR", description="データ保存ディレクトリ")
    debug: bool = Field(default=False, alias="JACKUT_DEBUG", description="デバッグモード")
    log_level: str = Field(default="INFO", alias="JACKUT_LOG_LEVEL", description="ログレベル")

    storage: StorageSettings = Field(default_factory=StorageSettings)

    # API サーバー設定
    api_host: str = Field(default="127.0.0.1", alias="API_HOST", description="API サーバーホスト")
    api_port: int = Field(default=8000, alias="API_PORT", description="API サーバーポート")

    @property
    def snapshot_path(self) -> Path:
        """スナップショットファイルのフルパス"""
        return Path(self.data_dir) / self.storage.snapshot_file

    @classmethod
    def load(cls) -> "JackutSettings":
        """設定をロード（サブ設定も含む）"""
        return cls(storage=StorageSettings())


@lru_cache()
def get_settings() -> JackutSettings:
    """
    設定を取得（キャッシュ付き）

    使用例:
        settings = get_settings()
        print(settings.snapshot_path)
    """
    return JackutSettings.load()


def reload_settings() -> JackutSettings:
    """設定を再読み込み"""
    get_settings.cache_clear()
    return get_settings()
