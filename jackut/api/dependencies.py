"""
API Dependencies
依存性注入の設定
"""

import threading
from typing import Optional

from ..adapters.storage.file import FileSnapshotAdapter
from ..adapters.storage.memory import MemorySnapshotAdapter
from ..core.config import get_settings
from ..domain.ports.storage_port import ISnapshotStorage
from ..domain.services.interaction import InteractionService
from ..domain.services.network import SocialNetwork

# === シングルトンインスタンス ===

_storage: Optional[ISnapshotStorage] = None
_service: Optional[InteractionService] = None

# シングルトンの生成を直列化する
_init_lock = threading.RLock()


# === 依存性取得関数 ===


def get_storage() -> ISnapshotStorage:
    """ストレージを取得

    環境変数 JACKUT_STORAGE_BACKEND=memory でメモリストレージを使用
    """
    global _storage
    if _storage is None:
        with _init_lock:
            if _storage is None:
                settings = get_settings()
                if settings.storage.backend == "memory":
                    _storage = MemorySnapshotAdapter()
                else:
                    _storage = FileSnapshotAdapter(
                        data_dir=settings.data_dir,
                        file_name=settings.storage.snapshot_file,
                    )
    return _storage


def get_service() -> InteractionService:
    """インタラクションサービスを取得（初回生成時にスナップショットを復元）"""
    global _service
    if _service is None:
        with _init_lock:
            if _service is None:
                _service = InteractionService(network=SocialNetwork(), storage=get_storage())
    return _service


# === テスト用リセット関数 ===


def reset_dependencies() -> None:
    """依存性をリセット（テスト用）"""
    global _storage, _service
    with _init_lock:
        _storage = None
        _service = None


def set_service(service: InteractionService) -> None:
    """サービスを設定（テスト用）"""
    global _service
    with _init_lock:
        _service = service
