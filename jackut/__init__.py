"""
Jackut - 小さなソーシャルネットワーク

- 友人申請・ファン・片思い・敵の関係管理
- 個人宛メッセージ（FIFO）
- コミュニティのブロードキャスト配送
"""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
import tomllib

_pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
if _pyproject.exists():
    with _pyproject.open("rb") as _f:
        __version__: str = tomllib.load(_f)["project"]["version"]
else:
    try:
        __version__ = version("jackut")
    except PackageNotFoundError:
        __version__ = "0.0.0"

# ===== Domain Models =====
from .domain.models import (
    Account,
    Community,
    Message,
    RelationKind,
    RelationshipState,
)

# ===== Ports (Interfaces) =====
from .domain.ports import ISnapshotStorage

# ===== Domain Services =====
from .domain.services import (
    InteractionService,
    SocialNetwork,
)


# ===== Adapters (lazy import) =====
def get_file_storage_adapter():
    from .adapters.storage.file import FileSnapshotAdapter

    return FileSnapshotAdapter


# ===== API (lazy import) =====
def get_app():
    from .api import app

    return app


def create_app():
    from .api import create_app as _create_app

    return _create_app()


__all__ = [
    # Version
    "__version__",
    # Domain Models
    "Account",
    "RelationKind",
    "RelationshipState",
    "Message",
    "Community",
    # Domain Services
    "SocialNetwork",
    "InteractionService",
    # Ports
    "ISnapshotStorage",
    # Adapters (lazy)
    "get_file_storage_adapter",
    # API (lazy)
    "get_app",
    "create_app",
]
