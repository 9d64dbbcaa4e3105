"""
Domain Ports
依存性逆転のためのインターフェース定義
"""

from .storage_port import ISnapshotStorage

__all__ = [
    "ISnapshotStorage",
]
