"""
Storage Adapters
スナップショット永続化の実装

使用例:
    from jackut.adapters.storage.file import FileSnapshotAdapter
    from jackut.adapters.storage.memory import MemorySnapshotAdapter
"""

from .file import FileSnapshotAdapter
from .memory import MemorySnapshotAdapter

__all__ = [
    "FileSnapshotAdapter",
    "MemorySnapshotAdapter",
]
