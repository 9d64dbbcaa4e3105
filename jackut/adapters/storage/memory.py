"""
メモリストレージアダプター
プロセス内でのみスナップショットを保持する（テスト・一時利用向け）
"""

import copy
from typing import Any

from ...domain.ports.storage_port import ISnapshotStorage


class MemorySnapshotAdapter(ISnapshotStorage):
    """最後に保存されたスナップショットのコピーを保持"""

    def __init__(self, snapshot: dict[str, Any] | None = None):
        self._snapshot = copy.deepcopy(snapshot)
        self.save_count = 0

    def save(self, snapshot: dict[str, Any]) -> None:
        self._snapshot = copy.deepcopy(snapshot)
        self.save_count += 1

    def load(self) -> dict[str, Any] | None:
        return copy.deepcopy(self._snapshot)

    def clear(self) -> None:
        self._snapshot = None
