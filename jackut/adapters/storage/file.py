"""
ファイルストレージアダプター
JSONファイルベースのスナップショット永続化
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from ...core.exceptions import PersistenceError
from ...core.logging import get_logger
from ...domain.ports.storage_port import ISnapshotStorage

logger = get_logger(__name__)


class FileSnapshotAdapter(ISnapshotStorage):
    """
    ファイルストレージアダプター

    JSONファイルを使用したシンプルな永続化実装。
    一時ファイルに書き込んでから置換するため、書き込み途中の状態は残らない。
    """

    def __init__(self, data_dir: str = "data", file_name: str = "jackut.json"):
        self.data_dir = Path(data_dir)
        self.data_file = self.data_dir / file_name
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def save(self, snapshot: dict[str, Any]) -> None:
        """ファイルにスナップショットを保存（アトミック書き込み）"""
        data = {
            **snapshot,
            "updated_at": datetime.now().isoformat(),
        }
        temp_file = self.data_file.with_suffix(".tmp")

        try:
            with open(temp_file, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, separators=(",", ":"))
            temp_file.replace(self.data_file)
        except OSError as e:
            raise PersistenceError(
                f"Failed to save snapshot: {e}",
                details={"path": str(self.data_file)},
            ) from e

        logger.debug(f"Snapshot saved: {self.data_file}")

    def load(self) -> dict[str, Any] | None:
        """ファイルからスナップショットを読み込み"""
        if not self.data_file.exists():
            return None

        try:
            with open(self.data_file, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.error(f"データ読み込みエラー: {e}")
            return None

        data.pop("updated_at", None)
        return data

    def clear(self) -> None:
        """スナップショットファイルを削除"""
        if self.data_file.exists():
            self.data_file.unlink()
            logger.info(f"Snapshot removed: {self.data_file}")
