"""
スナップショットストレージのテスト
"""

import json
import tempfile
from pathlib import Path

import pytest

from jackut.adapters.storage.file import FileSnapshotAdapter
from jackut.adapters.storage.memory import MemorySnapshotAdapter


@pytest.fixture
def temp_data_dir():
    """テスト用の一時データディレクトリ"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


class TestFileSnapshotAdapter:
    """FileSnapshotAdapter のテスト"""

    def test_load_without_file(self, temp_data_dir):
        adapter = FileSnapshotAdapter(data_dir=temp_data_dir)
        assert adapter.load() is None

    def test_save_and_load(self, temp_data_dir):
        adapter = FileSnapshotAdapter(data_dir=temp_data_dir)
        snapshot = {"version": 1, "accounts": [{"account_id": "joão"}]}

        adapter.save(snapshot)

        assert adapter.load() == snapshot
        assert not (Path(temp_data_dir) / "jackut.tmp").exists()

    def test_saved_file_is_json(self, temp_data_dir):
        adapter = FileSnapshotAdapter(data_dir=temp_data_dir, file_name="state.json")
        adapter.save({"version": 1})

        with open(Path(temp_data_dir) / "state.json", encoding="utf-8") as f:
            data = json.load(f)
        assert data["version"] == 1
        assert "updated_at" in data

    def test_corrupt_file_loads_as_empty(self, temp_data_dir):
        """壊れたファイルは読み込めずに None を返す"""
        (Path(temp_data_dir) / "jackut.json").write_text("{not json", encoding="utf-8")
        adapter = FileSnapshotAdapter(data_dir=temp_data_dir)
        assert adapter.load() is None

    def test_clear(self, temp_data_dir):
        adapter = FileSnapshotAdapter(data_dir=temp_data_dir)
        adapter.save({"version": 1})
        adapter.clear()
        assert adapter.load() is None


class TestMemorySnapshotAdapter:
    """MemorySnapshotAdapter のテスト"""

    def test_snapshot_is_copied(self):
        adapter = MemorySnapshotAdapter()
        snapshot = {"accounts": []}
        adapter.save(snapshot)
        snapshot["accounts"].append("changed")

        assert adapter.load() == {"accounts": []}
        assert adapter.save_count == 1
