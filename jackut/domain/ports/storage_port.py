"""
ストレージポート
ソーシャルネットワーク全体スナップショットの永続化インターフェース
"""

from abc import ABC, abstractmethod
from typing import Any


class ISnapshotStorage(ABC):
    """
    スナップショットストレージインターフェース

    変更操作が成功するたびに全状態のスナップショットを受け取る。
    実装はファイル、メモリ等で切り替え可能。
    """

    @abstractmethod
    def save(self, snapshot: dict[str, Any]) -> None:
        """
        スナップショットを保存

        Args:
            snapshot: SocialNetwork.to_snapshot() の結果

        Raises:
            PersistenceError: 書き込みに失敗した場合
        """

    @abstractmethod
    def load(self) -> dict[str, Any] | None:
        """
        最後に保存されたスナップショットを読み込み

        Returns:
            Optional[dict]: スナップショット（存在しない場合None）
        """

    @abstractmethod
    def clear(self) -> None:
        """保存済みスナップショットを削除"""
