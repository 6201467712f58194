"""
予約リポジトリ

全予約データ（Dataset）をストアから読み込み、ストアへ保存します。
保存は常にデータセット全体の書き込みで、部分的な更新は行いません。
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from models.errors import StorageUnavailable
from models.reservation_models import Dataset, DayBucket, ShiftLimits
from storage.store import Store
from utils.constants import STORAGE_KEY, SEED_RESERVATIONS


def utc_now() -> datetime:
    """現在時刻（UTC、ミリ秒精度）"""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class ReservationRepository:
    """予約データの読み書きを担当するクラス"""

    def __init__(self, store: Store, storage_key: str = STORAGE_KEY,
                 default_limits: Optional[ShiftLimits] = None,
                 seed: Optional[Dict[str, Any]] = None,
                 clock: Callable[[], datetime] = utc_now):
        """
        初期化

        Args:
            store: 永続化先のストア
            storage_key: データを保存するキー
            default_limits: データセット初期化時に記録する定員
            seed: ストアが空の場合に投入する予約データ（Noneの場合は既定の初期データ）
            clock: 現在時刻を返す関数
        """
        self.store = store
        self.storage_key = storage_key
        self.default_limits = default_limits or ShiftLimits()
        self.seed = SEED_RESERVATIONS if seed is None else seed
        self.clock = clock
        self._logger = logging.getLogger(__name__)

    def load(self) -> Dataset:
        """
        データセットを読み込み

        ストアにデータがなければ初期データを作成して保存します。

        Raises:
            StorageUnavailable: ストアを読み込めない場合
            StorageQuotaExceeded: 初期データを保存できない場合
        """
        raw = self.store.get(self.storage_key)
        if raw is None:
            self._logger.info("保存済みデータがないため初期データを作成します")
            dataset = self._create_default_dataset()
            self.save(dataset)
            return dataset

        try:
            return Dataset.from_dict(json.loads(raw), self.default_limits)
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            self._logger.error(f"保存データを解析できません: {e}")
            raise StorageUnavailable() from e

    def refresh(self) -> Dataset:
        """ストアから最新のデータセットを再読み込み"""
        return self.load()

    def save(self, dataset: Dataset) -> None:
        """
        データセットを保存（lastUpdatedを現在時刻に更新）

        書き込みに失敗した場合、lastUpdatedは元の値に戻します。

        Raises:
            StorageQuotaExceeded: ストアが書き込みを拒否した場合
        """
        previous = dataset.last_updated
        dataset.last_updated = self.clock()
        try:
            self.store.set(self.storage_key, json.dumps(dataset.to_dict(), ensure_ascii=False))
        except Exception:
            dataset.last_updated = previous
            raise

    def find_bucket(self, date: str, dataset: Optional[Dataset] = None) -> DayBucket:
        """
        指定日のバケットを取得

        未登録の日付の場合は空のバケットを返します（データセットには追加しません）。
        """
        if dataset is None:
            dataset = self.load()
        return dataset.reservations.get(date) or DayBucket()

    def has_bucket(self, date: str, dataset: Optional[Dataset] = None) -> bool:
        if dataset is None:
            dataset = self.load()
        return date in dataset.reservations

    def list_dates(self) -> List[str]:
        """予約バケットが存在する日付の一覧（昇順）"""
        return sorted(self.load().reservations)

    def _create_default_dataset(self) -> Dataset:
        limits = ShiftLimits(self.default_limits.morning, self.default_limits.afternoon)
        data = {"rezerwacje": self.seed, "limity": limits.to_dict()}
        return Dataset.from_dict(data, limits)
