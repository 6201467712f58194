"""
サービスの組み立て

設定値からストア・リポジトリ・サービスを生成します。
"""

from typing import Optional

from models.reservation_models import ShiftLimits
from repositories.reservation_repository import ReservationRepository
from storage.store import JsonFileStore, Store
from utils.config import AppConfig, get_config
from .reservation_service import ReservationService


def create_reservation_service(config: Optional[AppConfig] = None,
                               store: Optional[Store] = None) -> ReservationService:
    """
    予約サービスを生成

    Args:
        config: アプリケーション設定（Noneの場合は環境変数から読み込み）
        store: 使用するストア（Noneの場合はデータディレクトリのファイルストア）
    """
    if config is None:
        config = get_config()
    if store is None:
        store = JsonFileStore(config.data_dir, quota_bytes=config.storage_quota_bytes)

    repository = ReservationRepository(
        store,
        storage_key=config.storage_key,
        default_limits=ShiftLimits(config.morning_limit, config.afternoon_limit),
    )
    return ReservationService(repository, display_timezone=config.display_timezone)
