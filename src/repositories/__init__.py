"""
リポジトリ層

予約データセットの読み込み・保存を提供します。
"""

from .reservation_repository import ReservationRepository, utc_now

__all__ = [
    "ReservationRepository",
    "utc_now"
]
