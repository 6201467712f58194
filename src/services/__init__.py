"""
サービス層

予約の業務ルール（入力検証・定員チェック・追加・取消・エクスポート）を提供します。
"""

from .factory import create_reservation_service
from .reservation_service import (
    ReservationService,
    normalize_date,
    normalize_name,
    normalize_shift
)

__all__ = [
    "ReservationService",
    "create_reservation_service",
    "normalize_date",
    "normalize_name",
    "normalize_shift"
]
