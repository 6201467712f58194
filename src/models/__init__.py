"""
モデル層

予約データの構造と例外定義を提供します。
"""

from .reservation_models import (
    Shift,
    WorkMode,
    ReservationRecord,
    DayBucket,
    ShiftLimits,
    Availability,
    Dataset,
    ReservationRequest,
    ReservationRow,
    parse_timestamp,
    format_timestamp
)
from .errors import (
    ReservationError,
    ValidationError,
    ValidationKind,
    CapacityExceeded,
    NotFound,
    NoDataForDate,
    StorageError,
    StorageUnavailable,
    StorageQuotaExceeded
)

__all__ = [
    "Shift",
    "WorkMode",
    "ReservationRecord",
    "DayBucket",
    "ShiftLimits",
    "Availability",
    "Dataset",
    "ReservationRequest",
    "ReservationRow",
    "parse_timestamp",
    "format_timestamp",
    "ReservationError",
    "ValidationError",
    "ValidationKind",
    "CapacityExceeded",
    "NotFound",
    "NoDataForDate",
    "StorageError",
    "StorageUnavailable",
    "StorageQuotaExceeded"
]
