"""
予約システムの例外定義

ユーザー入力の検証エラー、業務ルール違反、ストレージ障害を表す例外を提供します。
すべての例外は画面に表示するためのメッセージ（ポーランド語）を持ちます。
"""

from enum import Enum
from typing import Optional


class ReservationError(Exception):
    """予約システムの基底例外"""

    default_message = "Wystąpił nieoczekiwany błąd."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationKind(Enum):
    """入力検証エラーの種類"""
    MISSING_DATE = "missing_date"
    INVALID_DATE = "invalid_date"
    MISSING_NAME = "missing_name"
    MISSING_SHIFT = "missing_shift"


VALIDATION_MESSAGES = {
    ValidationKind.MISSING_DATE: "Proszę wybrać datę!",
    ValidationKind.INVALID_DATE: "Nieprawidłowy format daty (oczekiwano RRRR-MM-DD)!",
    ValidationKind.MISSING_NAME: "Proszę wprowadzić imię i nazwisko!",
    ValidationKind.MISSING_SHIFT: "Proszę wybrać zmianę dla pracy w biurze!",
}


class ValidationError(ReservationError):
    """入力値が不正（データセットには触れる前に発生）"""

    def __init__(self, kind: ValidationKind, message: Optional[str] = None):
        self.kind = kind
        super().__init__(message or VALIDATION_MESSAGES[kind])


class CapacityExceeded(ReservationError):
    """シフトの定員超過"""

    default_message = "Brak dostępnych miejsc na wybraną zmianę!"

    def __init__(self, date: str, shift: str, limit: int):
        self.date = date
        self.shift = shift
        self.limit = limit
        super().__init__()


class NotFound(ReservationError):
    """取消対象の予約が存在しない"""

    default_message = "Nie znaleziono rezerwacji dla podanej osoby!"

    def __init__(self, date: str, name: str):
        self.date = date
        self.name = name
        super().__init__()


class NoDataForDate(ReservationError):
    """指定日にエクスポート可能なデータがない"""

    default_message = "Brak danych do eksportu dla wybranej daty!"

    def __init__(self, date: str):
        self.date = date
        super().__init__()


class StorageError(ReservationError):
    """ストレージ関連エラーの基底クラス"""


class StorageUnavailable(StorageError):
    """ストレージを読み込めない（無効化・ブロック・破損）"""

    default_message = "Pamięć lokalna jest niedostępna - nie można odczytać rezerwacji."


class StorageQuotaExceeded(StorageError):
    """ストレージへの書き込みが拒否された"""

    default_message = "Brak miejsca w pamięci lokalnej - nie można zapisać rezerwacji."
