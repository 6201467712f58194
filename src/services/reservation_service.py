"""
予約サービス

予約リクエストの検証、定員チェック、予約の追加・取消を行います。
すべての操作はデータセット全体の読み込み → 変更 → 保存の順で実行されます。

主な機能:
- オフィス勤務（午前・午後）の予約（定員チェック付き）
- リモート勤務の登録（定員なし）
- 氏名と日付による予約取消
- 空き枠数の取得
- 1日分の予約一覧とCSVエクスポート
"""

import logging
import uuid
from datetime import date as date_type, datetime
from typing import Callable, List, Optional, Union

from models.errors import (
    ValidationError, ValidationKind, CapacityExceeded, NotFound, NoDataForDate
)
from models.reservation_models import (
    Availability, Dataset, ReservationRecord, ReservationRequest, ReservationRow,
    Shift, WorkMode
)
from repositories.reservation_repository import ReservationRepository, utc_now
from utils.constants import MESSAGES, SHIFT_LABELS, NO_SHIFT_LABEL, WORK_MODE_LABELS
from utils.export_utils import build_export_csv
from utils.logger import log_extra_fields


DateInput = Union[str, date_type, None]


def normalize_date(value: DateInput, missing_message: Optional[str] = None) -> str:
    """日付入力をISO形式（YYYY-MM-DD）の文字列に変換"""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date_type):
        return value.isoformat()
    text = (value or "").strip()
    if not text:
        raise ValidationError(ValidationKind.MISSING_DATE, missing_message)
    try:
        return date_type.fromisoformat(text).isoformat()
    except ValueError:
        raise ValidationError(ValidationKind.INVALID_DATE)


def normalize_name(value: Optional[str], missing_message: Optional[str] = None) -> str:
    """氏名の前後の空白を除去（空の場合はエラー）"""
    name = (value or "").strip()
    if not name:
        raise ValidationError(ValidationKind.MISSING_NAME, missing_message)
    return name


def normalize_shift(value: Union[Shift, str, None]) -> Shift:
    """シフト入力をShiftに変換（poranna / morning 等の表記を受け付ける）"""
    if isinstance(value, Shift):
        return value
    text = (value or "").strip().lower()
    for shift in Shift:
        if text in (shift.value, shift.name.lower()):
            return shift
    raise ValidationError(ValidationKind.MISSING_SHIFT)


class ReservationService:
    """予約の業務ルールを適用するクラス"""

    def __init__(self, repository: ReservationRepository,
                 id_factory: Callable[[], str] = lambda: uuid.uuid4().hex,
                 clock: Callable[[], datetime] = utc_now,
                 display_timezone: str = "Europe/Warsaw"):
        """
        初期化

        Args:
            repository: 予約リポジトリ
            id_factory: 予約IDの生成関数
            clock: 作成日時に使用する現在時刻関数
            display_timezone: 一覧・エクスポートで表示するタイムゾーン
        """
        self.repository = repository
        self.id_factory = id_factory
        self.clock = clock
        self.display_timezone = display_timezone
        self._logger = logging.getLogger(__name__)

    def reserve_office(self, date: DateInput, name: str, shift: Union[Shift, str, None]) -> ReservationRecord:
        """
        オフィス勤務を予約

        Raises:
            ValidationError: 日付・氏名・シフトが未指定の場合
            CapacityExceeded: 指定シフトが満員の場合（データは変更されません）
        """
        date_key = normalize_date(date)
        name = normalize_name(name)
        shift = normalize_shift(shift)

        dataset = self.repository.load()
        limit = dataset.limits.for_shift(shift)
        current = dataset.reservations.get(date_key)
        taken = len(current.office(shift)) if current else 0
        if taken >= limit:
            log_extra_fields(self._logger, logging.WARNING, "定員超過のため予約を拒否しました",
                             date=date_key, shift=shift.value, limit=limit)
            raise CapacityExceeded(date_key, shift.value, limit)

        record = self._new_record(dataset, name)
        dataset.bucket_for(date_key).office(shift).append(record)
        self.repository.save(dataset)

        log_extra_fields(self._logger, logging.INFO, "オフィス勤務を予約しました",
                         date=date_key, shift=shift.value, id=record.id)
        return record

    def reserve_remote(self, date: DateInput, name: str) -> ReservationRecord:
        """リモート勤務を登録（定員なし）"""
        date_key = normalize_date(date)
        name = normalize_name(name)

        dataset = self.repository.load()
        record = self._new_record(dataset, name)
        dataset.bucket_for(date_key).remote.append(record)
        self.repository.save(dataset)

        log_extra_fields(self._logger, logging.INFO, "リモート勤務を登録しました",
                         date=date_key, id=record.id)
        return record

    def submit(self, request: ReservationRequest) -> ReservationRecord:
        """予約フォームの入力を検証し、勤務形態に応じて予約を追加"""
        date_key = normalize_date(request.date)
        name = normalize_name(request.employee_name)
        if request.work_mode is WorkMode.REMOTE:
            return self.reserve_remote(date_key, name)
        if request.shift is None:
            raise ValidationError(ValidationKind.MISSING_SHIFT)
        return self.reserve_office(date_key, name, request.shift)

    def cancel(self, date: DateInput, name: str) -> bool:
        """
        予約を取消

        午前 → 午後 → リモートの順に走査し、氏名が一致した最初の1件のみ削除します。
        氏名の比較は大文字小文字を区別しません。

        Returns:
            削除した場合True、該当がなければFalse
        """
        name = normalize_name(name, MESSAGES["cancel_missing_name"])
        date_key = normalize_date(date, MESSAGES["cancel_missing_date"])

        dataset = self.repository.load()
        bucket = dataset.reservations.get(date_key)
        if bucket is None:
            return False

        for sequence in bucket.sequences():
            for index, record in enumerate(sequence):
                if record.matches_name(name):
                    del sequence[index]
                    self.repository.save(dataset)
                    log_extra_fields(self._logger, logging.INFO, "予約を取り消しました",
                                     date=date_key, id=record.id)
                    return True

        self._logger.info(f"取消対象の予約が見つかりません: {date_key}")
        return False

    def cancel_or_raise(self, date: DateInput, name: str) -> None:
        """予約を取消（該当がなければNotFound）"""
        if not self.cancel(date, name):
            raise NotFound(normalize_date(date), normalize_name(name))

    def availability(self, date: DateInput, dataset: Optional[Dataset] = None) -> Availability:
        """指定日の空き枠数を取得（負の値にはならない）"""
        date_key = normalize_date(date)
        if dataset is None:
            dataset = self.repository.load()
        bucket = self.repository.find_bucket(date_key, dataset)
        limits = dataset.limits
        return Availability(
            morning_free=max(0, limits.morning - len(bucket.morning_office)),
            afternoon_free=max(0, limits.afternoon - len(bucket.afternoon_office)),
            morning_limit=limits.morning,
            afternoon_limit=limits.afternoon,
        )

    def list_reservations(self, date: DateInput, dataset: Optional[Dataset] = None) -> List[ReservationRow]:
        """指定日の予約一覧（午前 → 午後 → リモートの順）"""
        date_key = normalize_date(date)
        if dataset is None:
            dataset = self.repository.load()
        bucket = self.repository.find_bucket(date_key, dataset)

        rows = []
        for shift in Shift:
            for record in bucket.office(shift):
                rows.append(ReservationRow(
                    name=record.name,
                    work_mode=WORK_MODE_LABELS[WorkMode.OFFICE.value],
                    shift=SHIFT_LABELS[shift.value],
                    created_at=record.created_at,
                ))
        for record in bucket.remote:
            rows.append(ReservationRow(
                name=record.name,
                work_mode=WORK_MODE_LABELS[WorkMode.REMOTE.value],
                shift=NO_SHIFT_LABEL,
                created_at=record.created_at,
            ))
        return rows

    def export_day(self, date: DateInput) -> str:
        """
        指定日の予約をCSV文字列としてエクスポート

        Raises:
            NoDataForDate: バケットがない、または予約が1件もない場合
        """
        date_key = normalize_date(date)
        rows = self.list_reservations(date_key)
        if not rows:
            raise NoDataForDate(date_key)
        return build_export_csv(rows, self.display_timezone)

    def _new_record(self, dataset: Dataset, name: str) -> ReservationRecord:
        existing = set(dataset.all_ids())
        record_id = self.id_factory()
        while record_id in existing:
            record_id = self.id_factory()
        return ReservationRecord(id=record_id, name=name, created_at=self.clock())
