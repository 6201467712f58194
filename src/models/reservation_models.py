"""
予約データモデル

日付ごとの予約（午前・午後のオフィス勤務、リモート勤務）を表すデータ構造を提供します。
永続化フォーマット（JSON）との相互変換もこのモジュールで行います。

保存フォーマットのフィールド名は既存データとの互換性のため固定です:
- rezerwacje: 日付 -> DayBucket
- limity: シフトごとの定員
- poranna / popoludniowa / zdalna: 午前 / 午後 / リモート
- imie / timestamp: 氏名 / 作成日時
"""

from typing import List, Dict, Optional, Any
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class Shift(Enum):
    """オフィス勤務のシフト（値は保存フォーマットのフィールド名）"""
    MORNING = "poranna"        # 8:00-10:00
    AFTERNOON = "popoludniowa"  # 10:00-14:00


class WorkMode(Enum):
    """勤務形態"""
    OFFICE = "office"
    REMOTE = "remote"


REMOTE_FIELD = "zdalna"


def parse_timestamp(value: str) -> datetime:
    """ISO形式（末尾Z可）の文字列をUTCのdatetimeに変換"""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """datetimeをJavaScriptのtoISOString互換の文字列に変換"""
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S") + f".{value.microsecond // 1000:03d}Z"


@dataclass
class ReservationRecord:
    """1件の予約"""
    id: str
    name: str
    created_at: datetime

    def __post_init__(self):
        """作成後の検証"""
        if not self.id:
            raise ValueError("予約IDは必須です")

    def matches_name(self, name: str) -> bool:
        """氏名が一致するか（大文字小文字を区別しない）"""
        return self.name.strip().lower() == name.strip().lower()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "imie": self.name,
            "timestamp": format_timestamp(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReservationRecord":
        # 旧データのIDは数値
        return cls(
            id=str(data["id"]),
            name=str(data.get("imie") or ""),
            created_at=parse_timestamp(data["timestamp"]),
        )


@dataclass
class DayBucket:
    """1日分の予約（挿入順 = 表示順）"""
    morning_office: List[ReservationRecord] = field(default_factory=list)
    afternoon_office: List[ReservationRecord] = field(default_factory=list)
    remote: List[ReservationRecord] = field(default_factory=list)

    def office(self, shift: Shift) -> List[ReservationRecord]:
        """指定シフトの予約リストを取得"""
        if shift is Shift.MORNING:
            return self.morning_office
        return self.afternoon_office

    def sequences(self) -> List[List[ReservationRecord]]:
        """取消・エクスポート時の走査順（午前 → 午後 → リモート）"""
        return [self.morning_office, self.afternoon_office, self.remote]

    def is_empty(self) -> bool:
        return not any(self.sequences())

    def to_dict(self) -> Dict[str, Any]:
        return {
            Shift.MORNING.value: [r.to_dict() for r in self.morning_office],
            Shift.AFTERNOON.value: [r.to_dict() for r in self.afternoon_office],
            REMOTE_FIELD: [r.to_dict() for r in self.remote],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DayBucket":
        def records(key: str) -> List[ReservationRecord]:
            return [ReservationRecord.from_dict(item) for item in data.get(key) or []]

        return cls(
            morning_office=records(Shift.MORNING.value),
            afternoon_office=records(Shift.AFTERNOON.value),
            remote=records(REMOTE_FIELD),
        )


@dataclass
class ShiftLimits:
    """シフトごとの定員"""
    morning: int = 5
    afternoon: int = 8

    def __post_init__(self):
        if self.morning < 0 or self.afternoon < 0:
            raise ValueError("定員は0以上である必要があります")

    def for_shift(self, shift: Shift) -> int:
        return self.morning if shift is Shift.MORNING else self.afternoon

    def to_dict(self) -> Dict[str, int]:
        return {Shift.MORNING.value: self.morning, Shift.AFTERNOON.value: self.afternoon}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]], default: "ShiftLimits") -> "ShiftLimits":
        if not data:
            return cls(default.morning, default.afternoon)
        return cls(
            morning=int(data.get(Shift.MORNING.value, default.morning)),
            afternoon=int(data.get(Shift.AFTERNOON.value, default.afternoon)),
        )


@dataclass
class Availability:
    """指定日の空き枠数"""
    morning_free: int
    afternoon_free: int
    morning_limit: int
    afternoon_limit: int


@dataclass
class Dataset:
    """全予約データ（日付ISO文字列 -> DayBucket）"""
    reservations: Dict[str, DayBucket] = field(default_factory=dict)
    last_updated: Optional[datetime] = None
    limits: ShiftLimits = field(default_factory=ShiftLimits)

    def bucket_for(self, date: str) -> DayBucket:
        """指定日のバケットを取得（なければ作成してデータセットに追加）"""
        if date not in self.reservations:
            self.reservations[date] = DayBucket()
        return self.reservations[date]

    def all_ids(self) -> List[str]:
        ids = []
        for bucket in self.reservations.values():
            for sequence in bucket.sequences():
                ids.extend(r.id for r in sequence)
        return ids

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rezerwacje": {date: bucket.to_dict() for date, bucket in self.reservations.items()},
            "lastUpdated": format_timestamp(self.last_updated) if self.last_updated else None,
            "limity": self.limits.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], default_limits: Optional[ShiftLimits] = None) -> "Dataset":
        default_limits = default_limits or ShiftLimits()
        last_updated = data.get("lastUpdated")
        return cls(
            reservations={
                date: DayBucket.from_dict(bucket or {})
                for date, bucket in (data.get("rezerwacje") or {}).items()
            },
            last_updated=parse_timestamp(last_updated) if last_updated else None,
            limits=ShiftLimits.from_dict(data.get("limity"), default_limits),
        )


@dataclass
class ReservationRequest:
    """予約フォームの入力値"""
    date: Any
    work_mode: WorkMode
    employee_name: str
    shift: Optional[Shift] = None


@dataclass
class ReservationRow:
    """一覧表示・エクスポート用の1行"""
    name: str
    work_mode: str
    shift: str
    created_at: datetime
