#!/usr/bin/env python3
"""
予約データモデルのユニットテスト

保存フォーマットとの相互変換とバケット操作をテストします。
"""

import sys
import os
from datetime import datetime, timezone
import pytest

# プロジェクトルートをパスに追加
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from models.reservation_models import (
    ReservationRecord, DayBucket, ShiftLimits, Dataset, Shift,
    parse_timestamp, format_timestamp
)


class TestTimestamps:
    """日時変換のテスト"""

    def test_parse_z_suffix(self):
        parsed = parse_timestamp("2025-06-03T10:30:00Z")
        assert parsed == datetime(2025, 6, 3, 10, 30, tzinfo=timezone.utc)

    def test_format_always_has_milliseconds(self):
        value = datetime(2025, 6, 3, 10, 30, tzinfo=timezone.utc)
        assert format_timestamp(value) == "2025-06-03T10:30:00.000Z"

    def test_format_keeps_milliseconds(self):
        """JavaScriptのtoISOString形式（ミリ秒付き）を保持する"""
        assert format_timestamp(parse_timestamp("2025-06-03T10:30:00.123Z")) == "2025-06-03T10:30:00.123Z"


class TestReservationRecord:
    """ReservationRecordクラスのテスト"""

    def test_from_dict_converts_numeric_id(self):
        record = ReservationRecord.from_dict({"id": 1, "imie": "Jan Kowalski", "timestamp": "2025-06-03T10:30:00Z"})
        assert record.id == "1"
        assert record.name == "Jan Kowalski"

    def test_to_dict_uses_storage_field_names(self):
        record = ReservationRecord("abc", "Anna Nowak", datetime(2025, 6, 3, 11, 15, tzinfo=timezone.utc))
        assert record.to_dict() == {"id": "abc", "imie": "Anna Nowak", "timestamp": "2025-06-03T11:15:00.000Z"}

    def test_matches_name_case_insensitive(self):
        record = ReservationRecord("1", "Jan Kowalski", datetime.now(timezone.utc))
        assert record.matches_name("jan kowalski")
        assert record.matches_name("  JAN KOWALSKI ")
        assert not record.matches_name("Jan Kowalsky")

    def test_matches_name_uses_simple_lowercase(self):
        """toLowerCaseと同じ比較（ßはSSと一致しない）"""
        record = ReservationRecord("1", "Straße", datetime.now(timezone.utc))
        assert record.matches_name("STRAßE")
        assert not record.matches_name("STRASSE")

    def test_null_name_becomes_empty(self):
        record = ReservationRecord.from_dict({"id": 7, "imie": None, "timestamp": "2025-06-03T10:30:00.000Z"})
        assert record.name == ""
        assert record.to_dict()["imie"] == ""
        assert not record.matches_name("none")

    def test_empty_id_rejected(self):
        with pytest.raises(ValueError):
            ReservationRecord("", "Jan", datetime.now(timezone.utc))


class TestDayBucket:
    """DayBucketクラスのテスト"""

    def test_missing_remote_defaults_to_empty(self):
        bucket = DayBucket.from_dict({"poranna": [], "popoludniowa": []})
        assert bucket.remote == []
        assert bucket.is_empty()

    def test_to_dict_always_has_three_sequences(self):
        assert DayBucket().to_dict() == {"poranna": [], "popoludniowa": [], "zdalna": []}

    def test_office_selects_shift_sequence(self):
        bucket = DayBucket()
        assert bucket.office(Shift.MORNING) is bucket.morning_office
        assert bucket.office(Shift.AFTERNOON) is bucket.afternoon_office


class TestShiftLimits:
    """ShiftLimitsクラスのテスト"""

    def test_negative_limit_rejected(self):
        with pytest.raises(ValueError):
            ShiftLimits(-1, 8)

    def test_from_dict_falls_back_to_default(self):
        limits = ShiftLimits.from_dict(None, ShiftLimits(3, 4))
        assert (limits.morning, limits.afternoon) == (3, 4)

    def test_for_shift(self):
        limits = ShiftLimits.from_dict({"poranna": 2, "popoludniowa": 6}, ShiftLimits())
        assert limits.for_shift(Shift.MORNING) == 2
        assert limits.for_shift(Shift.AFTERNOON) == 6


class TestDataset:
    """Datasetクラスのテスト"""

    def test_from_dict_round_trip(self):
        data = {
            "rezerwacje": {
                "2025-06-04": {
                    "poranna": [{"id": "1", "imie": "Jan Kowalski", "timestamp": "2025-06-03T10:30:00.000Z"}],
                    "popoludniowa": [],
                    "zdalna": [{"id": "2", "imie": "Ewa Zielińska", "timestamp": "2025-06-03T10:31:00.500Z"}],
                }
            },
            "lastUpdated": "2025-06-03T10:31:00.500Z",
            "limity": {"poranna": 5, "popoludniowa": 8},
        }
        assert Dataset.from_dict(data).to_dict() == data

    def test_bucket_for_creates_lazily(self):
        dataset = Dataset()
        bucket = dataset.bucket_for("2025-06-10")
        assert "2025-06-10" in dataset.reservations
        assert dataset.bucket_for("2025-06-10") is bucket

    def test_all_ids(self):
        dataset = Dataset.from_dict({
            "rezerwacje": {
                "2025-06-04": {"poranna": [{"id": 1, "imie": "A", "timestamp": "2025-06-03T10:30:00Z"}]},
                "2025-06-05": {"zdalna": [{"id": 2, "imie": "B", "timestamp": "2025-06-03T10:30:00Z"}]},
            }
        })
        assert sorted(dataset.all_ids()) == ["1", "2"]
