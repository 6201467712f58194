#!/usr/bin/env python3
"""
エクスポート処理のテスト
"""

import sys
import os
from datetime import date, datetime, timezone

# プロジェクトルートをパスに追加
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from models.reservation_models import ReservationRow
from utils.export_utils import (
    format_display_time, reservations_to_dataframe, build_export_csv, generate_export_filename
)


def make_row(name="Jan Kowalski", work_mode="W biurze", shift="Poranna (8:00-10:00)"):
    return ReservationRow(name, work_mode, shift, datetime(2025, 1, 15, 7, 5, 9, tzinfo=timezone.utc))


class TestFormatDisplayTime:
    """表示用日時フォーマットのテスト"""

    def test_polish_locale_style_in_winter(self):
        value = datetime(2025, 1, 15, 7, 5, 9, tzinfo=timezone.utc)
        assert format_display_time(value) == "15.01.2025, 08:05:09"

    def test_other_timezone(self):
        value = datetime(2025, 1, 15, 7, 5, 9, tzinfo=timezone.utc)
        assert format_display_time(value, "UTC") == "15.01.2025, 07:05:09"


class TestDataFrame:
    """DataFrame変換のテスト"""

    def test_columns(self):
        df = reservations_to_dataframe([make_row()])
        assert list(df.columns) == ["Imię i Nazwisko", "Tryb Pracy", "Zmiana", "Czas Rezerwacji"]
        assert df.iloc[0]["Imię i Nazwisko"] == "Jan Kowalski"

    def test_empty(self):
        assert reservations_to_dataframe([]).empty


class TestBuildExportCsv:
    """CSV生成のテスト"""

    def test_header_unquoted_and_fields_quoted(self):
        csv_text = build_export_csv([make_row(), make_row("Ewa", "Zdalnie", "-")])
        assert csv_text == (
            "Imię i Nazwisko,Tryb Pracy,Zmiana,Czas Rezerwacji\n"
            '"Jan Kowalski","W biurze","Poranna (8:00-10:00)","15.01.2025, 08:05:09"\n'
            '"Ewa","Zdalnie","-","15.01.2025, 08:05:09"\n'
        )

    def test_embedded_quote_is_escaped(self):
        csv_text = build_export_csv([make_row('Jan "Kowal" Kowalski')])
        assert '"Jan ""Kowal"" Kowalski"' in csv_text


class TestFilename:
    """ファイル名生成のテスト"""

    def test_from_string(self):
        assert generate_export_filename("2025-06-04") == "rezerwacje_2025-06-04.csv"

    def test_from_date(self):
        assert generate_export_filename(date(2025, 6, 4)) == "rezerwacje_2025-06-04.csv"
