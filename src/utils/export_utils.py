"""
エクスポート処理モジュール

予約一覧のDataFrame変換、CSV生成、ファイル名生成の機能を提供します。
"""

import csv
import pandas as pd
from datetime import date, datetime
from io import StringIO
from typing import List, Union
from zoneinfo import ZoneInfo

from models.reservation_models import ReservationRow
from .constants import EXPORT_HEADER, EXPORT_FILENAME_PREFIX, DISPLAY_DATETIME_FORMAT


def format_display_time(value: datetime, tz_name: str = "Europe/Warsaw") -> str:
    """
    予約日時を表示用の文字列に変換

    ポーランド語ロケールの表記（例: 3.06.2025, 12:30:00）を使用します。

    Args:
        value: 予約日時（タイムゾーン付き）
        tz_name: 表示タイムゾーン

    Returns:
        フォーマット済みの文字列
    """
    local = value.astimezone(ZoneInfo(tz_name))
    return DISPLAY_DATETIME_FORMAT.format(
        day=local.day, month=local.month, year=local.year,
        hour=local.hour, minute=local.minute, second=local.second
    )


def reservations_to_dataframe(rows: List[ReservationRow], tz_name: str = "Europe/Warsaw") -> pd.DataFrame:
    """
    予約一覧をDataFrameに変換

    Args:
        rows: 予約一覧
        tz_name: 表示タイムゾーン

    Returns:
        列が EXPORT_HEADER のDataFrame（予約がなければ空）
    """
    data = [
        [row.name, row.work_mode, row.shift, format_display_time(row.created_at, tz_name)]
        for row in rows
    ]
    return pd.DataFrame(data, columns=EXPORT_HEADER)


def build_export_csv(rows: List[ReservationRow], tz_name: str = "Europe/Warsaw") -> str:
    """
    予約一覧をCSV文字列に変換

    ヘッダー行は引用符なし、データ行は全フィールドをダブルクォートで囲みます。
    """
    df = reservations_to_dataframe(rows, tz_name)
    buf = StringIO()
    buf.write(",".join(EXPORT_HEADER) + "\n")
    df.to_csv(buf, header=False, index=False, quoting=csv.QUOTE_ALL, lineterminator="\n")
    return buf.getvalue()


def generate_export_filename(day: Union[str, date]) -> str:
    """エクスポートファイル名を生成（rezerwacje_<日付>.csv）"""
    if isinstance(day, date):
        day = day.isoformat()
    return f"{EXPORT_FILENAME_PREFIX}_{day}.csv"
