"""
定数定義モジュール

予約システムで使用する定数を定義します。
"""

# ストレージ設定
STORAGE_KEY = "reservation_data"
DEFAULT_STORAGE_QUOTA_BYTES = 5 * 1024 * 1024  # ブラウザのlocalStorage相当

# 定員のデフォルト値
DEFAULT_MORNING_LIMIT = 5
DEFAULT_AFTERNOON_LIMIT = 8

# 表示ラベル
WORK_MODE_LABELS = {
    "office": "W biurze",
    "remote": "Zdalnie",
}

SHIFT_LABELS = {
    "poranna": "Poranna (8:00-10:00)",
    "popoludniowa": "Popołudniowa (10:00-14:00)",
}
NO_SHIFT_LABEL = "-"

# エクスポート設定
EXPORT_HEADER = ["Imię i Nazwisko", "Tryb Pracy", "Zmiana", "Czas Rezerwacji"]
EXPORT_FILENAME_PREFIX = "rezerwacje"
DISPLAY_DATETIME_FORMAT = "{day}.{month:02d}.{year}, {hour:02d}:{minute:02d}:{second:02d}"

# 画面メッセージ
MESSAGE_TIMEOUT_SECONDS = 5
MESSAGES = {
    "reserved": "Rezerwacja została pomyślnie dodana!",
    "cancelled": "Rezerwacja została anulowana!",
    "cancel_missing_name": "Wprowadź swoje imię i nazwisko aby anulować rezerwację!",
    "cancel_missing_date": "Wybierz datę rezerwacji do anulowania!",
    "exported": "Dane zostały wyeksportowane do pliku CSV!",
    "refreshed": "Dane zostały odświeżone!",
    "no_reservations": "Brak rezerwacji na wybrany dzień",
}

# 初期データ（ストレージが空の場合に投入）
SEED_RESERVATIONS = {
    "2025-06-04": {
        "poranna": [
            {"id": 1, "imie": "Jan Kowalski", "timestamp": "2025-06-03T10:30:00Z"},
            {"id": 2, "imie": "Anna Nowak", "timestamp": "2025-06-03T11:15:00Z"},
        ],
        "popoludniowa": [
            {"id": 3, "imie": "Piotr Wiśniewski", "timestamp": "2025-06-03T12:00:00Z"},
        ],
    },
    "2025-06-05": {
        "poranna": [
            {"id": 4, "imie": "Maria Kowalczyk", "timestamp": "2025-06-03T14:20:00Z"},
        ],
        "popoludniowa": [],
    },
}
