"""
ユーティリティパッケージ

このパッケージは、アプリケーション全体で使用される共通機能を提供します。
設定管理、ログ機能、エクスポート、UIコンポーネントなどのユーティリティが含まれています。
"""

# 設定管理とログ機能
from .config import get_config, reload_config, AppConfig
from .logger import setup_logging, get_logger, log_extra_fields

from .export_utils import (
    format_display_time,
    reservations_to_dataframe,
    build_export_csv,
    generate_export_filename
)
from .constants import (
    STORAGE_KEY,
    DEFAULT_MORNING_LIMIT,
    DEFAULT_AFTERNOON_LIMIT,
    WORK_MODE_LABELS,
    SHIFT_LABELS,
    NO_SHIFT_LABEL,
    EXPORT_HEADER,
    MESSAGES,
    SEED_RESERVATIONS
)

__all__ = [
    # 設定管理とログ機能
    'get_config',
    'reload_config',
    'AppConfig',
    'setup_logging',
    'get_logger',
    'log_extra_fields',

    # エクスポート機能
    'format_display_time',
    'reservations_to_dataframe',
    'build_export_csv',
    'generate_export_filename',

    # 定数
    'STORAGE_KEY',
    'DEFAULT_MORNING_LIMIT',
    'DEFAULT_AFTERNOON_LIMIT',
    'WORK_MODE_LABELS',
    'SHIFT_LABELS',
    'NO_SHIFT_LABEL',
    'EXPORT_HEADER',
    'MESSAGES',
    'SEED_RESERVATIONS'
]
