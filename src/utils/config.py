"""
設定管理モジュール

このモジュールは、アプリケーション全体で使用される設定値を管理します。
環境変数から値を読み込み、適切なデフォルト値を提供します。
direnvとの連携を考慮し、開発環境での設定管理を簡素化します。

主な機能:
- 環境変数からの設定値読み込み
- デフォルト値の提供
- 設定値の型変換
- 設定値の検証
"""

import os
import logging
from typing import Optional
from dataclasses import dataclass
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .constants import (
    STORAGE_KEY,
    DEFAULT_STORAGE_QUOTA_BYTES,
    DEFAULT_MORNING_LIMIT,
    DEFAULT_AFTERNOON_LIMIT,
    MESSAGE_TIMEOUT_SECONDS,
)


@dataclass
class AppConfig:
    """アプリケーション設定クラス"""

    # アプリケーション基本設定
    app_name: str
    app_version: str
    debug: bool
    log_level: str

    # ストレージ設定
    data_dir: Path
    storage_key: str
    storage_quota_bytes: int

    # 定員設定
    morning_limit: int
    afternoon_limit: int

    # 表示設定
    message_timeout_seconds: float
    display_timezone: str

    # Streamlit設定
    streamlit_server_port: int
    streamlit_server_address: str

    # ログ設定
    log_file: Path
    log_max_size: str
    log_backup_count: int


class ConfigManager:
    """設定管理クラス"""

    def __init__(self):
        """設定マネージャーを初期化"""
        self._config: Optional[AppConfig] = None
        self._logger = logging.getLogger(__name__)

    def load_config(self) -> AppConfig:
        """環境変数から設定を読み込み、AppConfigオブジェクトを返す"""
        if self._config is None:
            self._config = self._create_config()
        return self._config

    def _create_config(self) -> AppConfig:
        """環境変数から設定オブジェクトを作成"""

        # アプリケーション基本設定
        app_name = os.getenv('APP_NAME', 'System Rezerwacji Biurek')
        app_version = os.getenv('APP_VERSION', '0.1.0')
        debug = self._parse_bool(os.getenv('DEBUG', 'false'))
        log_level = os.getenv('LOG_LEVEL', 'INFO')

        # ストレージ設定
        data_dir = Path(os.getenv('DATA_DIR', './data'))
        storage_key = os.getenv('STORAGE_KEY', STORAGE_KEY)
        storage_quota_bytes = int(os.getenv('STORAGE_QUOTA_BYTES', str(DEFAULT_STORAGE_QUOTA_BYTES)))

        # 定員設定
        morning_limit = int(os.getenv('MORNING_LIMIT', str(DEFAULT_MORNING_LIMIT)))
        afternoon_limit = int(os.getenv('AFTERNOON_LIMIT', str(DEFAULT_AFTERNOON_LIMIT)))

        # 表示設定
        message_timeout_seconds = float(os.getenv('MESSAGE_TIMEOUT_SECONDS', str(MESSAGE_TIMEOUT_SECONDS)))
        display_timezone = os.getenv('DISPLAY_TIMEZONE', 'Europe/Warsaw')

        # Streamlit設定
        streamlit_server_port = int(os.getenv('STREAMLIT_SERVER_PORT', '8501'))
        streamlit_server_address = os.getenv('STREAMLIT_SERVER_ADDRESS', '0.0.0.0')

        # ログ設定
        log_file = Path(os.getenv('LOG_FILE', './logs/app.log'))
        log_max_size = os.getenv('LOG_MAX_SIZE', '10MB')
        log_backup_count = int(os.getenv('LOG_BACKUP_COUNT', '5'))

        # 設定オブジェクトを作成
        config = AppConfig(
            app_name=app_name,
            app_version=app_version,
            debug=debug,
            log_level=log_level,
            data_dir=data_dir,
            storage_key=storage_key,
            storage_quota_bytes=storage_quota_bytes,
            morning_limit=morning_limit,
            afternoon_limit=afternoon_limit,
            message_timeout_seconds=message_timeout_seconds,
            display_timezone=display_timezone,
            streamlit_server_port=streamlit_server_port,
            streamlit_server_address=streamlit_server_address,
            log_file=log_file,
            log_max_size=log_max_size,
            log_backup_count=log_backup_count
        )

        # 設定の検証
        self._validate_config(config)

        # ログ出力
        self._log_config_summary(config)

        return config

    def _parse_bool(self, value: str) -> bool:
        """文字列をブール値に変換"""
        return value.lower() in ('true', '1', 'yes', 'on')

    def _validate_config(self, config: AppConfig) -> None:
        """設定値の検証"""
        errors = []

        if not config.data_dir.exists():
            self._logger.warning(f"データディレクトリが存在しません（初回保存時に作成します）: {config.data_dir}")

        if not config.storage_key:
            errors.append("STORAGE_KEYは空にできません")

        if config.storage_quota_bytes <= 0:
            errors.append("STORAGE_QUOTA_BYTESは正の値である必要があります")

        # 定員設定の検証
        if config.morning_limit < 0:
            errors.append("MORNING_LIMITは0以上の値である必要があります")

        if config.afternoon_limit < 0:
            errors.append("AFTERNOON_LIMITは0以上の値である必要があります")

        if config.message_timeout_seconds <= 0:
            errors.append("MESSAGE_TIMEOUT_SECONDSは正の値である必要があります")

        try:
            ZoneInfo(config.display_timezone)
        except (ZoneInfoNotFoundError, ValueError):
            errors.append(f"DISPLAY_TIMEZONEが不正です: {config.display_timezone}")

        # エラーがあれば例外を発生
        if errors:
            error_msg = "設定エラー:\n" + "\n".join(f"- {error}" for error in errors)
            raise ValueError(error_msg)

    def _log_config_summary(self, config: AppConfig) -> None:
        """設定の要約をログに出力"""
        self._logger.info(f"アプリケーション設定を読み込みました:")
        self._logger.info(f"  アプリ名: {config.app_name} v{config.app_version}")
        self._logger.info(f"  デバッグモード: {config.debug}")
        self._logger.info(f"  ログレベル: {config.log_level}")
        self._logger.info(f"  データディレクトリ: {config.data_dir} (キー: {config.storage_key})")
        self._logger.info(f"  定員: 午前 {config.morning_limit} / 午後 {config.afternoon_limit}")
        self._logger.info(f"  Streamlit: {config.streamlit_server_address}:{config.streamlit_server_port}")
        self._logger.info(f"  ログファイル: {config.log_file}")


# グローバル設定インスタンス
config_manager = ConfigManager()


def get_config() -> AppConfig:
    """設定オブジェクトを取得"""
    return config_manager.load_config()


def reload_config() -> AppConfig:
    """設定を再読み込み"""
    config_manager._config = None
    return config_manager.load_config()
