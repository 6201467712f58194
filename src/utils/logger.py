"""
ログ管理モジュール

このモジュールは、アプリケーション全体で使用されるログ機能を提供します。
設定ファイルと連携し、適切なログレベルとフォーマットを設定します。

主な機能:
- ログレベルの設定
- ログファイルへの出力（ローテーション付き）
- 予約操作の構造化ログ出力
"""

import logging
import logging.handlers
import sys
from typing import Optional

from .config import AppConfig, get_config


class ColoredFormatter(logging.Formatter):
    """カラー付きログフォーマッター"""

    # ANSIカラーコード
    COLORS = {
        'DEBUG': '\033[36m',    # シアン
        'INFO': '\033[32m',     # 緑
        'WARNING': '\033[33m',  # 黄
        'ERROR': '\033[31m',    # 赤
        'CRITICAL': '\033[35m', # マゼンタ
        'RESET': '\033[0m'      # リセット
    }

    def format(self, record):
        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        # 他のハンドラーに色コードが漏れないようにコピーを整形
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.COLORS['RESET']}"
        return super().format(record)


class StructuredFormatter(logging.Formatter):
    """構造化ログフォーマッター"""

    def format(self, record):
        log_entry = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage()
        }

        # log_extra_fieldsで付与された項目
        extra = getattr(record, 'extra_fields', None)
        if extra:
            log_entry.update(extra)

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        return str(log_entry)


class LoggerManager:
    """ログマネージャークラス"""

    def __init__(self, config: Optional[AppConfig] = None):
        self._initialized = False
        self._config = config

    @property
    def config(self) -> AppConfig:
        if self._config is None:
            self._config = get_config()
        return self._config

    def setup_logging(self, log_level: Optional[str] = None) -> None:
        """ログ設定を初期化（2回目以降の呼び出しは無視）"""
        if self._initialized:
            return

        if log_level is None:
            log_level = self.config.log_level
        numeric_level = getattr(logging, log_level.upper(), logging.INFO)

        root_logger = logging.getLogger()
        root_logger.setLevel(numeric_level)

        # Streamlitの再実行でハンドラーが重複しないようにクリア
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

        self._setup_console_handler(root_logger, numeric_level)
        self._setup_file_handler(root_logger, numeric_level)
        self._adjust_library_log_levels()

        self._initialized = True
        logging.info("ログシステムを初期化しました")

    def _setup_console_handler(self, logger: logging.Logger, level: int) -> None:
        """コンソールハンドラーを設定"""
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)

        fmt = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        if self.config.debug:
            formatter = ColoredFormatter(fmt, datefmt='%Y-%m-%d %H:%M:%S')
        else:
            formatter = logging.Formatter(fmt, datefmt='%Y-%m-%d %H:%M:%S')

        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    def _setup_file_handler(self, logger: logging.Logger, level: int) -> None:
        """ファイルハンドラーを設定"""
        log_file = self.config.log_file
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_file,
            maxBytes=parse_size(self.config.log_max_size),
            backupCount=self.config.log_backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    def _adjust_library_log_levels(self) -> None:
        """外部ライブラリのログレベルを調整"""
        logging.getLogger('streamlit').setLevel(logging.INFO)
        logging.getLogger('tornado').setLevel(logging.WARNING)
        if not self.config.debug:
            logging.getLogger('watchdog').setLevel(logging.WARNING)
            logging.getLogger('urllib3').setLevel(logging.WARNING)


def parse_size(size_str: str) -> int:
    """サイズ文字列（例: 10MB）をバイト数に変換"""
    size_str = size_str.strip().upper()
    units = {'KB': 1024, 'MB': 1024 ** 2, 'GB': 1024 ** 3}
    for suffix, multiplier in units.items():
        if size_str.endswith(suffix):
            return int(size_str[:-2]) * multiplier
    return int(size_str)


# グローバルログマネージャーインスタンス
logger_manager = LoggerManager()


def setup_logging(log_level: Optional[str] = None) -> None:
    """ログ設定を初期化"""
    logger_manager.setup_logging(log_level)


def get_logger(name: str) -> logging.Logger:
    """指定された名前のロガーを取得"""
    return logging.getLogger(name)


def log_extra_fields(logger: logging.Logger, level: int, message: str, **kwargs) -> None:
    """追加フィールド付きでログを出力"""
    logger.log(level, f"{message} | {kwargs}", extra={'extra_fields': kwargs})
