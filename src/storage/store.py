"""
キーバリューストア

ブラウザのlocalStorageに相当する、キーごとに1つのJSON文字列を保持するストアです。
ストア自体は業務ロジックを持ちません。

注意: 読み込み→変更→書き込みの間にロックはありません。
複数のプロセス（複数タブ）から同時に更新した場合、後から書き込んだ側が
先の変更を上書きします。
"""

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from models.errors import StorageUnavailable, StorageQuotaExceeded

logger = logging.getLogger(__name__)


class Store(ABC):
    """キーバリューストアのインターフェース"""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """キーに対応する値を取得（存在しなければNone）"""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """キーに値を書き込む"""


class InMemoryStore(Store):
    """メモリ上のストア（テスト・一時利用向け）"""

    def __init__(self, quota_bytes: Optional[int] = None, available: bool = True):
        self._items: Dict[str, str] = {}
        self.quota_bytes = quota_bytes
        self.available = available
        self.write_count = 0

    def get(self, key: str) -> Optional[str]:
        if not self.available:
            raise StorageUnavailable()
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        if not self.available:
            raise StorageUnavailable()
        if self.quota_bytes is not None and len(value.encode("utf-8")) > self.quota_bytes:
            raise StorageQuotaExceeded()
        self._items[key] = value
        self.write_count += 1


class JsonFileStore(Store):
    """
    ファイルベースの永続ストア

    キーごとに data_dir/<key>.json を1ファイル作成します。
    書き込みは一時ファイル経由で置き換えるため、途中で失敗しても既存の内容は残ります。
    """

    def __init__(self, data_dir: Path, quota_bytes: Optional[int] = None):
        self.data_dir = Path(data_dir)
        self.quota_bytes = quota_bytes

    def _path_for(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        if not path.exists():
            return None
        try:
            text = path.read_text(encoding="utf-8")
            json.loads(text)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"ストアの読み込みに失敗しました: {path}: {e}")
            raise StorageUnavailable() from e
        except json.JSONDecodeError as e:
            logger.error(f"ストアの内容が破損しています: {path}: {e}")
            raise StorageUnavailable() from e
        return text

    def set(self, key: str, value: str) -> None:
        data = value.encode("utf-8")
        if self.quota_bytes is not None and len(data) > self.quota_bytes:
            logger.warning(f"書き込みサイズが上限を超えています: {len(data)} > {self.quota_bytes} bytes")
            raise StorageQuotaExceeded()

        path = self._path_for(key)
        tmp_name = None
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.data_dir, prefix=f".{key}.", suffix=".tmp")
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, path)
        except OSError as e:
            logger.error(f"ストアへの書き込みに失敗しました: {path}: {e}")
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageQuotaExceeded() from e
