"""
ストレージ層

予約データ（JSON文字列）をキー単位で保存するキーバリューストアを提供します。
"""

from .store import Store, InMemoryStore, JsonFileStore

__all__ = [
    "Store",
    "InMemoryStore",
    "JsonFileStore"
]
