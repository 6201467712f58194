"""
テスト共通フィクスチャ
"""

import sys
import os
from datetime import datetime, timedelta, timezone

import pytest

# プロジェクトルートをパスに追加
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from models.reservation_models import ShiftLimits
from repositories.reservation_repository import ReservationRepository
from services.reservation_service import ReservationService
from storage.store import InMemoryStore


class FixedClock:
    """呼び出すたびに1秒進むテスト用の時計"""

    def __init__(self, start: datetime = datetime(2025, 6, 3, 8, 0, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        return value


class CountingIds:
    """連番のID生成"""

    def __init__(self):
        self.counter = 0

    def __call__(self) -> str:
        self.counter += 1
        return f"r{self.counter}"


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def repository(store, clock):
    return ReservationRepository(store, default_limits=ShiftLimits(5, 8), seed={}, clock=clock)


@pytest.fixture
def seeded_repository(store, clock):
    return ReservationRepository(store, default_limits=ShiftLimits(5, 8), clock=clock)


@pytest.fixture
def service(repository, clock):
    return ReservationService(repository, id_factory=CountingIds(), clock=clock,
                              display_timezone="Europe/Warsaw")


@pytest.fixture
def seeded_service(seeded_repository, clock):
    return ReservationService(seeded_repository, id_factory=CountingIds(), clock=clock,
                              display_timezone="Europe/Warsaw")
