"""
Pytest fixtures for wellness module tests
"""
from datetime import datetime, timedelta

import pytest

from src.core.record_store import RecordStore
from src.Modules.wellness_module import (
    HabitRepository,
    MoodRepository,
    SettingsRepository,
    WaterRepository,
    WellnessAnalytics,
    WaterInsights,
)


class FakeClock:
    """Controllable replacement for datetime.now"""

    def __init__(self, now: datetime):
        self.current = now

    def __call__(self) -> datetime:
        return self.current

    def set(self, year: int, month: int, day: int, hour: int = 12, minute: int = 0):
        self.current = datetime(year, month, day, hour, minute)

    def advance(self, days: int = 0, hours: int = 0, minutes: int = 0):
        self.current += timedelta(days=days, hours=hours, minutes=minutes)


@pytest.fixture
def clock():
    """Clock frozen at 2024-03-10 12:00 (a Sunday)"""
    return FakeClock(datetime(2024, 3, 10, 12, 0))


@pytest.fixture
def store(tmp_path):
    """Fresh record store in a temporary data directory"""
    return RecordStore(tmp_path / "data")


@pytest.fixture
def habits(store, clock):
    return HabitRepository(store, clock=clock)


@pytest.fixture
def moods(store, clock):
    return MoodRepository(store, clock=clock)


@pytest.fixture
def water(store, clock):
    return WaterRepository(store, clock=clock)


@pytest.fixture
def settings(store):
    return SettingsRepository(store)


@pytest.fixture
def analytics(habits, moods, water, settings, clock):
    return WellnessAnalytics(habits, moods, water, settings, clock=clock)


@pytest.fixture
def insights(water, settings, analytics):
    return WaterInsights(water, settings, analytics)
