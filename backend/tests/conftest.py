"""
Pytest fixtures for Weather Monitor tests.
"""

import time
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from weather_monitor.main import create_app
from weather_monitor.services import InMemoryStorage


class FakeClock:
    """Callable clock that returns whatever time it was last set to."""

    def __init__(self, now: datetime):
        self.set(now)

    def set(self, moment: datetime):
        self.now = time.mktime(moment.timetuple())

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def noon_today():
    """Today at 12:00 server-local time, well clear of midnight."""
    return datetime.now().replace(hour=12, minute=0, second=0, microsecond=0)


@pytest.fixture
def clock(noon_today):
    """A clock pinned to noon today."""
    return FakeClock(noon_today)


@pytest.fixture
def storage():
    """A fresh store on the real clock."""
    return InMemoryStorage()


@pytest.fixture
def clocked_storage(clock):
    """A fresh store on the fake clock."""
    return InMemoryStorage(clock=clock)


@pytest.fixture
def yesterday(noon_today):
    return noon_today - timedelta(days=1)


@pytest.fixture
def client(storage):
    """API client backed by `storage`, with the app lifespan running."""
    app = create_app(storage=storage, summary_interval=0)
    with TestClient(app) as test_client:
        yield test_client
