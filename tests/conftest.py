"""
Shared fixtures for unit tests.
"""

import random
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from bluescreen.config import Settings
from bluescreen.main import create_app
from bluescreen.services.analytics import AnalyticsAggregator
from bluescreen.services.selector import ErrorSelector


class FakeClock:
    """Manually advanced clock for uptime tests."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def fake_clock() -> FakeClock:
    """Clock starting at a fixed instant."""
    return FakeClock()


@pytest.fixture
def settings() -> Settings:
    """Settings with analytics enabled, independent of the environment."""
    return Settings(
        _env_file=None,
        app_name="Blue Screen of App",
        app_url="http://testserver",
        environment="development",
        enable_analytics=True,
        enable_qr_codes=True,
        default_qr_url="https://github.com",
    )


@pytest.fixture
def analytics() -> AnalyticsAggregator:
    """Enabled analytics aggregator."""
    return AnalyticsAggregator(enabled=True)


@pytest.fixture
def selector() -> ErrorSelector:
    """Selector with a seeded random source."""
    return ErrorSelector(rng=random.Random(1234))


@pytest.fixture
def app(settings, analytics, selector):
    """Isolated application instance."""
    return create_app(settings=settings, analytics=analytics, selector=selector)


@pytest.fixture
def client(app) -> TestClient:
    """Create a test client for the application."""
    return TestClient(app)
