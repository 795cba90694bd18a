"""Test configuration for the multi-calendar service.

Settings are cached process-wide, so every test starts and ends with a
fresh cache; tests that change environment variables use ``monkeypatch``.
"""

import os
from datetime import date

import pytest
from fastapi.testclient import TestClient

# Set testing environment before any application imports
os.environ["ENVIRONMENT"] = "testing"

from multicalendar.calendar_systems import CalendarManager  # noqa: E402
from multicalendar.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Drop cached settings around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def manager() -> CalendarManager:
    """Fresh calendar manager."""
    return CalendarManager()


@pytest.fixture
def christmas_2025() -> date:
    return date(2025, 12, 25)


@pytest.fixture
def galungan_2024() -> date:
    """Balinese Pawukon anchor day (Buda Kliwon, Wuku Dungulan)."""
    return date(2024, 2, 28)


@pytest.fixture
def client():
    """HTTP test client for the application."""
    from multicalendar.main import app

    with TestClient(app) as test_client:
        yield test_client
