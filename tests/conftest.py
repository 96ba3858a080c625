"""
Pytest configuration and shared fixtures.
"""

import os
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.schemas.advocate import AdvocateRead
from app.schemas.search import SearchParams
from app.services.advocate_sources import AdvocatePage, StoreFailure


class FakeClock:
    """Manually advanced clock for TTL and window tests."""

    def __init__(self, start: float = 1_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StubPrimarySource:
    """Primary source double: returns a fixed page or a StoreFailure, counting calls."""

    def __init__(self, page: Optional[AdvocatePage] = None, configured: bool = True):
        self.page = page
        self.is_configured = configured
        self.calls: List[SearchParams] = []

    async def search(self, params: SearchParams):
        self.calls.append(params)
        if self.page is None:
            return StoreFailure(reason="connection refused", error_type="OperationalError")
        return self.page

    async def ping(self):
        if self.page is None:
            return StoreFailure(reason="connection refused", error_type="OperationalError")
        return None


def make_advocate(**overrides) -> AdvocateRead:
    values = dict(
        first_name="Test",
        last_name="Advocate",
        city="Springfield",
        degree="MD",
        specialties=["Bipolar"],
        years_of_experience=5,
        phone_number="5550000000",
    )
    values.update(overrides)
    return AdvocateRead(**values)


def make_settings(**overrides) -> Settings:
    values = dict(
        DATABASE_URL=None,
        RATE_LIMIT_MAX_REQUESTS=100,
        RATE_LIMIT_WINDOW_SECONDS=900,
        SEARCH_CACHE_TTL_SECONDS=300,
        SEARCH_CACHE_MAX_ENTRIES=100,
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def client():
    """TestClient over an app with no database configured (fallback dataset only)."""
    with TestClient(create_app(make_settings())) as test_client:
        yield test_client


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests, no external deps")
    config.addinivalue_line("markers", "db: requires database")
    config.addinivalue_line("markers", "server: requires running HTTP server")


def pytest_collection_modifyitems(config, items):
    run_db = os.environ.get("RUN_DB_TESTS") == "1"
    run_server = os.environ.get("RUN_SERVER_TESTS") == "1"

    skip_db = pytest.mark.skip(reason="db tests skipped by default; set RUN_DB_TESTS=1 to enable")
    skip_server = pytest.mark.skip(reason="server tests skipped by default; set RUN_SERVER_TESTS=1 to enable")

    for item in items:
        if "db" in item.keywords and not run_db:
            item.add_marker(skip_db)
        if "server" in item.keywords and not run_server:
            item.add_marker(skip_server)
