"""Pytest configuration and fixtures

Provides shared fixtures for all tests: a controllable clock, an in-memory
session store, a pagination manager and a FastAPI TestClient wired to them.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from fastapi.testclient import TestClient

from app.logger import ConsoleLogger, Logger
from app.sessions import PaginationManager, SessionStore
from app.storage import reset_storage
from app.web_server import DatagenWebServer

TEST_SESSION_TTL_SECONDS = 600


class FakeClock:
    """Manually advanced time source for TTL tests."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def _reset_global_storage():
    """Keep the global page mirror from leaking between tests."""
    reset_storage()
    yield
    reset_storage()


@pytest.fixture
def logger() -> Logger:
    return ConsoleLogger()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session_store(logger, clock):
    return SessionStore(ttl_seconds=TEST_SESSION_TTL_SECONDS, logger=logger, clock=clock)


@pytest.fixture
def manager(session_store, logger):
    return PaginationManager(session_store=session_store, logger=logger)


@pytest.fixture
def server(session_store, logger):
    return DatagenWebServer(session_store=session_store, enable_housekeeper=False, logger=logger)


@pytest.fixture
def client(server):
    """Create a TestClient for the web server."""
    return TestClient(server.app)
