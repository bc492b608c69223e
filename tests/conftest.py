"""
Global test fixtures for the Cars Source API.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock / mongomock-motor)
- FastAPI test clients
- Timestamp assertion helpers
"""

import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

# No background index creation against a real server during tests
os.environ.setdefault("SOURCE_INDEX_WARMUP", "false")


# =============================================================================
# MongoDB Fixtures (mongomock)
# =============================================================================

@pytest.fixture
def mock_mongo_client():
    """
    Create a mock MongoDB client using mongomock.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes.
    """
    import mongomock
    client = mongomock.MongoClient()
    yield client
    client.close()


@pytest.fixture
def mock_scraping_db(mock_mongo_client):
    """Provide a synchronous mock scraping database."""
    return mock_mongo_client["scrapping"]


@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    from mongomock_motor import AsyncMongoMockClient
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_async_scraping_db(mock_async_mongo_client):
    """Provide an async mock scraping database."""
    yield mock_async_mongo_client["scrapping"]


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app():
    """
    FastAPI app for testing.

    Dependency overrides set by a test are cleared afterwards.
    """
    from app.main import app
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Runs the application lifespan, so ``app.state.mongo`` is set.
    """
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture
async def async_client(app):
    """
    Create an async test client.

    The lifespan does not run; override ``get_mongo_provider`` when
    the route needs a database.
    """
    from httpx import AsyncClient, ASGITransport

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


# =============================================================================
# Utility Fixtures
# =============================================================================

@pytest.fixture
def assert_timestamp_between():
    """
    Helper asserting an ISO-8601 ``Z`` timestamp lies in [start, end].

    Usage:
        def test_something(assert_timestamp_between):
            assert_timestamp_between(body["timestamp"], start, end)
    """
    def _assert(timestamp: str, start: datetime, end: datetime):
        assert timestamp.endswith("Z"), f"{timestamp} is not a UTC Z timestamp"
        parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
        assert parsed.tzinfo is not None
        assert start <= parsed <= end, f"{timestamp} outside [{start}, {end}]"

    return _assert


@pytest.fixture
def utc_now():
    """Callable returning the current aware UTC datetime."""
    return lambda: datetime.now(timezone.utc)
