"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with connection provider fakes
and settings builders for testing routes, services and the registry.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def make_settings():
    """
    Build Settings that ignore env files.

    Usage:
        settings = make_settings(mongo_url_scrapping="mongodb://test:27017")
    """
    from app.config import Settings

    def _make(**overrides):
        return Settings(_env_file=None, **overrides)
    return _make


# =============================================================================
# Connection Provider Fixtures
# =============================================================================

@pytest.fixture
def mock_database():
    """A database handle whose ping succeeds."""
    db = MagicMock()
    db.command = AsyncMock(return_value={"ok": 1.0})
    return db


@pytest.fixture
def healthy_provider(mock_database):
    """Provider returning a database that answers pings."""
    provider = MagicMock()
    provider.get_database = AsyncMock(return_value=mock_database)
    return provider


@pytest.fixture
def unreachable_provider():
    """Provider that fails to hand out a database."""
    provider = MagicMock()
    provider.get_database = AsyncMock(side_effect=ConnectionError("Connection refused"))
    return provider


@pytest.fixture
def failing_ping_provider():
    """Provider whose database rejects the ping command."""
    db = MagicMock()
    db.command = AsyncMock(side_effect=Exception("not primary"))
    provider = MagicMock()
    provider.get_database = AsyncMock(return_value=db)
    return provider


@pytest.fixture
def override_provider(app):
    """
    Install a provider for routes that depend on ``get_mongo_provider``.

    Usage:
        def test_route(client, override_provider, healthy_provider):
            override_provider(healthy_provider)
            client.get("/health")
    """
    from app.dependencies.database import get_mongo_provider

    def _override(provider):
        app.dependency_overrides[get_mongo_provider] = lambda: provider
    return _override
