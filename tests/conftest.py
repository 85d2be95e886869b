"""Pytest configuration and shared fixtures.

- Settings come from environment variables; safe test values are set here
  before anything imports ``get_settings``.
- Repository tests run against in-memory SQLite (aiosqlite).
- Refresh token store tests run against fakeredis.
"""

import os
from unittest.mock import Mock

import fakeredis.aioredis
import pytest
import pytest_asyncio

from tests.factories import TEST_SECRET_KEY

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/0")
os.environ.setdefault("SECRET_KEY", TEST_SECRET_KEY)

from userservice.infrastructure.persistence.database import Database  # noqa: E402


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real adapters"
    )


@pytest.fixture
def mock_logger():
    """Logger double satisfying LoggerProtocol."""
    logger = Mock()
    logger.bind.return_value = logger
    return logger


@pytest_asyncio.fixture
async def database():
    """Fresh in-memory SQLite database with all tables."""
    db = Database("sqlite+aiosqlite:///:memory:")
    await db.create_all()
    yield db
    await db.drop_all()
    await db.close()


@pytest_asyncio.fixture
async def db_session(database):
    """Session bound to the in-memory database."""
    async with database.async_session() as session:
        yield session


@pytest_asyncio.fixture
async def fake_redis():
    """In-process Redis double (bytes responses, like production)."""
    client = fakeredis.aioredis.FakeRedis(decode_responses=False)
    yield client
    await client.flushall()
    await client.aclose()
