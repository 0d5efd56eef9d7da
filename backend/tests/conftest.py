"""
Noteful API — Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    ├── mock_db_session: AsyncMock session for service unit tests (no DB)
    ├── db_engine:       in-memory SQLite engine with both tables created
    ├── app:             create_app() wired to db_engine
    ├── test_client:     HTTPX AsyncClient over ASGITransport
    └── seeded:          folders 50-52 and notes 1-3 inserted into db_engine
"""

import os
from unittest.mock import AsyncMock, MagicMock

# Settings are read at import time; point them away from PostgreSQL first
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from noteful_api.database import Base
from noteful_api.main import create_app
from noteful_api.models import Folder, Note
from noteful_fixtures import make_folders_array, make_notes_array


# ══════════════════════════════════════════════════════════════════════════
# Unit Test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get(mock_db_session):
            mock_result = MagicMock()
            mock_result.scalar_one_or_none.return_value = row
            mock_db_session.execute.return_value = mock_result
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# Endpoint Test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    Fresh in-memory database per test.

    StaticPool keeps one connection alive, so every session in the test
    sees the same in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def app(db_engine):
    return create_app(engine=db_engine)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient talking to the app in-process.

    raise_app_exceptions=False lets the 500 handler's response reach the test.
    """
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def seeded(db_engine):
    """Inserts the fixture folders and notes; returns the raw arrays."""
    folders = make_folders_array()
    notes = make_notes_array()
    async with AsyncSession(db_engine) as session:
        session.add_all([Folder(**folder) for folder in folders])
        await session.flush()
        session.add_all([Note(**note) for note in notes])
        await session.commit()
    return {"folders": folders, "notes": notes}
