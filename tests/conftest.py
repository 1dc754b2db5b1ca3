"""
Tutor API — Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: Mock AsyncSession for repository unit tests
    ├── sample_tutor_data: Column values for a stored tutor
    ├── db_schema: Creates the tables on the SQLite test database, drops them after
    ├── db_session: Real AsyncSession on the test database
    └── test_client: HTTPX AsyncClient wired to the FastAPI app
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Must run BEFORE any tutor_api import: settings and the engine are built at import
_test_dir = tempfile.mkdtemp(prefix="tutor_api_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_test_dir}/test.db"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["APPLICATION_NAME"] = "tutorApp"
os.environ["API_PREFIX"] = "/api"

from tutor_api.database import Base, async_session_factory, engine  # noqa: E402
import tutor_api.models  # noqa: E402,F401


# ══════════════════════════════════════════════════════════════════════════
# Mock Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_find(mock_db_session):
            mock_db_session.get.return_value = tutor
            result = await TutorRepository(mock_db_session).find_by_id(1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.merge = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_tutor_data():
    return {
        "id": 1,
        "name": "Alice Nowak",
        "email": "alice@example.com",
        "phone": "+48 600 100 200",
        "subject": "Mathematics",
    }


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_schema():
    """Fresh tables for each test; identifiers start at 1."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_schema):
    async with async_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(db_schema):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from tutor_api.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
