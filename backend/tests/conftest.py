"""
Company Backend — Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the test suite.
How:   Environment overrides are applied before any application import so
       the settings singleton, the engine and the photos mount all point at
       throwaway locations.

Fixture Hierarchy:
    Function-scoped:
    ├── mock_db_session: AsyncMock session for service unit tests
    ├── db_engine:       SQLite (aiosqlite) engine with both tables created
    ├── session_class:   AsyncSession subclass the request sessions are built from
├── test_client:     HTTPX AsyncClient wired to the app, sessions from db_engine
    └── photos_dir:      The photos directory the app serves at /Photos
"""

import os
import tempfile
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

# Must run before company_backend is imported anywhere
_TEST_ROOT = tempfile.mkdtemp(prefix="company_backend_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{Path(_TEST_ROOT) / 'app.db'}"
os.environ["PHOTOS_DIR"] = str(Path(_TEST_ROOT) / "Photos")
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

from company_backend.config import settings  # noqa: E402
from company_backend.database import Base, dispose_engine  # noqa: E402
from company_backend.models.department import Department  # noqa: E402,F401
from company_backend.models.employee import Employee  # noqa: E402,F401


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_list(mock_db_session):
            mock_db_session.execute.return_value.all.return_value = [(1, "IT")]
            result = await department_service.list_departments(mock_db_session)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """A fresh SQLite database per test with the Department and Employee tables."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def photos_dir():
    return settings.photos_path


@pytest.fixture
def session_class():
    """Overridden in tests that need to observe or break commits."""
    return AsyncSession


@pytest_asyncio.fixture
async def test_client(db_engine, session_class, monkeypatch):
    """
    HTTPX AsyncClient routed straight into the ASGI app.

    The real get_db_session dependency runs; only the session factory it
    draws from is pointed at the per-test database.
    """
    from company_backend.main import app

    monkeypatch.setattr(
        "company_backend.database.async_session_factory",
        async_sessionmaker(db_engine, class_=session_class, expire_on_commit=False),
    )
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
    await dispose_engine()
