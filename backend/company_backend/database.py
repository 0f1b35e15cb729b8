"""
Company Backend — Database Session Management
==============================================

What:  Async SQLAlchemy engine, session factory and FastAPI dependency.
How:   The engine is built from `settings.database_url` at import time; every
       request receives its own session through `get_db_session`, which
       rolls back on error and always closes; services commit their own writes.
Who:   Route handlers via `Depends(get_db_session)`; Alembic via `Base`.

Resource model:
    One session per request, one statement per session. The connection goes
    back to the pool when the session closes, whatever the outcome. No retry
    and no statement timeout are configured; a hung store call blocks only the
    request that issued it.
"""

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from company_backend.config import settings


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(
    settings.database_url,
    pool_size=settings.db_pool_size,
    max_overflow=settings.db_max_overflow,
    pool_pre_ping=settings.db_pool_pre_ping,
    pool_recycle=3600,
    echo=settings.log_level == "DEBUG",
)

# expire_on_commit=False: rows fetched before commit stay readable afterwards
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object between the application and Alembic.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On error: rolls back and re-raises
        4. Always: closes the session (returns connection to pool)

    Writes are committed by the service method itself, before the route
    returns: code after `yield` runs once the response has been sent.

    Example usage in a route:
        @router.get("")
        async def list_departments(db: AsyncSession = Depends(get_db_session)):
            return await department_service.list_departments(db)
    """
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """Closes every pooled connection. Called from the application lifespan on shutdown."""
    await engine.dispose()
