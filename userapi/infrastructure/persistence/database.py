"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

Engine and session factory are created lazily on first use (get_db /
get_db_transactional / init_models) so import does not trigger Settings
validation. Tables are created from metadata at startup when
settings.database_auto_create is True.
"""

import logging
from collections.abc import AsyncIterator
from typing import Any

from sqlalchemy.exc import ArgumentError, InvalidRequestError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from userapi.core.config import get_settings
from userapi.domain.exceptions import DatabaseNotConfiguredException

logger = logging.getLogger(__name__)

# Set by _ensure_engine() on first use; avoids get_settings() at import time.
engine: AsyncEngine | None = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


def _engine_kwargs(database_url: str, echo: bool) -> dict[str, Any]:
    """Pool options for server databases; SQLite keeps SQLAlchemy's default pool."""
    kwargs: dict[str, Any] = {"echo": echo, "pool_pre_ping": True}
    if not database_url.startswith("sqlite"):
        kwargs.update(pool_size=10, max_overflow=20, pool_recycle=3600)
    return kwargs


def _ensure_engine() -> async_sessionmaker[AsyncSession]:
    """Create engine and AsyncSessionLocal on first use and return the factory.

    Raises:
        DatabaseNotConfiguredException: DATABASE_URL cannot be parsed, names
            an unknown dialect or a sync driver, or needs a driver that is not
            installed (e.g. asyncpg without the postgres extra).
    """
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return AsyncSessionLocal
    settings = get_settings()
    try:
        new_engine = create_async_engine(
            settings.database_url,
            **_engine_kwargs(settings.database_url, settings.database_echo),
        )
    except (ArgumentError, InvalidRequestError, ImportError) as e:
        logger.error("SQL database not configured (%s): check DATABASE_URL", e)
        raise DatabaseNotConfiguredException() from e
    engine = new_engine
    AsyncSessionLocal = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    return AsyncSessionLocal


def get_engine() -> AsyncEngine:
    """Return the (lazily created) engine."""
    _ensure_engine()
    assert engine is not None
    return engine


async def init_models() -> None:
    """Create all tables known to Base.metadata (idempotent)."""
    # Registers UserModel on Base.metadata.
    from userapi.infrastructure.persistence import models  # noqa: F401

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured")


async def dispose_engine() -> None:
    """Dispose the engine and forget the session factory."""
    global engine, AsyncSessionLocal
    if engine is not None:
        await engine.dispose()
        logger.info("Database engine disposed")
    engine = None
    AsyncSessionLocal = None


async def get_db() -> AsyncIterator[AsyncSession]:
    """Database session dependency for read operations.

    Does not commit; use get_db_transactional for writes.
    """
    session_factory = _ensure_engine()
    async with session_factory() as session:
        yield session


async def get_db_transactional() -> AsyncIterator[AsyncSession]:
    """Database session dependency for write operations.

    Begins a transaction, commits on success, rolls back on exception.
    Use for POST, PUT, DELETE endpoints.
    """
    session_factory = _ensure_engine()
    async with session_factory() as session:
        async with session.begin():
            yield session
