"""SQLAlchemy async engine, sessions and the declarative Base.

The engine is built on first use rather than at import, so importing models
or the app never requires DATABASE_URL to be set. Tables are created by the
Alembic migrations; tests build them with Base.metadata.create_all.
"""

import logging
from collections.abc import AsyncIterator
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from event_registry.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

engine: AsyncEngine | None = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


class Base(DeclarativeBase):
    """Declarative base for registry tables."""


def engine_options(settings: Settings) -> dict[str, Any]:
    """Backend-specific create_async_engine keyword arguments."""
    options: dict[str, Any] = {"echo": settings.database_echo}
    if settings.database_url.startswith("sqlite"):
        # A single shared connection keeps :memory: databases alive between sessions.
        options["poolclass"] = StaticPool
        options["connect_args"] = {"check_same_thread": False}
        return options
    options["pool_pre_ping"] = True
    options["pool_recycle"] = 3600
    if settings.db_pool_size is not None:
        options["pool_size"] = settings.db_pool_size
    if settings.db_max_overflow is not None:
        options["max_overflow"] = settings.db_max_overflow
    return options


def session_factory() -> async_sessionmaker[AsyncSession]:
    """Return the process session factory, creating the engine on first call."""
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is None:
        settings = get_settings()
        engine = create_async_engine(settings.database_url, **engine_options(settings))
        AsyncSessionLocal = async_sessionmaker(
            bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )
        logger.debug("Database engine created for %s", engine.url.render_as_string())
    return AsyncSessionLocal


async def get_db() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency for reads: a session with no explicit transaction."""
    async with session_factory()() as session:
        yield session


async def get_db_transactional() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency for writes: one transaction per request.

    Commits when the route returns and rolls back if it raises.
    """
    async with session_factory()() as session:
        async with session.begin():
            yield session


async def dispose_engine() -> None:
    """Close pooled connections at shutdown; the next request builds a new engine."""
    global engine, AsyncSessionLocal
    if engine is not None:
        await engine.dispose()
        logger.info("Database engine disposed")
    engine = None
    AsyncSessionLocal = None
