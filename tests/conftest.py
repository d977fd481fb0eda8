"""Pytest configuration and fixtures for event_registry.

Every test runs against a fresh in-memory SQLite database (aiosqlite) with
tables created from the ORM metadata. HTTP tests use event_registry.main:app
with the session dependencies pointed at that database.
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
# Tests issue many writes from one client address.
os.environ["WRITE_RATE_LIMIT"] = "10000/minute"

from collections.abc import AsyncIterator  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from event_registry.application.use_cases.event_types import EventTypeService  # noqa: E402
from event_registry.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from event_registry.infrastructure.persistence import models  # noqa: E402,F401
from event_registry.infrastructure.persistence.database import (  # noqa: E402
    Base,
    get_db,
    get_db_transactional,
)
from event_registry.infrastructure.persistence.repositories import (  # noqa: E402
    EventTypeRepository,
)
from event_registry.main import app  # noqa: E402

TENANT_ID = "tenant-a"
OTHER_TENANT_ID = "tenant-b"


@pytest.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    """Fresh in-memory database with the event_type table."""
    eng = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Database session for repository/integration tests. Rolls back after test."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def event_type_repo(db_session: AsyncSession) -> EventTypeRepository:
    return EventTypeRepository(db_session)


@pytest.fixture
def event_type_service(event_type_repo: EventTypeRepository) -> EventTypeService:
    """Service over the SQLite-backed repository."""
    return EventTypeService(event_type_repo)


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI), bound to the test database."""

    async def _get_db() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            yield session

    async def _get_db_transactional() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            async with session.begin():
                yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_db_transactional] = _get_db_transactional
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def tenant_headers() -> dict[str, str]:
    """Headers for a caller in TENANT_ID who may see every feature flag."""
    return {"X-Tenant-ID": TENANT_ID}
