"""Shared repository plumbing: write helpers with hooks and store error translation."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from event_registry.domain.exceptions import StoreException
from event_registry.infrastructure.persistence.database import Base

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(operation: str, **context: object) -> Iterator[None]:
    """Log driver failures with context and re-raise them as an opaque StoreException.

    Registry exceptions raised inside the block are not SQLAlchemy errors and
    pass through unchanged.
    """
    try:
        yield
    except SQLAlchemyError as e:
        logger.exception("Store %s failed (%s)", operation, context)
        raise StoreException(operation) from e


class BaseRepository[ModelType: Base]:
    """Repository over one mapped table.

    Writes flush immediately so constraint violations surface inside the
    calling repository method, and reload the row so server defaults
    (timestamps) are visible to the caller.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def _flush_and_reload(self, obj: ModelType) -> ModelType:
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def add(self, obj: ModelType) -> ModelType:
        """Insert obj, then run the after-insert hook."""
        self.db.add(obj)
        await self._flush_and_reload(obj)
        await self._after_insert(obj)
        return obj

    async def save(self, obj: ModelType) -> ModelType:
        """Write pending changes on an attached obj, then run the after-update hook."""
        await self._flush_and_reload(obj)
        await self._after_update(obj)
        return obj

    async def _after_insert(self, obj: ModelType) -> None:
        """Hook for subclasses (logging, events)."""

    async def _after_update(self, obj: ModelType) -> None:
        """Hook for subclasses (logging, events)."""
