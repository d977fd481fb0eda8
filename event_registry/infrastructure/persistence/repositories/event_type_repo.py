"""EventType repository (implements IEventTypeRepository). Returns domain records."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from sqlalchemy import ColumnElement, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from event_registry.domain.entities.event_type import EventTypeRecord
from event_registry.domain.exceptions import (
    EventTypeAlreadyExistsException,
    ResourceNotFoundException,
)
from event_registry.domain.scope import AllowedFeatureFlags, SomeFeatureFlags
from event_registry.infrastructure.persistence.models.event_type import EventType
from event_registry.infrastructure.persistence.repositories.base import (
    BaseRepository,
    store_errors,
)

logger = logging.getLogger(__name__)


def _as_utc(dt: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes (SQLite) and normalize aware ones."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def _event_type_to_record(row: EventType) -> EventTypeRecord:
    """Map ORM EventType to the domain EventTypeRecord."""
    return EventTypeRecord(
        tenant_id=row.tenant_id,
        name=row.name,
        description=row.description,
        archived=row.archived,
        schema=row.schemas,
        feature_flag=row.feature_flag,
        created_at=_as_utc(row.created_at),
        updated_at=_as_utc(row.updated_at),
    )


def feature_flag_clause(allowed: AllowedFeatureFlags | None) -> ColumnElement[bool] | None:
    """SQL form of AllowedFeatureFlags.permits for range scans; None means no filtering.

    Listing must filter inside the scan so pages stay full and the cursor
    stays correct; single-record reads apply is_visible to the fetched record.
    """
    if not isinstance(allowed, SomeFeatureFlags):
        return None
    if not allowed.flags:
        return EventType.feature_flag.is_(None)
    return or_(
        EventType.feature_flag.is_(None),
        EventType.feature_flag.in_(sorted(allowed.flags)),
    )


class EventTypeRepository(BaseRepository[EventType]):
    """Event type store over SQLAlchemy. Every query filters on tenant_id."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, EventType)

    async def _after_insert(self, obj: EventType) -> None:
        logger.debug("Inserted event_type id=%s tenant_id=%s", obj.id, obj.tenant_id)

    async def _after_update(self, obj: EventType) -> None:
        logger.debug("Updated event_type id=%s tenant_id=%s", obj.id, obj.tenant_id)

    async def _get_row(self, tenant_id: str, name: str) -> EventType | None:
        stmt = select(EventType).where(
            EventType.tenant_id == tenant_id,
            EventType.name == name,
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_name(self, tenant_id: str, name: str) -> EventTypeRecord | None:
        """Return the record for name (archived or not), or None if missing.

        Not flag-filtered: writes need to see every name in the tenant.
        """
        with store_errors("get", tenant_id=tenant_id, name=name):
            row = await self._get_row(tenant_id, name)
        return _event_type_to_record(row) if row else None

    async def list_after(
        self,
        tenant_id: str,
        *,
        after: str | None,
        limit: int,
        include_archived: bool = False,
        feature_flags: AllowedFeatureFlags | None = None,
    ) -> list[EventTypeRecord]:
        """Range scan: name > after (or from the start), ascending, at most limit rows."""
        stmt = select(EventType).where(EventType.tenant_id == tenant_id)
        if not include_archived:
            stmt = stmt.where(EventType.archived.is_(False))
        if after is not None:
            stmt = stmt.where(EventType.name > after)
        clause = feature_flag_clause(feature_flags)
        if clause is not None:
            stmt = stmt.where(clause)
        stmt = stmt.order_by(EventType.name.asc()).limit(limit)
        with store_errors("scan", tenant_id=tenant_id, after=after, limit=limit):
            result = await self.db.execute(stmt)
            rows = result.scalars().all()
        return [_event_type_to_record(r) for r in rows]

    async def insert(self, record: EventTypeRecord) -> EventTypeRecord:
        """Insert a new row. A unique violation on (tenant_id, name) is a conflict."""
        row = EventType(
            tenant_id=record.tenant_id,
            name=record.name,
            description=record.description,
            archived=record.archived,
            schemas=record.schema,
            feature_flag=record.feature_flag,
        )
        with store_errors("insert", tenant_id=record.tenant_id, name=record.name):
            try:
                created = await self.add(row)
            except IntegrityError as e:
                # Lost a race with a concurrent insert of the same name.
                raise EventTypeAlreadyExistsException(record.name) from e
        return _event_type_to_record(created)

    async def update(self, record: EventTypeRecord) -> EventTypeRecord:
        """Copy the record's mutable fields onto the stored row (last write wins)."""
        with store_errors("update", tenant_id=record.tenant_id, name=record.name):
            row = await self._get_row(record.tenant_id, record.name)
            if row is None:
                raise ResourceNotFoundException("event_type", record.name)
            row.description = record.description
            row.archived = record.archived
            row.schemas = record.schema
            row.feature_flag = record.feature_flag
            saved = await self.save(row)
        return _event_type_to_record(saved)
