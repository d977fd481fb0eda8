"""Event type operations: create/unarchive, list, get, replace, patch, archive.

Owns the per-name lifecycle (Nonexistent -> Active <-> Archived) and delegates
storage to IEventTypeRepository. Every operation takes an explicit TenantScope.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from event_registry.application.dtos.event_type import (
    EventTypeCreate,
    EventTypeListOptions,
    EventTypePatch,
    EventTypeUpdate,
)
from event_registry.application.interfaces.repositories import IEventTypeRepository
from event_registry.application.services.content_validator import (
    EventTypeInputValidator,
)
from event_registry.domain.entities.event_type import EventTypeRecord
from event_registry.domain.exceptions import (
    OperationNotImplementedException,
    ResourceNotFoundException,
)
from event_registry.domain.pagination import Page, paginate, scan_size
from event_registry.domain.scope import TenantScope, is_visible

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "event_type"


def without_schema(record: EventTypeRecord) -> EventTypeRecord:
    """Return the record as shown in lean list output (schema stripped)."""
    return replace(record, schema=None)


class EventTypeService:
    """Tenant-scoped event type registry.

    Reads honor the caller's feature flags; writes are scoped by tenant only.
    Validation always runs before the store is touched.
    """

    def __init__(
        self,
        event_type_repo: IEventTypeRepository,
        validator: EventTypeInputValidator | None = None,
    ) -> None:
        self.event_type_repo = event_type_repo
        self.validator = validator or EventTypeInputValidator()

    async def create_event_type(
        self, scope: TenantScope, data: EventTypeCreate
    ) -> EventTypeRecord:
        """Create a new event type, or unarchive an archived one with the same name.

        Unarchiving replaces description, schema and feature flag with the new
        input; nothing from the archived record is merged in.

        Raises:
            ValidationException: Input failed validation.
            EventTypeAlreadyExistsException: An active event type has this name.
        """
        self.validator.validate_create(data)
        existing = await self.event_type_repo.get_by_name(scope.tenant_id, data.name)
        if existing is None:
            record = EventTypeRecord(
                tenant_id=scope.tenant_id,
                name=data.name,
                description=data.description,
                archived=False,
                schema=data.schema,
                feature_flag=data.feature_flag,
            )
            created = await self.event_type_repo.insert(record)
            logger.info(
                "Event type created: tenant_id=%s name=%s", scope.tenant_id, data.name
            )
            return created
        # Raises EventTypeAlreadyExistsException when the name is still active.
        reactivated = existing.reactivated(
            description=data.description,
            schema=data.schema,
            feature_flag=data.feature_flag,
        )
        updated = await self.event_type_repo.update(reactivated)
        logger.info(
            "Event type unarchived: tenant_id=%s name=%s", scope.tenant_id, data.name
        )
        return updated

    async def list_event_types(
        self,
        scope: TenantScope,
        *,
        limit: int,
        iterator: str | None = None,
        options: EventTypeListOptions | None = None,
    ) -> Page[EventTypeRecord]:
        """Return one page of visible event types, ascending by name.

        The next page starts after ``Page.iterator``; it is None on the last page.
        """
        options = options or EventTypeListOptions()
        rows = await self.event_type_repo.list_after(
            scope.tenant_id,
            after=iterator,
            limit=scan_size(limit),
            include_archived=options.include_archived,
            feature_flags=scope.feature_flags,
        )
        page = paginate(rows, limit, cursor_of=lambda r: r.name)
        if options.with_content:
            return page
        return Page(
            data=[without_schema(r) for r in page.data],
            iterator=page.iterator,
            done=page.done,
        )

    async def get_event_type(self, scope: TenantScope, name: str) -> EventTypeRecord:
        """Return the event type (schema included) if visible to the caller.

        Raises:
            ResourceNotFoundException: No such name, or hidden by feature flags.
        """
        record = await self.event_type_repo.get_by_name(scope.tenant_id, name)
        if record is None or not is_visible(record.feature_flag, scope.feature_flags):
            raise ResourceNotFoundException(RESOURCE_TYPE, name)
        return record

    async def replace_event_type(
        self, scope: TenantScope, name: str, data: EventTypeUpdate
    ) -> tuple[EventTypeRecord, bool]:
        """Full replace (upsert). Returns (record, created)."""
        self.validator.validate_update(name, data)
        existing = await self.event_type_repo.get_by_name(scope.tenant_id, name)
        if existing is None:
            record = EventTypeRecord(
                tenant_id=scope.tenant_id,
                name=name,
                description=data.description,
                archived=data.archived,
                schema=data.schema,
                feature_flag=data.feature_flag,
            )
            created = await self.event_type_repo.insert(record)
            logger.info(
                "Event type created by replace: tenant_id=%s name=%s",
                scope.tenant_id,
                name,
            )
            return created, True
        replaced = existing.replaced(
            description=data.description,
            archived=data.archived,
            schema=data.schema,
            feature_flag=data.feature_flag,
        )
        return await self.event_type_repo.update(replaced), False

    async def patch_event_type(
        self, scope: TenantScope, name: str, data: EventTypePatch
    ) -> EventTypeRecord:
        """Partially update an event type. Never creates.

        Raises:
            ValidationException: Explicit null on description/archived, or bad value.
            ResourceNotFoundException: No event type with this name.
        """
        self.validator.validate_patch(name, data)
        existing = await self.event_type_repo.get_by_name(scope.tenant_id, name)
        if existing is None:
            raise ResourceNotFoundException(RESOURCE_TYPE, name)
        patched = existing.patched(
            description=data.description,
            archived=data.archived,
            schema=data.schema,
            feature_flag=data.feature_flag,
        )
        return await self.event_type_repo.update(patched)

    async def archive_event_type(self, scope: TenantScope, name: str) -> None:
        """Soft-delete an event type. Archiving an archived event type succeeds.

        Raises:
            ResourceNotFoundException: The name was never created in this tenant.
        """
        existing = await self.event_type_repo.get_by_name(scope.tenant_id, name)
        if existing is None:
            raise ResourceNotFoundException(RESOURCE_TYPE, name)
        await self.event_type_repo.update(existing.archive())
        logger.info("Event type archived: tenant_id=%s name=%s", scope.tenant_id, name)

    @staticmethod
    async def generate_schema_example(
        schema: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Generate a fake example from a JSON Schema. Not implemented.

        Needs no tenant or store, so the route calls it without a session.
        """
        raise OperationNotImplementedException("generate_schema_example")

