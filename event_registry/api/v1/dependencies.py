"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, the caller's tenant scope and
the event type service. Routes depend only on these, never on infra directly.

Tenant and feature flags come from headers set by the upstream auth gateway;
override get_tenant_scope via app.dependency_overrides to plug in another
authentication layer.
"""

from __future__ import annotations

import re
from typing import Annotated

from fastapi import Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from event_registry.application.use_cases.event_types import EventTypeService
from event_registry.core.config import get_settings
from event_registry.domain.scope import (
    AllFeatureFlags,
    AllowedFeatureFlags,
    SomeFeatureFlags,
    TenantScope,
)
from event_registry.domain.value_objects import FeatureFlag
from event_registry.infrastructure.persistence.database import (
    get_db,
    get_db_transactional,
)
from event_registry.infrastructure.persistence.repositories import (
    EventTypeRepository,
)

TENANT_ID_MAX_LENGTH = 64
_TENANT_ID_RE = re.compile(r"^[a-zA-Z0-9_-]{1," + str(TENANT_ID_MAX_LENGTH) + r"}$")


def is_valid_tenant_id_format(value: str) -> bool:
    """Return True if value is a CUID/UUID-style identifier of at most 64 chars."""
    return bool(value) and bool(_TENANT_ID_RE.fullmatch(value))


def parse_feature_flags(raw: str | None) -> AllowedFeatureFlags:
    """Parse the comma-separated feature flags header.

    An absent header grants every flag; a present but empty header grants
    none (only unflagged event types are visible).
    """
    if raw is None:
        return AllFeatureFlags()
    flags = [part.strip() for part in raw.split(",") if part.strip()]
    try:
        return SomeFeatureFlags.of(FeatureFlag(f).value for f in flags)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid feature flag: {e}") from e


async def get_tenant_scope(request: Request) -> TenantScope:
    """Resolve the caller's TenantScope from request headers."""
    settings = get_settings()
    name = settings.tenant_header_name
    tenant_id = request.headers.get(name)
    if not tenant_id:
        raise HTTPException(
            status_code=400,
            detail=f"Missing required header: {name}",
        )
    if not is_valid_tenant_id_format(tenant_id):
        raise HTTPException(
            status_code=400,
            detail="Invalid tenant ID format (use alphanumeric, hyphen, underscore; max 64 characters)",
        )
    feature_flags = parse_feature_flags(
        request.headers.get(settings.feature_flags_header_name)
    )
    return TenantScope(tenant_id=tenant_id, feature_flags=feature_flags)


async def get_event_type_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EventTypeService:
    """Event type service for reads."""
    return EventTypeService(EventTypeRepository(db))


async def get_event_type_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> EventTypeService:
    """Event type service for writes (commit on success, rollback on error)."""
    return EventTypeService(EventTypeRepository(db))
