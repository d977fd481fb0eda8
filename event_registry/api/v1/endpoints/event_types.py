"""Event type API: thin routes delegating to EventTypeService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response

from event_registry.api.v1.dependencies import (
    get_event_type_service,
    get_event_type_service_for_write,
    get_tenant_scope,
)
from event_registry.application.dtos.event_type import EventTypeListOptions
from event_registry.application.use_cases.event_types import EventTypeService
from event_registry.core.config import get_settings
from event_registry.core.limiter import limit_writes
from event_registry.domain.exceptions import ValidationException
from event_registry.domain.scope import TenantScope
from event_registry.schemas.event_type import (
    EventTypeIn,
    EventTypeListResponse,
    EventTypeOut,
    EventTypePatchIn,
    EventTypeUpdateIn,
)

router = APIRouter()


def _page_limit(limit: int | None) -> int:
    settings = get_settings()
    if limit is None:
        return settings.pagination_default_limit
    if limit > settings.pagination_max_limit:
        raise ValidationException(
            f"limit must be between 1 and {settings.pagination_max_limit}",
            field="limit",
        )
    return limit


@router.post("/", response_model=EventTypeOut, status_code=201)
@limit_writes
async def create_event_type(
    request: Request,
    body: EventTypeIn,
    scope: Annotated[TenantScope, Depends(get_tenant_scope)],
    service: Annotated[EventTypeService, Depends(get_event_type_service_for_write)],
):
    """Create an event type, or unarchive an archived one with the same name."""
    record = await service.create_event_type(scope, body.to_dto())
    return EventTypeOut.from_record(record)


@router.get("/", response_model=EventTypeListResponse)
async def list_event_types(
    scope: Annotated[TenantScope, Depends(get_tenant_scope)],
    service: Annotated[EventTypeService, Depends(get_event_type_service)],
    iterator: str | None = Query(None),
    limit: int | None = Query(None, ge=1),
    include_archived: bool = Query(False),
    with_content: bool = Query(False),
):
    """List event types ascending by name. Pass the returned iterator to continue."""
    page = await service.list_event_types(
        scope,
        limit=_page_limit(limit),
        iterator=iterator,
        options=EventTypeListOptions(
            include_archived=include_archived, with_content=with_content
        ),
    )
    return EventTypeListResponse(
        data=[EventTypeOut.from_record(r) for r in page.data],
        iterator=page.iterator,
        prev_iterator=page.prev_iterator,
        done=page.done,
    )


@router.post(
    "/schema/generate-example/",
    status_code=501,
    responses={501: {"description": "Example generation is not implemented"}},
)
async def generate_schema_example():
    """Generate an example payload for a JSON Schema. The body is not read; always 501."""
    return await EventTypeService.generate_schema_example()


@router.get("/{event_type_name}/", response_model=EventTypeOut)
async def get_event_type(
    event_type_name: str,
    scope: Annotated[TenantScope, Depends(get_tenant_scope)],
    service: Annotated[EventTypeService, Depends(get_event_type_service)],
):
    """Get an event type by name, schema included."""
    record = await service.get_event_type(scope, event_type_name)
    return EventTypeOut.from_record(record)


@router.put("/{event_type_name}/", response_model=EventTypeOut)
@limit_writes
async def replace_event_type(
    request: Request,
    response: Response,
    event_type_name: str,
    body: EventTypeUpdateIn,
    scope: Annotated[TenantScope, Depends(get_tenant_scope)],
    service: Annotated[EventTypeService, Depends(get_event_type_service_for_write)],
):
    """Full replace; creates the event type (201) when the name is new."""
    record, created = await service.replace_event_type(
        scope, event_type_name, body.to_dto()
    )
    response.status_code = 201 if created else 200
    return EventTypeOut.from_record(record)


@router.patch("/{event_type_name}/", response_model=EventTypeOut)
@limit_writes
async def patch_event_type(
    request: Request,
    event_type_name: str,
    body: EventTypePatchIn,
    scope: Annotated[TenantScope, Depends(get_tenant_scope)],
    service: Annotated[EventTypeService, Depends(get_event_type_service_for_write)],
):
    """Partial update: omitted fields are kept, explicit nulls clear nullable fields."""
    record = await service.patch_event_type(scope, event_type_name, body.to_dto())
    return EventTypeOut.from_record(record)


@router.delete("/{event_type_name}/", status_code=204)
@limit_writes
async def archive_event_type(
    request: Request,
    event_type_name: str,
    scope: Annotated[TenantScope, Depends(get_tenant_scope)],
    service: Annotated[EventTypeService, Depends(get_event_type_service_for_write)],
):
    """Archive (soft-delete) an event type."""
    await service.archive_event_type(scope, event_type_name)
    return Response(status_code=204)
