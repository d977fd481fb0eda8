"""EventTypeService unit tests with a mocked repository."""

from unittest.mock import AsyncMock

import pytest

from event_registry.application.dtos import (
    EventTypeCreate,
    EventTypeListOptions,
    EventTypePatch,
    EventTypeUpdate,
)
from event_registry.application.use_cases.event_types import EventTypeService
from event_registry.domain.entities import EventTypeRecord
from event_registry.domain.exceptions import (
    EventTypeAlreadyExistsException,
    OperationNotImplementedException,
    ResourceNotFoundException,
    ValidationException,
)
from event_registry.domain.patch import NULL, Value
from event_registry.domain.scope import SomeFeatureFlags, TenantScope

SCOPE = TenantScope(tenant_id="t1")
SCHEMA = {"1": {"type": "object"}}


def _record(name: str = "user.signup", **overrides) -> EventTypeRecord:
    fields = {
        "tenant_id": "t1",
        "name": name,
        "description": "desc",
        "schema": SCHEMA,
        "feature_flag": None,
    }
    fields.update(overrides)
    return EventTypeRecord(**fields)


@pytest.fixture
def repo() -> AsyncMock:
    """Repository mock whose writes echo back the record they were given."""
    event_type_repo = AsyncMock()
    event_type_repo.get_by_name = AsyncMock(return_value=None)
    event_type_repo.insert = AsyncMock(side_effect=lambda record: record)
    event_type_repo.update = AsyncMock(side_effect=lambda record: record)
    event_type_repo.list_after = AsyncMock(return_value=[])
    return event_type_repo


@pytest.fixture
def service(repo: AsyncMock) -> EventTypeService:
    return EventTypeService(event_type_repo=repo)


async def test_create_inserts_active_record(service: EventTypeService, repo: AsyncMock) -> None:
    created = await service.create_event_type(
        SCOPE, EventTypeCreate(name="user.signup", description="desc", schema=SCHEMA)
    )
    assert created.tenant_id == "t1"
    assert created.archived is False
    repo.insert.assert_awaited_once()
    repo.update.assert_not_awaited()


async def test_create_conflicts_with_active_record(
    service: EventTypeService, repo: AsyncMock
) -> None:
    repo.get_by_name.return_value = _record()
    with pytest.raises(EventTypeAlreadyExistsException):
        await service.create_event_type(
            SCOPE, EventTypeCreate(name="user.signup", description="again")
        )
    repo.insert.assert_not_awaited()
    repo.update.assert_not_awaited()


async def test_create_unarchives_and_replaces_content(
    service: EventTypeService, repo: AsyncMock
) -> None:
    repo.get_by_name.return_value = _record(archived=True, feature_flag="beta")
    result = await service.create_event_type(
        SCOPE, EventTypeCreate(name="user.signup", description="fresh")
    )
    assert result.archived is False
    assert result.description == "fresh"
    assert result.schema is None
    assert result.feature_flag is None
    repo.update.assert_awaited_once()
    repo.insert.assert_not_awaited()


async def test_validation_runs_before_store(service: EventTypeService, repo: AsyncMock) -> None:
    with pytest.raises(ValidationException):
        await service.create_event_type(
            SCOPE, EventTypeCreate(name="user.signup", description="bad\x00")
        )
    with pytest.raises(ValidationException):
        await service.patch_event_type(
            SCOPE, "user.signup", EventTypePatch(description=NULL)
        )
    repo.get_by_name.assert_not_awaited()


async def test_get_applies_visibility_to_fetched_record(
    service: EventTypeService, repo: AsyncMock
) -> None:
    repo.get_by_name.return_value = _record(feature_flag="beta")

    with_beta = TenantScope(tenant_id="t1", feature_flags=SomeFeatureFlags.of(["beta"]))
    assert (await service.get_event_type(with_beta, "user.signup")).feature_flag == "beta"

    without_beta = TenantScope(tenant_id="t1", feature_flags=SomeFeatureFlags.of([]))
    with pytest.raises(ResourceNotFoundException):
        await service.get_event_type(without_beta, "user.signup")
    repo.get_by_name.assert_awaited_with("t1", "user.signup")


async def test_get_missing_raises_not_found(service: EventTypeService) -> None:
    with pytest.raises(ResourceNotFoundException):
        await service.get_event_type(SCOPE, "missing")


async def test_replace_reports_created_then_updated(
    service: EventTypeService, repo: AsyncMock
) -> None:
    data = EventTypeUpdate(description="d", schema=SCHEMA)
    record, created = await service.replace_event_type(SCOPE, "user.signup", data)
    assert created is True
    assert record.name == "user.signup"

    repo.get_by_name.return_value = _record(archived=True, feature_flag="beta")
    record, created = await service.replace_event_type(SCOPE, "user.signup", data)
    assert created is False
    assert record.archived is False
    assert record.feature_flag is None


async def test_patch_missing_raises_not_found(service: EventTypeService, repo: AsyncMock) -> None:
    with pytest.raises(ResourceNotFoundException):
        await service.patch_event_type(
            SCOPE, "missing", EventTypePatch(description=Value("x"))
        )
    repo.insert.assert_not_awaited()


async def test_patch_applies_tri_state(service: EventTypeService, repo: AsyncMock) -> None:
    repo.get_by_name.return_value = _record(feature_flag="beta")
    result = await service.patch_event_type(
        SCOPE, "user.signup", EventTypePatch(schema=NULL, description=Value("d2"))
    )
    assert result.schema is None
    assert result.description == "d2"
    assert result.feature_flag == "beta"


async def test_archive_is_idempotent(service: EventTypeService, repo: AsyncMock) -> None:
    repo.get_by_name.return_value = _record(archived=True)
    await service.archive_event_type(SCOPE, "user.signup")
    stored = repo.update.await_args.args[0]
    assert stored.archived is True
    assert stored.schema == SCHEMA


async def test_archive_missing_raises_not_found(service: EventTypeService) -> None:
    with pytest.raises(ResourceNotFoundException):
        await service.archive_event_type(SCOPE, "missing")


async def test_list_requests_lookahead_and_strips_schema(
    service: EventTypeService, repo: AsyncMock
) -> None:
    repo.list_after.return_value = [_record("a"), _record("b"), _record("c")]
    page = await service.list_event_types(SCOPE, limit=2, iterator="0")
    repo.list_after.assert_awaited_once_with(
        "t1",
        after="0",
        limit=3,
        include_archived=False,
        feature_flags=SCOPE.feature_flags,
    )
    assert [r.name for r in page.data] == ["a", "b"]
    assert page.iterator == "b"
    assert all(r.schema is None for r in page.data)


async def test_list_rejects_non_positive_limit_before_store(
    service: EventTypeService, repo: AsyncMock
) -> None:
    with pytest.raises(ValidationException) as exc:
        await service.list_event_types(SCOPE, limit=0)
    assert exc.value.details == {"field": "limit"}
    repo.list_after.assert_not_called()


async def test_list_with_content_keeps_schema(service: EventTypeService, repo: AsyncMock) -> None:
    repo.list_after.return_value = [_record("a")]
    page = await service.list_event_types(
        SCOPE, limit=10, options=EventTypeListOptions(with_content=True)
    )
    assert page.done is True
    assert page.data[0].schema == SCHEMA


async def test_generate_schema_example_not_implemented(service: EventTypeService) -> None:
    with pytest.raises(OperationNotImplementedException):
        await service.generate_schema_example({"type": "object"})
