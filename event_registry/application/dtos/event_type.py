"""DTOs for event type use cases (no dependency on ORM)."""

from dataclasses import dataclass
from typing import Any

from event_registry.domain.patch import ABSENT, PatchField


@dataclass(frozen=True)
class EventTypeCreate:
    """Input for create (new name, or unarchive of an archived name)."""

    name: str
    description: str
    schema: dict[str, Any] | None = None
    feature_flag: str | None = None


@dataclass(frozen=True)
class EventTypeUpdate:
    """Input for full replace (PUT). Every mutable field is required."""

    description: str
    archived: bool = False
    schema: dict[str, Any] | None = None
    feature_flag: str | None = None


@dataclass(frozen=True)
class EventTypePatch:
    """Input for partial update (PATCH). Each field is Absent, Null or Value."""

    description: PatchField[str] = ABSENT
    archived: PatchField[bool] = ABSENT
    schema: PatchField[dict[str, Any]] = ABSENT
    feature_flag: PatchField[str] = ABSENT


@dataclass(frozen=True)
class EventTypeListOptions:
    """List filters; both default to the lean, active-only view."""

    include_archived: bool = False
    with_content: bool = False
