"""Event type API schemas.

The versioned JSON Schema payload travels as ``schemas`` on the wire; the
Python attribute is ``schema_definition`` so it does not shadow
``BaseModel.schema``.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from event_registry.application.dtos.event_type import (
    EventTypeCreate,
    EventTypePatch,
    EventTypeUpdate,
)
from event_registry.domain.entities.event_type import EventTypeRecord
from event_registry.domain.patch import from_wire


class EventTypeIn(BaseModel):
    """Request body for POST /event-type/ (create or unarchive)."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    schema_definition: dict[str, Any] | None = Field(default=None, alias="schemas")
    feature_flag: str | None = None

    def to_dto(self) -> EventTypeCreate:
        return EventTypeCreate(
            name=self.name,
            description=self.description,
            schema=self.schema_definition,
            feature_flag=self.feature_flag,
        )


class EventTypeUpdateIn(BaseModel):
    """Request body for PUT (full replace). description is required."""

    model_config = ConfigDict(populate_by_name=True)

    description: str
    archived: bool = False
    schema_definition: dict[str, Any] | None = Field(default=None, alias="schemas")
    feature_flag: str | None = None

    def to_dto(self) -> EventTypeUpdate:
        return EventTypeUpdate(
            description=self.description,
            archived=self.archived,
            schema=self.schema_definition,
            feature_flag=self.feature_flag,
        )


class EventTypePatchIn(BaseModel):
    """Request body for PATCH.

    Omitted keys leave the stored value alone; explicit null clears nullable
    fields and is rejected for description and archived.
    """

    model_config = ConfigDict(populate_by_name=True)

    description: str | None = None
    archived: bool | None = None
    schema_definition: dict[str, Any] | None = Field(default=None, alias="schemas")
    feature_flag: str | None = None

    def to_dto(self) -> EventTypePatch:
        """Convert to tri-state fields using which keys the client actually sent."""
        sent = self.model_fields_set
        return EventTypePatch(
            description=from_wire("description" in sent, self.description),
            archived=from_wire("archived" in sent, self.archived),
            schema=from_wire("schema_definition" in sent, self.schema_definition),
            feature_flag=from_wire("feature_flag" in sent, self.feature_flag),
        )


class EventTypeOut(BaseModel):
    """Event type response. schemas is omitted from lean list items (null)."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    archived: bool
    schema_definition: dict[str, Any] | None = Field(default=None, alias="schemas")
    feature_flag: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_record(cls, record: EventTypeRecord) -> "EventTypeOut":
        return cls(
            name=record.name,
            description=record.description,
            archived=record.archived,
            schema_definition=record.schema,
            feature_flag=record.feature_flag,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )


class EventTypeListResponse(BaseModel):
    """One page of event types. iterator is the cursor for the next page."""

    data: list[EventTypeOut]
    iterator: str | None = None
    prev_iterator: str | None = None
    done: bool

