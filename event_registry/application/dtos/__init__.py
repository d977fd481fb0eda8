"""Application DTOs: inputs and options for use cases (no ORM types)."""

from event_registry.application.dtos.event_type import (
    EventTypeCreate,
    EventTypeListOptions,
    EventTypePatch,
    EventTypeUpdate,
)

__all__ = [
    "EventTypeCreate",
    "EventTypeListOptions",
    "EventTypePatch",
    "EventTypeUpdate",
]
