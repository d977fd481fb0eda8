"""API request/response schemas (pydantic)."""

from event_registry.schemas.event_type import (
    EventTypeIn,
    EventTypeListResponse,
    EventTypeOut,
    EventTypePatchIn,
    EventTypeUpdateIn,
)
from event_registry.schemas.health import HealthResponse

__all__ = [
    "EventTypeIn",
    "EventTypeListResponse",
    "EventTypeOut",
    "EventTypePatchIn",
    "EventTypeUpdateIn",
    "HealthResponse",
]
