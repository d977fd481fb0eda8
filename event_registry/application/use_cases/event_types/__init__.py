"""Event type use cases."""

from event_registry.application.use_cases.event_types.event_type_operations import (
    EventTypeService,
    without_schema,
)

__all__ = [
    "EventTypeService",
    "without_schema",
]
