"""Domain value objects and shared value types."""

from event_registry.domain.value_objects.core import (
    EventTypeName,
    FeatureFlag,
    has_control_characters,
)

__all__ = [
    "EventTypeName",
    "FeatureFlag",
    "has_control_characters",
]
