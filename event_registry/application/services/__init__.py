"""Application services: validation helpers used by the use cases."""

from event_registry.application.services.content_validator import (
    DefaultContentValidator,
    EventTypeInputValidator,
)

__all__ = [
    "DefaultContentValidator",
    "EventTypeInputValidator",
]
