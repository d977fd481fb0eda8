"""Persistence repositories. Re-exports for dependency injection."""

from event_registry.infrastructure.persistence.repositories.base import (
    BaseRepository,
    store_errors,
)
from event_registry.infrastructure.persistence.repositories.event_type_repo import (
    EventTypeRepository,
)

__all__ = [
    "BaseRepository",
    "EventTypeRepository",
    "store_errors",
]
