"""Domain entities and aggregates.

Pure domain models; no ORM or persistence concerns.
"""

from event_registry.domain.entities.event_type import EventTypeRecord

__all__ = [
    "EventTypeRecord",
]
