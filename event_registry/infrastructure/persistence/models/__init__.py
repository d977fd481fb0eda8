"""ORM models. Import here so Base.metadata sees every table."""

from event_registry.infrastructure.persistence.models.event_type import EventType

__all__ = ["EventType"]
