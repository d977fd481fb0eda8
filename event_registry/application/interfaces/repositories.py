"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain entities only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from event_registry.domain.entities.event_type import EventTypeRecord
    from event_registry.domain.scope import AllowedFeatureFlags


class IEventTypeRepository(Protocol):
    """Protocol for the event type registry store (DIP).

    Every method is tenant-scoped. Implementations guarantee that a single
    insert or update is atomic per (tenant_id, name) and that a racing insert
    of an existing name surfaces as EventTypeAlreadyExistsException.
    """

    async def get_by_name(self, tenant_id: str, name: str) -> EventTypeRecord | None:
        """Return the record for name in tenant (archived or not, any flag), or None."""

    async def list_after(
        self,
        tenant_id: str,
        *,
        after: str | None,
        limit: int,
        include_archived: bool = False,
        feature_flags: AllowedFeatureFlags | None = None,
    ) -> list[EventTypeRecord]:
        """Return up to limit records with name > after (or from the start), ascending by name."""

    async def insert(self, record: EventTypeRecord) -> EventTypeRecord:
        """Insert a new record; return it with store timestamps set."""

    async def update(self, record: EventTypeRecord) -> EventTypeRecord:
        """Overwrite the mutable fields of an existing record; return the stored result."""
