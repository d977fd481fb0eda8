"""EventType domain entity.

A named classification record owned by a tenant. Instances are immutable;
every mutation returns a new record that the repository persists. Archival is
a tombstone: the name stays taken and all content is retained.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any

from event_registry.domain.exceptions import (
    EventTypeAlreadyExistsException,
    ValidationException,
)
from event_registry.domain.patch import ABSENT, PatchField, require_non_null, resolve


@dataclass(frozen=True)
class EventTypeRecord:
    """Immutable event type record (tenant_id and name never change).

    created_at and updated_at are None until the store has persisted the record.
    """

    tenant_id: str
    name: str
    description: str
    archived: bool = False
    schema: dict[str, Any] | None = None
    feature_flag: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.tenant_id:
            raise ValidationException("Event type must belong to a tenant", field="tenant_id")
        if not self.name:
            raise ValidationException("Event type name is required", field="name")

    def replaced(
        self,
        *,
        description: str,
        archived: bool,
        schema: dict[str, Any] | None,
        feature_flag: str | None,
    ) -> "EventTypeRecord":
        """Return a copy with every mutable field overwritten (full replace)."""
        return replace(
            self,
            description=description,
            archived=archived,
            schema=schema,
            feature_flag=feature_flag,
        )

    def patched(
        self,
        *,
        description: PatchField[str] = ABSENT,
        archived: PatchField[bool] = ABSENT,
        schema: PatchField[dict[str, Any]] = ABSENT,
        feature_flag: PatchField[str] = ABSENT,
    ) -> "EventTypeRecord":
        """Return a copy with the touched fields applied.

        Raises ValidationException before building anything if a non-nullable
        field (description, archived) carries an explicit null.
        """
        require_non_null(description, "description")
        require_non_null(archived, "archived")
        return replace(
            self,
            description=resolve(description, self.description),
            archived=resolve(archived, self.archived),
            schema=resolve(schema, self.schema),
            feature_flag=resolve(feature_flag, self.feature_flag),
        )

    def archive(self) -> "EventTypeRecord":
        """Return an archived copy. Archiving an archived record is a no-op copy."""
        return replace(self, archived=True)

    def reactivated(
        self,
        *,
        description: str,
        schema: dict[str, Any] | None,
        feature_flag: str | None,
    ) -> "EventTypeRecord":
        """Return an active copy whose content is replaced, not merged.

        Used when create targets an archived name: the archived description,
        schema and feature flag are considered stale and are discarded.
        """
        if not self.archived:
            raise EventTypeAlreadyExistsException(self.name)
        return self.replaced(
            description=description,
            archived=False,
            schema=schema,
            feature_flag=feature_flag,
        )
