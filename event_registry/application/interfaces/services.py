"""Service interfaces (ports) for the application layer."""

from __future__ import annotations

from typing import Any, Protocol


class IContentValidator(Protocol):
    """Pluggable format and content validation for event type input.

    Each method raises ValidationException on failure and returns None otherwise.
    """

    def validate_name(self, name: str) -> None:
        """Check the event type name against the token grammar."""

    def validate_description(self, description: str) -> None:
        """Reject control characters in free text."""

    def validate_feature_flag(self, feature_flag: str) -> None:
        """Check the feature flag against the token grammar."""

    def validate_schema(self, schema: dict[str, Any]) -> None:
        """Check the schema payload is well formed."""
