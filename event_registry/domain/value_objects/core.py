"""Domain value objects for the event type registry.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

import re
import unicodedata
from dataclasses import dataclass

# Shared token pattern for event type names and feature flags (e.g. user.signup, beta-ui).
_TOKEN_RE = re.compile(r"^[a-zA-Z0-9\-_.]+$")
TOKEN_MAX_LENGTH = 256


def _validate_token(value: str, field_name: str) -> None:
    """Validate non-empty, length, and token format. Raises ValueError on failure."""
    if not value:
        raise ValueError(f"{field_name} must be a non-empty string")
    if len(value) > TOKEN_MAX_LENGTH:
        raise ValueError(
            f"{field_name} must not exceed {TOKEN_MAX_LENGTH} characters"
        )
    if not _TOKEN_RE.fullmatch(value):
        raise ValueError(
            f"{field_name} must contain only letters, digits, '-', '_' or '.' "
            "(e.g., 'user.signup', 'invoice-paid')"
        )


def has_control_characters(value: str) -> bool:
    """Return True if value contains any Unicode control character (category Cc)."""
    return any(unicodedata.category(c) == "Cc" for c in value)


@dataclass(frozen=True)
class EventTypeName:
    """Value object for an event type name (SRP).

    Names are 1-256 characters of letters, digits, '-', '_' and '.'.
    Immutable once assigned; used as the ordering key for pagination.
    """

    value: str

    def __post_init__(self) -> None:
        _validate_token(self.value, "Event type name")


@dataclass(frozen=True)
class FeatureFlag:
    """Value object for a feature flag tag gating event type visibility."""

    value: str

    def __post_init__(self) -> None:
        _validate_token(self.value, "Feature flag")
