"""Tri-state patch fields.

A partial update carries, per field, one of three states:

- Absent: the field was omitted; the stored value is left alone.
- Null: the field was sent as an explicit null; clears a nullable field.
- Value(v): the field was sent with a concrete value.

Modeled as a tagged union rather than Optional plus a presence flag so the
distinction survives every layer between the wire and the record.
"""

from dataclasses import dataclass
from typing import Any

from event_registry.domain.exceptions import ValidationException


@dataclass(frozen=True)
class Absent:
    """Field omitted from the request."""


@dataclass(frozen=True)
class Null:
    """Field present with an explicit null."""


@dataclass(frozen=True)
class Value[T]:
    """Field present with a concrete value."""

    value: T


# Non-nullable fields only accept Absent or Value; Null is rejected at validation time.
type PatchField[T] = Absent | Null | Value[T]

ABSENT = Absent()
NULL = Null()


def from_wire(present: bool, raw: Any) -> PatchField[Any]:
    """Build a PatchField from (was the key present, decoded value)."""
    if not present:
        return ABSENT
    if raw is None:
        return NULL
    return Value(raw)


def require_non_null(field: PatchField[Any], field_name: str) -> None:
    """Raise ValidationException if a non-nullable field was sent as explicit null."""
    if isinstance(field, Null):
        raise ValidationException(
            f"{field_name} cannot be null", field=field_name
        )


def resolve[T](field: PatchField[T], current: T | None) -> T | None:
    """Return the value a field takes after applying the patch state to current."""
    match field:
        case Absent():
            return current
        case Null():
            return None
        case Value(value=v):
            return v
    raise TypeError(f"Unsupported patch field: {field!r}")
