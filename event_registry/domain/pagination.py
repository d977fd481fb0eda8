"""Forward-only cursor pagination with a one-row lookahead.

The store is asked for ``limit + 1`` rows after the cursor. An extra row means
another page exists; its presence is the only signal needed, so no separate
count query is run.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from event_registry.domain.exceptions import ValidationException


@dataclass(frozen=True)
class Page[T]:
    """One page of results plus the cursor for the next page (None when done)."""

    data: list[T]
    iterator: str | None
    done: bool
    # Backwards iteration is not supported; kept for wire compatibility.
    prev_iterator: None = None


def scan_size(limit: int) -> int:
    """Rows to request from the store for a page of ``limit`` items."""
    if limit < 1:
        raise ValidationException("limit must be positive", field="limit")
    return limit + 1


def paginate[T](
    rows: Sequence[T], limit: int, cursor_of: Callable[[T], str]
) -> Page[T]:
    """Cut a lookahead scan of up to ``limit + 1`` rows into a Page.

    Args:
        rows: Rows returned by the store, ascending by cursor key.
        limit: Page size requested by the caller.
        cursor_of: Returns the cursor key (the record name) of a row.

    Returns:
        Page with the first ``limit`` rows and the next cursor when more rows
        exist; otherwise all rows with no cursor and ``done=True``.
    """
    if len(rows) > limit:
        data = list(rows[:limit])
        return Page(data=data, iterator=cursor_of(data[-1]), done=False)
    return Page(data=list(rows), iterator=None, done=True)
