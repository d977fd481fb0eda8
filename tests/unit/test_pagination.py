"""Lookahead-by-one pagination tests."""

import pytest

from event_registry.domain.exceptions import ValidationException
from event_registry.domain.pagination import Page, paginate, scan_size


def _name(row: str) -> str:
    return row


def test_scan_size_adds_one_lookahead_row() -> None:
    assert scan_size(1) == 2
    assert scan_size(50) == 51


@pytest.mark.parametrize("limit", [0, -1])
def test_scan_size_rejects_non_positive_limit(limit: int) -> None:
    with pytest.raises(ValidationException) as exc:
        scan_size(limit)
    assert exc.value.details == {"field": "limit"}


def test_paginate_with_lookahead_row_emits_cursor() -> None:
    page = paginate(["a", "b", "c"], 2, cursor_of=_name)
    assert page.data == ["a", "b"]
    assert page.iterator == "b"
    assert page.done is False


def test_paginate_exactly_limit_rows_is_final_page() -> None:
    page = paginate(["a", "b"], 2, cursor_of=_name)
    assert page.data == ["a", "b"]
    assert page.iterator is None
    assert page.done is True


def test_paginate_empty_scan() -> None:
    assert paginate([], 10, cursor_of=_name) == Page(data=[], iterator=None, done=True)


def test_prev_iterator_is_never_set() -> None:
    page = paginate(["a", "b", "c"], 1, cursor_of=_name)
    assert page.prev_iterator is None
