"""Status code mapping for registry exceptions."""

import pytest

from event_registry.core.exception_handlers import status_for
from event_registry.domain.exceptions import (
    EventTypeAlreadyExistsException,
    OperationNotImplementedException,
    RegistryException,
    ResourceNotFoundException,
    StoreException,
    ValidationException,
)


@pytest.mark.parametrize(
    ("exc", "expected"),
    [
        (ValidationException("bad"), 422),
        (ResourceNotFoundException("event_type", "x"), 404),
        (EventTypeAlreadyExistsException("x"), 409),
        (StoreException("insert"), 500),
        (OperationNotImplementedException("generate_schema_example"), 501),
        (RegistryException("other"), 400),
    ],
)
def test_status_for(exc: RegistryException, expected: int) -> None:
    assert status_for(exc) == expected
