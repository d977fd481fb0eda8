"""DefaultContentValidator and EventTypeInputValidator tests."""

import pytest

from event_registry.application.dtos import (
    EventTypeCreate,
    EventTypePatch,
    EventTypeUpdate,
)
from event_registry.application.services import (
    DefaultContentValidator,
    EventTypeInputValidator,
)
from event_registry.domain.exceptions import ValidationException
from event_registry.domain.patch import NULL, Value


@pytest.fixture
def validator() -> EventTypeInputValidator:
    return EventTypeInputValidator()


def _field(exc_info: pytest.ExceptionInfo[ValidationException]) -> str | None:
    return exc_info.value.details.get("field")


def test_validate_create_accepts_valid_input(validator: EventTypeInputValidator) -> None:
    validator.validate_create(
        EventTypeCreate(
            name="order.placed",
            description="An order was placed",
            schema={"1": {"type": "object"}},
            feature_flag="checkout-v2",
        )
    )


def test_invalid_name_is_rejected(validator: EventTypeInputValidator) -> None:
    with pytest.raises(ValidationException) as exc_info:
        validator.validate_create(EventTypeCreate(name="bad name", description="x"))
    assert _field(exc_info) == "name"


def test_control_characters_in_description_are_rejected(
    validator: EventTypeInputValidator,
) -> None:
    with pytest.raises(ValidationException) as exc_info:
        validator.validate_update("ok", EventTypeUpdate(description="line\nbreak"))
    assert _field(exc_info) == "description"


def test_invalid_feature_flag_is_rejected(validator: EventTypeInputValidator) -> None:
    with pytest.raises(ValidationException) as exc_info:
        validator.validate_update(
            "ok", EventTypeUpdate(description="x", feature_flag="not valid!")
        )
    assert _field(exc_info) == "feature_flag"


def test_invalid_json_schema_is_rejected() -> None:
    content = DefaultContentValidator()
    with pytest.raises(ValidationException) as exc_info:
        content.validate_schema({"1": {"type": "not-a-type"}})
    assert "not a valid JSON Schema" in exc_info.value.message


def test_schema_versions_must_be_objects() -> None:
    content = DefaultContentValidator()
    with pytest.raises(ValidationException):
        content.validate_schema({"1": "string"})


def test_patch_null_on_non_nullable_is_rejected(
    validator: EventTypeInputValidator,
) -> None:
    with pytest.raises(ValidationException) as exc_info:
        validator.validate_patch("ok", EventTypePatch(archived=NULL))
    assert _field(exc_info) == "archived"


def test_patch_null_on_nullable_is_accepted(validator: EventTypeInputValidator) -> None:
    validator.validate_patch("ok", EventTypePatch(schema=NULL, feature_flag=NULL))


def test_patch_values_get_content_validation(
    validator: EventTypeInputValidator,
) -> None:
    with pytest.raises(ValidationException) as exc_info:
        validator.validate_patch("ok", EventTypePatch(description=Value("bell\x07")))
    assert _field(exc_info) == "description"


def test_custom_content_validator_is_used() -> None:
    class RejectEverything(DefaultContentValidator):
        def validate_name(self, name: str) -> None:
            raise ValidationException("nope", field="name")

    validator = EventTypeInputValidator(RejectEverything())
    with pytest.raises(ValidationException):
        validator.validate_create(EventTypeCreate(name="fine.name", description="d"))
