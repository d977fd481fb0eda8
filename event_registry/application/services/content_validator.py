"""Default content validator for event type input (implements IContentValidator)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import jsonschema
from jsonschema.validators import validator_for

from event_registry.application.dtos.event_type import (
    EventTypeCreate,
    EventTypePatch,
    EventTypeUpdate,
)
from event_registry.application.interfaces.services import IContentValidator
from event_registry.domain.exceptions import ValidationException
from event_registry.domain.patch import Value, require_non_null
from event_registry.domain.value_objects.core import (
    EventTypeName,
    FeatureFlag,
    has_control_characters,
)


class DefaultContentValidator:
    """Token grammar for names and flags, control-character check for text.

    The schema payload is a mapping of schema version (e.g. "1") to a JSON
    Schema document; each document must itself be a valid JSON Schema.
    """

    def validate_name(self, name: str) -> None:
        try:
            EventTypeName(name)
        except ValueError as e:
            raise ValidationException(str(e), field="name") from e

    def validate_description(self, description: str) -> None:
        if has_control_characters(description):
            raise ValidationException(
                "Control characters are not allowed", field="description"
            )

    def validate_feature_flag(self, feature_flag: str) -> None:
        try:
            FeatureFlag(feature_flag)
        except ValueError as e:
            raise ValidationException(str(e), field="feature_flag") from e

    def validate_schema(self, schema: dict[str, Any]) -> None:
        if not isinstance(schema, Mapping):
            raise ValidationException("Schemas must be an object", field="schemas")
        for version, document in schema.items():
            if not isinstance(document, Mapping):
                raise ValidationException(
                    f"Schema version {version!r} must be a JSON Schema object",
                    field="schemas",
                )
            try:
                validator_for(document).check_schema(document)
            except jsonschema.SchemaError as e:
                raise ValidationException(
                    f"Schema version {version!r} is not a valid JSON Schema: {e.message}",
                    field="schemas",
                ) from e


class EventTypeInputValidator:
    """Runs an IContentValidator over whole use-case inputs.

    Every supplied field is checked before the caller touches the store, so a
    request is rejected as a whole or not at all.
    """

    def __init__(self, content_validator: IContentValidator | None = None) -> None:
        self.content = content_validator or DefaultContentValidator()

    def _check_fields(
        self,
        description: str | None,
        schema: dict[str, Any] | None,
        feature_flag: str | None,
    ) -> None:
        if description is not None:
            self.content.validate_description(description)
        if schema is not None:
            self.content.validate_schema(schema)
        if feature_flag is not None:
            self.content.validate_feature_flag(feature_flag)

    def validate_create(self, data: EventTypeCreate) -> None:
        self.content.validate_name(data.name)
        self._check_fields(data.description, data.schema, data.feature_flag)

    def validate_update(self, name: str, data: EventTypeUpdate) -> None:
        self.content.validate_name(name)
        self._check_fields(data.description, data.schema, data.feature_flag)

    def validate_patch(self, name: str, data: EventTypePatch) -> None:
        """Validate a patch: explicit null on non-nullable fields, then concrete values."""
        self.content.validate_name(name)
        require_non_null(data.description, "description")
        require_non_null(data.archived, "archived")
        self._check_fields(
            data.description.value if isinstance(data.description, Value) else None,
            data.schema.value if isinstance(data.schema, Value) else None,
            data.feature_flag.value if isinstance(data.feature_flag, Value) else None,
        )
