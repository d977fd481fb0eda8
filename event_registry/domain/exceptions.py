"""Registry errors raised by the domain and application layers.

Each carries a stable error_code plus structured details; the HTTP layer
chooses the status code (see event_registry.core.exception_handlers).
"""

from typing import Any


class RegistryException(Exception):
    """Base class for every error the registry reports to callers.

    error_code defaults to the class name; details holds structured context
    such as the offending field or resource name.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return error, message and details as a JSON-serializable dict."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(RegistryException):
    """Raised when input validation fails (e.g. invalid format or illegal null)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(RegistryException):
    """Raised when a requested resource is not found (or not visible to the caller)."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'event_type').
            resource_id: The ID or name that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class EventTypeAlreadyExistsException(RegistryException):
    """Raised when creating an event type whose name is already active in the tenant."""

    def __init__(self, name: str) -> None:
        """Initialize with the duplicate event type name.

        Args:
            name: The event type name that already exists.
        """
        super().__init__(
            "An event_type with this name already exists",
            "EVENT_TYPE_ALREADY_EXISTS",
            {"name": name},
        )


class StoreException(RegistryException):
    """Raised when the persistence layer fails. Message is opaque to callers."""

    def __init__(self, operation: str) -> None:
        """Initialize with the failed store operation.

        Args:
            operation: Store operation that failed (e.g. 'insert', 'scan').
        """
        super().__init__(
            "Internal server error",
            "STORE_ERROR",
            {"operation": operation},
        )


class OperationNotImplementedException(RegistryException):
    """Raised by operations that are declared but intentionally not implemented."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"Operation not implemented: {operation}",
            "NOT_IMPLEMENTED",
            {"operation": operation},
        )
