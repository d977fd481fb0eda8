"""Domain layer: entities, value objects, scope, patch fields and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from event_registry.domain.entities import EventTypeRecord
from event_registry.domain.exceptions import (
    EventTypeAlreadyExistsException,
    OperationNotImplementedException,
    RegistryException,
    ResourceNotFoundException,
    StoreException,
    ValidationException,
)
from event_registry.domain.scope import (
    AllFeatureFlags,
    AllowedFeatureFlags,
    SomeFeatureFlags,
    TenantScope,
)
from event_registry.domain.value_objects import EventTypeName, FeatureFlag

__all__ = [
    # Entities
    "EventTypeRecord",
    # Exceptions
    "EventTypeAlreadyExistsException",
    "OperationNotImplementedException",
    "RegistryException",
    "ResourceNotFoundException",
    "StoreException",
    "ValidationException",
    # Scope
    "AllFeatureFlags",
    "AllowedFeatureFlags",
    "SomeFeatureFlags",
    "TenantScope",
    # Value objects
    "EventTypeName",
    "FeatureFlag",
]
