"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories).
"""

from event_registry.application.interfaces import (
    IContentValidator,
    IEventTypeRepository,
)
from event_registry.application.services import (
    DefaultContentValidator,
    EventTypeInputValidator,
)
from event_registry.application.use_cases.event_types import EventTypeService

__all__ = [
    "DefaultContentValidator",
    "EventTypeInputValidator",
    "EventTypeService",
    "IContentValidator",
    "IEventTypeRepository",
]
