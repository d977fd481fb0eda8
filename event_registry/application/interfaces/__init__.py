"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from event_registry.infrastructure.
"""

from event_registry.application.interfaces.repositories import IEventTypeRepository
from event_registry.application.interfaces.services import IContentValidator

__all__ = [
    "IContentValidator",
    "IEventTypeRepository",
]
