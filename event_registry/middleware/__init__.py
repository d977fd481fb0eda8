"""HTTP middleware, applied in event_registry.main."""

from event_registry.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
