"""slowapi limiter shared by main (app.state.limiter) and the route modules.

Mutating routes are decorated with limit_writes and must accept a
``request: Request`` parameter.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from event_registry.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def write_limit() -> str:
    """Current WRITE_RATE_LIMIT, resolved per request so settings load lazily."""
    return get_settings().write_rate_limit


limit_writes = limiter.limit(write_limit)
