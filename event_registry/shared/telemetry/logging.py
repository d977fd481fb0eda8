"""Logging configuration with per-request correlation.

Every record carries ``request_id`` (``-`` outside a request) so store
failures and lifecycle transitions can be traced back to the HTTP call.
"""

import logging
import sys
from contextvars import ContextVar

from event_registry.core.config import get_settings

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"


class RequestIdFilter(logging.Filter):
    """Copy the current request ID onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


def setup_logging() -> None:
    """Configure application-wide logging to stdout.

    Level is DEBUG when settings.debug is True, otherwise INFO. Safe to call
    more than once; the handler is only installed the first time.
    """
    settings = get_settings()
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if settings.debug else logging.INFO)
    if not any(getattr(h, "_event_registry", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.addFilter(RequestIdFilter())
        handler._event_registry = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.database_echo else logging.WARNING
    )
