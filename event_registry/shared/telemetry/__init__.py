"""Logging setup and request correlation."""

from event_registry.shared.telemetry.logging import (
    RequestIdFilter,
    request_id_var,
    setup_logging,
)

__all__ = ["RequestIdFilter", "request_id_var", "setup_logging"]
