"""Startup and shutdown hooks for the FastAPI app."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from event_registry.core.config import get_settings
from event_registry.infrastructure.persistence.database import dispose_engine
from event_registry.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging on startup; release database connections on shutdown."""
    setup_logging()
    settings = get_settings()
    logger.info(
        "Starting %s %s (debug=%s)", settings.app_name, settings.app_version, settings.debug
    )
    try:
        yield
    finally:
        await dispose_engine()
        logger.info("Stopped %s", settings.app_name)
