"""Health check endpoint. No dependencies; used for liveness checks."""

from fastapi import APIRouter

from event_registry.core.config import get_settings
from event_registry.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return ok status and the running version."""
    return HealthResponse(version=get_settings().app_version)
