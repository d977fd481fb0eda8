"""API v1 router aggregation."""

from fastapi import APIRouter

from event_registry.api.v1.endpoints import event_types, health

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    event_types.router, prefix="/event-type", tags=["event-types"]
)
