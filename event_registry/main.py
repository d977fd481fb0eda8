"""ASGI entry point: ``uvicorn event_registry.main:app``.

create_app() only wires components together; the pieces live in
event_registry.core, event_registry.middleware and event_registry.api.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from event_registry.api.v1.router import api_router
from event_registry.core.config import Settings, get_settings
from event_registry.core.exception_handlers import register_exception_handlers
from event_registry.core.lifespan import create_lifespan
from event_registry.core.limiter import limiter
from event_registry.middleware import RequestIDMiddleware


def _install_middleware(app: FastAPI, settings: Settings) -> None:
    # add_middleware prepends, so the request ID middleware ends up outermost.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[settings.request_id_header],
    )
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the registry application from settings (loaded from env by default)."""
    settings = settings or get_settings()
    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    application.state.limiter = limiter
    application.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    register_exception_handlers(application)
    _install_middleware(application, settings)
    application.include_router(api_router, prefix="/api/v1")
    return application


app = create_app()
