"""HTTP error mapping for the registry API.

Every error body has the same shape, ``{"error", "message", "details"?,
"request_id"}``, whether it comes from a domain exception, request
validation, a framework HTTP error or an unexpected failure.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from event_registry.core.config import get_settings
from event_registry.domain.exceptions import (
    EventTypeAlreadyExistsException,
    OperationNotImplementedException,
    RegistryException,
    ResourceNotFoundException,
    StoreException,
    ValidationException,
)

logger = logging.getLogger(__name__)

# Most specific class first; unmapped RegistryException subclasses are 400.
STATUS_BY_EXCEPTION: tuple[tuple[type[RegistryException], int], ...] = (
    (ValidationException, 422),
    (ResourceNotFoundException, 404),
    (EventTypeAlreadyExistsException, 409),
    (StoreException, 500),
    (OperationNotImplementedException, 501),
)


def status_for(exc: RegistryException) -> int:
    for exc_type, code in STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return code
    return 400


def _error_response(
    request: Request,
    status_code: int,
    error: str,
    message: Any,
    details: Any = None,
) -> JSONResponse:
    body: dict[str, Any] = {"error": error, "message": message}
    if details:
        body["details"] = details
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        body["request_id"] = request_id
    return JSONResponse(status_code=status_code, content=body)


async def registry_exception_handler(
    request: Request, exc: RegistryException
) -> JSONResponse:
    """Domain errors. Server-side failures hide their details from the caller."""
    status_code = status_for(exc)
    details = exc.details if status_code < 500 else None
    return _error_response(request, status_code, exc.error_code, exc.message, details)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed body, path or query: same error code as domain validation."""
    return _error_response(
        request,
        422,
        "VALIDATION_ERROR",
        "Request validation failed",
        jsonable_encoder(exc.errors()),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return _error_response(request, exc.status_code, "HTTP_ERROR", exc.detail)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return _error_response(request, 500, "INTERNAL_ERROR", message)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers above on app. Call once from create_app()."""
    app.add_exception_handler(RegistryException, registry_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
