"""Map catalog errors onto HTTP responses.

Every route shares these handlers, so a failure is reported the same way
whichever endpoint raised it. Errors raised by the framework itself (unknown
routes, wrong methods, unparseable requests) get the same body shape.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookish.constants import INTERNAL_ERROR_MESSAGE, INVALID_REQUEST_MESSAGE
from bookish.core.errors import CatalogError
from bookish.models.schemas import ErrorResponse

logger = logging.getLogger(__name__)

HTTP_ERROR_REASONS = {
    404: "not_found",
    405: "method_not_allowed",
}


def _error_response(
    status_code: int, reason: str, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    body = ErrorResponse(reason=reason, error=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    """Render a CatalogError with its own status code and message."""
    # Store failures are already logged with a traceback where they happen
    logger.debug(f"{request.method} {request.url.path} failed: {exc.reason}")
    return _error_response(exc.status_code, exc.reason, exc.message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render routing errors such as unknown paths and unsupported methods."""
    reason = HTTP_ERROR_REASONS.get(exc.status_code, "http_error")
    return _error_response(exc.status_code, reason, str(exc.detail), headers=exc.headers)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures without echoing pydantic internals."""
    logger.debug(f"Invalid request on {request.method} {request.url.path}: {exc.errors()}")
    return _error_response(422, "invalid_request", INVALID_REQUEST_MESSAGE)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for anything the services did not anticipate."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return _error_response(500, "internal_error", INTERNAL_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    """Install the catalog error handlers on ``app``."""
    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
