"""Exception handlers — map domain and framework errors to HTTP responses.

Response bodies are fixed strings so nothing about the failure leaks to
the caller beyond what the handler chooses to say.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from assignment_tracker.domain.exceptions import (
    EntityNotFoundError,
    MissingFieldError,
    PersistenceError,
)

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = "Route not found"
SERVER_ERROR = "Something went wrong!"


async def entity_not_found_handler(request: Request, exc: EntityNotFoundError) -> PlainTextResponse:
    return PlainTextResponse(f"{exc.entity_type} not found", status_code=status.HTTP_404_NOT_FOUND)


async def missing_field_handler(request: Request, exc: MissingFieldError) -> JSONResponse:
    return JSONResponse({"error": str(exc)}, status_code=status.HTTP_400_BAD_REQUEST)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected request on %s: %s", request.url.path, exc.errors())
    in_body = any(error.get("loc", ("",))[0] == "body" for error in exc.errors())
    message = "Invalid request body" if in_body else "Invalid request parameters"
    return JSONResponse({"error": message}, status_code=status.HTTP_400_BAD_REQUEST)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    # Unmatched paths and unsupported methods both surface as "Route not found".
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return PlainTextResponse(ROUTE_NOT_FOUND, status_code=status.HTTP_404_NOT_FOUND)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


async def persistence_error_handler(request: Request, exc: PersistenceError) -> PlainTextResponse:
    logger.critical("Store write failed during %s %s: %s", request.method, request.url.path, exc)
    return PlainTextResponse(SERVER_ERROR, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


async def unhandled_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.error(
        "Unhandled error during %s %s",
        request.method,
        request.url.path,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return PlainTextResponse(SERVER_ERROR, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every handler above to ``app``."""
    app.add_exception_handler(EntityNotFoundError, entity_not_found_handler)
    app.add_exception_handler(MissingFieldError, missing_field_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(PersistenceError, persistence_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
