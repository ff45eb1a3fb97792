"""
Error Handler Utility for the HTTP layer

Provides centralized error handling for API routes with:
- Automatic exception kind to HTTP status mapping
- Consistent error body for clients
- Logging for debugging

Registered once on the application:
    from utils.error_handler import register_exception_handlers
    register_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from exceptions import (
    StoreException,
    NotFoundException,
    InvalidRequestException,
    ForbiddenException,
    ConflictException,
    AuthenticationException,
)

logger = logging.getLogger(__name__)

# Checked in order; domain exceptions inherit from exactly one kind
ERROR_STATUS_MAPPING: list[tuple[type[StoreException], int]] = [
    (NotFoundException, status.HTTP_404_NOT_FOUND),
    (InvalidRequestException, status.HTTP_400_BAD_REQUEST),
    (ForbiddenException, status.HTTP_403_FORBIDDEN),
    (ConflictException, status.HTTP_409_CONFLICT),
    (AuthenticationException, status.HTTP_401_UNAUTHORIZED),
]


def get_status_code(exception: StoreException) -> int:
    for kind, status_code in ERROR_STATUS_MAPPING:
        if isinstance(exception, kind):
            return status_code
    # StoreException raised without a kind is a programming error
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def handle_service_error(exception: StoreException) -> JSONResponse:
    """
    Convert service exception to an error response.

    Args:
        exception: The custom exception raised by a service

    Returns:
        JSONResponse with the status code of the exception's kind and body
        {"success": false, "error": <name>, "message": ..., "details": {...}}
    """
    status_code = get_status_code(exception)
    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"Unmapped exception type: {type(exception).__name__} - {exception}")
    else:
        logger.warning(f"Service error handled: {type(exception).__name__} - {exception}")

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": type(exception).__name__,
            "message": exception.message,
            "details": exception.details,
        },
    )


def handle_validation_error(exception: RequestValidationError) -> JSONResponse:
    """
    Convert a request validation failure (body, path or query) into the
    InvalidRequest error body with status 400.
    """
    errors = [
        {"field": ".".join(str(part) for part in error["loc"]), "message": error["msg"]}
        for error in exception.errors()
    ]
    logger.warning(f"Request validation failed: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "error": "ValidationError",
            "message": "Request validation failed",
            "details": {"errors": errors},
        },
    )


def handle_unexpected_error(exception: Exception) -> JSONResponse:
    """
    Handle unexpected exceptions (non-StoreException).

    Logs the full traceback and answers with a generic message so internals
    never leak to clients.
    """
    logger.error(f"Unexpected error: {type(exception).__name__} - {exception}", exc_info=exception)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "error": "InternalServerError",
            "message": "An unexpected error occurred",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    async def store_exception_handler(request: Request, exc: StoreException) -> JSONResponse:
        return handle_service_error(exc)

    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return handle_validation_error(exc)

    async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        return handle_unexpected_error(exc)

    app.add_exception_handler(StoreException, store_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)
