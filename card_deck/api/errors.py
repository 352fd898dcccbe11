"""
API error handling and exception mapping.

This module provides custom exception handlers and error response formatting
for the API layer, converting domain and infrastructure errors into
appropriate HTTP responses with localized messages.
"""

from typing import Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from card_deck.api.messages import message_for, negotiate_locale
from card_deck.api.schemas.base import ErrorResponse
from card_deck.domain.exceptions import DomainError, ErrorKind
from card_deck.infra.config.logging_config import get_logger

logger = get_logger("api.errors")

STATUS_CODES = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_IDENTIFIER: 422,
    ErrorKind.MISSING_PARAMETER: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_PARAMETER: 422,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.CORRUPTED_STATE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.PERSISTENCE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def request_locale(request: Request) -> str:
    """Locale for user-facing text, from Accept-Language or the settings default."""
    return negotiate_locale(
        request.headers.get("accept-language"),
        request.app.state.settings.default_locale,
    )


def error_response(
    request: Request,
    kind: ErrorKind,
    status_code: Optional[int] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """Build the JSON error body for a kind, in the request's locale."""
    body = ErrorResponse(
        error=kind.value, detail=message_for(kind, request_locale(request))
    )
    return JSONResponse(
        status_code=status_code or STATUS_CODES[kind],
        content=body.model_dump(mode="json"),
        headers=headers,
    )


def kind_for_status(status_code: int) -> ErrorKind:
    """Closest error kind for an HTTP error raised by the framework."""
    if status_code == status.HTTP_404_NOT_FOUND:
        return ErrorKind.NOT_FOUND
    if status_code >= 500:
        return ErrorKind.INTERNAL
    return ErrorKind.INVALID_PARAMETER


# Exception handler functions
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """
    Handle domain-specific errors.

    Args:
        request: The HTTP request
        exc: The domain error

    Returns:
        JSONResponse: Formatted error response
    """
    log = logger.error if exc.kind is ErrorKind.CORRUPTED_STATE else logger.warning
    log("domain.error", kind=exc.kind.value, error=exc.message, deck_id=exc.deck_id)
    return error_response(request, exc.kind)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    A required input that is absent is a missing parameter; anything else
    that fails validation is an invalid parameter.
    """
    errors = exc.errors()
    formatted = [
        f"{' -> '.join(str(loc) for loc in error['loc'])}: {error['msg']}"
        for error in errors
    ]
    logger.warning("request.validation_error", errors=formatted)

    if any(error.get("type") == "missing" for error in errors):
        return error_response(request, ErrorKind.MISSING_PARAMETER)
    return error_response(request, ErrorKind.INVALID_PARAMETER)


async def persistence_error_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """Handle database failures, which are recoverable at the request boundary."""
    logger.error("persistence.error", error_type=type(exc).__name__, error=str(exc))
    return error_response(request, ErrorKind.PERSISTENCE_UNAVAILABLE)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handle HTTP exceptions, including unknown routes and disallowed methods.

    The status code is kept; the body uses the closest error kind.

    Args:
        request: The HTTP request
        exc: The HTTP exception

    Returns:
        JSONResponse: Formatted error response
    """
    logger.warning("http.error", status_code=exc.status_code, detail=str(exc.detail))

    return error_response(
        request,
        kind_for_status(exc.status_code),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Args:
        request: The HTTP request
        exc: The unexpected exception

    Returns:
        JSONResponse: Generic error response
    """
    logger.exception("unexpected.error", error_type=type(exc).__name__, error=str(exc))
    return error_response(request, ErrorKind.INTERNAL)


def setup_error_handlers(app: FastAPI) -> None:
    """
    Setup error handlers for the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, persistence_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
