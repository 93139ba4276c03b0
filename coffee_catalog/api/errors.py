"""
API error handling and exception mapping.

This module converts domain and infrastructure errors into HTTP responses
with a uniform ``ErrorResponse`` body.
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from coffee_catalog.api.schemas.base import ErrorResponse
from coffee_catalog.domain_core.exceptions import DomainError
from coffee_catalog.infra.config.logging_config import get_logger

logger = get_logger("api.errors")

# Map domain error codes to HTTP status codes
STATUS_CODE_MAPPING = {
    "COFFEE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVALID_COFFEE": status.HTTP_400_BAD_REQUEST,
    "RECOMMENDATION_FAILED": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _error_response(status_code: int, error: str, detail: str, headers=None) -> JSONResponse:
    body = ErrorResponse(error=error, detail=detail)
    return JSONResponse(
        status_code=status_code, content=body.model_dump(mode="json"), headers=headers
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Handle domain-specific errors."""
    logger.warning("error.domain", code=exc.code, detail=exc.message)

    status_code = STATUS_CODE_MAPPING.get(
        exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    return _error_response(status_code, exc.code, exc.message)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    Each error is flattened to ``location: message`` for readability.
    """
    logger.warning("error.validation", errors=len(exc.errors()))

    formatted_errors = []
    for error in exc.errors():
        location = " -> ".join(str(loc) for loc in error["loc"])
        formatted_errors.append(f"{location}: {error['msg']}")

    return _error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        "Validation failed: " + "; ".join(formatted_errors),
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions raised by guards and routers."""
    logger.warning("error.http", status_code=exc.status_code, detail=exc.detail)

    return _error_response(
        exc.status_code,
        f"HTTP_{exc.status_code}",
        str(exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception("error.unexpected", error_type=type(exc).__name__)

    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        "An unexpected error occurred. Please try again later.",
    )


def setup_error_handlers(app: FastAPI) -> None:
    """Register error handlers on the FastAPI application."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
