"""
Global Exception Handlers for edge-i18n

Error Response Format:
{
    "error": {
        "status_code": 404,
        "message": "i18n is not configured",
        "type": "Not Found",
        "details": {...},
        "path": "/api/v1/i18n/config"
    }
}
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from edge_i18n.exceptions import EdgeI18nException

logger = logging.getLogger(__name__)


def get_error_type(status_code: int) -> str:
    """Get a human-readable error type based on status code."""
    error_types = {
        400: "Bad Request",
        404: "Not Found",
        405: "Method Not Allowed",
        422: "Validation Error",
        500: "Internal Server Error",
    }
    return error_types.get(status_code, "Error")


def create_error_response(
    status_code: int,
    message: str,
    details: dict[str, Any] | None = None,
    path: str | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    error_response: dict[str, Any] = {
        "error": {
            "status_code": status_code,
            "message": message,
            "type": get_error_type(status_code),
        }
    }

    if details:
        error_response["error"]["details"] = details

    if path:
        error_response["error"]["path"] = path

    return JSONResponse(status_code=status_code, content=error_response)


async def edge_exception_handler(request: Request, exc: EdgeI18nException) -> JSONResponse:
    """Handle custom edge-i18n exceptions."""
    log_level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
    logger.log(log_level, f"EdgeI18nException: {exc.message}", extra={"status_code": exc.status_code, "path": request.url.path})

    return create_error_response(
        status_code=exc.status_code,
        message=exc.message,
        details=exc.details or None,
        path=request.url.path,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.warning(f"HTTPException: {exc.detail}", extra={"status_code": exc.status_code, "path": request.url.path})

    return create_error_response(status_code=exc.status_code, message=str(exc.detail), path=request.url.path)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors with a per-field breakdown."""
    errors = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"] if loc != "body")
        errors.append({"field": field, "message": error["msg"], "type": error["type"]})

    return create_error_response(
        status_code=422,
        message="Request validation failed",
        details={"errors": errors},
        path=request.url.path,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the application."""
    app.add_exception_handler(EdgeI18nException, edge_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
