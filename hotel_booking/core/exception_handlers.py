"""
Exception handlers that render application errors as JSON responses.
"""
from __future__ import annotations

from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from hotel_booking.core.exceptions import BaseAppException, InternalError, ValidationError
from hotel_booking.core.logging import get_logger

logger = get_logger(__name__)

_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def format_validation_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Flatten pydantic error entries into {field, message, type} items."""
    field_errors = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        message = error.get("msg", "Invalid value")
        # pydantic prefixes messages raised from validators
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        field_errors.append({
            "field": ".".join(loc) or None,
            "message": message,
            "type": error.get("type"),
        })
    return field_errors


async def app_exception_handler(request: Request, exc: BaseAppException) -> JSONResponse:
    extra = {
        "error_code": exc.error_code.value,
        "status_code": exc.status_code,
        "path": request.url.path,
    }
    if exc.status_code >= 500:
        logger.error(f"Request failed: {exc.message}", extra=extra)
    else:
        logger.info(f"Request rejected: {exc.message}", extra=extra)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    field_errors = format_validation_errors(exc.errors())
    error = ValidationError("Validation failed", field_errors=field_errors)
    logger.info(
        "Request validation failed",
        extra={"path": request.url.path, "field_count": len(field_errors)},
    )
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception: {exc}",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
        exc_info=exc,
    )
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the application's exception handlers."""
    app.add_exception_handler(BaseAppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = [
    "format_validation_errors",
    "register_exception_handlers",
]
