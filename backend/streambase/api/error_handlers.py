"""Error Handlers: global exception handlers for the Streambase API.

Invariants:
    - StreambaseError -> its own http_status with the to_response() envelope
    - RequestValidationError -> 400 VALIDATION_ERROR with field-level details
    - Exception (catch-all) -> 500 INTERNAL_ERROR, never leaks internal details
    - Every error body has the shape {"error": {"code", "message", "category", "severity", ...}}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from streambase.core.errors import (
    ErrorSeverity, StreambaseError, ValidationError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    @app.exception_handler(StreambaseError)
    async def streambase_error_handler(request: Request, exc: StreambaseError):
        """Handle all Streambase domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.info
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _field_path(loc) -> str:
    # drop the "body"/"path" prefix FastAPI adds
    parts = [str(p) for p in loc]
    if len(parts) > 1 and parts[0] in ("body", "path", "query"):
        parts = parts[1:]
    return ".".join(parts)


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    errors = exc.errors()
    fields = [_field_path(e["loc"]) for e in errors]
    missing = [f for f, e in zip(fields, errors) if e["type"] == "missing"]
    if missing:
        message = f"Missing required field(s): {', '.join(missing)}"
    else:
        message = "Invalid request data"
    body = ValidationError(message, field=fields[0] if fields else "").to_response()
    body["error"]["details"] = [
        {"field": f, "message": e["msg"], "type": e["type"]}
        for f, e in zip(fields, errors)
    ]
    return body
