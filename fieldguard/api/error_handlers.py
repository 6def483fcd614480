"""Error Handlers — global exception handlers for the FieldGuard API.

Invariants:
    - FieldGuardError → structured JSON with error code, message, severity
    - RequestValidationError (payload decoding) → PAYLOAD_DECODE_ERROR with per-location details
    - Exception (catch-all) → never leaks internal details
    - Rule violations never pass through here: they are returned as report bodies by routes

Design Decisions:
    - Three-layer handler: domain (FieldGuardError), decoding (Pydantic), catch-all (Exception)
    - Pydantic errors are renamed to PAYLOAD_DECODE_ERROR: "validation" is reserved for
      rule reports, decoding is a distinct category
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from fieldguard.core.errors import (
    ErrorCategory, ErrorSeverity, FieldGuardError, PayloadDecodeError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_fieldguard_error_handler(app)
    _register_decode_error_handler(app)
    _register_generic_error_handler(app)


def _register_fieldguard_error_handler(app: FastAPI) -> None:
    """Register FieldGuard domain/infrastructure error handler."""

    @app.exception_handler(FieldGuardError)
    async def fieldguard_error_handler(request: Request, exc: FieldGuardError):
        """Handle all FieldGuard errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"FieldGuardError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_decode_error_handler(app: FastAPI) -> None:
    """Register Pydantic decoding error handler."""

    @app.exception_handler(RequestValidationError)
    async def decode_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle payloads that could not be decoded into a record."""
        logger.warning(
            f"Payload decode error on {request.url.path}: {len(exc.errors())} problem(s)",
            extra={"error_code": "PAYLOAD_DECODE_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_decode_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_decode_error_response(exc: RequestValidationError) -> dict:
    """Build structured decode error response (input values are not echoed)."""
    response = PayloadDecodeError("Request payload could not be decoded").to_response()
    response["error"]["details"] = [
        {
            "location": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return response
