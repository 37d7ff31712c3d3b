"""Error Handlers — render every failure as the QandaError JSON envelope.

Invariants:
    - HandlerError (BadRequest 400 / InternalError 500) → its own to_response()
    - RequestValidationError (missing field, wrong type, bad JSON) → 400 VALIDATION_ERROR
    - Any other exception → 500 INTERNAL_ERROR, never leaks internal details
    - Exactly one log line per rendered error
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from qanda.core.errors import (
    ErrorCategory, ErrorSeverity, InternalError, QandaError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(QandaError, _handle_qanda_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)


def _render(exc: QandaError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _handle_qanda_error(request: Request, exc: QandaError) -> JSONResponse:
    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        f"{type(exc).__name__} on {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return _render(exc)


async def _handle_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    logger.warning(
        f"Validation error on {request.url.path}: {details}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    error = QandaError(
        "Invalid request data", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
        ErrorSeverity.ERROR, http_status=status.HTTP_400_BAD_REQUEST,
    )
    body = error.to_response()
    body["error"]["details"] = details
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        extra={"path": request.url.path},
        exc_info=exc,
    )
    return _render(InternalError("An unexpected error occurred"))
