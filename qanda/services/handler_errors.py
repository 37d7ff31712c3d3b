"""Handler Errors — payload checks and the StoreError → HandlerError collapse.

Invariants:
    - InvalidIdentifierError → BadRequestError (message kept: it names the bad id)
    - ConstraintViolationError, StorageFailureError → InternalError with a generic
      per-operation message; storage details stay in the logs
"""

import logging

from qanda.core.errors import (
    BadRequestError, ErrorContext, HandlerError, InternalError,
    InvalidIdentifierError, StoreError,
)

logger = logging.getLogger(__name__)


def require_text(value: object, field: str) -> str:
    """Return `value` if it is a non-blank string, else raise BadRequestError."""
    if not isinstance(value, str) or not value.strip():
        raise BadRequestError(
            f"{field} must be a non-empty string",
            ErrorContext(debug_info={"field": field}),
        )
    return value


def to_handler_error(exc: StoreError, message: str) -> HandlerError:
    """Collapse a store error into one of the two boundary errors."""
    if isinstance(exc, InvalidIdentifierError):
        return BadRequestError(exc.message, exc.context)
    logger.debug(
        f"{message}: {exc.message}",
        extra={"error_code": exc.code, "operation": exc.context.operation},
    )
    return InternalError(message, exc.context)
