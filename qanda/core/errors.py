"""Error Hierarchy — typed, categorized exceptions for every Q&A failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Store errors form a closed set: InvalidIdentifier, ConstraintViolation, StorageFailure
    - Boundary errors form a closed set: BadRequest (400), InternalError (500)
    - Store errors never reach the HTTP layer; handlers re-map them exactly once
    - to_response() never includes the chained storage-native cause

Design Decisions:
    - Single hierarchy with QandaError base: FastAPI global handler renders one shape
    - Two tiers (StoreError / HandlerError): callers cannot act on storage semantics,
      so the boundary only distinguishes "your request is wrong" from "we failed"
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    INTEGRITY = "integrity"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: str | None = None
    resource_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class QandaError(Exception):
    """Base exception for all Q&A service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "resource_type": self.context.resource_type,
                    "resource_id": self.context.resource_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Store Errors (raised by QuestionsStore / AnswersStore) ─────

class StoreError(QandaError):
    """Base for the closed set of errors a store may raise."""


class InvalidIdentifierError(StoreError):
    """Identifier failed canonical-format validation before reaching storage."""
    def __init__(self, raw: object, context: ErrorContext | None = None):
        super().__init__(
            f"Could not parse UUID: {raw}",
            "INVALID_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.raw = raw


class ConstraintViolationError(StoreError):
    """Storage rejected a write because of a declared integrity rule."""
    def __init__(self, detail: str, context: ErrorContext | None = None):
        super().__init__(
            detail, "CONSTRAINT_VIOLATION", ErrorCategory.INTEGRITY,
            ErrorSeverity.ERROR, context, 500,
        )
        self.detail = detail


class StorageFailureError(StoreError):
    """Any other storage failure. The native cause is kept as __cause__."""
    def __init__(self, detail: str, context: ErrorContext | None = None):
        super().__init__(
            detail, "STORAGE_FAILURE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.detail = detail


# ─── Boundary Errors (raised by services, rendered by api) ──────

class HandlerError(QandaError):
    """Base for the two error kinds the HTTP boundary renders."""


class BadRequestError(HandlerError):
    """The request itself is malformed; the caller can fix it."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "BAD_REQUEST", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class InternalError(HandlerError):
    """The service failed; nothing the caller sent can fix it."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
