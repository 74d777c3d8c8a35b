"""Error Hierarchy: typed, categorized exceptions for every arithmetic failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the wire envelope {"error": <message>} and nothing else
    - Messages are fixed strings; callers match on them, so they never carry input values

Design Decisions:
    - Single hierarchy with ArithmeticServiceError base: one FastAPI handler catches all
    - ErrorContext as dataclass: carries observability data without touching the wire shape
    - category and severity feed the log extras of the API error handlers
"""

from dataclasses import dataclass
from enum import Enum


INVALID_REQUEST_MESSAGE = "Invalid request"
DIVISION_BY_ZERO_MESSAGE = "Division by zero"
RESULT_OUT_OF_RANGE_MESSAGE = "Result out of range"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context for error observability, never serialized to the client."""
    service: str | None = None


class ArithmeticServiceError(Exception):
    """Base exception for all arithmetic service errors."""

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
        """Convert to the error payload returned over HTTP."""
        return {"error": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidRequestError(ArithmeticServiceError):
    """Body missing, not an object, or a/b not finite numbers."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            INVALID_REQUEST_MESSAGE, "INVALID_REQUEST", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class DivisionByZeroError(ArithmeticServiceError):
    """Divisor is zero."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            DIVISION_BY_ZERO_MESSAGE, "DIVISION_BY_ZERO", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


class ResultOutOfRangeError(ArithmeticServiceError):
    """Finite operands produced a result that does not fit in a float."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            RESULT_OUT_OF_RANGE_MESSAGE, "RESULT_OUT_OF_RANGE",
            ErrorCategory.BUSINESS_RULE, ErrorSeverity.WARNING, context, 400,
        )


# ─── Client Errors ──────────────────────────────────────────────

class OperationServiceError(Exception):
    """A service answered with a non-success HTTP status."""

    def __init__(self, service_name: str, status_code: int):
        super().__init__(f"{service_name} returned status {status_code}")
        self.service_name = service_name
        self.status_code = status_code
