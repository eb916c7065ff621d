"""Error Hierarchy — typed, categorized exceptions for all exercise tracker failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors are 400-level (validation, unknown user, username conflict)
    - Store errors are 500-level and never swallowed
    - message is the exact plain-text body returned to the client

Design Decisions:
    - Single hierarchy with ExerciseTrackerError base: one global handler catches all
    - Unknown userId is a ValidationError subclass (400, not 404): clients see "Invalid userId."
    - Duplicate username is 400, not 409: matches the established public contract
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


class ExerciseTrackerError(Exception):
    """Base exception for all exercise tracker errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_log_extra(self) -> dict:
        """Structured fields for the JSON log formatter."""
        return {
            "error_code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(ExerciseTrackerError):
    """Missing or malformed request field."""
    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field = field


class UnknownUserError(ValidationError):
    """userId does not reference an existing user."""
    def __init__(self, user_id: str | None = None):
        super().__init__("Invalid userId.", field="userId")
        self.code = "UNKNOWN_USER"
        self.category = ErrorCategory.RESOURCE_NOT_FOUND
        self.user_id = user_id


class ConflictError(ExerciseTrackerError):
    """Username already registered."""
    def __init__(self, username: str):
        super().__init__(
            f"{username} already exists in database.",
            "USERNAME_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, 400,
        )
        self.username = username


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreError(ExerciseTrackerError):
    """Persistence operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
