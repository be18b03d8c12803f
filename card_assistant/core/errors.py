"""Error Hierarchy: typed, categorized exceptions for every failure the API reports.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Caller errors (400/404) are raised before any external call
    - Collaborator failures (row-store, completion provider) are ServiceError (500)
    - to_response() always carries a top-level "error" string and a "details" field

Design Decisions:
    - Single hierarchy with CardAssistantError base: one FastAPI handler for all (ADR: uniform error shape)
    - details holds the upstream message verbatim for diagnostics
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class CardAssistantError(Exception):
    """Base exception for all API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        details: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.details = details

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {
            "error": self.message,
            "code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
            "details": self.details,
        }


# ─── Caller Errors (400-level) ──────────────────────────────────

class MissingFieldError(CardAssistantError):
    """A required request field is absent or empty."""
    def __init__(self, field: str, context: ErrorContext | None = None):
        super().__init__(
            f"Missing required field: {field}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class ResourceNotFoundError(CardAssistantError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: object, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


# ─── Service Errors (500-level) ─────────────────────────────────

class ServiceError(CardAssistantError):
    """An external collaborator failed; details carry its message."""
    def __init__(
        self,
        message: str,
        details: str | None = None,
        code: str = "SERVICE_ERROR",
        category: ErrorCategory = ErrorCategory.INTERNAL,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, category,
            ErrorSeverity.CRITICAL, context, 500, details,
        )


class DatabaseError(ServiceError):
    """Row-store operation failed."""
    def __init__(
        self, operation: str, details: str | None = None, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Database {operation} failed", details,
            "DATABASE_ERROR", ErrorCategory.DATABASE, context,
        )
        self.operation = operation


class CompletionProviderError(ServiceError):
    """Completion provider call failed or returned no text."""
    def __init__(
        self, details: str, api_error_type: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Completion provider error ({api_error_type})", details,
            "COMPLETION_PROVIDER_ERROR", ErrorCategory.EXTERNAL_API, context,
        )
        self.api_error_type = api_error_type
