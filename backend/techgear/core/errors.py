"""Error Hierarchy — typed, categorized exceptions for all WebShop failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors are 400-level; storage failures are 500-level
    - to_response() produces the REST envelope used by every error response
    - No driver or SQL details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with WebShopError base: one FastAPI handler catches all
    - "Not found" is raised by routes, never by repositories (they return None / 0 rows)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
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
    STORAGE = "storage"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    resource_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class WebShopError(Exception):
    """Base exception for all WebShop errors."""

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
                    "resource": self.context.resource,
                    "resource_id": self.context.resource_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class InputValidationError(WebShopError):
    """A required request parameter is missing or inconsistent."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class ResourceNotFoundError(WebShopError):
    """Requested resource does not exist (or a mutation touched zero rows)."""
    def __init__(
        self, resource_type: str, resource_id: int | str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource = resource_type
        ctx.resource_id = str(resource_id)
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )


# ─── Storage Errors (500-level) ─────────────────────────────────

class StorageError(WebShopError):
    """Underlying database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Database {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation
