"""Error Hierarchy: typed, categorized exceptions for the stand-in server.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Routing and page producers never raise; errors only come from the shell
      (host introspection, startup)
    - to_response() never leaks internal details beyond the message

Design Decisions:
    - Single hierarchy with StandinError base: one FastAPI handler catches all
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
    """High-level error categories."""
    INFRASTRUCTURE = "infrastructure"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None
    debug_info: dict[str, Any] | None = None


class StandinError(Exception):
    """Base exception for all stand-in server errors."""

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
                "context": {"path": self.context.path},
            }
        }


class MetricsSourceError(StandinError):
    """The host process could not be inspected."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Process metrics unavailable: {message}",
            "METRICS_UNAVAILABLE", ErrorCategory.INFRASTRUCTURE,
            ErrorSeverity.CRITICAL, context, 503,
        )
