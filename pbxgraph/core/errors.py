"""Error Hierarchy — typed, categorized exceptions for all object graph failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Errors are raised before any graph mutation, never after a partial one
    - to_dict() produces a JSON-safe envelope for structured logs

Design Decisions:
    - Single hierarchy with PbxGraphError base: callers can catch one type (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    owner_uuid: str | None = None
    attribute: str | None = None
    key: str | None = None
    debug_info: dict[str, Any] | None = None


class PbxGraphError(Exception):
    """Base exception for all pbxgraph errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to a structured error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "owner_uuid": self.context.owner_uuid,
                    "attribute": self.context.attribute,
                    "key": self.context.key,
                },
            }
        }


# ─── Domain Errors ───────────────────────────────────────────────

class AttributeValidationError(PbxGraphError):
    """A value was rejected by the attribute descriptor it was assigned through."""
    def __init__(
        self,
        message: str,
        attribute: str,
        value_isa: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.attribute = attribute
        self.value_isa = value_isa


class DuplicateUUIDError(PbxGraphError):
    """A different node already holds the UUID being registered."""
    def __init__(self, uuid: str, context: ErrorContext | None = None):
        super().__init__(
            f"UUID '{uuid}' is already registered to another object",
            "DUPLICATE_UUID", ErrorCategory.CONFLICT,
            ErrorSeverity.CRITICAL, context,
        )
        self.uuid = uuid
