"""Error Hierarchy — typed, categorized exceptions for FieldGuard failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Rule violations are NOT exceptions: they are FieldViolation data in a ValidationReport
    - SchemaError is construction-time only — never raised while validating a record
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with FieldGuardError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
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
    SCHEMA = "schema"
    DECODE = "decode"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    schema_name: str | None = None
    field_name: str | None = None
    rule_code: str | None = None
    debug_info: dict[str, Any] | None = None


class FieldGuardError(Exception):
    """Base exception for all FieldGuard errors."""

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
                    "schema_name": self.context.schema_name,
                    "field": self.context.field_name,
                    "rule": self.context.rule_code,
                },
            }
        }


# ─── Construction Errors (fatal) ────────────────────────────────

class SchemaError(FieldGuardError):
    """Schema or pattern cache could not be built. Fatal at startup."""
    def __init__(
        self,
        message: str,
        field_name: str | None = None,
        rule_code: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.field_name = ctx.field_name or field_name
        ctx.rule_code = ctx.rule_code or rule_code
        super().__init__(
            message, "SCHEMA_ERROR", ErrorCategory.SCHEMA,
            ErrorSeverity.CRITICAL, ctx, 500,
        )


# ─── Request Errors (400-level) ─────────────────────────────────

class PayloadDecodeError(FieldGuardError):
    """Payload could not be decoded into a record. Raised before validation."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "PAYLOAD_DECODE_ERROR", ErrorCategory.DECODE,
            ErrorSeverity.ERROR, context, 400,
        )


class SchemaNotFoundError(FieldGuardError):
    """Requested schema is not registered."""
    def __init__(self, schema_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.schema_name = schema_name
        super().__init__(
            f"Schema '{schema_name}' not found",
            "SCHEMA_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
