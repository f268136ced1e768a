"""Error Hierarchy: typed, categorized exceptions for all registry failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Caller errors (400-level) are raised before any store is touched
    - Invariant violations (500-level) mean the registry itself is broken
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with RegistryError base: one FastAPI handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging
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
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    token_id: int | None = None
    caller: str | None = None
    debug_info: dict[str, Any] | None = None


class RegistryError(Exception):
    """Base exception for all registry errors."""

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
                    "token_id": self.context.token_id,
                    "caller": self.context.caller,
                },
            }
        }


# ─── Caller Errors (400-level) ──────────────────────────────────

class UnauthorizedError(RegistryError):
    """Caller lacks the administrative capability for a mutation."""
    def __init__(
        self, caller: str | None, operation: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.caller = caller
        super().__init__(
            f"Caller is not authorized to {operation}",
            "UNAUTHORIZED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.ERROR, ctx, 403,
        )
        self.operation = operation


class InvalidRecipientError(RegistryError):
    """Target identity is the null sentinel."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Recipient must not be the null identity",
            "INVALID_RECIPIENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class TokenNotFoundError(RegistryError):
    """Token id was never issued or has already been burned."""
    def __init__(self, token_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.token_id = token_id
        super().__init__(
            f"Token {token_id} not found",
            "TOKEN_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.token_id = token_id


# ─── Invariant Violations (500-level) ───────────────────────────

class BalanceUnderflowError(RegistryError):
    """A balance would drop below zero; the indexes are out of sync."""
    def __init__(self, owner: str, context: ErrorContext | None = None):
        super().__init__(
            f"Balance of {owner} is already zero",
            "BALANCE_UNDERFLOW", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.owner = owner


class CorruptSnapshotError(RegistryError):
    """Snapshot data violates the catalog/ownership invariants."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Registry snapshot is corrupt: {reason}",
            "CORRUPT_SNAPSHOT", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.reason = reason


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(RegistryError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


# ─── Configuration Errors (400-level) ───────────────────────────

class HandOverUnsupportedError(RegistryError):
    """The configured gate has no administrator to hand over."""
    def __init__(self, gate_type: str, context: ErrorContext | None = None):
        super().__init__(
            f"Authorization gate {gate_type} does not support hand-over",
            "HANDOVER_UNSUPPORTED", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 409,
        )
        self.gate_type = gate_type
