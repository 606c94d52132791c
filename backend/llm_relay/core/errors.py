"""Error Hierarchy — typed, categorized exceptions for every relay failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the flat `{error, ...}` envelope callers expect
    - Client errors (400-level) carry no upstream data; upstream errors carry
      the provider's parsed body under `upstream`
    - Upstream status codes are passed through unchanged

Design Decisions:
    - Single hierarchy with RelayError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


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
    CONFIGURATION = "configuration"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs (never sent to the client)."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    provider: str | None = None
    model: str | None = None
    debug_info: dict[str, Any] | None = None


class RelayError(Exception):
    """Base exception for all relay errors."""

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
        """Convert to the REST error envelope."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidJsonBodyError(RelayError):
    """Request body is not parseable JSON."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid JSON body", "INVALID_JSON", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class InvalidRequestError(RelayError):
    """Request body parsed but its fields are unusable."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class UnknownProviderError(RelayError):
    """Path names a provider that is not registered."""
    def __init__(self, provider: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unknown provider '{provider}'.",
            "UNKNOWN_PROVIDER", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )
        self.provider = provider


# ─── Server Errors (500-level / passthrough) ────────────────────

class InvalidDefaultProviderError(RelayError):
    """DEFAULT_PROVIDER names no registered provider."""
    def __init__(self, provider: str, context: ErrorContext | None = None):
        super().__init__(
            "Server misconfiguration: default provider is invalid.",
            "DEFAULT_PROVIDER_INVALID", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.provider = provider


class MissingApiKeyError(RelayError):
    """Provider API key is absent from the environment."""
    def __init__(self, env_var: str, context: ErrorContext | None = None):
        super().__init__(
            "Server misconfiguration: API key missing.",
            "API_KEY_MISSING", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.env_var = env_var


class UpstreamError(RelayError):
    """Provider answered with a non-success status."""
    def __init__(
        self,
        message: str,
        status_code: int,
        upstream: Any,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "UPSTREAM_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, status_code or 500,
        )
        self.upstream = upstream

    def to_response(self) -> dict:
        return {"error": self.message, "upstream": self.upstream}


class ProviderTransportError(RelayError):
    """Outbound call failed before any provider response arrived."""
    def __init__(self, details: str, context: ErrorContext | None = None):
        super().__init__(
            "An internal server error occurred on the backend.",
            "TRANSPORT_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.details = details

    def to_response(self) -> dict:
        return {"error": self.message, "details": self.details}
