"""
Base exception classes for the family health records backend.

Each module should define its own exceptions that inherit from these bases.
Every error carries a stable machine-readable code and an HTTP status class,
so the API layer can serialize it unchanged.
"""

from typing import Optional, Any


class HealthRecordsError(Exception):
    """
    Base exception for all backend errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(HealthRecordsError):
    """Input validation failed (caller error)."""

    status_code = 400


class AuthenticationError(HealthRecordsError):
    """Authentication failed (invalid or missing identity)."""

    status_code = 401


class AuthorizationError(HealthRecordsError):
    """Authorization failed (insufficient permissions)."""

    status_code = 403


class NotFoundError(HealthRecordsError):
    """Resource not found."""

    status_code = 404


class ConflictError(HealthRecordsError):
    """Request conflicts with the current state of a resource."""

    status_code = 409


class ExternalServiceError(HealthRecordsError):
    """Error communicating with an external service."""

    status_code = 503

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class StoreUnavailableError(ExternalServiceError):
    """
    Raised when the document store cannot be reached or rejects a query.

    Kept distinct from authorization failures so monitoring can tell
    "user lacks access" apart from "store is unavailable".
    """

    def __init__(self, operation: str, reason: str = ""):
        super().__init__(
            f"Document store unavailable during {operation}",
            service="supabase",
            code="STORE_UNAVAILABLE",
            details={"operation": operation, "reason": reason} if reason else {"operation": operation},
        )
