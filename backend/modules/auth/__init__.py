"""
Authentication module.

Handles identity extraction from verified claims and login-time device
registration.

Public API:
- ILoginService: Interface for login-time device registration
- extract_identity, get_header, parse_device_info: Request helpers
- Auth exceptions: UnauthorizedError, InvalidTokenError, etc.
"""

from .interfaces import ILoginService
from .claims import extract_identity, get_header, parse_device_info
from .models import TokenPayload, PreAuthenticationEvent, CompleteLoginResponse
from .exceptions import (
    UnauthorizedError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)

__all__ = [
    # Interface
    "ILoginService",
    # Helpers
    "extract_identity",
    "get_header",
    "parse_device_info",
    # Models
    "TokenPayload",
    "PreAuthenticationEvent",
    "CompleteLoginResponse",
    # Exceptions
    "UnauthorizedError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
]
