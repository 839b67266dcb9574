"""
Access gate exceptions.

Together with UnauthorizedError (auth module) and the device errors
(devices module) these make up the gate's failure taxonomy.
"""

from typing import Optional

from shared.exceptions import AuthorizationError, HealthRecordsError


class ForbiddenError(AuthorizationError):
    """Raised for insufficient profile role or a generic device denial."""

    def __init__(
        self,
        message: str = "Access not allowed",
        profile_id: Optional[str] = None,
        required_role: Optional[str] = None,
    ):
        details = {}
        if profile_id:
            details["profile_id"] = profile_id
        if required_role:
            details["required_role"] = required_role
        super().__init__(message, code="FORBIDDEN", details=details)


class AccessGateMisuseError(HealthRecordsError):
    """Raised when the gate is invoked for an endpoint marked public."""

    def __init__(self):
        super().__init__(
            "AccessGate should not be called for public endpoints",
            code="GATE_MISUSE",
        )
