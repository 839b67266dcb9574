"""
Access gate module.

Per-request authorization: identity, subscription status, device-limit
enforcement and profile role checks, composed into one AccessOutcome.

Public API:
- IAccessGate: Interface for the gate
- AccessOptions, ProfileRequirement, GateRequest, AccessOutcome: Data models
- ForbiddenError, AccessGateMisuseError: Gate exceptions
"""

from .interfaces import IAccessGate
from .models import (
    AccessOptions,
    AccessOutcome,
    DeviceOutcome,
    GateRequest,
    ProfileOutcome,
    ProfileRequirement,
    SubscriptionOutcome,
)
from .exceptions import AccessGateMisuseError, ForbiddenError

__all__ = [
    # Interface
    "IAccessGate",
    # Models
    "AccessOptions",
    "AccessOutcome",
    "DeviceOutcome",
    "GateRequest",
    "ProfileOutcome",
    "ProfileRequirement",
    "SubscriptionOutcome",
    # Exceptions
    "AccessGateMisuseError",
    "ForbiddenError",
]
