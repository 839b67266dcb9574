"""
Devices module.

Device Registry Enforcer and device management.

Public API:
- IDeviceRegistry: Interface for device-limit enforcement
- IDeviceStore: Persistence boundary for device registrations
- DeviceInfo, DeviceRegistration, DeviceCheckResult: Data models
- Device exceptions: DeviceRequiredError, DeviceNotRegisteredError, etc.
"""

from .interfaces import IDeviceRegistry, IDeviceStore
from .models import DeviceInfo, DeviceRegistration, DeviceCheckResult
from .exceptions import (
    DeviceRequiredError,
    DeviceNotRegisteredError,
    DeviceLimitExceededError,
    DeviceOwnershipConflictError,
    DeviceIdMismatchError,
    DeviceUpdateConflictError,
    NotDeviceOwnerError,
)

__all__ = [
    # Interfaces
    "IDeviceRegistry",
    "IDeviceStore",
    # Models
    "DeviceInfo",
    "DeviceRegistration",
    "DeviceCheckResult",
    # Exceptions
    "DeviceRequiredError",
    "DeviceNotRegisteredError",
    "DeviceLimitExceededError",
    "DeviceOwnershipConflictError",
    "DeviceIdMismatchError",
    "DeviceUpdateConflictError",
    "NotDeviceOwnerError",
]
