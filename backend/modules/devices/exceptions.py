"""
Device module exceptions.

The first three codes are part of the access gate's stable failure
taxonomy; clients use them to route users to device management.
"""

from typing import Optional

from shared.exceptions import AuthorizationError, ConflictError, ValidationError


class DeviceRequiredError(ValidationError):
    """Raised when a device-gated request carries no device ID header."""

    def __init__(self, message: str = "Device id is required"):
        super().__init__(message, code="DEVICE_REQUIRED")


class DeviceNotRegisteredError(AuthorizationError):
    """Raised when the device never passed login-time registration."""

    def __init__(self, device_id: str):
        super().__init__(
            "Device not registered",
            code="DEVICE_NOT_REGISTERED",
            details={"device_id": device_id},
        )


class DeviceLimitExceededError(AuthorizationError):
    """
    Raised when an unsubscribed account is already at its device limit.

    The UI should offer to sign out the other device or upgrade.
    """

    def __init__(self, limit: int, registered: Optional[int] = None):
        super().__init__(
            "Device limit exceeded",
            code="DEVICE_LIMIT_EXCEEDED",
            details={"limit": limit},
        )
        if registered is not None:
            self.details["registered_devices"] = registered


class DeviceOwnershipConflictError(ConflictError):
    """Raised when a device ID is already registered to another account."""

    def __init__(self, device_id: str):
        super().__init__(
            "Device is registered to another account. Revoke it there first.",
            code="DEVICE_REGISTERED_TO_ANOTHER_ACCOUNT",
            details={"device_id": device_id},
        )


class DeviceIdMismatchError(ValidationError):
    """Raised when the device header and body disagree."""

    def __init__(self):
        super().__init__(
            "x-device-id must match body.deviceId",
            code="DEVICE_ID_MISMATCH",
        )


class DeviceUpdateConflictError(ConflictError):
    """Raised when refreshing metadata of a device the caller does not have."""

    def __init__(self, device_id: str):
        super().__init__(
            "Device not found for this user.",
            code="UPDATE_REQUIRES_EXISTING_DEVICE",
            details={"device_id": device_id},
        )


class NotDeviceOwnerError(AuthorizationError):
    """Raised when revoking a device that belongs to someone else."""

    def __init__(self, device_id: str):
        super().__init__(
            "Forbidden: not your device.",
            code="NOT_DEVICE_OWNER",
            details={"device_id": device_id},
        )
