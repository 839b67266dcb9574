"""
Device module interfaces.

IDeviceStore is the document-store boundary (the Supabase repository in
production, an in-memory fake in tests). IDeviceRegistry is what the access
gate, the pre-authentication hook and the device routes depend on.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .models import DeviceCheckResult, DeviceInfo, DeviceRegistration


@runtime_checkable
class IDeviceStore(Protocol):
    """Persistence operations for device registrations."""

    def list_by_account(self, user_id: str) -> list[DeviceRegistration]:
        """List every registration currently owned by the account."""
        ...

    def get(self, device_id: str) -> Optional[DeviceRegistration]:
        """Get a registration by device ID, whoever owns it."""
        ...

    def upsert(self, device_id: str, fields: dict[str, Any]) -> DeviceRegistration:
        """Create the row or merge ``fields`` into the existing one."""
        ...

    def update_if_exists(
        self,
        device_id: str,
        user_id: str,
        fields: dict[str, Any],
    ) -> Optional[DeviceRegistration]:
        """
        Merge ``fields`` only if the row still exists for this account.

        Returns:
            The updated row, or None if the row vanished concurrently
        """
        ...

    def delete(self, device_id: str) -> None:
        """Delete a registration. Deleting a missing row is not an error."""
        ...


@runtime_checkable
class IDeviceRegistry(Protocol):
    """Interface for device-limit enforcement and device management."""

    async def register(
        self,
        user_id: str,
        device_id: str,
        subscribed: bool,
        limit: int,
        allow_eviction: bool = False,
        meta: Optional[DeviceInfo] = None,
    ) -> DeviceCheckResult:
        """
        Login-time registration (may create the row, may evict others).

        Raises:
            DeviceLimitExceededError: If over the limit and eviction is not allowed
            DeviceOwnershipConflictError: If another account owns the device ID
        """
        ...

    async def refresh(
        self,
        user_id: str,
        device_id: str,
        subscribed: bool,
        limit: int,
        meta: Optional[DeviceInfo] = None,
    ) -> DeviceCheckResult:
        """
        Steady-state check. Never creates and never deletes registrations.
        """
        ...

    async def list_devices(self, user_id: str) -> list[DeviceRegistration]:
        """List the account's registered devices."""
        ...

    async def update_metadata(
        self,
        user_id: str,
        device_id: str,
        info: DeviceInfo,
    ) -> DeviceRegistration:
        """
        Refresh metadata of one of the account's devices.

        Raises:
            DeviceUpdateConflictError: If the account does not own the device
        """
        ...

    async def revoke(self, user_id: str, device_id: str) -> None:
        """
        Remove one of the account's devices.

        Raises:
            NotDeviceOwnerError: If the account does not own the device
        """
        ...
