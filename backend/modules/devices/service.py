"""
Device Registry Enforcer.

One policy decides whether an (account, device) pair may proceed. It runs in
two modes that differ only in mutation rights:

- register (login time): may create the registration and, when the caller
  allows it, evict the account's other devices to make room.
- refresh (every API request): never creates and never deletes. It only
  touches last_seen/metadata on a row that already exists, so a guessed
  device ID cannot self-register through ordinary traffic.

There is no locking. Two logins racing for the last free slot can both
succeed; the next login-time check corrects it.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from .exceptions import (
    DeviceLimitExceededError,
    DeviceOwnershipConflictError,
    DeviceUpdateConflictError,
    NotDeviceOwnerError,
)
from .interfaces import IDeviceRegistry, IDeviceStore
from .models import DeviceCheckResult, DeviceInfo, DeviceRegistration

logger = logging.getLogger(__name__)


class DeviceRegistryEnforcer(IDeviceRegistry):
    """
    Device-limit policy over an IDeviceStore.

    Args:
        store: Device persistence
        allow_takeover: Let Mode A move a device ID that another account
            owns. Off by default: the other account must revoke it first.
    """

    def __init__(self, store: IDeviceStore, allow_takeover: bool = False):
        self._store = store
        self._allow_takeover = allow_takeover

    async def evaluate(
        self,
        user_id: str,
        device_id: str,
        subscribed: bool,
        limit: int,
        *,
        allow_eviction: bool,
        allow_create: bool,
        meta: Optional[DeviceInfo] = None,
    ) -> DeviceCheckResult:
        """
        Apply the device-limit policy.

        Args:
            user_id: Account ID
            device_id: Client device ID
            subscribed: Whether the account has an active subscription
            limit: Free-tier device limit
            allow_eviction: Delete the account's other devices when over limit
            allow_create: Create the registration if it does not exist
            meta: Optional descriptive metadata to merge

        Returns:
            DeviceCheckResult describing the decision

        Raises:
            DeviceLimitExceededError: Creation refused because of the limit
            DeviceOwnershipConflictError: Device ID owned by another account
        """
        existing = self._store.list_by_account(user_id)
        registered = any(d.device_id == device_id for d in existing)
        others = [d for d in existing if d.device_id != device_id]
        at_limit = not subscribed and len(others) >= limit

        fields = self._bookkeeping_fields(user_id, meta)

        if not allow_create:
            if not registered:
                logger.warning(f"Device {device_id} not registered for user {user_id}")
                return DeviceCheckResult(registered=False, allowed=False, limit_applied=at_limit)

            row = self._store.update_if_exists(device_id, user_id, fields)
            if row is None:
                logger.warning(f"Device {device_id} vanished during refresh for user {user_id}")
                return DeviceCheckResult(registered=False, allowed=False, limit_applied=False)
            return DeviceCheckResult(registered=True, allowed=True, limit_applied=at_limit)

        if not registered:
            self._check_ownership(user_id, device_id)

        evicted: list[str] = []
        if not registered and at_limit:
            if not allow_eviction:
                logger.warning(
                    f"Device limit exceeded for user {user_id}: "
                    f"{len(others)} registered, limit {limit}"
                )
                raise DeviceLimitExceededError(limit=limit, registered=len(others))
            for other in others:
                self._store.delete(other.device_id)
                evicted.append(other.device_id)
            logger.info(f"Evicted {len(evicted)} device(s) for user {user_id} to admit {device_id}")

        self._store.upsert(device_id, fields)
        if not registered:
            logger.info(f"Registered device {device_id} for user {user_id}")

        return DeviceCheckResult(
            registered=True,
            allowed=True,
            limit_applied=at_limit,
            evicted=evicted,
        )

    async def register(
        self,
        user_id: str,
        device_id: str,
        subscribed: bool,
        limit: int,
        allow_eviction: bool = False,
        meta: Optional[DeviceInfo] = None,
    ) -> DeviceCheckResult:
        """Login-time registration."""
        return await self.evaluate(
            user_id,
            device_id,
            subscribed,
            limit,
            allow_eviction=allow_eviction,
            allow_create=True,
            meta=meta,
        )

    async def refresh(
        self,
        user_id: str,
        device_id: str,
        subscribed: bool,
        limit: int,
        meta: Optional[DeviceInfo] = None,
    ) -> DeviceCheckResult:
        """Steady-state check and last_seen refresh."""
        return await self.evaluate(
            user_id,
            device_id,
            subscribed,
            limit,
            allow_eviction=False,
            allow_create=False,
            meta=meta,
        )

    async def list_devices(self, user_id: str) -> list[DeviceRegistration]:
        devices = self._store.list_by_account(user_id)
        return sorted(
            devices,
            key=lambda d: d.last_seen or datetime.min.replace(tzinfo=timezone.utc),
            reverse=True,
        )

    async def update_metadata(
        self,
        user_id: str,
        device_id: str,
        info: DeviceInfo,
    ) -> DeviceRegistration:
        current = self._store.get(device_id)
        if current is None or current.user_id != user_id:
            raise DeviceUpdateConflictError(device_id)

        row = self._store.update_if_exists(device_id, user_id, self._bookkeeping_fields(user_id, info))
        if row is None:
            raise DeviceUpdateConflictError(device_id)
        return row

    async def revoke(self, user_id: str, device_id: str) -> None:
        current = self._store.get(device_id)
        if current is None or current.user_id != user_id:
            raise NotDeviceOwnerError(device_id)

        self._store.delete(device_id)
        logger.info(f"User {user_id} revoked device {device_id}")

    def _check_ownership(self, user_id: str, device_id: str) -> None:
        """Refuse to silently move a device ID between accounts."""
        current = self._store.get(device_id)
        if current is None or current.user_id == user_id:
            return
        if not self._allow_takeover:
            raise DeviceOwnershipConflictError(device_id)
        logger.warning(
            f"Device {device_id} moved from user {current.user_id} to user {user_id}"
        )

    @staticmethod
    def _bookkeeping_fields(user_id: str, meta: Optional[DeviceInfo]) -> dict[str, Any]:
        fields: dict[str, Any] = {
            "user_id": user_id,
            "last_seen": datetime.now(timezone.utc).isoformat(),
        }
        if meta is not None:
            fields.update(meta.to_store_fields())
        return fields

