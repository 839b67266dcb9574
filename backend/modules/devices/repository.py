"""
Device repository for database access.

Encapsulates all Supabase queries against the devices table. The table is
keyed by device_id, so there is at most one row per device.
"""

from typing import Any, Optional


from shared.config import get_settings
from shared.database import get_supabase_client
from shared.repository import BaseRepository
from .models import DeviceRegistration


class DeviceRepository(BaseRepository[DeviceRegistration]):
    """
    Repository for device registrations.

    Note: This repository does NOT perform authorization checks.
    The registry service decides who may create, update or delete rows.
    """

    def list_by_account(self, user_id: str) -> list[DeviceRegistration]:
        query = self._table().select("*").eq("user_id", user_id)
        rows = self._execute(query, "list devices")
        return [DeviceRegistration.from_row(row) for row in rows]

    def get(self, device_id: str) -> Optional[DeviceRegistration]:
        query = self._table().select("*").eq("device_id", device_id)
        rows = self._execute(query, "get device")
        return DeviceRegistration.from_row(rows[0]) if rows else None

    def upsert(self, device_id: str, fields: dict[str, Any]) -> DeviceRegistration:
        """
        Create the row or merge the given columns into it.

        PostgREST merges on conflict, so columns absent from ``fields`` keep
        their stored values.
        """
        data = {"device_id": device_id, **fields}
        query = self._table().upsert(data, on_conflict="device_id")
        rows = self._execute(query, "upsert device")
        return DeviceRegistration.from_row(rows[0] if rows else data)

    def update_if_exists(
        self,
        device_id: str,
        user_id: str,
        fields: dict[str, Any],
    ) -> Optional[DeviceRegistration]:
        """
        Conditional update: only touches a row that still belongs to the account.

        An empty result means the row was deleted (or re-owned) concurrently.
        """
        query = (
            self._table()
            .update(fields)
            .eq("device_id", device_id)
            .eq("user_id", user_id)
        )
        rows = self._execute(query, "update device")
        return DeviceRegistration.from_row(rows[0]) if rows else None

    def delete(self, device_id: str) -> None:
        query = self._table().delete().eq("device_id", device_id)
        self._execute(query, "delete device")


# Module-level instance management
_repository_instance: Optional[DeviceRepository] = None


def get_device_repository() -> DeviceRepository:
    """Get the device repository singleton."""
    global _repository_instance
    if _repository_instance is None:
        _repository_instance = DeviceRepository(
            get_supabase_client(),
            get_settings().devices_table,
        )
    return _repository_instance


def reset_device_repository() -> None:
    """Reset the repository singleton (for testing)."""
    global _repository_instance
    _repository_instance = None
