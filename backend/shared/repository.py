"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and translating transport failures into
StoreUnavailableError.
"""

import logging
from typing import Any, TypeVar, Generic

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import StoreUnavailableError


T = TypeVar("T")

logger = logging.getLogger(__name__)


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Error translation via self._execute
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class DeviceRepository(BaseRepository[DeviceRegistration]):
            def get(self, device_id: str) -> Optional[DeviceRegistration]:
                query = self._table().select("*").eq("device_id", device_id)
                rows = self._execute(query, "get device")
                return self._map_to_device(rows[0]) if rows else None
    """

    def __init__(self, db: Client, table_name: str) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
            table_name: Name of the table this repository owns.
        """
        self._db = db
        self._table_name = table_name

    def _table(self):
        return self._db.table(self._table_name)

    def _execute(self, query: Any, operation: str) -> list[dict[str, Any]]:
        """
        Execute a built query and return its rows.

        Raises:
            StoreUnavailableError: If PostgREST rejects the query or the
                HTTP round trip fails.
        """
        try:
            result = query.execute()
        except (APIError, httpx.HTTPError) as e:
            logger.error(f"Store call failed during {operation} on {self._table_name}: {e}")
            raise StoreUnavailableError(operation, str(e)) from e
        return result.data or []
