"""
Subscription repository for database access.

Encapsulates Supabase queries against the subscriptions table.
"""

from typing import Any, Optional


from shared.config import get_settings
from shared.database import get_supabase_client
from shared.repository import BaseRepository
from .models import SubscriptionSnapshot, SubscriptionStatus


class SubscriptionRepository(BaseRepository[SubscriptionSnapshot]):
    """
    Repository for subscription snapshots.

    Read-only from the gate's point of view; snapshots are written by the
    purchase flow.
    """

    def list_snapshots(
        self,
        user_id: str,
        statuses: Optional[list[SubscriptionStatus]] = None,
    ) -> list[SubscriptionSnapshot]:
        """List a user's snapshots, newest first, optionally filtered by status."""
        query = self._table().select("*").eq("user_id", user_id)
        if statuses:
            query = query.in_("status", [s.value for s in statuses])
        rows = self._execute(query.order("created_at", desc=True), "list subscriptions")
        return [self._map_to_snapshot(row) for row in rows]

    def _map_to_snapshot(self, data: dict[str, Any]) -> SubscriptionSnapshot:
        return SubscriptionSnapshot(
            user_id=data["user_id"],
            status=SubscriptionStatus(data["status"]),
            created_at=data["created_at"],
            updated_at=data.get("updated_at"),
            plan_id=data.get("plan_id"),
            cancel_at_period_end=bool(data.get("cancel_at_period_end", False)),
        )


# Module-level instance management
_repository_instance: Optional[SubscriptionRepository] = None


def get_subscription_repository() -> SubscriptionRepository:
    """Get the subscription repository singleton."""
    global _repository_instance
    if _repository_instance is None:
        _repository_instance = SubscriptionRepository(
            get_supabase_client(),
            get_settings().subscriptions_table,
        )
    return _repository_instance


def reset_subscription_repository() -> None:
    """Reset the repository singleton (for testing)."""
    global _repository_instance
    _repository_instance = None
