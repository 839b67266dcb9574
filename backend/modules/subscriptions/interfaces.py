"""
Subscription module interfaces.

The access gate depends on ISubscriptionService to decide whether the
free-tier device limit applies. The service depends on ISubscriptionStore,
which the Supabase repository implements and tests replace with fakes.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import SubscriptionSnapshot, SubscriptionStatus


@runtime_checkable
class ISubscriptionStore(Protocol):
    """Read access to subscription snapshots."""

    def list_snapshots(
        self,
        user_id: str,
        statuses: Optional[list[SubscriptionStatus]] = None,
    ) -> list[SubscriptionSnapshot]:
        """
        List a user's snapshots, newest first.

        Args:
            user_id: Account ID
            statuses: Optional status filter; None returns every snapshot

        Raises:
            StoreUnavailableError: If the store cannot be queried
        """
        ...


@runtime_checkable
class ISubscriptionService(Protocol):
    """Interface for subscription status lookups."""

    async def is_active(self, user_id: str, include_trialing: bool = False) -> bool:
        """
        Check whether the user currently has paid-tier privileges.

        Args:
            user_id: Account ID
            include_trialing: Also count "trialing" snapshots as active

        Returns:
            True if at least one qualifying snapshot exists
        """
        ...

    async def get_current(self, user_id: str) -> Optional[SubscriptionSnapshot]:
        """
        Get the newest active snapshot, or None if there is none.
        """
        ...
