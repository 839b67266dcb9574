"""
Subscription service implementation.

Answers "does this account currently have paid-tier privileges".
"""

import logging
from typing import Optional

from .interfaces import ISubscriptionService, ISubscriptionStore
from .models import SubscriptionSnapshot, SubscriptionStatus

logger = logging.getLogger(__name__)


class SubscriptionService(ISubscriptionService):
    """Subscription lookups backed by an ISubscriptionStore."""

    def __init__(self, store: ISubscriptionStore):
        self._store = store

    async def is_active(self, user_id: str, include_trialing: bool = False) -> bool:
        """Check for at least one qualifying snapshot."""
        statuses = [SubscriptionStatus.ACTIVE]
        if include_trialing:
            statuses.append(SubscriptionStatus.TRIALING)

        snapshots = self._store.list_snapshots(user_id, statuses)
        active = any(s.status in statuses for s in snapshots)
        logger.debug(f"Subscription check for {user_id}: active={active}")
        return active

    async def get_current(self, user_id: str) -> Optional[SubscriptionSnapshot]:
        """Get the newest active snapshot."""
        snapshots = self._store.list_snapshots(user_id, [SubscriptionStatus.ACTIVE])
        return snapshots[0] if snapshots else None

