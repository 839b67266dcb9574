"""
Subscription endpoints.
"""

from fastapi import APIRouter, Depends

from modules.access.models import AccessOutcome
from modules.subscriptions.exceptions import SubscriptionNotFoundError
from modules.subscriptions.interfaces import ISubscriptionService
from modules.subscriptions.models import SubscriptionSnapshot
from ..dependencies import get_subscription_service
from ..middleware.access import require_access

router = APIRouter()


@router.get("/current", response_model=SubscriptionSnapshot)
async def get_current_subscription(
    outcome: AccessOutcome = Depends(require_access()),
    service: ISubscriptionService = Depends(get_subscription_service),
) -> SubscriptionSnapshot:
    """
    Get the caller's newest active subscription.

    Returns 404 SUBSCRIPTION_NOT_FOUND when there is none.
    """
    snapshot = await service.get_current(outcome.user.id)
    if snapshot is None:
        raise SubscriptionNotFoundError(outcome.user.id)
    return snapshot
