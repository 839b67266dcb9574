"""
User-related endpoints.

Provides the caller's own account overview.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from modules.access.models import AccessOutcome
from ..middleware.access import require_access

router = APIRouter()


class UserOverviewResponse(BaseModel):
    """Account overview as established by the access gate."""

    id: str
    email: str
    subscription_active: bool
    device_id: Optional[str] = None
    device_limit_reached: bool = False


@router.get("/me", response_model=UserOverviewResponse)
async def get_current_user_overview(
    outcome: AccessOutcome = Depends(require_access()),
) -> UserOverviewResponse:
    """
    Get the current user's overview.

    Requires authentication and a registered device.
    """
    return UserOverviewResponse(
        id=outcome.user.id,
        email=outcome.user.email,
        subscription_active=outcome.subscription.active,
        device_id=outcome.device.id if outcome.device else None,
        device_limit_reached=outcome.device.limit_applied if outcome.device else False,
    )
