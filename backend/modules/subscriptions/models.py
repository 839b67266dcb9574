"""
Subscription module data models.

A user may have several historical snapshots; superseded ones are flipped
to inactive rather than deleted, so lookups filter by status.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class SubscriptionStatus(str, Enum):
    """Lifecycle status of a subscription snapshot."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    TRIALING = "trialing"
    CANCELED = "canceled"  # Canceled, still paid until period end


class SubscriptionSnapshot(BaseModel):
    """
    One subscription record for a user.

    Only the existence of an "active" snapshot grants paid-tier privileges.
    """

    user_id: str = Field(..., description="Owning account ID")
    status: SubscriptionStatus = Field(..., description="Snapshot status")
    created_at: datetime = Field(..., description="When the subscription was created")
    updated_at: Optional[datetime] = Field(None, description="Last status change")
    plan_id: Optional[str] = Field(None, description="Purchased plan identifier")
    cancel_at_period_end: bool = Field(
        default=False,
        description="Whether the subscription ends with the current period",
    )
