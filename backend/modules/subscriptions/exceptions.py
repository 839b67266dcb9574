"""
Subscription module exceptions.
"""

from shared.exceptions import NotFoundError


class SubscriptionNotFoundError(NotFoundError):
    """Raised when a user has no active subscription."""

    def __init__(self, user_id: str):
        super().__init__(
            "No active subscription found.",
            code="SUBSCRIPTION_NOT_FOUND",
            details={"user_id": user_id},
        )
