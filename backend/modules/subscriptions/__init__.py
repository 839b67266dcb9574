"""
Subscriptions module.

Looks up whether an account has paid-tier privileges.

Public API:
- ISubscriptionService: Interface for subscription lookups
- SubscriptionSnapshot, SubscriptionStatus: Data models
- SubscriptionNotFoundError: Raised when no active subscription exists
"""

from .interfaces import ISubscriptionService, ISubscriptionStore
from .models import SubscriptionSnapshot, SubscriptionStatus
from .exceptions import SubscriptionNotFoundError

__all__ = [
    # Interfaces
    "ISubscriptionService",
    "ISubscriptionStore",
    # Models
    "SubscriptionSnapshot",
    "SubscriptionStatus",
    # Exceptions
    "SubscriptionNotFoundError",
]
