"""
Sharing module.

Resolves a caller's role on a family member profile.

Public API:
- IProfileRoleResolver: Interface for role checks
- Role, ShareStatus, ShareGrant: Data models
"""

from .interfaces import IProfileOwnerStore, IProfileRoleResolver, IShareStore
from .models import Role, ShareGrant, ShareStatus

__all__ = [
    # Interfaces
    "IProfileOwnerStore",
    "IProfileRoleResolver",
    "IShareStore",
    # Models
    "Role",
    "ShareGrant",
    "ShareStatus",
]
