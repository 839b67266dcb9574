"""
Profile role resolution.

Combines direct ownership with accepted share grants.
"""

from typing import Optional

from .interfaces import IProfileOwnerStore, IProfileRoleResolver, IShareStore
from .models import Role


class ProfileRoleResolver(IProfileRoleResolver):
    """Role checks backed by profile and share stores."""

    def __init__(self, profiles: IProfileOwnerStore, shares: IShareStore):
        self._profiles = profiles
        self._shares = shares

    async def resolve(
        self,
        user_id: str,
        user_email: str,
        profile_id: str,
        required_role: Role,
    ) -> bool:
        # Ownership trumps sharing
        if self._profiles.get_profile_owner(profile_id) == user_id:
            return True

        if not user_email:
            return False

        grant = self._shares.find_accepted_share(profile_id, user_email)
        if grant is None:
            return False
        return grant.grants(required_role)

    async def effective_role(
        self,
        user_id: str,
        user_email: str,
        profile_id: str,
    ) -> Optional[Role]:
        if self._profiles.get_profile_owner(profile_id) == user_id:
            return Role.OWNER
        if not user_email:
            return None

        grant = self._shares.find_accepted_share(profile_id, user_email)
        return grant.role if grant is not None else None

