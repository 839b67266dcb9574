"""
Sharing module interfaces.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import Role, ShareGrant


@runtime_checkable
class IProfileOwnerStore(Protocol):
    """Lookup of profile ownership."""

    def get_profile_owner(self, profile_id: str) -> Optional[str]:
        """Return the owning account ID, or None if the profile does not exist."""
        ...


@runtime_checkable
class IShareStore(Protocol):
    """Lookup of accepted share grants."""

    def find_accepted_share(self, profile_id: str, invitee_email: str) -> Optional[ShareGrant]:
        """Return an ACCEPTED grant for the (profile, email) pair, if any."""
        ...


@runtime_checkable
class IProfileRoleResolver(Protocol):
    """Interface for profile role checks."""

    async def resolve(
        self,
        user_id: str,
        user_email: str,
        profile_id: str,
        required_role: Role,
    ) -> bool:
        """
        Check whether the account holds at least ``required_role`` on the profile.

        Ownership satisfies every role. A share grant satisfies Viewer or
        Editor according to its role and never satisfies Owner.
        """
        ...

    async def effective_role(
        self,
        user_id: str,
        user_email: str,
        profile_id: str,
    ) -> Optional[Role]:
        """Return the strongest role the account holds, or None."""
        ...
