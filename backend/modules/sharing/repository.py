"""
Profile and share repositories for database access.

Only the two lookups the role check needs live here; profile and share CRUD
are handled elsewhere.
"""

from typing import Any, Optional

from shared.config import get_settings
from shared.database import get_supabase_client
from shared.repository import BaseRepository
from .models import Role, ShareGrant, ShareStatus


class ProfileRepository(BaseRepository[str]):
    """Repository for profile ownership lookups."""

    def get_profile_owner(self, profile_id: str) -> Optional[str]:
        query = self._table().select("user_id").eq("profile_id", profile_id)
        rows = self._execute(query, "get profile owner")
        return rows[0].get("user_id") if rows else None


class ShareRepository(BaseRepository[ShareGrant]):
    """
    Repository for share invites.

    Invitee emails are stored lowercase, so an exact match on the
    lowercased caller email is a case-insensitive match.
    """

    def find_accepted_share(self, profile_id: str, invitee_email: str) -> Optional[ShareGrant]:
        query = (
            self._table()
            .select("*")
            .eq("profile_id", profile_id)
            .eq("invitee_email", invitee_email.strip().lower())
            .eq("status", ShareStatus.ACCEPTED.value)
            .limit(1)
        )
        rows = self._execute(query, "find accepted share")
        return self._map_to_grant(rows[0]) if rows else None

    def _map_to_grant(self, data: dict[str, Any]) -> ShareGrant:
        return ShareGrant(
            share_id=data["share_id"],
            profile_id=data["profile_id"],
            owner_id=data["owner_id"],
            owner_email=data.get("owner_email"),
            invitee_email=data["invitee_email"],
            invitee_id=data.get("invitee_id"),
            role=Role(data["role"]),
            status=ShareStatus(data["status"]),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )


# Module-level instance management
_profile_repository: Optional[ProfileRepository] = None
_share_repository: Optional[ShareRepository] = None


def get_profile_repository() -> ProfileRepository:
    """Get the profile repository singleton."""
    global _profile_repository
    if _profile_repository is None:
        _profile_repository = ProfileRepository(
            get_supabase_client(),
            get_settings().profiles_table,
        )
    return _profile_repository


def get_share_repository() -> ShareRepository:
    """Get the share repository singleton."""
    global _share_repository
    if _share_repository is None:
        _share_repository = ShareRepository(
            get_supabase_client(),
            get_settings().share_invites_table,
        )
    return _share_repository


def reset_sharing_repositories() -> None:
    """Reset the repository singletons (for testing)."""
    global _profile_repository, _share_repository
    _profile_repository = None
    _share_repository = None
