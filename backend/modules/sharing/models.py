"""
Sharing module data models.

A share grant delegates Viewer or Editor access on one profile to another
account, matched by email.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class Role(str, Enum):
    """Profile access roles. Editor implies Viewer; Owner is never granted."""

    VIEWER = "Viewer"
    EDITOR = "Editor"
    OWNER = "Owner"


class ShareStatus(str, Enum):
    """Invite lifecycle."""

    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"


# Roles a grant may hold that satisfy each required role.
SATISFIED_BY: dict[Role, frozenset[Role]] = {
    Role.VIEWER: frozenset({Role.VIEWER, Role.EDITOR}),
    Role.EDITOR: frozenset({Role.EDITOR}),
    Role.OWNER: frozenset(),
}


class ShareGrant(BaseModel):
    """A stored share invite."""

    share_id: str = Field(..., description="Share ID")
    profile_id: str = Field(..., description="Shared profile")
    owner_id: str = Field(..., description="Profile owner account")
    owner_email: Optional[str] = Field(None, description="Profile owner email")
    invitee_email: str = Field(..., description="Invited email, lowercase")
    invitee_id: Optional[str] = Field(
        None,
        description="Invitee account, resolved once the invitee is known",
    )
    role: Role = Field(..., description="Granted role (Viewer or Editor)")
    status: ShareStatus = Field(..., description="Invite status")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("invitee_email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()

    def grants(self, required_role: Role) -> bool:
        """Whether this grant satisfies ``required_role``."""
        return self.role in SATISFIED_BY[required_role]


class ProfileRoleResponse(BaseModel):
    """The caller's effective role on a profile."""

    profile_id: str
    role: Role
