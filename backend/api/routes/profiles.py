"""
Profile access endpoints.
"""

from fastapi import APIRouter, Depends

from modules.access.exceptions import ForbiddenError
from modules.access.models import AccessOutcome
from modules.sharing.interfaces import IProfileRoleResolver
from modules.sharing.models import ProfileRoleResponse, Role
from ..dependencies import get_profile_role_resolver
from ..middleware.access import require_access

router = APIRouter()


@router.get("/{profile_id}/role", response_model=ProfileRoleResponse)
async def get_profile_role(
    profile_id: str,
    outcome: AccessOutcome = Depends(
        require_access(profile_param="profile_id", required_role=Role.VIEWER)
    ),
    resolver: IProfileRoleResolver = Depends(get_profile_role_resolver),
) -> ProfileRoleResponse:
    """
    Get the caller's role on a profile (Owner, Editor or Viewer).

    The UI uses it to decide which controls to show.
    """
    role = await resolver.effective_role(outcome.user.id, outcome.user.email, profile_id)
    if role is None:
        raise ForbiddenError("Insufficient permission for profile.", profile_id=profile_id)
    return ProfileRoleResponse(profile_id=profile_id, role=role)
