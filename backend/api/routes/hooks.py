"""
Identity-provider hook endpoints.

Called by the identity provider during sign-in, not by clients. Any non-2xx
response aborts the sign-in.
"""

from fastapi import APIRouter, Depends

from modules.auth.interfaces import ILoginService
from modules.auth.models import PreAuthenticationEvent
from ..dependencies import get_login_service
from ..middleware.auth import require_hook_secret

router = APIRouter()


@router.post(
    "/pre-authentication",
    response_model=PreAuthenticationEvent,
    response_model_by_alias=True,
    response_model_exclude_unset=True,
    dependencies=[Depends(require_hook_secret)],
)
async def pre_authentication(
    event: PreAuthenticationEvent,
    service: ILoginService = Depends(get_login_service),
) -> PreAuthenticationEvent:
    """
    Enforce the device limit before a password sign-in completes.
    """
    return await service.handle_pre_authentication(event)
