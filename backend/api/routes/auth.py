"""
Login-time endpoints.

complete-login is on the device allowlist: the gate checks identity only,
because the device row does not exist yet.
"""

from fastapi import APIRouter, Depends

from modules.access.models import AccessOutcome
from modules.auth.interfaces import ILoginService
from modules.auth.models import CompleteLoginResponse
from modules.devices.models import CompleteLoginRequest
from ..dependencies import get_login_service
from ..middleware.access import require_access

router = APIRouter()


@router.post("/complete-login", response_model=CompleteLoginResponse)
async def complete_login(
    body: CompleteLoginRequest,
    outcome: AccessOutcome = Depends(require_access()),
    service: ILoginService = Depends(get_login_service),
) -> CompleteLoginResponse:
    """
    Register the calling device after sign-in.

    Free accounts at their device limit get 403 DEVICE_LIMIT_EXCEEDED
    unless ``kickPrevious`` is set, which signs the other devices out.
    """
    return await service.complete_login(outcome.user, body)
