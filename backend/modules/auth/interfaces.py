"""
Authentication module interface.

Both login-time entry points register the signing-in device with the
Device Registry Enforcer in its registration-capable mode.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser
from modules.devices.models import CompleteLoginRequest

from .models import CompleteLoginResponse, PreAuthenticationEvent


@runtime_checkable
class ILoginService(Protocol):
    """Interface for login-time device registration."""

    async def handle_pre_authentication(
        self,
        event: PreAuthenticationEvent,
    ) -> PreAuthenticationEvent:
        """
        Run the device-limit policy before the identity provider signs a user in.

        Args:
            event: Pre-authentication trigger event

        Returns:
            The same event, to let sign-in continue

        Raises:
            DeviceLimitExceededError: To abort sign-in
        """
        ...

    async def complete_login(
        self,
        user: AuthenticatedUser,
        request: CompleteLoginRequest,
    ) -> CompleteLoginResponse:
        """
        Register the calling device right after tokens were issued.

        Raises:
            DeviceLimitExceededError: If over the limit without kickPrevious
        """
        ...
