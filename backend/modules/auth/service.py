"""
Login-time device registration.

The pre-authentication hook and the complete-login endpoint are the only
places allowed to create device registrations or evict other devices.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from shared.config import get_settings
from shared.models import AuthenticatedUser
from modules.devices.interfaces import IDeviceRegistry
from modules.devices.models import CompleteLoginRequest, DeviceInfo
from modules.subscriptions.interfaces import ISubscriptionService

from .interfaces import ILoginService
from .models import CompleteLoginResponse, PreAuthenticationEvent

logger = logging.getLogger(__name__)

PASSWORD_AUTH_TRIGGER = "PreAuthentication_Authentication"


class LoginService(ILoginService):
    """
    Implementation of login-time device registration.

    Args:
        devices: Device Registry Enforcer
        subscriptions: Subscription lookups
        device_limit: Free-tier device limit; defaults to settings
    """

    def __init__(
        self,
        devices: IDeviceRegistry,
        subscriptions: ISubscriptionService,
        device_limit: Optional[int] = None,
    ):
        self._devices = devices
        self._subscriptions = subscriptions
        self._device_limit = (
            device_limit if device_limit is not None else get_settings().device_limit_free
        )

    async def handle_pre_authentication(
        self,
        event: PreAuthenticationEvent,
    ) -> PreAuthenticationEvent:
        if event.trigger_source != PASSWORD_AUTH_TRIGGER:
            logger.info(f"Skipping device checks for trigger {event.trigger_source}")
            return event

        user_id = event.user_name
        metadata = event.request.client_metadata or {}
        device_id = (metadata.get("deviceId") or "").strip()
        kick_previous = str(metadata.get("kickPrevious")).lower() == "true"

        if not device_id:
            # complete-login registers the device once tokens are issued
            logger.warning(f"deviceId missing from client metadata for {user_id}; allowing login")
            return event

        subscribed = await self._subscriptions.is_active(user_id)
        await self._devices.register(
            user_id,
            device_id,
            subscribed,
            self._device_limit,
            allow_eviction=kick_previous,
            meta=self._metadata_from_client(metadata),
        )
        return event

    async def complete_login(
        self,
        user: AuthenticatedUser,
        request: CompleteLoginRequest,
    ) -> CompleteLoginResponse:
        device_id = request.device_id.strip()
        subscribed = await self._subscriptions.is_active(user.id)
        result = await self._devices.register(
            user.id,
            device_id,
            subscribed,
            self._device_limit,
            allow_eviction=request.kick_previous,
            meta=request.meta,
        )
        return CompleteLoginResponse(device_id=device_id, evicted=result.evicted)

    @staticmethod
    def _metadata_from_client(metadata: dict[str, str]) -> Optional[DeviceInfo]:
        try:
            return DeviceInfo.model_validate(metadata)
        except ValidationError:
            return None

