"""
Access gate orchestration.

Steps run in a fixed order because later ones depend on earlier results:
identity, subscription status, device check, profile role.
"""

import logging
from typing import Optional

from shared.config import Settings, get_settings
from modules.auth.claims import extract_identity, get_header, parse_device_info
from modules.devices.exceptions import (
    DeviceLimitExceededError,
    DeviceNotRegisteredError,
    DeviceRequiredError,
)
from modules.devices.interfaces import IDeviceRegistry
from modules.sharing.interfaces import IProfileRoleResolver
from modules.subscriptions.interfaces import ISubscriptionService

from .exceptions import AccessGateMisuseError, ForbiddenError
from .interfaces import IAccessGate
from .models import (
    AccessOptions,
    AccessOutcome,
    DeviceOutcome,
    GateRequest,
    ProfileOutcome,
    SubscriptionOutcome,
)

logger = logging.getLogger(__name__)


class AccessGate(IAccessGate):
    """
    Implementation of the per-request access gate.

    The gate only ever refreshes device registrations; creating them and
    evicting other devices happens at login (see modules.auth.service).
    """

    def __init__(
        self,
        subscriptions: ISubscriptionService,
        devices: IDeviceRegistry,
        roles: IProfileRoleResolver,
        settings: Optional[Settings] = None,
    ):
        self._subscriptions = subscriptions
        self._devices = devices
        self._roles = roles
        self._settings = settings or get_settings()

    async def enforce(
        self,
        request: GateRequest,
        options: Optional[AccessOptions] = None,
    ) -> AccessOutcome:
        options = options or AccessOptions()
        if options.public:
            raise AccessGateMisuseError()

        user = extract_identity(request.claims)
        subscription_active = await self._subscriptions.is_active(user.id)

        device: Optional[DeviceOutcome] = None
        if options.require_device or options.enforce_device_limit:
            device = await self._check_device(request, options, user.id, subscription_active)

        profile: Optional[ProfileOutcome] = None
        requirement = options.profile
        if requirement is not None and requirement.id:
            if requirement.required_role is not None:
                allowed = await self._roles.resolve(
                    user.id,
                    user.email,
                    requirement.id,
                    requirement.required_role,
                )
                if not allowed:
                    logger.warning(
                        f"User {user.id} lacks {requirement.required_role.value} "
                        f"on profile {requirement.id}"
                    )
                    raise ForbiddenError(
                        "Insufficient permission for profile.",
                        profile_id=requirement.id,
                        required_role=requirement.required_role.value,
                    )
            profile = ProfileOutcome(id=requirement.id, authorized_role=requirement.required_role)

        return AccessOutcome(
            user=user,
            subscription=SubscriptionOutcome(active=subscription_active),
            device=device,
            profile=profile,
        )

    async def _check_device(
        self,
        request: GateRequest,
        options: AccessOptions,
        user_id: str,
        subscribed: bool,
    ) -> DeviceOutcome:
        device_id = get_header(request.headers, self._settings.device_id_header)
        if not device_id:
            raise DeviceRequiredError()

        meta = parse_device_info(get_header(request.headers, self._settings.device_info_header))
        limit = (
            options.device_limit_free
            if options.device_limit_free is not None
            else self._settings.device_limit_free
        )

        result = await self._devices.refresh(user_id, device_id, subscribed, limit, meta)
        if not result.registered:
            if result.limit_applied:
                raise DeviceLimitExceededError(limit=limit)
            raise DeviceNotRegisteredError(device_id)
        if not result.allowed:
            raise ForbiddenError()

        return DeviceOutcome(
            id=device_id,
            registered=result.registered,
            allowed=result.allowed,
            limit_applied=result.limit_applied,
        )

