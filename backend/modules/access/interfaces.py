"""
Access gate interface.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import AccessOptions, AccessOutcome, GateRequest


@runtime_checkable
class IAccessGate(Protocol):
    """Per-request authorization entry point."""

    async def enforce(
        self,
        request: GateRequest,
        options: Optional[AccessOptions] = None,
    ) -> AccessOutcome:
        """
        Authorize one request.

        Args:
            request: Verified claims and request headers
            options: Endpoint access options (defaults require a device)

        Returns:
            AccessOutcome for the request handler

        Raises:
            UnauthorizedError: No identity in the claims (401)
            DeviceRequiredError: Device header missing (400)
            DeviceNotRegisteredError: Device never registered at login (403)
            DeviceLimitExceededError: Unregistered device over the free limit (403)
            ForbiddenError: Profile role insufficient or device denied (403)
            StoreUnavailableError: A lookup failed (503)
            AccessGateMisuseError: Called with ``public=True``
        """
        ...
