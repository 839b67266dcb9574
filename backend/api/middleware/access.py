"""
Access gate binding for FastAPI routes.

Each protected route declares its access options through require_access();
the dependency builds a GateRequest from the verified claims and headers
and returns the AccessOutcome.
"""

from typing import Any, Optional

from fastapi import Depends, Request

from modules.access.interfaces import IAccessGate
from modules.access.models import AccessOptions, AccessOutcome, GateRequest, ProfileRequirement
from modules.sharing.models import Role

from ..dependencies import get_access_gate
from .auth import get_verified_claims

# Paths that must be reachable right after login, before the device row exists.
DEVICE_ALLOWLIST: frozenset[str] = frozenset({"/api/auth/complete-login"})


def require_access(
    *,
    public: bool = False,
    require_device: bool = True,
    enforce_device_limit: bool = True,
    device_limit_free: Optional[int] = None,
    profile_param: Optional[str] = None,
    required_role: Optional[Role] = None,
):
    """
    Build a dependency that runs the access gate.

    Args:
        public: Skip the gate entirely (no identity, device or subscription checks)
        require_device: Require the device ID header
        enforce_device_limit: Apply the free-tier device policy
        device_limit_free: Override the configured free-tier limit
        profile_param: Path parameter holding the target profile ID
        required_role: Role required on that profile

    Usage:
        @router.get("/{profile_id}/records")
        async def records(
            outcome: AccessOutcome = Depends(
                require_access(profile_param="profile_id", required_role=Role.VIEWER)
            ),
        ): ...
    """
    options = AccessOptions(
        public=public,
        require_device=require_device,
        enforce_device_limit=enforce_device_limit,
        device_limit_free=device_limit_free,
    )

    if public:

        async def public_dependency() -> None:
            return None

        return public_dependency

    async def dependency(
        request: Request,
        claims: dict[str, Any] = Depends(get_verified_claims),
        gate: IAccessGate = Depends(get_access_gate),
    ) -> AccessOutcome:
        effective = options
        # Matched route template, independent of any root_path the app is mounted under
        route = request.scope.get("route")
        route_path = route.path if route is not None else request.url.path
        if route_path in DEVICE_ALLOWLIST:
            effective = effective.model_copy(
                update={"require_device": False, "enforce_device_limit": False}
            )
        if profile_param is not None:
            effective = effective.model_copy(
                update={
                    "profile": ProfileRequirement(
                        id=request.path_params.get(profile_param),
                        required_role=required_role,
                    )
                }
            )

        gate_request = GateRequest(claims=claims, headers=dict(request.headers))
        return await gate.enforce(gate_request, effective)

    return dependency
