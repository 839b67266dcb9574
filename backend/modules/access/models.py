"""
Access gate data models.

AccessOutcome is produced fresh for every request and never persisted.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from shared.models import AuthenticatedUser
from modules.sharing.models import Role


class ProfileRequirement(BaseModel):
    """Profile the request targets and the role it needs."""

    model_config = {"frozen": True}

    id: Optional[str] = None
    required_role: Optional[Role] = None


class AccessOptions(BaseModel):
    """
    Per-endpoint access options.

    ``public`` endpoints must never reach the gate; the binding layer skips
    it for them.
    """

    model_config = {"frozen": True}

    public: bool = False
    require_device: bool = True
    enforce_device_limit: bool = True
    device_limit_free: Optional[int] = Field(
        None,
        ge=0,
        description="Free-tier device limit; None uses the configured default",
    )
    profile: Optional[ProfileRequirement] = None


class GateRequest(BaseModel):
    """
    The parts of an inbound request the gate reads.

    ``claims`` were verified upstream; the gate trusts them as-is.
    """

    claims: dict[str, Any] = Field(default_factory=dict)
    headers: dict[str, str] = Field(default_factory=dict)


class SubscriptionOutcome(BaseModel):
    model_config = {"frozen": True}

    active: bool


class DeviceOutcome(BaseModel):
    model_config = {"frozen": True}

    id: str
    registered: bool
    allowed: bool
    limit_applied: bool


class ProfileOutcome(BaseModel):
    model_config = {"frozen": True}

    id: str
    authorized_role: Optional[Role] = None


class AccessOutcome(BaseModel):
    """Everything the gate established about the request."""

    model_config = {"frozen": True}

    user: AuthenticatedUser
    subscription: SubscriptionOutcome
    device: Optional[DeviceOutcome] = None
    profile: Optional[ProfileOutcome] = None
