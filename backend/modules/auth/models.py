"""
Authentication module data models.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TokenPayload(BaseModel):
    """
    Decoded JWT payload.

    Only ``sub`` and ``email`` matter to the access gate; everything else is
    kept so the raw claim set can be handed on unchanged.
    """

    model_config = ConfigDict(extra="allow")

    sub: Optional[str] = None
    email: Optional[str] = None
    aud: Optional[str] = None
    exp: Optional[int] = None
    iat: Optional[int] = None


class PreAuthenticationRequest(BaseModel):
    """
    Request part of an identity-provider pre-authentication event.

    Fields other than clientMetadata (userAttributes, validationData, ...)
    are kept so the event goes back to the provider as it came in.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    client_metadata: Optional[dict[str, str]] = Field(default=None, alias="clientMetadata")


class PreAuthenticationEvent(BaseModel):
    """
    Event passed to the pre-authentication hook.

    Mirrors the identity provider's trigger payload; the hook returns it
    unchanged to let sign-in continue.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    trigger_source: str = Field(..., alias="triggerSource")
    user_name: str = Field(..., alias="userName")
    request: PreAuthenticationRequest = Field(default_factory=PreAuthenticationRequest)


class CompleteLoginResponse(BaseModel):
    """Result of the post-login device registration."""

    ok: bool = True
    device_id: str
    evicted: list[str] = Field(default_factory=list)
