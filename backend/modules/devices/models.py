"""
Device module data models.

A device registration binds one client-generated device ID to one account.
Descriptive metadata is best effort: clients send whatever they can detect.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DeviceInfo(BaseModel):
    """
    Descriptive metadata a client reports about itself.

    Accepts the camelCase keys the web client sends (``osName``,
    ``browserVersion``, ...) as well as snake_case.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
        frozen=True,
    )

    device_type: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("deviceType", "deviceClass", "device_type"),
    )
    device_name: Optional[str] = None
    os_name: Optional[str] = None
    os_version: Optional[str] = None
    browser_name: Optional[str] = None
    browser_version: Optional[str] = None
    locale: Optional[str] = None
    time_zone: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("timeZone", "timezone", "time_zone"),
    )
    country: Optional[str] = None
    city: Optional[str] = None

    def to_store_fields(self) -> dict[str, str]:
        """Return only the non-empty metadata fields, keyed by column name."""
        data = self.model_dump(include=set(DeviceInfo.model_fields))
        return {name: value for name, value in data.items() if value is not None and value != ""}


class DeviceRegistration(BaseModel):
    """A stored device row."""

    device_id: str = Field(..., description="Client-generated device ID")
    user_id: str = Field(..., description="Owning account ID")
    last_seen: Optional[datetime] = Field(None, description="Last authenticated request")

    device_type: Optional[str] = None
    device_name: Optional[str] = None
    os_name: Optional[str] = None
    os_version: Optional[str] = None
    browser_name: Optional[str] = None
    browser_version: Optional[str] = None
    locale: Optional[str] = None
    time_zone: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None

    @classmethod
    def from_row(cls, data: dict[str, Any]) -> "DeviceRegistration":
        known = {k: v for k, v in data.items() if k in cls.model_fields}
        return cls(**known)


class DeviceCheckResult(BaseModel):
    """
    Outcome of one device-limit policy evaluation.

    ``limit_applied`` reports whether the free-tier limit was reached for an
    unsubscribed account. On a denial it explains the denial; on an allowed,
    already-registered device it is informational only.
    """

    model_config = {"frozen": True}

    registered: bool
    allowed: bool
    limit_applied: bool
    evicted: list[str] = Field(default_factory=list, description="Device IDs removed")


class CompleteLoginRequest(BaseModel):
    """Body of the post-login device registration call."""

    model_config = ConfigDict(populate_by_name=True)

    device_id: str = Field(..., min_length=1, alias="deviceId")
    kick_previous: bool = Field(default=False, alias="kickPrevious")
    meta: Optional[DeviceInfo] = None


class UpdateDeviceRequest(DeviceInfo):
    """Body of a metadata refresh for the calling device."""

    device_id: str = Field(..., min_length=1, alias="deviceId")
