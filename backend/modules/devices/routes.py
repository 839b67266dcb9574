"""
Device management endpoints.

Lets a user see the devices signed in to their account, refresh the
calling device's metadata and sign other devices out.
"""

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_device_registry
from api.middleware.access import require_access
from modules.access.models import AccessOutcome
from shared.config import get_settings

from .exceptions import DeviceIdMismatchError
from .interfaces import IDeviceRegistry
from .models import DeviceInfo, DeviceRegistration, UpdateDeviceRequest

router = APIRouter()


@router.get("", response_model=list[DeviceRegistration])
async def list_devices(
    outcome: AccessOutcome = Depends(require_access()),
    registry: IDeviceRegistry = Depends(get_device_registry),
) -> list[DeviceRegistration]:
    """
    List the current user's registered devices, most recently seen first.
    """
    return await registry.list_devices(outcome.user.id)


@router.put("/current", response_model=DeviceRegistration)
async def update_current_device(
    body: UpdateDeviceRequest,
    request: Request,
    outcome: AccessOutcome = Depends(require_access()),
    registry: IDeviceRegistry = Depends(get_device_registry),
) -> DeviceRegistration:
    """
    Refresh metadata of the calling device.

    The device header must name the same device as the body.
    """
    header_device_id = request.headers.get(get_settings().device_id_header)
    if not header_device_id or header_device_id != body.device_id:
        raise DeviceIdMismatchError()

    info = DeviceInfo.model_validate(body.model_dump(exclude={"device_id"}))
    return await registry.update_metadata(outcome.user.id, body.device_id, info)


@router.delete("/{device_id}", status_code=204)
async def revoke_device(
    device_id: str,
    outcome: AccessOutcome = Depends(require_access()),
    registry: IDeviceRegistry = Depends(get_device_registry),
) -> None:
    """
    Sign a device out of the current user's account.

    Returns 403 NOT_DEVICE_OWNER for devices of other accounts.
    """
    await registry.revoke(outcome.user.id, device_id)
