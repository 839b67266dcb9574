"""
Identity and header extraction.

Claims arrive already verified by an upstream token verifier; nothing here
checks signatures.
"""

import json
import logging
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from shared.models import AuthenticatedUser
from modules.devices.models import DeviceInfo

from .exceptions import UnauthorizedError

logger = logging.getLogger(__name__)


def extract_identity(claims: Optional[Mapping[str, Any]]) -> AuthenticatedUser:
    """
    Build the caller identity from a trusted claim set.

    Args:
        claims: Verified token claims (``sub``, ``email``, ...)

    Returns:
        AuthenticatedUser with a lowercase email (empty if absent)

    Raises:
        UnauthorizedError: If the claims carry no subject
    """
    claims = claims or {}
    subject = claims.get("sub") or claims.get("cognito:username")
    if subject is None or not str(subject).strip():
        raise UnauthorizedError()

    return AuthenticatedUser(id=str(subject).strip(), email=str(claims.get("email") or ""))


def get_header(headers: Optional[Mapping[str, str]], name: str) -> Optional[str]:
    """Case-insensitive header lookup. Blank values count as absent."""
    if not headers:
        return None
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            value = (value or "").strip()
            return value or None
    return None


def parse_device_info(raw: Optional[str]) -> Optional[DeviceInfo]:
    """
    Parse the JSON device-info header.

    Metadata is optional, so anything unparseable is dropped rather than
    failing the request.
    """
    if not raw:
        return None
    try:
        data = json.loads(raw)
        if not isinstance(data, dict):
            return None
        return DeviceInfo.model_validate(data)
    except (ValueError, ValidationError):
        logger.debug("Ignoring malformed device info header")
        return None
