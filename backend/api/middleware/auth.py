"""
JWT verification middleware.

Verifies Supabase JWT tokens and hands the verified claim set to the access
gate. This is the only place signatures are checked.
"""

import hmac
from typing import Any, Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, ExpiredSignatureError, JWTError

from modules.auth.exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
)
from modules.auth.models import TokenPayload
from ..config import get_settings

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def decode_token(token: str) -> TokenPayload:
    """
    Decode and validate a Supabase JWT token.

    Args:
        token: The JWT token string

    Returns:
        TokenPayload with the decoded claims

    Raises:
        InvalidTokenError: If token is invalid or verification is not configured
        ExpiredTokenError: If token has expired
    """
    settings = get_settings()

    if not settings.supabase_jwt_secret:
        raise InvalidTokenError("Server authentication not configured")

    try:
        payload = jwt.decode(
            token,
            settings.supabase_jwt_secret,
            algorithms=["HS256"],
            audience=settings.jwt_audience,
        )
        return TokenPayload(**payload)
    except ExpiredSignatureError:
        raise ExpiredTokenError("Token has expired")
    except JWTError as e:
        raise InvalidTokenError(f"Invalid token: {str(e)}")


async def get_verified_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> dict[str, Any]:
    """
    Dependency that requires a valid bearer token.

    Returns the verified claim set for the access gate.
    """
    if credentials is None:
        raise MissingTokenError("Missing authorization header")

    payload = decode_token(credentials.credentials)
    return payload.model_dump(exclude_none=True)


async def require_hook_secret(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> None:
    """
    Dependency for identity-provider hooks.

    The provider presents a shared secret instead of a user token.
    """
    secret = get_settings().auth_hook_secret
    if credentials is None:
        raise MissingTokenError("Missing authorization header")
    if not secret or not hmac.compare_digest(credentials.credentials, secret):
        raise InvalidTokenError("Invalid hook secret")
