"""
Supabase client factory.

The access gate reads and writes device, subscription, profile and share
rows on behalf of the caller, so it uses a service-role client that
bypasses RLS. Authorization is decided in code, not by row policies.

Every gated request waits on the store, so the PostgREST timeout is kept
short: a hung store surfaces as STORE_UNAVAILABLE instead of a stalled
request.
"""

from typing import Optional

from supabase import Client, ClientOptions, create_client

from .config import get_settings

_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get the shared service-role Supabase client, creating it on first use.

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset
    """
    global _client

    if _client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
            options=ClientOptions(
                postgrest_client_timeout=settings.store_timeout_seconds,
                auto_refresh_token=False,
                persist_session=False,
            ),
        )

    return _client


def reset_client_cache() -> None:
    """Drop the cached client (tests, or after settings change)."""
    global _client
    _client = None
