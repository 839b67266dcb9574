"""
Centralized configuration for the family health records backend.

All settings are loaded from environment variables with sensible defaults.
Table names default to the names created by the SQL migrations.
"""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Family Health Records API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    store_timeout_seconds: float = Field(default=5.0, gt=0)

    # Tables
    devices_table: str = "devices"
    subscriptions_table: str = "subscriptions"
    profiles_table: str = "profiles"
    share_invites_table: str = "share_invites"

    # Device policy
    device_limit_free: int = Field(default=1, ge=0)
    allow_device_takeover: bool = False
    device_id_header: str = "x-device-id"
    device_info_header: str = "x-device-info"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
