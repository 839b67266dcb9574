"""
API configuration using Pydantic Settings.

Loads configuration from environment variables with sensible defaults.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """API configuration settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FHR_",
        case_sensitive=False,
        extra="ignore",
    )

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Token verification (upstream of the access gate)
    supabase_jwt_secret: str = ""
    jwt_audience: str = "authenticated"

    # Shared secret the identity provider presents when calling auth hooks
    auth_hook_secret: str = ""

    # Direct Postgres connection for run_migrations.py
    supabase_db_url: str = ""


@lru_cache
def get_settings() -> APISettings:
    """Get cached settings instance."""
    return APISettings()
