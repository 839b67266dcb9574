"""
Health check endpoints.

Public: these never reach the access gate.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from shared.config import get_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check() -> ReadinessResponse:
    """
    Readiness check endpoint.

    Reports whether the document store is configured; it does not issue a
    query.
    """
    settings = get_settings()
    configured = bool(settings.supabase_url and settings.supabase_service_role_key)
    return ReadinessResponse(
        status="ready" if configured else "degraded",
        database="configured" if configured else "not_configured",
    )
