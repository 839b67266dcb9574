"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.exceptions import HealthRecordsError
from .config import get_settings
from .models.errors import ErrorResponse
from .routes import auth, health, hooks, profiles, subscriptions, users
from modules.devices.routes import router as devices_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logger.info(f"Starting Family Health Records API on {settings.host}:{settings.port}")
    yield
    # Shutdown
    logger.info("Shutting down Family Health Records API")


async def handle_app_error(request: Request, exc: HealthRecordsError) -> JSONResponse:
    """
    Serialize typed errors with their own status and stable code.
    """
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    body = ErrorResponse(
        error=exc.code,
        code=exc.code,
        message=exc.message,
        details=exc.details,
    )
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Family Health Records API",
        description="Family health records with device-limited, shareable access",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(HealthRecordsError, handle_app_error)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
    app.include_router(hooks.router, prefix="/api/hooks", tags=["hooks"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(devices_router, prefix="/api/devices", tags=["devices"])
    app.include_router(subscriptions.router, prefix="/api/subscriptions", tags=["subscriptions"])
    app.include_router(profiles.router, prefix="/api/profiles", tags=["profiles"])

    return app


# Application instance for uvicorn
app = create_app()
