"""
Family Health Records API package.

Provides the FastAPI application for the family health records backend.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
