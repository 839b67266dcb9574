"""
Error response models.

Standardized error responses for the API. ``code`` is the stable
machine-readable string clients branch on.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str
    code: str
    message: Optional[str] = None
    details: dict[str, Any] = Field(default_factory=dict)
