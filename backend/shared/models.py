"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field, field_validator


class AuthenticatedUser(BaseModel):
    """
    Identity of the caller, taken from a pre-verified claim set.

    The email is used for share matching and is stored lowercase so
    comparisons are case-insensitive.
    """

    id: str = Field(..., min_length=1, description="Account ID (token subject)")
    email: str = Field(default="", description="Account email, lowercase")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",  # Ignore extra fields from claims
    }

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()
