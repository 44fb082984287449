"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class User(BaseModel):
    """
    The current identity of a visitor.

    This is exactly what gets persisted under the session key, so it must
    never carry the password. A new login or signup replaces it wholesale.
    """

    id: str = Field(..., description="Opaque stable identifier")
    email: str = Field(..., description="Login lookup key")
    name: str = Field(..., description="Display name")

    model_config = {
        "frozen": True,  # Replaced wholesale, never mutated
        "extra": "ignore",  # Tolerate extra fields in persisted payloads
    }
