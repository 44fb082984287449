"""
Session module data models.
"""

from pydantic import BaseModel, Field, field_validator

from shared.models import User


MIN_NAME_LENGTH = 2
MIN_PASSWORD_LENGTH = 6


class CredentialRecord(BaseModel):
    """
    An entry in the mock credential table.

    The password is compared in plaintext. Only to_user() output is
    ever persisted.
    """

    id: str
    email: str
    password: str
    name: str

    model_config = {"frozen": True}

    def to_user(self) -> User:
        """Strip the secret and return the persistable identity."""
        return User(id=self.id, email=self.email, name=self.name)


class SignupRequest(BaseModel):
    """Signup form input, validated before an identity is minted."""

    email: str = Field(..., description="Must contain '@'")
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)
    name: str = Field(..., min_length=MIN_NAME_LENGTH)

    @field_validator("email")
    @classmethod
    def email_has_at_sign(cls, value: str) -> str:
        if "@" not in value:
            raise ValueError("Please enter a valid email")
        return value
