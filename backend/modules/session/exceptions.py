"""
Session module exceptions.

A credential mismatch on login is NOT an exception: login() returns None.
"""

from shared.exceptions import ValidationError


class InvalidSignupError(ValidationError):
    """Raised when signup input fails the name/email/password rules."""

    def __init__(self, fields: dict[str, str]):
        super().__init__(
            "Invalid signup details",
            code="INVALID_SIGNUP",
            details={"fields": fields},
        )
        self.fields = fields
