"""
Base exception classes for the MiniLearn core.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class MiniLearnError(Exception):
    """
    Base exception for all MiniLearn errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for the presentation layer."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(MiniLearnError):
    """Resource not found."""

    pass


class ValidationError(MiniLearnError):
    """Input validation failed."""

    pass


class ExternalServiceError(MiniLearnError):
    """Error communicating with an external collaborator."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class StorageUnavailableError(ExternalServiceError):
    """Raised when the device-local store cannot be written."""

    def __init__(self, key: str, reason: str):
        super().__init__(
            f"Storage unavailable while writing {key!r}: {reason}",
            service="storage",
            code="STORAGE_UNAVAILABLE",
            details={"key": key, "reason": reason},
        )
