"""
Session module.

Handles mock login/signup, the persisted current identity, and logout.

Public API:
- ISessionService: Interface for identity operations
- SessionService: Storage-backed implementation
- CredentialRecord, SignupRequest: Input models
- InvalidSignupError: Signup input rejected
"""

from .interfaces import ISessionService
from .models import (
    CredentialRecord,
    SignupRequest,
    MIN_NAME_LENGTH,
    MIN_PASSWORD_LENGTH,
)
from .credentials import DEMO_CREDENTIALS
from .exceptions import InvalidSignupError
from .service import SessionService, get_session_service, reset_session_service

__all__ = [
    # Interface
    "ISessionService",
    # Models
    "CredentialRecord",
    "SignupRequest",
    "MIN_NAME_LENGTH",
    "MIN_PASSWORD_LENGTH",
    "DEMO_CREDENTIALS",
    # Exceptions
    "InvalidSignupError",
    # Service
    "SessionService",
    "get_session_service",
    "reset_session_service",
]
