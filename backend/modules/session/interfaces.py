"""
Session module interface.

Other modules should depend on ISessionService, not the concrete implementation.
This lets the access policy be tested against a stub session.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import User


@runtime_checkable
class ISessionService(Protocol):
    """
    Interface for identity operations.

    Two states exist: anonymous (no persisted user) and authenticated.
    login/signup move to authenticated, logout moves back.
    """

    def login(self, email: str, password: str) -> Optional[User]:
        """
        Establish a session from the credential table.

        Args:
            email: Exact, case-sensitive email
            password: Exact plaintext password

        Returns:
            The persisted User, or None if no record matches both fields.
            Which field was wrong is never revealed.
        """
        ...

    def signup(self, email: str, password: str, name: str) -> User:
        """
        Mint and persist a new identity.

        Args:
            email: Must contain '@'
            password: At least 6 characters (never persisted)
            name: At least 2 characters

        Returns:
            The new User with a time-based ID

        Raises:
            InvalidSignupError: If any input rule is violated
        """
        ...

    def get_current_user(self) -> Optional[User]:
        """
        Read the persisted identity.

        Returns:
            The current User, or None if absent or malformed
        """
        ...

    def logout(self) -> None:
        """Remove the persisted identity. Safe to call when logged out."""
        ...

    def is_authenticated(self) -> bool:
        """Whether a current User exists."""
        ...
