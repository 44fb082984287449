"""
Session service implementation.

Simulates authentication against a fixed credential table and persists the
current identity through the device storage adapter.
"""

import logging
import time
from typing import Callable, Iterable, Optional

import pydantic

from shared.config import get_settings
from shared.models import User
from shared.repository import BaseRepository
from shared.storage import IStorageAdapter, get_storage

from .credentials import DEMO_CREDENTIALS
from .exceptions import InvalidSignupError
from .interfaces import ISessionService
from .models import CredentialRecord, SignupRequest

logger = logging.getLogger(__name__)


def _millis_id() -> str:
    """Time-based identifier: milliseconds since the epoch."""
    return str(time.time_ns() // 1_000_000)


class SessionService(BaseRepository[User], ISessionService):
    """
    Implementation of the session store.

    The persisted payload is {"id", "email", "name"} under a single key;
    absence of that key is the anonymous state.
    """

    def __init__(
        self,
        storage: Optional[IStorageAdapter] = None,
        credentials: Optional[Iterable[CredentialRecord]] = None,
        storage_key: Optional[str] = None,
        id_factory: Callable[[], str] = _millis_id,
    ):
        """
        Initialize the session service.

        Args:
            storage: Storage adapter. Defaults to the configured device storage.
            credentials: Credential table. Defaults to DEMO_CREDENTIALS.
            storage_key: Key for the identity record. Defaults to the
                         SESSION_STORAGE_KEY setting.
            id_factory: Generates IDs for new signups.
        """
        super().__init__(storage or get_storage())
        self._credentials = tuple(
            credentials if credentials is not None else DEMO_CREDENTIALS
        )
        self._key = storage_key or get_settings().session_storage_key
        self._id_factory = id_factory

    def _persist(self, user: User) -> None:
        self._write_json(self._key, user.model_dump())

    def login(self, email: str, password: str) -> Optional[User]:
        """Look up a credential record matching both fields exactly."""
        record = next(
            (
                c
                for c in self._credentials
                if c.email == email and c.password == password
            ),
            None,
        )
        if record is None:
            logger.info("Login rejected: no matching credentials")
            return None

        user = record.to_user()
        self._persist(user)
        logger.info(f"Logged in {user.email} (id={user.id})")
        return user

    def signup(self, email: str, password: str, name: str) -> User:
        """Validate input, then mint and persist a new identity."""
        try:
            request = SignupRequest(email=email, password=password, name=name)
        except pydantic.ValidationError as e:
            fields = {
                str(err["loc"][0]): err["msg"] for err in e.errors() if err["loc"]
            }
            raise InvalidSignupError(fields) from None

        user = User(id=self._id_factory(), email=request.email, name=request.name)
        self._persist(user)
        logger.info(f"Signed up {user.email} (id={user.id})")
        return user

    def get_current_user(self) -> Optional[User]:
        """Read the persisted identity, treating bad payloads as absent."""
        payload = self._read_json(self._key)
        if payload is None:
            return None
        if not isinstance(payload, dict):
            logger.warning("Discarding session payload that is not an object")
            return None
        try:
            return User.model_validate(payload)
        except pydantic.ValidationError:
            logger.warning("Discarding session payload with missing or invalid fields")
            return None

    def logout(self) -> None:
        self._remove(self._key)
        logger.info("Logged out")

    def is_authenticated(self) -> bool:
        return self.get_current_user() is not None


# Module-level instance getter
_service_instance: Optional[SessionService] = None


def get_session_service() -> SessionService:
    """Get the session service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = SessionService()
    return _service_instance


def reset_session_service() -> None:
    """Reset the session service singleton (for testing)."""
    global _service_instance
    _service_instance = None
