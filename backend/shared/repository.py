"""
Base store class for persisted state.

Provides a common abstraction layer for the session and progress stores,
encapsulating storage adapter access and the JSON encoding shared by every
persisted record.
"""

import json
import logging
from typing import Any, Generic, Optional, TypeVar

from .storage import IStorageAdapter

logger = logging.getLogger(__name__)


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all stores.

    Provides common functionality for persisted state:
    - Storage adapter access via self._storage
    - Fail-soft JSON reads (malformed payloads read as absent)
    - JSON writes and key removal

    Subclasses own one storage key and map the decoded JSON to their
    model type internally.

    Example:
        class SessionService(BaseRepository[User]):
            def get_current_user(self) -> Optional[User]:
                payload = self._read_json(self._key)
                if not isinstance(payload, dict):
                    return None
                return User(**payload)
    """

    def __init__(self, storage: IStorageAdapter) -> None:
        """
        Initialize the store with a storage adapter.

        Args:
            storage: Key/value adapter used for every read and write.
        """
        self._storage = storage

    def _read_json(self, key: str) -> Optional[Any]:
        """
        Read and decode the JSON value stored under key.

        Returns None if the key is absent or the payload does not parse.
        """
        raw = self._storage.get_item(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (ValueError, RecursionError):
            logger.warning(f"Discarding malformed payload under {key!r}")
            return None

    def _write_json(self, key: str, value: Any) -> None:
        """Encode value as JSON and store it under key."""
        self._storage.set_item(key, json.dumps(value))

    def _remove(self, key: str) -> None:
        self._storage.remove_item(key)
