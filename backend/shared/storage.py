"""
Device-local key/value storage adapters.

The stores in this package only ever talk to an IStorageAdapter, so tests
can swap in InMemoryStorage while a real install persists to a JSON file.
"""

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from .config import get_settings
from .exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)


@runtime_checkable
class IStorageAdapter(Protocol):
    """
    Interface for a string-keyed, string-valued persistent store.

    Mirrors browser local storage: values are opaque strings and a
    missing key reads as None.
    """

    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """
        Store a value under a key, replacing any previous value.

        Raises:
            StorageUnavailableError: If the value could not be persisted
        """
        ...

    def remove_item(self, key: str) -> None:
        """Remove a key. Removing an absent key is not an error."""
        ...


class InMemoryStorage:
    """
    Dict-backed storage.

    For testing and for sessions that should not outlive the process.
    """

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        """Drop every key (the equivalent of clearing site data)."""
        self._items.clear()


class JsonFileStorage:
    """
    Storage persisted to a single JSON object on disk.

    Every call reads or rewrites the file, so there is no in-process cache
    that could shadow writes made by another process (last write wins).
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError, RecursionError) as e:
            logger.warning(f"Ignoring unreadable storage file {self._path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring storage file {self._path}: not a JSON object")
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _save(self, key: str, items: dict[str, str]) -> None:
        # Atomic swap: the store file is never left half-written.
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(items), encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            raise StorageUnavailableError(key, str(e)) from e

    def get_item(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = value
        self._save(key, items)

    def remove_item(self, key: str) -> None:
        items = self._load()
        if key not in items:
            return
        del items[key]
        self._save(key, items)


# Module-level adapter cache
_storage: Optional[IStorageAdapter] = None


def get_storage() -> IStorageAdapter:
    """
    Get the storage adapter configured for this device.

    Uses STORAGE_BACKEND to pick between the in-memory and file adapters.

    Returns:
        The cached storage adapter
    """
    global _storage

    if _storage is None:
        settings = get_settings()
        if settings.storage_backend == "file":
            _storage = JsonFileStorage(settings.storage_path)
        else:
            _storage = InMemoryStorage()
        logger.debug(f"Using {type(_storage).__name__} for device storage")

    return _storage


def reset_storage_cache() -> None:
    """Reset the cached adapter (for testing)."""
    global _storage
    _storage = None
