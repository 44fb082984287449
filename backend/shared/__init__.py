"""
Shared infrastructure for the MiniLearn core.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- storage: Device-local key/value adapters
- repository: Base class for persisted stores
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .storage import (
    IStorageAdapter,
    InMemoryStorage,
    JsonFileStorage,
    get_storage,
    reset_storage_cache,
)
from .exceptions import (
    MiniLearnError,
    NotFoundError,
    ValidationError,
    ExternalServiceError,
    StorageUnavailableError,
)
from .models import User

__all__ = [
    "Settings",
    "get_settings",
    "IStorageAdapter",
    "InMemoryStorage",
    "JsonFileStorage",
    "get_storage",
    "reset_storage_cache",
    "MiniLearnError",
    "NotFoundError",
    "ValidationError",
    "ExternalServiceError",
    "StorageUnavailableError",
    "User",
]
