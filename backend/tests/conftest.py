"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest

from shared.config import get_settings
from shared.storage import InMemoryStorage, reset_storage_cache
from modules.access.service import reset_access_policy
from modules.catalog.service import reset_catalog_service
from modules.progress.service import ProgressService, reset_progress_service
from modules.session.service import SessionService, reset_session_service


SESSION_KEY = "elearning_user"
PROGRESS_KEY = "elearning_completed_courses"


def _reset_singletons() -> None:
    get_settings.cache_clear()
    reset_storage_cache()
    reset_session_service()
    reset_progress_service()
    reset_catalog_service()
    reset_access_policy()


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings, storage and services before and after each test."""
    _reset_singletons()
    yield
    _reset_singletons()


@pytest.fixture
def storage() -> InMemoryStorage:
    """Provide a fresh in-memory device store."""
    return InMemoryStorage()


@pytest.fixture
def session_service(storage: InMemoryStorage) -> SessionService:
    """Session service over the in-memory store with a fixed ID factory."""
    return SessionService(
        storage=storage,
        storage_key=SESSION_KEY,
        id_factory=lambda: "1700000000000",
    )


@pytest.fixture
def progress_service(storage: InMemoryStorage) -> ProgressService:
    """Progress service sharing the same in-memory store."""
    return ProgressService(storage=storage, storage_key=PROGRESS_KEY)
