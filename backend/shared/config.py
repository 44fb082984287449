"""
Centralized configuration for the MiniLearn core.

All settings are loaded from environment variables with sensible defaults.
Storage-related settings are namespaced with STORAGE_* where possible.
"""

from functools import lru_cache
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Device-local storage
    storage_backend: Literal["memory", "file"] = "memory"
    storage_path: str = ".minilearn/storage.json"

    # Persisted keys (match the browser build so existing data stays readable)
    session_storage_key: str = "elearning_user"
    progress_storage_key: str = "elearning_completed_courses"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
