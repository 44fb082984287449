"""
Progress service implementation.

Persists completed course IDs as a JSON array through the device
storage adapter.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from shared.config import get_settings
from shared.repository import BaseRepository
from shared.storage import IStorageAdapter, get_storage
from modules.catalog.models import Course

from .interfaces import IProgressService
from .models import CompletionSummary

logger = logging.getLogger(__name__)


class ProgressService(BaseRepository[list[str]], IProgressService):
    """
    Implementation of the progress store.

    Membership checks scan the list linearly; the catalog is tens of
    entries, so insertion order is kept instead of hashing.
    """

    def __init__(
        self,
        storage: Optional[IStorageAdapter] = None,
        storage_key: Optional[str] = None,
    ):
        """
        Initialize the progress service.

        Args:
            storage: Storage adapter. Defaults to the configured device storage.
            storage_key: Key for the completion set. Defaults to the
                         PROGRESS_STORAGE_KEY setting.
        """
        super().__init__(storage or get_storage())
        self._key = storage_key or get_settings().progress_storage_key

    def get_completed(self) -> list[str]:
        payload = self._read_json(self._key)
        if payload is None:
            return []
        if not isinstance(payload, list):
            logger.warning("Discarding completion payload that is not an array")
            return []
        return [course_id for course_id in payload if isinstance(course_id, str)]

    def mark_complete(self, course_id: str) -> None:
        completed = self.get_completed()
        if course_id in completed:
            logger.debug(f"Course {course_id} already completed")
            return
        completed.append(course_id)
        self._write_json(self._key, completed)
        logger.debug(f"Marked course {course_id} complete")

    def is_completed(self, course_id: str) -> bool:
        return course_id in self.get_completed()

    def reset(self) -> None:
        self._remove(self._key)
        logger.info("Reset course progress")

    def get_summary(self, courses: Iterable[Course]) -> CompletionSummary:
        catalog_ids = [course.id for course in courses]
        completed = [c for c in self.get_completed() if c in catalog_ids]

        total = len(catalog_ids)
        if total == 0:
            percentage = 0
        else:
            percentage = int(
                (Decimal(len(completed) * 100) / Decimal(total)).quantize(
                    Decimal("1"), rounding=ROUND_HALF_UP
                )
            )

        return CompletionSummary(
            completed_course_ids=completed,
            completed_count=len(completed),
            total_courses=total,
            percentage=percentage,
        )


# Module-level instance getter
_service_instance: Optional[ProgressService] = None


def get_progress_service() -> ProgressService:
    """Get the progress service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = ProgressService()
    return _service_instance


def reset_progress_service() -> None:
    """Reset the progress service singleton (for testing)."""
    global _service_instance
    _service_instance = None
