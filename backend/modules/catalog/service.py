"""
Catalog lookup service.
"""

from typing import Iterable, Optional

from .data import COURSES
from .models import Course


class CatalogService:
    """Read-only access to the course catalog."""

    def __init__(self, courses: Optional[Iterable[Course]] = None):
        """
        Args:
            courses: Catalog to serve. Defaults to the shipped COURSES table.
        """
        self._courses: tuple[Course, ...] = (
            tuple(courses) if courses is not None else COURSES
        )

    def list_courses(self) -> list[Course]:
        return list(self._courses)

    def get_course(self, course_id: str) -> Optional[Course]:
        for course in self._courses:
            if course.id == course_id:
                return course
        return None

    def course_ids(self) -> list[str]:
        return [course.id for course in self._courses]


_service_instance: Optional[CatalogService] = None


def get_catalog_service() -> CatalogService:
    """Get the catalog service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = CatalogService()
    return _service_instance


def reset_catalog_service() -> None:
    """Reset the catalog service singleton (for testing)."""
    global _service_instance
    _service_instance = None
