"""
Course catalog module.

Serves the fixed, read-only course table.

Public API:
- CatalogService: Course lookup by ID
- Course, Difficulty: Catalog models
- CourseNotFoundError: Unknown course ID
"""

from .models import Course, Difficulty
from .data import COURSES
from .exceptions import CourseNotFoundError
from .service import CatalogService, get_catalog_service, reset_catalog_service

__all__ = [
    # Models
    "Course",
    "Difficulty",
    "COURSES",
    # Exceptions
    "CourseNotFoundError",
    # Service
    "CatalogService",
    "get_catalog_service",
    "reset_catalog_service",
]
