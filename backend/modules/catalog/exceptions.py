"""
Catalog module exceptions.
"""

from shared.exceptions import NotFoundError


class CourseNotFoundError(NotFoundError):
    """Raised when a course ID is not in the catalog."""

    def __init__(self, course_id: str):
        super().__init__(
            f"Course not found: {course_id}",
            code="COURSE_NOT_FOUND",
            details={"course_id": course_id},
        )
