"""
Access policy interface.

The presentation layer maps these decisions to redirects and messages.
"""

from typing import Protocol, runtime_checkable

from modules.catalog.models import Course

from .models import CourseAction, Landing


@runtime_checkable
class IAccessPolicy(Protocol):
    """Decisions derived from the current session and progress state."""

    def resolve_landing(self) -> Landing:
        """HOME for authenticated visitors, LOGIN otherwise."""
        ...

    def resolve_course_action(self, course_id: str) -> CourseAction:
        """
        Decide whether a course may be marked complete.

        Returns:
            REQUIRE_LOGIN if anonymous, ALREADY_DONE if completed, else ALLOW
        """
        ...

    def gate_progress_display(self) -> bool:
        """Whether completion badges and percentages may be shown."""
        ...

    def complete_course(self, course_id: str) -> CourseAction:
        """
        Resolve the course action and mark the course complete on ALLOW.

        Returns:
            The decision that was applied
        """
        ...

    def resolve_course_view(self, course_id: str) -> Course:
        """
        Look up the course for the detail view.

        Raises:
            CourseNotFoundError: If the ID is not in the catalog
        """
        ...
