"""
Progress module interface.

The access policy depends on IProgressService to decide whether a course
action is already done.
"""

from typing import Iterable, Protocol, runtime_checkable

from modules.catalog.models import Course

from .models import CompletionSummary


@runtime_checkable
class IProgressService(Protocol):
    """
    Interface for the device-wide completion set.

    The set is not scoped to the logged-in user: switching accounts on the
    same device shares progress.
    """

    def get_completed(self) -> list[str]:
        """
        Get completed course IDs in the order they were completed.

        Returns:
            Course IDs, or an empty list if nothing (or garbage) is stored
        """
        ...

    def mark_complete(self, course_id: str) -> None:
        """Add a course ID. No-op if it is already present."""
        ...

    def is_completed(self, course_id: str) -> bool:
        """Whether a course ID is in the completion set."""
        ...

    def reset(self) -> None:
        """Clear the whole completion set."""
        ...

    def get_summary(self, courses: Iterable[Course]) -> CompletionSummary:
        """
        Compute completion stats against a catalog.

        Args:
            courses: The catalog to measure progress against

        Returns:
            CompletionSummary with count, total and rounded percentage
        """
        ...
