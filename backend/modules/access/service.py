"""
Access policy implementation.

The landing policy gates the whole home view: anonymous visitors are sent
to login. Course browsing itself is not gated; marking complete is.
"""

import logging
from typing import Optional

from modules.catalog.exceptions import CourseNotFoundError
from modules.catalog.models import Course
from modules.catalog.service import CatalogService, get_catalog_service
from modules.progress.interfaces import IProgressService
from modules.progress.service import get_progress_service
from modules.session.interfaces import ISessionService
from modules.session.service import get_session_service

from .interfaces import IAccessPolicy
from .models import CourseAction, Landing

logger = logging.getLogger(__name__)


class AccessPolicy(IAccessPolicy):
    """Pure decisions over the session, progress and catalog services."""

    def __init__(
        self,
        session: Optional[ISessionService] = None,
        progress: Optional[IProgressService] = None,
        catalog: Optional[CatalogService] = None,
    ):
        self._session = session or get_session_service()
        self._progress = progress or get_progress_service()
        self._catalog = catalog or get_catalog_service()

    def resolve_landing(self) -> Landing:
        if self._session.is_authenticated():
            return Landing.HOME
        return Landing.LOGIN

    def resolve_course_action(self, course_id: str) -> CourseAction:
        if not self._session.is_authenticated():
            return CourseAction.REQUIRE_LOGIN
        if self._progress.is_completed(course_id):
            return CourseAction.ALREADY_DONE
        return CourseAction.ALLOW

    def gate_progress_display(self) -> bool:
        # The completion set is device-wide, not per user.
        return self._session.is_authenticated()

    def complete_course(self, course_id: str) -> CourseAction:
        decision = self.resolve_course_action(course_id)
        if decision is CourseAction.ALLOW:
            self._progress.mark_complete(course_id)
        logger.debug(f"Complete course {course_id}: {decision.value}")
        return decision

    def resolve_course_view(self, course_id: str) -> Course:
        course = self._catalog.get_course(course_id)
        if course is None:
            raise CourseNotFoundError(course_id)
        return course


_policy_instance: Optional[AccessPolicy] = None


def get_access_policy() -> AccessPolicy:
    """Get the access policy singleton."""
    global _policy_instance
    if _policy_instance is None:
        _policy_instance = AccessPolicy()
    return _policy_instance


def reset_access_policy() -> None:
    """Reset the access policy singleton (for testing)."""
    global _policy_instance
    _policy_instance = None
