import pytest

from modules.access.models import CourseAction, Landing
from modules.access.service import AccessPolicy, get_access_policy
from modules.catalog.exceptions import CourseNotFoundError
from modules.catalog.service import CatalogService


@pytest.fixture
def policy(session_service, progress_service) -> AccessPolicy:
    return AccessPolicy(
        session=session_service,
        progress=progress_service,
        catalog=CatalogService(),
    )


@pytest.fixture
def logged_in(session_service):
    session_service.login("student@example.com", "password123")
    return session_service


class TestLanding:
    def test_anonymous_lands_on_login(self, policy):
        """Anonymous visitors should be sent to login."""
        assert policy.resolve_landing() is Landing.LOGIN

    def test_authenticated_lands_on_home(self, policy, logged_in):
        """Authenticated visitors should land on home."""
        assert policy.resolve_landing() is Landing.HOME

    def test_logout_returns_to_login(self, policy, logged_in):
        """Logging out should send the visitor back to login."""
        logged_in.logout()
        assert policy.resolve_landing() is Landing.LOGIN

    def test_corrupted_session_lands_on_login(self, policy, storage):
        """A session payload too deeply nested to decode should land on login."""
        storage.set_item("elearning_user", "[" * 200000)
        assert policy.resolve_landing() is Landing.LOGIN


class TestCourseAction:
    def test_anonymous_requires_login(self, policy):
        """Fresh storage: course actions should require login."""
        assert policy.resolve_course_action("2") is CourseAction.REQUIRE_LOGIN

    def test_anonymous_requires_login_even_if_completed(self, policy, progress_service):
        """Login is checked before completion state."""
        progress_service.mark_complete("2")
        assert policy.resolve_course_action("2") is CourseAction.REQUIRE_LOGIN

    def test_authenticated_allowed(self, policy, logged_in):
        """An incomplete course should be allowed."""
        assert policy.resolve_course_action("2") is CourseAction.ALLOW

    def test_authenticated_already_done(self, policy, logged_in, progress_service):
        """A completed course should report ALREADY_DONE."""
        progress_service.mark_complete("2")
        assert policy.resolve_course_action("2") is CourseAction.ALREADY_DONE


class TestCompleteCourse:
    def test_complete_marks_course(self, policy, logged_in, progress_service):
        """ALLOW should mark the course complete."""
        assert policy.complete_course("1") is CourseAction.ALLOW
        assert progress_service.get_completed() == ["1"]

    def test_complete_twice(self, policy, logged_in, progress_service):
        """The second attempt should report ALREADY_DONE without changes."""
        policy.complete_course("1")
        assert policy.complete_course("1") is CourseAction.ALREADY_DONE
        assert progress_service.get_completed() == ["1"]

    def test_complete_anonymous_does_nothing(self, policy, progress_service):
        """Anonymous visitors should not be able to record progress."""
        assert policy.complete_course("1") is CourseAction.REQUIRE_LOGIN
        assert progress_service.get_completed() == []


class TestProgressDisplay:
    def test_hidden_for_anonymous(self, policy, progress_service):
        """Progress should stay hidden from anonymous visitors."""
        progress_service.mark_complete("1")
        assert policy.gate_progress_display() is False

    def test_shown_when_authenticated(self, policy, logged_in):
        """Progress should be shown to authenticated visitors."""
        assert policy.gate_progress_display() is True

    def test_progress_is_device_wide(self, policy, session_service, progress_service):
        """Switching accounts on one device should keep the same completion set."""
        session_service.login("student@example.com", "password123")
        policy.complete_course("3")
        session_service.logout()
        session_service.login("learner@example.com", "learn123")

        assert policy.resolve_course_action("3") is CourseAction.ALREADY_DONE


class TestCourseView:
    def test_known_course(self, policy):
        """Course detail should be viewable without logging in."""
        assert policy.resolve_course_view("4").title == "React Fundamentals"

    def test_unknown_course(self, policy):
        """Unknown IDs should raise CourseNotFoundError."""
        with pytest.raises(CourseNotFoundError):
            policy.resolve_course_view("99")


class TestDefaultWiring:
    def test_default_policy_shares_device_storage(self):
        """The default policy should see logins made through the default services."""
        from modules.session.service import get_session_service

        policy = get_access_policy()
        assert policy.resolve_landing() is Landing.LOGIN

        get_session_service().login("student@example.com", "password123")
        assert policy.resolve_landing() is Landing.HOME
        assert get_access_policy() is policy
