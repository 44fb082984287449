from modules.access.models import CourseAction, Landing


class TestDecisionEnums:
    def test_landing_values(self):
        """Landing should have exactly HOME and LOGIN."""
        assert {member.value for member in Landing} == {"home", "login"}

    def test_course_action_values(self):
        """CourseAction should cover the three outcomes."""
        assert {member.value for member in CourseAction} == {
            "allow",
            "require_login",
            "already_done",
        }

    def test_enums_compare_as_strings(self):
        """Decisions should compare equal to their string values."""
        assert Landing.HOME == "home"
        assert CourseAction.ALREADY_DONE == "already_done"
