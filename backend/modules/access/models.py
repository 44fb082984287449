"""
Access policy decision types.
"""

from enum import Enum


class Landing(str, Enum):
    """Where a visitor lands when opening the app."""

    HOME = "home"
    LOGIN = "login"


class CourseAction(str, Enum):
    """Outcome of asking to mark a course complete."""

    ALLOW = "allow"
    REQUIRE_LOGIN = "require_login"
    ALREADY_DONE = "already_done"
