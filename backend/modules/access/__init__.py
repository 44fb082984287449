"""
Access policy module.

Decides, from session and progress state, what a visitor may see and do.

Public API:
- IAccessPolicy: Interface for access decisions
- AccessPolicy: Default implementation
- Landing, CourseAction: Decision enums
"""

from .interfaces import IAccessPolicy
from .models import CourseAction, Landing
from .service import AccessPolicy, get_access_policy, reset_access_policy

__all__ = [
    # Interface
    "IAccessPolicy",
    # Models
    "CourseAction",
    "Landing",
    # Service
    "AccessPolicy",
    "get_access_policy",
    "reset_access_policy",
]
