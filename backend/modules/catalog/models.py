"""
Catalog module data models.

Courses are read-only reference data: the session and progress stores
only ever look them up by ID.
"""

from enum import Enum
from pydantic import BaseModel, Field


class Difficulty(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class Course(BaseModel):
    """A single course in the fixed catalog."""

    id: str = Field(..., description="Unique course ID")
    title: str
    description: str = Field(..., description="One-line summary for cards")
    long_description: str = Field(..., description="Body text for the detail view")
    icon: str
    color: str = Field(..., description="Gradient classes used by the course card")
    difficulty: Difficulty
    duration: str

    model_config = {"frozen": True}
