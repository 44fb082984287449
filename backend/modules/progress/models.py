"""
Progress module data models.
"""

from pydantic import BaseModel, Field


class CompletionSummary(BaseModel):
    """
    Derived completion stats for the progress display.

    Only completed IDs that exist in the catalog are counted.
    """

    completed_course_ids: list[str] = Field(default_factory=list)
    completed_count: int = Field(default=0, ge=0)
    total_courses: int = Field(default=0, ge=0)
    percentage: int = Field(default=0, ge=0, le=100, description="Rounded half up")
