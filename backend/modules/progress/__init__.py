"""
Progress tracking module.

Tracks which course IDs have been marked complete on this device.

Public API:
- IProgressService: Interface for progress operations
- ProgressService: Storage-backed implementation
- CompletionSummary: Derived completion stats
"""

from .interfaces import IProgressService
from .models import CompletionSummary
from .service import ProgressService, get_progress_service, reset_progress_service

__all__ = [
    # Interface
    "IProgressService",
    # Models
    "CompletionSummary",
    # Service
    "ProgressService",
    "get_progress_service",
    "reset_progress_service",
]
