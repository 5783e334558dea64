"""Services module for tasklog - Business logic layer."""

from .analysis_service import ActivitySummary, AnalysisService
from .session_service import SessionService
from .task_service import TaskService

__all__ = [
    "ActivitySummary",
    "AnalysisService",
    "SessionService",
    "TaskService",
]
