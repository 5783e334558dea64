"""Repository interfaces for tasklog.

Implementations live in tasklog.adapters.sqlite.
"""

from .repository import SessionRepository, TaskRepository

__all__ = [
    "TaskRepository",
    "SessionRepository",
]
