"""Repository abstraction layer for tasklog.

Abstract base classes for persistence operations. Business logic in
tasklog.services depends on these, never on SQLite directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from tasklog.models import (
    Session,
    SessionCreate,
    SessionFilters,
    SessionStatus,
    Task,
    TaskCreate,
    TaskFilters,
)


class TaskRepository(ABC):
    """Abstract base class for task persistence operations."""

    @abstractmethod
    async def list_all(self, filters: TaskFilters) -> list[Task]:
        """List tasks matching the filters, newest first.

        Raises:
            ValidationError: If the filters are out of range
            PersistenceError: On storage failure
        """
        raise NotImplementedError("TaskRepository.list_all() must be implemented by adapter")

    @abstractmethod
    async def get(self, task_id: int) -> Task:
        """Get a task by id.

        Raises:
            NotFoundError: If the task does not exist
        """
        raise NotImplementedError("TaskRepository.get() must be implemented by adapter")

    @abstractmethod
    async def add(self, task_data: TaskCreate) -> Task:
        """Insert a task and return it with its id populated."""
        raise NotImplementedError("TaskRepository.add() must be implemented by adapter")

    @abstractmethod
    async def mark_done(self, task_id: int) -> Task:
        """Move a task from Open to Done.

        Raises:
            NotFoundError: If the task does not exist
            AlreadyDoneError: If the task is already Done
        """
        raise NotImplementedError("TaskRepository.mark_done() must be implemented by adapter")

    @abstractmethod
    async def list_created_since(self, since: datetime) -> list[Task]:
        """All tasks created at or after *since*, any status."""
        raise NotImplementedError(
            "TaskRepository.list_created_since() must be implemented by adapter"
        )


class SessionRepository(ABC):
    """Abstract base class for pomodoro session persistence."""

    @abstractmethod
    async def create(self, session_data: SessionCreate) -> Session:
        """Insert a Running session; the store assigns id and start time."""
        raise NotImplementedError("SessionRepository.create() must be implemented by adapter")

    @abstractmethod
    async def finalize(
        self, session_id: int, end_time: datetime, status: SessionStatus
    ) -> Session:
        """Seal a session with its end time and terminal status.

        Raises:
            ValueError: If *status* is Running
            PersistenceError: If no row was updated
        """
        raise NotImplementedError("SessionRepository.finalize() must be implemented by adapter")

    @abstractmethod
    async def get(self, session_id: int) -> Session:
        """Get a session by id.

        Raises:
            NotFoundError: If the session does not exist
        """
        raise NotImplementedError("SessionRepository.get() must be implemented by adapter")

    @abstractmethod
    async def list_all(self, filters: SessionFilters) -> list[Session]:
        """List sessions matching the filters, most recent first."""
        raise NotImplementedError("SessionRepository.list_all() must be implemented by adapter")

    @abstractmethod
    async def list_started_since(self, since: datetime) -> list[Session]:
        """All sessions started at or after *since*."""
        raise NotImplementedError(
            "SessionRepository.list_started_since() must be implemented by adapter"
        )
