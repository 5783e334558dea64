"""Task service - Business logic for task operations.

This service layer sits between commands and repositories, providing
a clean API for task-related business logic.
"""

from __future__ import annotations

from datetime import datetime

from tasklog.models import Task, TaskCreate, TaskFilters
from tasklog.repositories import TaskRepository
from tasklog.utils.logger import get_logger
from tasklog.utils.validation import validate_task_create, validate_task_filters

logger = get_logger("services.tasks")


class TaskService:
    """Service for task business logic."""

    def __init__(self, task_repository: TaskRepository):
        """Initialize the task service.

        Args:
            task_repository: TaskRepository implementation for data access
        """
        self.repository = task_repository

    async def list_tasks(self, filters: TaskFilters | None = None) -> list[Task]:
        """List tasks due within the filter window.

        Args:
            filters: Listing predicates; defaults to open tasks due within a day

        Returns:
            Matching tasks, newest first
        """
        filters = filters or TaskFilters()
        validate_task_filters(filters)
        return await self.repository.list_all(filters)

    async def get_task(self, task_id: int) -> Task:
        return await self.repository.get(task_id)

    async def add_task(self, task_data: TaskCreate) -> Task:
        """Create a new task.

        Args:
            task_data: Title, due date (today or later), priority and category

        Returns:
            Created Task with its id

        Raises:
            ValidationError: Before anything is written
        """
        validate_task_create(task_data)
        task = await self.repository.add(task_data)
        logger.info("added task #%d", task.id)
        return task

    async def mark_done(self, task_id: int) -> Task:
        """Close a task.

        Raises:
            NotFoundError: If the task does not exist
            AlreadyDoneError: If it was already closed
        """
        task = await self.repository.mark_done(task_id)
        logger.info("task #%d done", task_id)
        return task

    async def list_created_since(self, since: datetime) -> list[Task]:
        return await self.repository.list_created_since(since)
