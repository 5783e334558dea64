"""SQLite implementation of TaskRepository."""

from __future__ import annotations

import sqlite3
from datetime import datetime
from pathlib import Path

from tasklog.adapters.sqlite.connection import open_connection
from tasklog.adapters.sqlite.filters import TASK_COLUMNS, build_task_query
from tasklog.adapters.sqlite.utils import (
    now_utc,
    parse_datetime,
    row_to_dict,
    to_db_timestamp,
)
from tasklog.errors import AlreadyDoneError, NotFoundError, PersistenceError
from tasklog.models import (
    PRIORITY_CODES,
    TASK_STATUS_CODES,
    Task,
    TaskCreate,
    TaskFilters,
    TaskStatus,
)
from tasklog.repositories import TaskRepository
from tasklog.utils.logger import get_logger

logger = get_logger("store.tasks")


def parse_task(row: sqlite3.Row) -> Task:
    """Map a ``tasks`` row onto a Task."""
    task_dict = row_to_dict(row)
    task_dict["status"] = TASK_STATUS_CODES.decode(task_dict["status"])
    task_dict["priority"] = PRIORITY_CODES.decode(task_dict["priority"])
    for key in ("due_date", "created_at", "updated_at"):
        task_dict[key] = parse_datetime(task_dict.get(key))
    return Task(**task_dict)


class SqliteTaskRepository(TaskRepository):
    """SQLite implementation of task repository."""

    def __init__(self, db_path: str | Path):
        """Initialize SQLite task repository.

        Args:
            db_path: Database file path.
        """
        self.db_path = Path(db_path)

    async def list_all(self, filters: TaskFilters) -> list[Task]:
        """List tasks with filtering."""
        query = build_task_query(filters)
        try:
            with open_connection(self.db_path) as conn:
                rows = conn.execute(query.sql, query.params).fetchall()
        except sqlite3.Error as e:
            raise PersistenceError(f"Could not list tasks: {e}") from e
        return [parse_task(row) for row in rows]

    async def get(self, task_id: int) -> Task:
        """Get a specific task by ID."""
        try:
            with open_connection(self.db_path) as conn:
                row = conn.execute(
                    f"SELECT {TASK_COLUMNS} FROM tasks WHERE id = ?", (task_id,)
                ).fetchone()
        except sqlite3.Error as e:
            raise PersistenceError(f"Could not read task {task_id}: {e}") from e

        if row is None:
            raise NotFoundError(f"Task not found: {task_id}")
        return parse_task(row)

    async def add(self, task_data: TaskCreate) -> Task:
        """Create a new task."""
        now = to_db_timestamp(now_utc())
        try:
            with open_connection(self.db_path) as conn:
                cursor = conn.execute(
                    """INSERT INTO tasks (
                        status, title, due_date, priority, category,
                        created_at, updated_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?)""",
                    (
                        TASK_STATUS_CODES.encode(TaskStatus.OPEN),
                        task_data.title,
                        to_db_timestamp(task_data.due_date),
                        PRIORITY_CODES.encode(task_data.priority),
                        task_data.category,
                        now,
                        now,
                    ),
                )
                task_id = cursor.lastrowid
        except sqlite3.Error as e:
            raise PersistenceError(f"Could not save task: {e}") from e

        logger.info("added task %s", task_id)
        return await self.get(task_id)

    async def mark_done(self, task_id: int) -> Task:
        """Mark a task as done.

        The Done check reads the current row first, so a missing task and an
        already closed task are told apart.
        """
        task = await self.get(task_id)
        if task.is_done:
            raise AlreadyDoneError(f"Task {task_id} is already done")

        try:
            with open_connection(self.db_path) as conn:
                cursor = conn.execute(
                    "UPDATE tasks SET status = ?, updated_at = ? WHERE id = ?",
                    (
                        TASK_STATUS_CODES.encode(TaskStatus.DONE),
                        to_db_timestamp(now_utc()),
                        task_id,
                    ),
                )
                updated = cursor.rowcount
        except sqlite3.Error as e:
            raise PersistenceError(f"Could not mark task {task_id} as done: {e}") from e

        if updated == 0:
            raise PersistenceError(f"Could not mark task {task_id} as done")

        logger.info("task %s marked done", task_id)
        return await self.get(task_id)

    async def list_created_since(self, since: datetime) -> list[Task]:
        try:
            with open_connection(self.db_path) as conn:
                rows = conn.execute(
                    f"""SELECT {TASK_COLUMNS} FROM tasks
                    WHERE created_at >= ?
                    ORDER BY created_at DESC, id ASC""",
                    (to_db_timestamp(since),),
                ).fetchall()
        except sqlite3.Error as e:
            raise PersistenceError(f"Could not list tasks: {e}") from e
        return [parse_task(row) for row in rows]
