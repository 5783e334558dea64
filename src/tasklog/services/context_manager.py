"""Storage bootstrap for commands.

Commands never build repositories themselves; they ask for the storage
context, which resolves the database file from configuration once per
process.

Usage Pattern:
    from tasklog.services.context_manager import get_storage_context

    storage = get_storage_context()
    tasks = await storage.task_repository.list_all(filters)
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from tasklog.adapters.sqlite import SqliteSessionRepository, SqliteTaskRepository
from tasklog.config import get_config_manager
from tasklog.repositories import SessionRepository, TaskRepository


@dataclass(frozen=True)
class StorageContext:
    db_path: Path
    task_repository: TaskRepository
    session_repository: SessionRepository


@lru_cache(maxsize=1)
def get_storage_context() -> StorageContext:
    """Get the cached StorageContext for the configured database file."""
    db_path = get_config_manager().get_db_path()
    return StorageContext(
        db_path=db_path,
        task_repository=SqliteTaskRepository(db_path),
        session_repository=SqliteSessionRepository(db_path),
    )
