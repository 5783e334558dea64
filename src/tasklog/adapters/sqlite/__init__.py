"""SQLite adapter module - Local database storage implementation."""

from tasklog.adapters.sqlite.connection import init_database, open_connection
from tasklog.adapters.sqlite.session_repository import SqliteSessionRepository
from tasklog.adapters.sqlite.task_repository import SqliteTaskRepository

__all__ = [
    "SqliteTaskRepository",
    "SqliteSessionRepository",
    "init_database",
    "open_connection",
]
