"""Adapters module - Repository implementations for storage backends.

- sqlite: Local SQLite database storage
"""

from .sqlite import SqliteSessionRepository, SqliteTaskRepository

__all__ = [
    "SqliteTaskRepository",
    "SqliteSessionRepository",
]
