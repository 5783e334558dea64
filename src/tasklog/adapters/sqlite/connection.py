"""Database connection management for the local tasklog store.

Connections are opened per operation: only the session coordinator's
caller touches the store, once when a session starts and once when it ends,
so nothing is held open across a countdown.
"""

from __future__ import annotations

import os
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from tasklog.adapters.sqlite.migrations.m001_initial_schema import initial_migration
from tasklog.adapters.sqlite.migrations.runner import MigrationRunner
from tasklog.errors import PersistenceError
from tasklog.utils.logger import get_logger

logger = get_logger("store")

# All migrations in order
MIGRATIONS = [
    initial_migration,
]


def _connect(db_path: Path) -> sqlite3.Connection:
    connection = sqlite3.connect(str(db_path), timeout=30.0)
    connection.row_factory = sqlite3.Row  # Enable dict-like access
    connection.execute("PRAGMA foreign_keys = ON")
    return connection


def init_database(db_path: str | Path) -> int:
    """Create the store directory and database file, then migrate.

    Safe to run repeatedly.

    Args:
        db_path: Path to the database file

    Returns:
        Number of migrations applied

    Raises:
        PersistenceError: If the file cannot be created or migrated
    """
    db_path = Path(db_path)
    try:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        is_new_database = not db_path.exists()

        connection = _connect(db_path)
        try:
            # Write-Ahead Logging persists in the file once set
            connection.execute("PRAGMA journal_mode = WAL")
            if is_new_database:
                os.chmod(db_path, 0o600)
            applied = MigrationRunner(connection).run_migrations(MIGRATIONS)
        finally:
            connection.close()
    except (OSError, sqlite3.Error) as e:
        raise PersistenceError(f"Could not initialize database at {db_path}: {e}") from e

    logger.info("database ready at %s (%d migrations applied)", db_path, applied)
    return applied


@contextmanager
def open_connection(db_path: str | Path) -> Iterator[sqlite3.Connection]:
    """Open a connection for a single operation.

    Commits when the block succeeds, rolls back when it raises, and always
    closes.

    Raises:
        PersistenceError: If the database does not exist or cannot be opened
    """
    db_path = Path(db_path)
    if not db_path.exists():
        raise PersistenceError(
            f"No database at {db_path}, please run 'tasklog init' first"
        )

    try:
        connection = _connect(db_path)
    except sqlite3.Error as e:
        raise PersistenceError(f"Could not connect to the database: {e}") from e

    try:
        yield connection
        connection.commit()
    except BaseException:
        connection.rollback()
        raise
    finally:
        connection.close()
