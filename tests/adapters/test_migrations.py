"""Tests for database bootstrap and the migration runner."""

from __future__ import annotations

import sqlite3

import pytest

from tasklog.adapters.sqlite.connection import MIGRATIONS, init_database, open_connection
from tasklog.adapters.sqlite.migrations.runner import (
    Migration,
    MigrationRunner,
    get_current_version,
)
from tasklog.errors import PersistenceError


class BrokenMigration(Migration):
    @property
    def version(self) -> int:
        return 99

    @property
    def description(self) -> str:
        return "Broken"

    def up(self, connection: sqlite3.Connection) -> None:
        connection.execute("CREATE TABLE nonsense (")


class TestInitDatabase:
    def test_creates_directory_file_and_tables(self, tmp_path):
        path = tmp_path / "nested" / "db.sqlite"
        applied = init_database(path)

        assert path.exists()
        assert applied == len(MIGRATIONS)
        with open_connection(path) as conn:
            tables = {
                row[0]
                for row in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
            }
        assert {"tasks", "sessions", "schema_version"} <= tables

    def test_is_idempotent(self, tmp_path):
        path = tmp_path / "db.sqlite"
        init_database(path)
        assert init_database(path) == 0

    def test_file_is_private(self, tmp_path):
        path = tmp_path / "db.sqlite"
        init_database(path)
        assert path.stat().st_mode & 0o777 == 0o600

    def test_unwritable_location_raises(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        with pytest.raises(PersistenceError):
            init_database(blocker / "db.sqlite")


class TestOpenConnection:
    def test_missing_file(self, tmp_path):
        with pytest.raises(PersistenceError, match="tasklog init"):
            with open_connection(tmp_path / "missing.sqlite"):
                pass

    def test_rolls_back_on_error(self, db_path):
        with pytest.raises(RuntimeError):
            with open_connection(db_path) as conn:
                conn.execute(
                    "INSERT INTO tasks (status, title, due_date, priority, created_at, updated_at) "
                    "VALUES (0, 'x', 'd', 2, 'c', 'u')"
                )
                raise RuntimeError("boom")

        with open_connection(db_path) as conn:
            assert conn.execute("SELECT COUNT(*) FROM tasks").fetchone()[0] == 0


class TestMigrationRunner:
    def test_version_after_init(self, db_path):
        conn = sqlite3.connect(db_path)
        try:
            assert get_current_version(conn) == 1
        finally:
            conn.close()

    def test_failed_migration_is_not_recorded(self, db_path):
        conn = sqlite3.connect(db_path)
        try:
            runner = MigrationRunner(conn)
            with pytest.raises(PersistenceError, match="Migration 99 failed"):
                runner.run_migration(BrokenMigration())
            assert runner.get_current_version() == 1
        finally:
            conn.close()

    def test_old_migration_is_rejected(self, db_path):
        conn = sqlite3.connect(db_path)
        try:
            with pytest.raises(ValueError):
                MigrationRunner(conn).run_migration(MIGRATIONS[0])
        finally:
            conn.close()
