"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real config directory and
database file.
"""

from __future__ import annotations

from datetime import timedelta

import pytest

import tasklog.config as config_module
from tasklog.adapters.sqlite import (
    SqliteSessionRepository,
    SqliteTaskRepository,
    init_database,
)
from tasklog.config import ConfigManager, PomodoroConfig
from tasklog.services.context_manager import get_storage_context
from tasklog.utils.ui.console import get_console

# ---------------------------------------------------------------------------
# Config isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config and the database at *tmp_path* for every test.

    Also clears the cached console and storage context so each test starts
    from a fresh configuration.
    """
    db_file = tmp_path / "store" / "db.sqlite"
    monkeypatch.setenv("TASKLOG_DB", str(db_file))

    manager = ConfigManager(config_dir=tmp_path / "config")
    monkeypatch.setattr(config_module, "_config_manager", manager)
    get_console.cache_clear()
    get_storage_context.cache_clear()
    yield manager
    get_console.cache_clear()
    get_storage_context.cache_clear()


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------


@pytest.fixture
def db_path(tmp_path):
    """A migrated database file."""
    path = tmp_path / "store" / "db.sqlite"
    init_database(path)
    return path


@pytest.fixture
def task_repo(db_path):
    return SqliteTaskRepository(db_path)


@pytest.fixture
def session_repo(db_path):
    return SqliteSessionRepository(db_path)


# ---------------------------------------------------------------------------
# Runtime timings
# ---------------------------------------------------------------------------


@pytest.fixture
def fast_settings():
    """Countdown settings with a 50 ms tick so sessions finish quickly."""
    return PomodoroConfig(
        tick_seconds=0.05,
        tick_slices=5,
        poll_seconds=0.01,
        idle_seconds=0.005,
    )


@pytest.fixture
def short_duration():
    return timedelta(seconds=3)
