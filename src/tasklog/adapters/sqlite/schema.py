"""Database schema definitions for the local tasklog store.

Status, priority and kind columns hold the integer codes from
tasklog.models.enums. Timestamps are ISO 8601 strings in UTC.
"""

from __future__ import annotations

# Tasks table
CREATE_TASKS_TABLE = """
CREATE TABLE IF NOT EXISTS tasks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    status INTEGER NOT NULL DEFAULT 0,
    title TEXT NOT NULL,
    due_date DATETIME NOT NULL,
    priority INTEGER NOT NULL DEFAULT 2,
    category TEXT,
    created_at DATETIME NOT NULL,
    updated_at DATETIME NOT NULL
)
"""

# Pomodoro sessions table
CREATE_SESSIONS_TABLE = """
CREATE TABLE IF NOT EXISTS sessions (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    kind INTEGER NOT NULL DEFAULT 0,
    title TEXT NOT NULL,
    start_time DATETIME NOT NULL,
    end_time DATETIME,
    duration INTEGER NOT NULL DEFAULT 1500,
    status INTEGER NOT NULL DEFAULT 0,
    category TEXT,
    created_at DATETIME NOT NULL,
    updated_at DATETIME NOT NULL
)
"""

# Tasks indexes
CREATE_TASK_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_tasks_status ON tasks(status)",
    "CREATE INDEX IF NOT EXISTS idx_tasks_due_date ON tasks(due_date)",
    "CREATE INDEX IF NOT EXISTS idx_tasks_category ON tasks(category)",
    "CREATE INDEX IF NOT EXISTS idx_tasks_created ON tasks(created_at)",
]

# Sessions indexes
CREATE_SESSION_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_sessions_kind ON sessions(kind)",
    "CREATE INDEX IF NOT EXISTS idx_sessions_category ON sessions(category)",
    "CREATE INDEX IF NOT EXISTS idx_sessions_status ON sessions(status)",
    "CREATE INDEX IF NOT EXISTS idx_sessions_start ON sessions(start_time)",
]

# All table creation statements in order
ALL_TABLES = [
    CREATE_TASKS_TABLE,
    CREATE_SESSIONS_TABLE,
]

# All index creation statements
ALL_INDEXES = CREATE_TASK_INDEXES + CREATE_SESSION_INDEXES
