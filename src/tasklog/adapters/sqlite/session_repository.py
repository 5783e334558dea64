"""SQLite implementation of SessionRepository."""

from __future__ import annotations

import sqlite3
from datetime import datetime, timedelta
from pathlib import Path

from tasklog.adapters.sqlite.connection import open_connection
from tasklog.adapters.sqlite.filters import SESSION_COLUMNS, build_session_query
from tasklog.adapters.sqlite.utils import (
    now_utc,
    parse_datetime,
    row_to_dict,
    to_db_timestamp,
)
from tasklog.errors import NotFoundError, PersistenceError
from tasklog.models import (
    SESSION_KIND_CODES,
    SESSION_STATUS_CODES,
    Session,
    SessionCreate,
    SessionFilters,
    SessionStatus,
)
from tasklog.repositories import SessionRepository
from tasklog.utils.logger import get_logger

logger = get_logger("store.sessions")


def parse_session(row: sqlite3.Row) -> Session:
    """Map a ``sessions`` row onto a Session."""
    data = row_to_dict(row)
    data["kind"] = SESSION_KIND_CODES.decode(data["kind"])
    data["status"] = SESSION_STATUS_CODES.decode(data["status"])
    data["duration"] = timedelta(seconds=data["duration"])
    data["start_time"] = parse_datetime(data["start_time"])
    data["end_time"] = parse_datetime(data.get("end_time"))
    return Session(**data)


class SqliteSessionRepository(SessionRepository):
    """SQLite implementation of session repository."""

    def __init__(self, db_path: str | Path):
        self.db_path = Path(db_path)

    async def create(self, session_data: SessionCreate) -> Session:
        """Insert a Running session.

        The start time is taken here, at insert, never earlier. A failed
        insert is not retried.
        """
        start = now_utc()
        stamp = to_db_timestamp(start)
        try:
            with open_connection(self.db_path) as conn:
                cursor = conn.execute(
                    """INSERT INTO sessions (
                        kind, title, start_time, duration, status, category,
                        created_at, updated_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)""",
                    (
                        SESSION_KIND_CODES.encode(session_data.kind),
                        session_data.title,
                        stamp,
                        int(session_data.duration.total_seconds()),
                        SESSION_STATUS_CODES.encode(SessionStatus.RUNNING),
                        session_data.category,
                        stamp,
                        stamp,
                    ),
                )
                session_id = cursor.lastrowid
        except sqlite3.Error as e:
            raise PersistenceError(f"Could not start session: {e}") from e

        logger.info("created session %s (%s)", session_id, session_data.title)
        return Session(
            id=session_id,
            title=session_data.title,
            kind=session_data.kind,
            duration=session_data.duration,
            category=session_data.category,
            start_time=parse_datetime(stamp),
            status=SessionStatus.RUNNING,
        )

    async def finalize(
        self, session_id: int, end_time: datetime, status: SessionStatus
    ) -> Session:
        """Write the end time and terminal status of a session."""
        if not status.is_final:
            raise ValueError(f"Cannot finalize session {session_id} as {status.value}")

        try:
            with open_connection(self.db_path) as conn:
                cursor = conn.execute(
                    """UPDATE sessions
                    SET status = ?, end_time = ?, updated_at = ?
                    WHERE id = ?""",
                    (
                        SESSION_STATUS_CODES.encode(status),
                        to_db_timestamp(end_time),
                        to_db_timestamp(now_utc()),
                        session_id,
                    ),
                )
                updated = cursor.rowcount
        except sqlite3.Error as e:
            raise PersistenceError(f"Could not finalize session {session_id}: {e}") from e

        if updated == 0:
            raise PersistenceError(
                f"Could not finalize session {session_id}: no such session"
            )

        logger.info("session %s finalized as %s", session_id, status.value)
        return await self.get(session_id)

    async def get(self, session_id: int) -> Session:
        try:
            with open_connection(self.db_path) as conn:
                row = conn.execute(
                    f"SELECT {SESSION_COLUMNS} FROM sessions WHERE id = ?",
                    (session_id,),
                ).fetchone()
        except sqlite3.Error as e:
            raise PersistenceError(f"Could not read session {session_id}: {e}") from e

        if row is None:
            raise NotFoundError(f"Session not found: {session_id}")
        return parse_session(row)

    async def list_all(self, filters: SessionFilters) -> list[Session]:
        query = build_session_query(filters)
        try:
            with open_connection(self.db_path) as conn:
                rows = conn.execute(query.sql, query.params).fetchall()
        except sqlite3.Error as e:
            raise PersistenceError(f"Could not list sessions: {e}") from e
        return [parse_session(row) for row in rows]

    async def list_started_since(self, since: datetime) -> list[Session]:
        try:
            with open_connection(self.db_path) as conn:
                rows = conn.execute(
                    f"""SELECT {SESSION_COLUMNS} FROM sessions
                    WHERE start_time >= ?
                    ORDER BY start_time DESC, id ASC""",
                    (to_db_timestamp(since),),
                ).fetchall()
        except sqlite3.Error as e:
            raise PersistenceError(f"Could not list sessions: {e}") from e
        return [parse_session(row) for row in rows]
