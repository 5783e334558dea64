"""Core data models for tasks and focus sessions."""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel, Field

from .enums import Priority, SessionKind, SessionStatus, TaskStatus

DEFAULT_LIMIT = 50
MAX_LIMIT = 100
DEFAULT_DAYS = 1
MAX_DAYS = 365


class Task(BaseModel):
    """A to-do item.

    Attributes:
        id: Row id assigned by the store
        title: Non-empty title
        due_date: Due instant (timezone aware)
        priority: Priority level, Low < Medium < High < Urgent
        category: Optional free-form category
        status: Open or Done (never All)
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """

    id: int
    title: str
    due_date: datetime
    priority: Priority = Priority.MEDIUM
    category: str | None = None
    status: TaskStatus = TaskStatus.OPEN
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_done(self) -> bool:
        return self.status is TaskStatus.DONE


class TaskCreate(BaseModel):
    """Model for creating a new task."""

    title: str
    due_date: datetime
    priority: Priority = Priority.MEDIUM
    category: str | None = None


class Session(BaseModel):
    """A pomodoro session.

    Attributes:
        id: Row id assigned by the store
        title: Session title
        kind: Work or Rest
        duration: Requested countdown length
        category: Optional category
        start_time: Instant the row was created
        end_time: Instant the session was finalized, None while running
        status: Running until finalized, then Paused or Finished
    """

    id: int
    title: str
    kind: SessionKind = SessionKind.WORK
    duration: timedelta
    category: str | None = None
    start_time: datetime
    end_time: datetime | None = None
    status: SessionStatus = SessionStatus.RUNNING

    @property
    def elapsed(self) -> timedelta | None:
        """Wall-clock length of a finalized session."""
        if self.end_time is None:
            return None
        return self.end_time - self.start_time


class SessionCreate(BaseModel):
    """Model for starting a new session."""

    title: str
    kind: SessionKind = SessionKind.WORK
    duration: timedelta = timedelta(minutes=25)
    category: str | None = None


class TaskFilters(BaseModel):
    """Filters for listing tasks.

    ``status`` left as None means Open tasks only; ``TaskStatus.ALL`` lifts
    the status restriction. ``days`` is a look-ahead window on the due date.
    """

    limit: int = Field(default=DEFAULT_LIMIT)
    days: int = Field(default=DEFAULT_DAYS)
    category: str | None = None
    priority: Priority | None = None
    status: TaskStatus | None = None


class SessionFilters(BaseModel):
    """Filters for listing sessions.

    ``days`` is a look-back window on the start time; ``status`` left as None
    means any status.
    """

    limit: int = Field(default=DEFAULT_LIMIT)
    days: int = Field(default=DEFAULT_DAYS)
    category: str | None = None
    kind: SessionKind | None = None
    status: SessionStatus | None = None
    since: datetime | None = None
