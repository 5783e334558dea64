"""Request validation.

Runs before any side effect: a request that fails here never reaches the
store or the terminal.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from tasklog.errors import ValidationError
from tasklog.models import (
    MAX_DAYS,
    MAX_LIMIT,
    SessionCreate,
    SessionFilters,
    TaskCreate,
    TaskFilters,
)


def validate_window(limit: int, days: int) -> None:
    """Check the row limit and day window shared by every listing.

    Values over the maximum are rejected, never clamped.
    """
    if limit < 0:
        raise ValidationError("Limit cannot be negative")
    if limit > MAX_LIMIT:
        raise ValidationError(f"Limit cannot be greater than {MAX_LIMIT}")
    if days < 0:
        raise ValidationError("Days cannot be negative")
    if days > MAX_DAYS:
        raise ValidationError(f"Days cannot be greater than {MAX_DAYS}")


def validate_task_filters(filters: TaskFilters) -> None:
    validate_window(filters.limit, filters.days)


def validate_session_filters(filters: SessionFilters) -> None:
    validate_window(filters.limit, filters.days)


def validate_task_create(task: TaskCreate, now: datetime | None = None) -> None:
    if not task.title.strip():
        raise ValidationError("Title cannot be empty")
    # Compared by calendar day
    now = now or datetime.now().astimezone()
    due = task.due_date.astimezone(now.tzinfo)
    if due.date() < now.date():
        raise ValidationError("Due date cannot be in the past")


def validate_session_create(session: SessionCreate) -> None:
    if not session.title.strip():
        raise ValidationError("Title cannot be empty")
    if session.duration <= timedelta(0):
        raise ValidationError("Duration cannot be 0")
    if session.duration.total_seconds() != int(session.duration.total_seconds()):
        raise ValidationError("Duration must be a whole number of seconds")
