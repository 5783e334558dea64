"""Query builder for task and session listings.

Each predicate is a SQL fragment plus its bound parameters; fragments are
joined with AND in the order they were added, so parameter order always
matches placeholder order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

from tasklog.adapters.sqlite.utils import now_utc, to_db_timestamp
from tasklog.models import (
    PRIORITY_CODES,
    SESSION_KIND_CODES,
    SESSION_STATUS_CODES,
    TASK_STATUS_CODES,
    SessionFilters,
    TaskFilters,
    TaskStatus,
)
from tasklog.utils.validation import validate_session_filters, validate_task_filters

TASK_COLUMNS = "id, status, title, due_date, priority, category, created_at, updated_at"
SESSION_COLUMNS = (
    "id, kind, title, start_time, end_time, duration, status, category"
)


@dataclass(frozen=True)
class Query:
    """A fully bound statement."""

    sql: str
    params: tuple[Any, ...]


@dataclass
class QueryBuilder:
    """Composes a SELECT from predicate clauses."""

    base_sql: str
    clauses: list[str] = field(default_factory=list)
    params: list[Any] = field(default_factory=list)
    ordering: list[str] = field(default_factory=list)
    row_limit: int | None = None

    def where(self, clause: str, *params: Any) -> QueryBuilder:
        if clause.count("?") != len(params):
            raise ValueError(f"{clause!r} expects {clause.count('?')} params, got {len(params)}")
        self.clauses.append(clause)
        self.params.extend(params)
        return self

    def order_by(self, *terms: str) -> QueryBuilder:
        self.ordering.extend(terms)
        return self

    def limit(self, n: int) -> QueryBuilder:
        self.row_limit = n
        return self

    def build(self) -> Query:
        sql = self.base_sql
        params = list(self.params)
        if self.clauses:
            sql += " WHERE " + " AND ".join(self.clauses)
        if self.ordering:
            sql += " ORDER BY " + ", ".join(self.ordering)
        if self.row_limit is not None:
            sql += " LIMIT ?"
            params.append(self.row_limit)
        return Query(sql=sql, params=tuple(params))


def build_task_query(filters: TaskFilters, now: datetime | None = None) -> Query:
    """Build the task listing query.

    Raises:
        ValidationError: If limit or days exceed their maximum
    """
    validate_task_filters(filters)

    due_before = (now or now_utc()) + timedelta(days=filters.days)
    builder = QueryBuilder(f"SELECT {TASK_COLUMNS} FROM tasks")
    builder.where("due_date <= ?", to_db_timestamp(due_before))

    if filters.category is not None:
        builder.where("category = ?", filters.category)

    if filters.priority is not None:
        builder.where("priority = ?", PRIORITY_CODES.encode(filters.priority))

    # Listings default to actionable items
    if filters.status is None:
        builder.where("status = ?", TASK_STATUS_CODES.encode(TaskStatus.OPEN))
    elif filters.status is not TaskStatus.ALL:
        builder.where("status = ?", TASK_STATUS_CODES.encode(filters.status))

    return builder.order_by("created_at DESC", "id ASC").limit(filters.limit).build()


def build_session_query(filters: SessionFilters, now: datetime | None = None) -> Query:
    """Build the session listing query.

    ``filters.since`` replaces the ``days`` look-back window when set.

    Raises:
        ValidationError: If limit or days exceed their maximum
    """
    validate_session_filters(filters)

    since = filters.since or (now or now_utc()) - timedelta(days=filters.days)
    builder = QueryBuilder(f"SELECT {SESSION_COLUMNS} FROM sessions")
    builder.where("start_time >= ?", to_db_timestamp(since))

    if filters.category is not None:
        builder.where("category = ?", filters.category)

    if filters.kind is not None:
        builder.where("kind = ?", SESSION_KIND_CODES.encode(filters.kind))

    if filters.status is not None:
        builder.where("status = ?", SESSION_STATUS_CODES.encode(filters.status))

    return builder.order_by("start_time DESC", "id ASC").limit(filters.limit).build()
