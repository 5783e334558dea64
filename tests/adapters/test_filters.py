"""Tests for the listing query builder."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from tasklog.adapters.sqlite.filters import (
    QueryBuilder,
    build_session_query,
    build_task_query,
)
from tasklog.adapters.sqlite.utils import to_db_timestamp
from tasklog.errors import ValidationError
from tasklog.models import (
    Priority,
    SessionFilters,
    SessionKind,
    SessionStatus,
    TaskFilters,
    TaskStatus,
)

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


# ---------------------------------------------------------------------------
# QueryBuilder
# ---------------------------------------------------------------------------


class TestQueryBuilder:
    def test_no_clauses(self):
        query = QueryBuilder("SELECT * FROM t").build()
        assert query.sql == "SELECT * FROM t"
        assert query.params == ()

    def test_clauses_joined_in_order(self):
        query = (
            QueryBuilder("SELECT * FROM t")
            .where("a = ?", 1)
            .where("b = ?", "x")
            .order_by("a DESC")
            .limit(5)
            .build()
        )
        assert query.sql == "SELECT * FROM t WHERE a = ? AND b = ? ORDER BY a DESC LIMIT ?"
        assert query.params == (1, "x", 5)

    def test_placeholder_mismatch_raises(self):
        with pytest.raises(ValueError):
            QueryBuilder("SELECT * FROM t").where("a = ? AND b = ?", 1)


# ---------------------------------------------------------------------------
# Task query
# ---------------------------------------------------------------------------


class TestBuildTaskQuery:
    def test_defaults_to_open_tasks_due_within_one_day(self):
        query = build_task_query(TaskFilters(), now=NOW)
        assert "due_date <= ?" in query.sql
        assert "status = ?" in query.sql
        assert query.params == (to_db_timestamp(NOW + timedelta(days=1)), 0, 50)

    def test_all_status_has_no_status_clause(self):
        query = build_task_query(TaskFilters(status=TaskStatus.ALL), now=NOW)
        assert "status = ?" not in query.sql

    def test_done_status_filters_done(self):
        query = build_task_query(TaskFilters(status=TaskStatus.DONE), now=NOW)
        assert query.params[-2] == 1

    def test_param_order_follows_clause_order(self):
        filters = TaskFilters(
            limit=10, days=7, category="work", priority=Priority.HIGH, status=TaskStatus.OPEN
        )
        query = build_task_query(filters, now=NOW)
        assert query.sql.index("category = ?") < query.sql.index("priority = ?") < query.sql.index("status = ?")
        assert query.params == (
            to_db_timestamp(NOW + timedelta(days=7)),
            "work",
            3,
            0,
            10,
        )

    def test_ordering_breaks_ties_by_id(self):
        query = build_task_query(TaskFilters(), now=NOW)
        assert query.sql.endswith("ORDER BY created_at DESC, id ASC LIMIT ?")

    def test_maximum_values_are_accepted(self):
        query = build_task_query(TaskFilters(limit=100, days=365), now=NOW)
        assert query.params[-1] == 100

    @pytest.mark.parametrize(
        "filters, message",
        [
            (TaskFilters(limit=101), "Limit cannot be greater than 100"),
            (TaskFilters(days=366), "Days cannot be greater than 365"),
            (TaskFilters(limit=-1), "Limit cannot be negative"),
            (TaskFilters(days=-1), "Days cannot be negative"),
        ],
    )
    def test_out_of_range_is_rejected(self, filters, message):
        with pytest.raises(ValidationError, match=message):
            build_task_query(filters, now=NOW)


# ---------------------------------------------------------------------------
# Session query
# ---------------------------------------------------------------------------


class TestBuildSessionQuery:
    def test_defaults_to_any_status_in_last_day(self):
        query = build_session_query(SessionFilters(), now=NOW)
        assert "status = ?" not in query.sql
        assert query.params == (to_db_timestamp(NOW - timedelta(days=1)), 50)

    def test_all_predicates(self):
        filters = SessionFilters(
            limit=5,
            days=3,
            category="deep",
            kind=SessionKind.REST,
            status=SessionStatus.PAUSED,
        )
        query = build_session_query(filters, now=NOW)
        assert query.params == (to_db_timestamp(NOW - timedelta(days=3)), "deep", 1, 1, 5)
        assert query.sql.endswith("ORDER BY start_time DESC, id ASC LIMIT ?")

    def test_since_overrides_days(self):
        since = datetime(2024, 1, 1, tzinfo=UTC)
        query = build_session_query(SessionFilters(days=3, since=since), now=NOW)
        assert query.params[0] == to_db_timestamp(since)

    def test_limit_over_maximum_is_rejected(self):
        with pytest.raises(ValidationError):
            build_session_query(SessionFilters(limit=500), now=NOW)
