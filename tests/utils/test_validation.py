"""Tests for request validation."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from tasklog.errors import ValidationError
from tasklog.models import SessionCreate, SessionFilters, TaskCreate, TaskFilters
from tasklog.utils.validation import (
    validate_session_create,
    validate_session_filters,
    validate_task_create,
    validate_task_filters,
    validate_window,
)

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


class TestWindow:
    def test_bounds_accepted(self):
        validate_window(0, 0)
        validate_window(100, 365)

    @pytest.mark.parametrize(
        ("limit", "days", "message"),
        [
            (-1, 1, "Limit cannot be negative"),
            (101, 1, "Limit cannot be greater than 100"),
            (10, -1, "Days cannot be negative"),
            (10, 366, "Days cannot be greater than 365"),
        ],
    )
    def test_out_of_range_rejected(self, limit, days, message):
        with pytest.raises(ValidationError, match=message):
            validate_window(limit, days)

    def test_filters_use_window(self):
        with pytest.raises(ValidationError):
            validate_task_filters(TaskFilters(limit=500))
        with pytest.raises(ValidationError):
            validate_session_filters(SessionFilters(days=1000))


class TestTaskCreate:
    def test_valid(self):
        validate_task_create(
            TaskCreate(title="Write report", due_date=NOW + timedelta(days=1)), now=NOW
        )

    def test_blank_title(self):
        with pytest.raises(ValidationError, match="Title cannot be empty"):
            validate_task_create(TaskCreate(title="   ", due_date=NOW), now=NOW)

    def test_earlier_today_is_accepted(self):
        validate_task_create(
            TaskCreate(title="x", due_date=NOW - timedelta(hours=1)), now=NOW
        )

    def test_yesterday_rejected(self):
        with pytest.raises(ValidationError, match="Due date cannot be in the past"):
            validate_task_create(
                TaskCreate(title="x", due_date=NOW - timedelta(days=1)), now=NOW
            )


class TestSessionCreate:
    def test_valid(self):
        validate_session_create(SessionCreate(title="Focus"))

    def test_blank_title(self):
        with pytest.raises(ValidationError, match="Title cannot be empty"):
            validate_session_create(SessionCreate(title=""))

    def test_zero_duration(self):
        with pytest.raises(ValidationError, match="Duration cannot be 0"):
            validate_session_create(SessionCreate(title="x", duration=timedelta(0)))

    def test_fractional_seconds(self):
        with pytest.raises(ValidationError, match="whole number of seconds"):
            validate_session_create(
                SessionCreate(title="x", duration=timedelta(seconds=1.5))
            )
