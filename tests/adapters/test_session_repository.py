"""Unit tests for SqliteSessionRepository against a temp-file database."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from tasklog.errors import NotFoundError, PersistenceError
from tasklog.models import (
    SessionCreate,
    SessionFilters,
    SessionKind,
    SessionStatus,
)


def _session(title: str = "focus", **kwargs) -> SessionCreate:
    return SessionCreate(title=title, **kwargs)


class TestCreate:
    @pytest.mark.asyncio
    async def test_create_is_running_with_start_time(self, session_repo):
        before = datetime.now(UTC)
        session = await session_repo.create(_session(category="deep"))
        assert session.id > 0
        assert session.status is SessionStatus.RUNNING
        assert session.start_time >= before
        assert session.end_time is None
        assert session.category == "deep"

    @pytest.mark.asyncio
    async def test_created_row_reads_back(self, session_repo):
        session = await session_repo.create(
            _session(kind=SessionKind.REST, duration=timedelta(minutes=5))
        )
        stored = await session_repo.get(session.id)
        assert stored == session


class TestFinalize:
    @pytest.mark.asyncio
    async def test_round_trip_finished_session(self, session_repo):
        session = await session_repo.create(
            _session("focus", kind=SessionKind.WORK, duration=timedelta(minutes=25))
        )
        end = session.start_time + timedelta(minutes=25)

        finalized = await session_repo.finalize(session.id, end, SessionStatus.FINISHED)
        stored = await session_repo.get(session.id)

        assert stored == finalized
        assert stored.title == "focus"
        assert stored.kind is SessionKind.WORK
        assert stored.duration == timedelta(minutes=25)
        assert stored.status is SessionStatus.FINISHED
        assert stored.end_time == end
        assert stored.end_time >= stored.start_time

    @pytest.mark.asyncio
    async def test_paused(self, session_repo):
        session = await session_repo.create(_session())
        finalized = await session_repo.finalize(
            session.id, datetime.now(UTC), SessionStatus.PAUSED
        )
        assert finalized.status is SessionStatus.PAUSED

    @pytest.mark.asyncio
    async def test_running_is_rejected_before_any_write(self, session_repo):
        session = await session_repo.create(_session())
        with pytest.raises(ValueError):
            await session_repo.finalize(session.id, datetime.now(UTC), SessionStatus.RUNNING)
        assert (await session_repo.get(session.id)).end_time is None

    @pytest.mark.asyncio
    async def test_missing_row_raises_persistence_error(self, session_repo):
        with pytest.raises(PersistenceError):
            await session_repo.finalize(404, datetime.now(UTC), SessionStatus.FINISHED)


class TestGet:
    @pytest.mark.asyncio
    async def test_missing_session_raises_not_found(self, session_repo):
        with pytest.raises(NotFoundError):
            await session_repo.get(12)


class TestListAll:
    @pytest.mark.asyncio
    async def test_most_recent_first_any_status(self, session_repo):
        a = await session_repo.create(_session("a"))
        b = await session_repo.create(_session("b"))
        await session_repo.finalize(a.id, datetime.now(UTC), SessionStatus.PAUSED)

        sessions = await session_repo.list_all(SessionFilters())
        assert [s.id for s in sessions] == [b.id, a.id]

    @pytest.mark.asyncio
    async def test_status_kind_category(self, session_repo):
        a = await session_repo.create(_session("a", kind=SessionKind.REST, category="x"))
        await session_repo.create(_session("b", kind=SessionKind.WORK, category="x"))
        await session_repo.finalize(a.id, datetime.now(UTC), SessionStatus.FINISHED)

        sessions = await session_repo.list_all(
            SessionFilters(kind=SessionKind.REST, status=SessionStatus.FINISHED, category="x")
        )
        assert [s.id for s in sessions] == [a.id]

    @pytest.mark.asyncio
    async def test_since_in_future_is_empty(self, session_repo):
        await session_repo.create(_session())
        sessions = await session_repo.list_all(
            SessionFilters(since=datetime.now(UTC) + timedelta(hours=1))
        )
        assert sessions == []


class TestListStartedSince:
    @pytest.mark.asyncio
    async def test_lists_all_started_after(self, session_repo):
        since = datetime.now(UTC) - timedelta(seconds=5)
        for i in range(3):
            await session_repo.create(_session(f"s{i}"))
        assert len(await session_repo.list_started_since(since)) == 3
