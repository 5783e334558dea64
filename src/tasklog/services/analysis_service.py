"""Summary of recent activity for the ``analyze`` command."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from tasklog.models import Session, SessionKind, SessionStatus, Task

from .session_service import SessionService
from .task_service import TaskService

NO_CATEGORY = "(none)"


@dataclass
class ActivitySummary:
    """Counts over tasks created and sessions started since a point in time."""

    since: datetime
    tasks: int = 0
    by_status: Counter = field(default_factory=Counter)
    by_priority: Counter = field(default_factory=Counter)
    by_category: Counter = field(default_factory=Counter)
    sessions: int = 0
    sessions_by_status: Counter = field(default_factory=Counter)
    focus_finished: timedelta = timedelta(0)
    focus_paused: timedelta = timedelta(0)

    @property
    def focus_total(self) -> timedelta:
        return self.focus_finished + self.focus_paused


def focused_time(session: Session) -> timedelta:
    """Time spent in a finalized session, never more than was requested."""
    if session.elapsed is None:
        return timedelta(0)
    return min(session.elapsed, session.duration)


def summarize(since: datetime, tasks: list[Task], sessions: list[Session]) -> ActivitySummary:
    summary = ActivitySummary(since=since, tasks=len(tasks))
    for task in tasks:
        summary.by_status[task.status.value] += 1
        summary.by_priority[task.priority.value] += 1
        summary.by_category[task.category or NO_CATEGORY] += 1

    for session in sessions:
        summary.sessions += 1
        summary.sessions_by_status[session.status.value] += 1
        # Rest sessions are not focus time
        if session.kind is not SessionKind.WORK:
            continue
        if session.status is SessionStatus.FINISHED:
            summary.focus_finished += focused_time(session)
        elif session.status is SessionStatus.PAUSED:
            summary.focus_paused += focused_time(session)
    return summary


class AnalysisService:
    def __init__(self, task_service: TaskService, session_service: SessionService):
        self.task_service = task_service
        self.session_service = session_service

    async def analyze(self, since: datetime) -> ActivitySummary:
        tasks = await self.task_service.list_created_since(since)
        sessions = await self.session_service.list_started_since(since)
        return summarize(since, tasks, sessions)
