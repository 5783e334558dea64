"""Session service - starts, runs and finalizes pomodoro sessions."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from tasklog.config import PomodoroConfig
from tasklog.focus import SessionCoordinator, Terminal
from tasklog.models import (
    Session,
    SessionCreate,
    SessionFilters,
    SessionKind,
    SessionStatus,
)
from tasklog.repositories import SessionRepository
from tasklog.utils.logger import get_logger
from tasklog.utils.validation import validate_session_create, validate_session_filters

logger = get_logger("services.sessions")

CoordinatorFactory = Callable[[str, int, Terminal, PomodoroConfig], SessionCoordinator]


class SessionService:
    """Service for pomodoro session business logic."""

    def __init__(
        self,
        session_repository: SessionRepository,
        settings: PomodoroConfig | None = None,
        terminal_factory: Callable[[], Terminal] = Terminal,
        coordinator_factory: CoordinatorFactory = SessionCoordinator,
    ):
        self.repository = session_repository
        self.settings = settings or PomodoroConfig()
        self.terminal_factory = terminal_factory
        self.coordinator_factory = coordinator_factory

    async def run_session(
        self,
        title: str,
        kind: SessionKind = SessionKind.WORK,
        duration: timedelta = timedelta(minutes=25),
        category: str | None = None,
    ) -> Session:
        """Record a session and run its live countdown.

        Blocks until the countdown reaches zero (Finished) or the user quits
        (Paused). The session is finalized exactly once, after both workers
        have stopped and the terminal is restored.

        Raises:
            ValidationError: Before anything is written
            TerminalError: After the session was finalized as Paused
            PersistenceError: If the session cannot be stored

        Any other error out of the countdown is re-raised once the session
        has been finalized as Paused.
        """
        request = SessionCreate(
            title=title.strip(), kind=kind, duration=duration, category=category
        )
        validate_session_create(request)

        session = await self.repository.create(request)
        logger.info("session #%d started (%s)", session.id, session.kind.value)

        try:
            coordinator = self.coordinator_factory(
                session.title,
                int(duration.total_seconds()),
                self.terminal_factory(),
                self.settings,
            )
            result = await asyncio.to_thread(coordinator.run)
        except BaseException:
            logger.exception("session #%d countdown crashed", session.id)
            await self._finalize(session, SessionStatus.PAUSED)
            raise

        finalized = await self._finalize(session, result.status)
        if result.error is not None:
            raise result.error
        return finalized

    async def _finalize(self, session: Session, status: SessionStatus) -> Session:
        end_time = max(datetime.now(UTC), session.start_time)
        finalized = await self.repository.finalize(session.id, end_time, status)
        logger.info("session #%d finalized as %s", session.id, status.value)
        return finalized

    async def get_session(self, session_id: int) -> Session:
        return await self.repository.get(session_id)

    async def list_sessions(self, filters: SessionFilters | None = None) -> list[Session]:
        """List sessions started within the filter window, most recent first."""
        filters = filters or SessionFilters()
        validate_session_filters(filters)
        return await self.repository.list_all(filters)

    async def list_started_since(self, since: datetime) -> list[Session]:
        return await self.repository.list_started_since(since)
