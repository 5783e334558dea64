"""Pomodoro session commands with a live countdown."""

import typer

from tasklog.config import get_config_manager
from tasklog.focus.ui import show_completion_message, show_stopped_message
from tasklog.models import (
    DEFAULT_DAYS,
    SessionFilters,
    SessionKind,
    SessionStatus,
)
from tasklog.services.context_manager import get_storage_context
from tasklog.services.session_service import SessionService
from tasklog.utils.parsing import parse_date, parse_duration
from tasklog.utils.typer_helpers import SuggestingGroup
from tasklog.utils.ui.console import get_console
from tasklog.utils.ui.formatters import format_sessions

from .decorators import command_wrapper
from .list_command import check_output_format

app = typer.Typer(cls=SuggestingGroup, help="Pomodoro focus sessions")


def get_session_service() -> SessionService:
    settings = get_config_manager().config.pomodoro
    return SessionService(get_storage_context().session_repository, settings=settings)


@app.command("start")
@command_wrapper
async def start_session(
    title: str = typer.Option(..., "--title", "-t", help="Session title"),
    duration: str | None = typer.Option(
        None, "--duration", "-d", help="Length, e.g. 25m, 90s, 1h (default from config)"
    ),
    category: str | None = typer.Option(None, "--category", "-c", help="Session category"),
    rest: bool = typer.Option(False, "--rest", help="Record a rest session instead of work"),
) -> None:
    """Start a live countdown. Press 'q' to stop early."""
    if duration is None:
        duration = get_config_manager().config.pomodoro.default_duration
    length = parse_duration(duration)
    kind = SessionKind.REST if rest else SessionKind.WORK

    session = await get_session_service().run_session(title, kind, length, category)

    console = get_console()
    if session.status is SessionStatus.FINISHED:
        show_completion_message(session, console)
    else:
        show_stopped_message(session, console)


@app.command("ls")
@command_wrapper
async def list_sessions(
    limit: int | None = typer.Option(
        None, "--limit", "-l", help="Maximum rows (default from config, max 100)"
    ),
    days: int = typer.Option(
        DEFAULT_DAYS, "--days", "-d", help="Sessions started in the last N days (max 365)"
    ),
    category: str | None = typer.Option(None, "--category", "-c", help="Filter by category"),
    status: SessionStatus | None = typer.Option(
        None, "--status", "-s", case_sensitive=False, help="Filter by status"
    ),
    kind: SessionKind | None = typer.Option(
        None, "--kind", case_sensitive=False, help="Filter by kind"
    ),
    output: str = typer.Option("table", "--output", "-o", help="table, json or yaml"),
) -> None:
    """List recent sessions, most recent first."""
    check_output_format(output)
    if limit is None:
        limit = get_config_manager().config.output.default_limit

    filters = SessionFilters(
        limit=limit, days=days, category=category, status=status, kind=kind
    )
    sessions = await get_session_service().list_sessions(filters)
    format_sessions(sessions, output)


@app.command("logs")
@command_wrapper
async def session_logs(
    since: str = typer.Option(
        "1d", "--since", "-n", help="Start from: offset (7d, 1m) or YYYY-MM-DD"
    ),
    output: str = typer.Option("table", "--output", "-o", help="table, json or yaml"),
) -> None:
    """Show every session started since a date."""
    check_output_format(output)
    start = parse_date(since, backward=True)
    sessions = await get_session_service().list_started_since(start)
    format_sessions(sessions, output)
