"""Countdown frame layout and end-of-session panels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from rich.console import Console
from rich.panel import Panel

from tasklog.models import Session

BOX_WIDTH = 40
BOX_HEIGHT = 4
INNER_WIDTH = BOX_WIDTH - 2
ELLIPSIS = "…"


@dataclass
class ViewState:
    """What the countdown screen shows. Owned by the coordinator only."""

    title: str
    width: int
    height: int
    remaining: int
    quit: bool = False


class FrameLine(NamedTuple):
    text: str
    style: str = ""


@dataclass(frozen=True)
class Frame:
    """A positioned block of lines; (x, y) is the top-left corner."""

    x: int
    y: int
    lines: tuple[FrameLine, ...]


def format_remaining(seconds: int) -> str:
    """``MM:SS``; minutes keep counting past 59."""
    seconds = max(0, seconds)
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


def fit_title(title: str, width: int = INNER_WIDTH) -> str:
    if len(title) <= width:
        return title
    return title[: width - 1] + ELLIPSIS


def time_style(remaining: int, quit: bool = False) -> str:
    if quit:
        return "bold yellow"
    if remaining < 60:
        return "bold red"
    if remaining < 300:
        return "bold yellow"
    return "bold cyan"


def render_frame(view: ViewState) -> Frame:
    """Lay out the countdown box centered in a ``width`` x ``height`` screen.

    The box is always BOX_WIDTH x BOX_HEIGHT; on a screen smaller than the
    box its corner is clamped to (0, 0).
    """
    x = max(0, (view.width - BOX_WIDTH) // 2)
    y = max(0, (view.height - BOX_HEIGHT) // 2)
    border = "─" * INNER_WIDTH

    lines = (
        FrameLine(f"┌{border}┐", "dim"),
        FrameLine(f"│{fit_title(view.title).center(INNER_WIDTH)}│", "bold white"),
        FrameLine(
            f"│{format_remaining(view.remaining).center(INNER_WIDTH)}│",
            time_style(view.remaining, view.quit),
        ),
        FrameLine(f"└{border}┘", "dim"),
    )
    return Frame(x=x, y=y, lines=lines)


def _minutes(seconds: float) -> int:
    return int(seconds) // 60


def show_completion_message(session: Session, console: Console | None = None):
    """Show a completion message after the countdown reaches zero."""
    console = console or Console()

    panel = Panel(
        f"""[bold green]Session Complete![/bold green]

Title: {session.title}
Kind: {session.kind.value}
Duration: {_minutes(session.duration.total_seconds())} minutes
Category: {session.category or "N/A"}

Session #{session.id} saved.""",
        border_style="green",
        padding=(1, 2),
    )

    console.print(panel)


def show_stopped_message(session: Session, console: Console | None = None):
    """Show a message when a session is quit early."""
    console = console or Console()

    total = session.duration.total_seconds()
    elapsed = session.elapsed.total_seconds() if session.elapsed else 0
    elapsed = min(elapsed, total)

    panel = Panel(
        f"""[yellow]Session Stopped[/yellow]

Title: {session.title}
Time focused: {_minutes(elapsed)} minutes
Remaining: {_minutes(total - elapsed)} minutes

Session #{session.id} saved as paused.""",
        border_style="yellow",
        padding=(1, 2),
    )

    console.print(panel)
