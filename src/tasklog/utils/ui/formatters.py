"""Output formatters for tasks, sessions and messages."""

import json
from datetime import datetime, timedelta
from typing import Any

import yaml
from rich.markup import escape
from rich.table import Table

from tasklog.models import Priority, Session, SessionStatus, Task, TaskStatus

from .console import get_console

OUTPUT_FORMATS = ("table", "json", "yaml")

PRIORITY_COLORS = {
    Priority.URGENT: "bold red",
    Priority.HIGH: "bold orange3",
    Priority.MEDIUM: "bold yellow",
    Priority.LOW: "green",
}

TASK_STATUS_COLORS = {
    TaskStatus.OPEN: "cyan",
    TaskStatus.DONE: "green",
}

SESSION_STATUS_COLORS = {
    SessionStatus.RUNNING: "cyan",
    SessionStatus.PAUSED: "yellow",
    SessionStatus.FINISHED: "green",
}


def colorize(text: str, color: str) -> str:
    """Wrap *text* in rich markup for *color*; the text itself is escaped."""
    return f"[{color}]{escape(text)}[/{color}]"


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(f"[bold red]Error:[/bold red] {escape(message)}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console().print(f"[bold green]Success:[/bold green] {escape(message)}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    get_console().print(f"[bold blue]Info:[/bold blue] {escape(message)}")


def format_duration(value: timedelta) -> str:
    """Compact form in the same grammar the CLI accepts: 25m, 90s, 1h, 1h30m."""
    seconds = int(value.total_seconds())
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if secs:
        return f"{seconds}s" if seconds < 3600 else f"{hours}h{minutes}m{secs}s"
    if hours and minutes:
        return f"{hours}h{minutes}m"
    if hours:
        return f"{hours}h"
    return f"{minutes}m"


def format_timestamp(value: datetime | None) -> str:
    """Local ``YYYY-MM-DD HH:MM``, or ``-`` when unset."""
    if value is None:
        return "-"
    return value.astimezone().strftime("%Y-%m-%d %H:%M")


def task_to_row(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "title": task.title,
        "due_date": format_timestamp(task.due_date),
        "priority": task.priority.value,
        "category": task.category,
        "status": task.status.value,
        "created_at": format_timestamp(task.created_at),
    }


def session_to_row(session: Session) -> dict[str, Any]:
    return {
        "id": session.id,
        "title": session.title,
        "kind": session.kind.value,
        "duration": format_duration(session.duration),
        "category": session.category,
        "start_time": format_timestamp(session.start_time),
        "end_time": format_timestamp(session.end_time),
        "status": session.status.value,
    }


def _cell(value: Any) -> str:
    if value is None:
        return "-"
    return str(value)


def format_tasks_table(tasks: list[Task]) -> None:
    console = get_console()
    if not tasks:
        console.print("[yellow]No tasks found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    for column in ("ID", "Title", "Due", "Priority", "Category", "Status"):
        table.add_column(column)

    for task in tasks:
        row = task_to_row(task)
        table.add_row(
            str(task.id),
            escape(task.title),
            row["due_date"],
            colorize(task.priority.value, PRIORITY_COLORS[task.priority]),
            escape(_cell(task.category)),
            colorize(task.status.value, TASK_STATUS_COLORS.get(task.status, "white")),
        )

    console.print(table)


def format_sessions_table(sessions: list[Session]) -> None:
    console = get_console()
    if not sessions:
        console.print("[yellow]No sessions found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    for column in ("ID", "Title", "Kind", "Duration", "Category", "Start", "End", "Status"):
        table.add_column(column)

    for session in sessions:
        row = session_to_row(session)
        table.add_row(
            str(session.id),
            escape(session.title),
            row["kind"],
            row["duration"],
            escape(_cell(session.category)),
            row["start_time"],
            row["end_time"],
            colorize(session.status.value, SESSION_STATUS_COLORS[session.status]),
        )

    console.print(table)


def format_rows(rows: list[dict[str, Any]], output_format: str) -> None:
    """Print rows as JSON or YAML for scripting."""
    if output_format == "json":
        print(json.dumps(rows, indent=2, default=str, ensure_ascii=False))
    elif output_format == "yaml":
        print(yaml.dump(rows, default_flow_style=False, sort_keys=False, allow_unicode=True))
    else:
        raise ValueError(f"Unsupported output format: {output_format}")


def format_tasks(tasks: list[Task], output_format: str = "table") -> None:
    if output_format == "table":
        format_tasks_table(tasks)
    else:
        format_rows([task_to_row(t) for t in tasks], output_format)


def format_sessions(sessions: list[Session], output_format: str = "table") -> None:
    if output_format == "table":
        format_sessions_table(sessions)
    else:
        format_rows([session_to_row(s) for s in sessions], output_format)


def _counter_table(title: str, counts, colors: dict | None = None) -> Table:
    table = Table(title=title, show_header=False, title_justify="left")
    table.add_column("Name", style="cyan")
    table.add_column("Count", justify="right")
    for name, count in sorted(counts.items()):
        label = colorize(name, colors[name]) if colors and name in colors else escape(name)
        table.add_row(label, str(count))
    return table


def format_summary(summary) -> None:
    """Print an ActivitySummary."""
    console = get_console()
    console.print(
        f"[bold]Since {format_timestamp(summary.since)}:[/bold] "
        f"{summary.tasks} task(s) created, {summary.sessions} session(s) started"
    )
    if summary.tasks:
        priority_colors = {p.value: c for p, c in PRIORITY_COLORS.items()}
        console.print(_counter_table("Tasks by status", summary.by_status))
        console.print(_counter_table("Tasks by priority", summary.by_priority, priority_colors))
        console.print(_counter_table("Tasks by category", summary.by_category))
    if summary.sessions:
        status_colors = {s.value: c for s, c in SESSION_STATUS_COLORS.items()}
        console.print(_counter_table("Sessions by status", summary.sessions_by_status, status_colors))
        console.print(
            f"Focus time: [green]{format_duration(summary.focus_finished)}[/green] finished, "
            f"[yellow]{format_duration(summary.focus_paused)}[/yellow] paused"
        )
