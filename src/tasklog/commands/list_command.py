"""Command 'ls' of tasklog"""

import typer

from tasklog.config import get_config_manager
from tasklog.errors import ValidationError
from tasklog.models import DEFAULT_DAYS, Priority, TaskFilters, TaskStatus
from tasklog.services.context_manager import get_storage_context
from tasklog.services.task_service import TaskService
from tasklog.utils.ui.formatters import OUTPUT_FORMATS, format_tasks

from .decorators import command_wrapper

app = typer.Typer()


def check_output_format(output: str) -> str:
    if output not in OUTPUT_FORMATS:
        raise ValidationError(
            f"Unknown output format '{output}', expected one of {', '.join(OUTPUT_FORMATS)}"
        )
    return output


@app.command("ls")
@command_wrapper
async def list_tasks(
    limit: int | None = typer.Option(
        None, "--limit", "-l", help="Maximum rows (default from config, max 100)"
    ),
    days: int = typer.Option(
        DEFAULT_DAYS, "--days", "-d", help="Show tasks due within N days (max 365)"
    ),
    category: str | None = typer.Option(None, "--category", "-c", help="Filter by category"),
    priority: Priority | None = typer.Option(
        None, "--priority", "-p", case_sensitive=False, help="Filter by priority"
    ),
    status: TaskStatus | None = typer.Option(
        None, "--status", "-s", case_sensitive=False, help="open (default), done or all"
    ),
    output: str = typer.Option("table", "--output", "-o", help="table, json or yaml"),
) -> None:
    """List tasks due within a window, newest first."""
    check_output_format(output)
    if limit is None:
        limit = get_config_manager().config.output.default_limit

    filters = TaskFilters(
        limit=limit, days=days, category=category, priority=priority, status=status
    )
    task_service = TaskService(get_storage_context().task_repository)
    tasks = await task_service.list_tasks(filters)
    format_tasks(tasks, output)
