"""Command 'add' of tasklog"""

import typer

from tasklog.models import Priority, TaskCreate
from tasklog.services.context_manager import get_storage_context
from tasklog.services.task_service import TaskService
from tasklog.utils.parsing import parse_date
from tasklog.utils.ui.formatters import format_success

from .decorators import command_wrapper

app = typer.Typer()


@command_wrapper
async def add_task(
    title: str = typer.Option(..., "--title", "-t", help="Task title"),
    due: str = typer.Option(
        "1d", "--due", "-d", help="Due date: offset (1d, 2m, 1y) or YYYY-MM-DD"
    ),
    priority: Priority = typer.Option(
        Priority.MEDIUM, "--priority", "-p", case_sensitive=False, help="Task priority"
    ),
    category: str | None = typer.Option(None, "--category", "-c", help="Task category"),
) -> None:
    """Add a new task."""
    task_data = TaskCreate(
        title=title.strip(),
        due_date=parse_date(due),
        priority=priority,
        category=category,
    )
    task_service = TaskService(get_storage_context().task_repository)
    task = await task_service.add_task(task_data)
    format_success(f"Added task #{task.id}: {task.title}")


app.command("add")(add_task)
app.command("new", help="Alias for 'add'.")(add_task)
