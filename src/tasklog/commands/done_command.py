"""Command 'done' of tasklog"""

import typer

from tasklog.services.context_manager import get_storage_context
from tasklog.services.task_service import TaskService
from tasklog.utils.ui.formatters import format_success

from .decorators import command_wrapper

app = typer.Typer()


@app.command("done")
@command_wrapper
async def done_command(
    task_id: int = typer.Argument(..., help="Task ID"),
) -> None:
    """Mark a task as done."""
    task_service = TaskService(get_storage_context().task_repository)
    task = await task_service.mark_done(task_id)
    format_success(f"Completed #{task.id}: {task.title}")
