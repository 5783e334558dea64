"""Command 'init' of tasklog"""

import typer

from tasklog.adapters.sqlite import init_database
from tasklog.services.context_manager import get_storage_context
from tasklog.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper

app = typer.Typer()


@app.command("init")
@command_wrapper
def init_command() -> None:
    """Create the task database and bring its schema up to date."""
    db_path = get_storage_context().db_path
    applied = init_database(db_path)
    if applied:
        format_success(f"Database initialized at {db_path}")
    else:
        format_info(f"Database already up to date: {db_path}")
