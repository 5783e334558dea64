"""Command 'version' of tasklog"""

import typer

from tasklog import __version__
from tasklog.utils.ui.console import get_console

app = typer.Typer()


@app.command()
def version() -> None:
    """Show version information"""
    get_console(highlight=False).print(f"[bold]tasklog[/bold] version [cyan]{__version__}[/cyan]")
