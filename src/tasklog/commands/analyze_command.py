"""Command 'analyze' of tasklog"""

import typer

from tasklog.services.analysis_service import AnalysisService
from tasklog.services.context_manager import get_storage_context
from tasklog.services.session_service import SessionService
from tasklog.services.task_service import TaskService
from tasklog.utils.parsing import parse_date
from tasklog.utils.ui.formatters import format_summary

from .decorators import command_wrapper

app = typer.Typer()


@app.command("analyze")
@command_wrapper
async def analyze_command(
    since: str = typer.Option(
        "1d", "--since", "-n", help="Look back: offset (7d, 1m, 1y) or YYYY-MM-DD"
    ),
) -> None:
    """Summarize tasks created and sessions started recently."""
    start = parse_date(since, backward=True)
    storage = get_storage_context()
    analysis = AnalysisService(
        TaskService(storage.task_repository),
        SessionService(storage.session_repository),
    )
    format_summary(await analysis.analyze(start))
