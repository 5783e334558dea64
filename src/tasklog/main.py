"""Main entry point for tasklog."""

import typer

from tasklog.commands import (
    add_command,
    analyze_command,
    config_command,
    done_command,
    init_command,
    list_command,
    pomo_command,
    version_command,
)
from tasklog.utils.typer_helpers import SuggestingGroup

app = typer.Typer(
    name="tasklog",
    cls=SuggestingGroup,
    help="Track tasks and pomodoro sessions from the terminal",
    no_args_is_help=True,
)

# Top-level commands
app.add_typer(init_command.app)
app.add_typer(list_command.app)
app.add_typer(add_command.app)
app.add_typer(done_command.app)
app.add_typer(analyze_command.app)
app.add_typer(version_command.app)

# Command groups
app.add_typer(pomo_command.app, name="pomo", help="Pomodoro focus sessions")
app.add_typer(config_command.app, name="config", help="Configuration management")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
