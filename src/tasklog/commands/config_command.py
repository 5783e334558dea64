"""Configuration management commands."""

import json

import pydantic
import typer

from tasklog.config import get_config_manager
from tasklog.errors import ValidationError
from tasklog.utils.ui.console import get_console
from tasklog.utils.ui.formatters import format_success

from .decorators import command_wrapper

app = typer.Typer(help="Configuration management commands")


@app.command("show")
@command_wrapper
def show_config() -> None:
    """Show the current configuration."""
    config_manager = get_config_manager()
    get_console().print_json(json.dumps(config_manager.config.model_dump()))
    get_console().print(f"[dim]{config_manager.config_file}[/dim]")


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., pomodoro.quit_keys)"),
) -> None:
    """Get a configuration value."""
    value = get_config_manager().get(key)
    if value is None:
        raise ValidationError(f"Configuration key '{key}' not found")
    get_console(highlight=False).print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., pomodoro.default_duration)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    try:
        get_config_manager().set(key, value)
    except KeyError as e:
        raise ValidationError(f"Configuration key '{key}' not found") from e
    except pydantic.ValidationError as e:
        reason = e.errors()[0]["msg"] if e.errors() else str(e)
        raise ValidationError(f"Invalid value for '{key}': {reason}") from e
    format_success(f"Configuration '{key}' set to '{value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes and not typer.confirm("Reset all settings to defaults?"):
        raise typer.Exit(0)
    get_config_manager().reset()
    format_success("Configuration reset to defaults")
