"""Configuration management commands."""

from __future__ import annotations

from datetime import timedelta

import typer
from rich.table import Table

from pomotrack_cli.config import get_config_manager
from pomotrack_cli.utils.exit_codes import ERROR_CONFIG, ERROR_INVALID_ARGS
from pomotrack_cli.utils.ui.console import format_success, get_console

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Configuration management commands")
console = get_console()


def _minutes(value: timedelta) -> str:
    return f"{value.total_seconds() / 60:g} min"


@app.command("view")
@command_wrapper
def view_config() -> None:
    """View current configuration."""
    manager = get_config_manager()
    table = Table(title="Configuration", show_header=True)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in manager.config.model_dump().items():
        table.add_row(key, _minutes(value))
    console.print(table)
    console.print(f"[dim]{manager.config_file}[/dim]")


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., work_length)"),
) -> None:
    """Get a configuration value."""
    try:
        value = get_config_manager().get(key)
    except KeyError:
        raise AppError(f"Configuration key '{key}' not found", ERROR_INVALID_ARGS) from None
    console.print(_minutes(value))


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., work_length)"),
    value: str = typer.Argument(..., help="Length in minutes"),
) -> None:
    """Set a configuration value."""
    try:
        length = timedelta(minutes=float(value))
    except (ValueError, OverflowError):
        raise AppError(f"'{value}' is not a usable number of minutes", ERROR_INVALID_ARGS) from None

    try:
        get_config_manager().set(key, length)
    except KeyError:
        raise AppError(f"Configuration key '{key}' not found", ERROR_INVALID_ARGS) from None
    except OSError as e:
        raise AppError(f"Could not write configuration: {e}", ERROR_CONFIG) from e
    except ValueError as e:
        raise AppError(f"Invalid value for '{key}': {e}", ERROR_INVALID_ARGS) from e
    format_success(f"Configuration '{key}' set to {_minutes(length)}")


@app.command("reset")
@command_wrapper
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes and not typer.confirm("Reset configuration to defaults?"):
        console.print("[yellow]Cancelled[/yellow]")
        return
    try:
        get_config_manager().reset()
    except OSError as e:
        raise AppError(f"Could not write configuration: {e}", ERROR_CONFIG) from e
    format_success("Configuration reset to defaults")
