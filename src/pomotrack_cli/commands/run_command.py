"""Command to start the interactive pomodoro view."""

from __future__ import annotations

from datetime import timedelta

import typer

from pomotrack_cli.config import get_config_manager
from pomotrack_cli.focus.ui import DEFAULT_TICK_INTERVAL, SessionDisplay, show_summary
from pomotrack_cli.models.session import Session
from pomotrack_cli.services.alert_service import get_notifier
from pomotrack_cli.utils.exit_codes import ERROR_INVALID_ARGS
from pomotrack_cli.utils.logger import get_logger
from pomotrack_cli.utils.ui.console import get_console

from .decorators import AppError, command_wrapper


def split_task_list(values: list[str] | None) -> list[str]:
    """Flatten repeated, comma-separated --task-list values."""
    names: list[str] = []
    for value in values or []:
        names.extend(part.strip() for part in value.split(","))
    return [name for name in names if name]


def resolve_lengths(
    length: int | None, break_length: int | None
) -> tuple[timedelta, timedelta]:
    """Combine command-line overrides (minutes) with the stored config."""
    config = get_config_manager().config
    work = timedelta(minutes=length) if length is not None else config.work_length
    rest = (
        timedelta(minutes=break_length)
        if break_length is not None
        else config.break_length
    )
    return work, rest


@command_wrapper
def run_command(
    task_list: list[str] | None = typer.Option(
        None,
        "--task-list",
        "-t",
        help="Comma-separated task names (may be repeated)",
    ),
    length: int | None = typer.Option(
        None, "--length", "-l", help="Length of one pomodoro [min]"
    ),
    break_length: int | None = typer.Option(
        None, "--break-length", "-b", help="Length of a break [min]"
    ),
    sound: bool = typer.Option(
        True, "--sound/--no-sound", help="Play a sound on phase change"
    ),
    tick_ms: int = typer.Option(
        int(DEFAULT_TICK_INTERVAL * 1000), "--tick-ms", help="Refresh interval [ms]"
    ),
) -> None:
    """Start the pomodoro timer with a list of tasks."""
    if length is not None and length <= 0:
        raise AppError("--length must be a positive number of minutes", ERROR_INVALID_ARGS)
    if break_length is not None and break_length <= 0:
        raise AppError(
            "--break-length must be a positive number of minutes", ERROR_INVALID_ARGS
        )
    if tick_ms <= 0:
        raise AppError("--tick-ms must be positive", ERROR_INVALID_ARGS)

    try:
        work, rest = resolve_lengths(length, break_length)
    except OverflowError:
        raise AppError("Phase length is too large", ERROR_INVALID_ARGS) from None
    names = split_task_list(task_list)
    session = Session.from_names(
        names, work, rest, notifier=get_notifier(sound=sound)
    )
    get_logger().info(
        "session started: %d tasks, work=%s, break=%s", len(names), work, rest
    )

    # Select the first task
    session.handle_select_next()

    console = get_console()
    result = SessionDisplay(console).run(session, tick_interval=tick_ms / 1000)
    session.finish()

    get_logger().info("session ended: %s", result)
    show_summary(session, console)
