"""Full-screen pomodoro view and its input loop."""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import timedelta

from rich.console import Console, Group
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from pomotrack_cli.models.session import Session, SessionSnapshot
from pomotrack_cli.models.timer import Phase
from pomotrack_cli.utils.logger import get_logger

from .keyboard import KeyboardHandler

PHASE_COLORS = {
    Phase.WORKING: "red",
    Phase.ON_BREAK: "green",
}

DEFAULT_TICK_INTERVAL = 0.25


def format_remaining(remaining: timedelta) -> str:
    """Render remaining time as 'M min S secs'."""
    total = int(remaining.total_seconds())
    mins, secs = divmod(total, 60)
    return f"{mins} min {secs} secs"


def format_duration(duration: timedelta) -> str:
    """Render a tracked duration as H:MM:SS."""
    total = int(duration.total_seconds())
    hours, rest = divmod(total, 3600)
    mins, secs = divmod(rest, 60)
    return f"{hours}:{mins:02d}:{secs:02d}"


class SessionDisplay:
    """Draws a session and routes key presses to it."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def create_layout(self, snapshot: SessionSnapshot) -> Layout:
        """Create the timer layout: gauge, countdown, task list."""
        color = PHASE_COLORS[snapshot.phase]

        layout = Layout()
        layout.split_column(
            Layout(name="gauge", ratio=1),
            Layout(name="status", ratio=1),
            Layout(name="tasks", ratio=1),
        )

        layout["gauge"].update(
            Panel(
                ProgressBar(
                    total=100,
                    completed=snapshot.progress_percent,
                    complete_style=color,
                    finished_style=color,
                ),
                title=Text(" Pomodoro ", style=color),
                border_style=color,
            )
        )
        layout["status"].update(self._create_status(snapshot, color))
        layout["tasks"].update(self._create_task_list(snapshot, color))
        return layout

    def _create_status(self, snapshot: SessionSnapshot, color: str) -> Group:
        if snapshot.remaining > timedelta(0):
            time_text = format_remaining(snapshot.remaining)
        else:
            time_text = f"{snapshot.phase.label} completed"

        current = snapshot.selected_name or "no task selected"
        return Group(
            Text(time_text, style=color),
            Text(f"Current: {current}", style=color),
            Text(
                "Press q to quit  •  ↑/↓ select  •  Enter toggle done",
                style=f"dim {color}",
            ),
        )

    def _create_task_list(self, snapshot: SessionSnapshot, color: str) -> Panel:
        lines = []
        for view in snapshot.tasks:
            task_color = "green" if view.is_complete else "red"
            line = Text(">> " if view.is_selected else "   ")
            line.append(
                f"{view.name} : {format_duration(view.total_duration)} : "
                f"{view.period_count}",
                style=f"bold {task_color}" if view.is_selected else task_color,
            )
            lines.append(line)

        if not lines:
            lines.append(Text("(no tasks)", style="dim"))

        return Panel(Group(*lines), title=" Task List ", border_style=color)

    def handle_key(self, session: Session, key: str) -> bool:
        """Apply *key* to the session. Returns False when the user quits."""
        if key == "q":
            return False
        actions: dict[str, Callable[[], None]] = {
            "down": session.handle_select_next,
            "j": session.handle_select_next,
            "up": session.handle_select_previous,
            "k": session.handle_select_previous,
            "enter": session.handle_toggle_complete,
            "c": lambda: session.handle_set_complete(True),
            "r": lambda: session.handle_set_complete(False),
            "escape": session.handle_clear_selection,
        }
        action = actions.get(key)
        if action is not None:
            action()
        return True

    def run(
        self,
        session: Session,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
        keyboard: KeyboardHandler | None = None,
    ) -> str:
        """
        Run the interactive view until the user quits.

        Returns 'quit' or 'interrupted'.
        """
        logger = get_logger("ui")
        keyboard = keyboard or KeyboardHandler()
        last_tick = time.monotonic()

        try:
            with keyboard, Live(
                self.create_layout(session.snapshot()),
                console=self.console,
                auto_refresh=False,
                screen=True,
            ) as live:
                while True:
                    timeout = max(0.0, tick_interval - (time.monotonic() - last_tick))
                    key = keyboard.read_key(timeout)
                    if key is not None:
                        logger.debug("key pressed: %s", key)
                        if not self.handle_key(session, key):
                            return "quit"

                    if time.monotonic() - last_tick >= tick_interval:
                        session.handle_tick()
                        last_tick = time.monotonic()

                    live.update(self.create_layout(session.snapshot()), refresh=True)
        except KeyboardInterrupt:
            return "interrupted"


def show_summary(session: Session, console: Console | None = None) -> None:
    """Print per-task tracked time after the view closes."""
    console = console or Console()
    snapshot = session.snapshot()

    if not snapshot.tasks:
        console.print("[yellow]No tasks were tracked[/yellow]")
        return

    table = Table(title="Session Summary", show_header=True)
    table.add_column("Task", style="cyan")
    table.add_column("Time", justify="right")
    table.add_column("Periods", justify="right")
    table.add_column("Done", justify="center")

    for view in snapshot.tasks:
        done = "[green]✓[/green]" if view.is_complete else "[dim]○[/dim]"
        table.add_row(
            view.name,
            format_duration(view.total_duration),
            str(view.period_count),
            done,
        )

    console.print(table)
    console.print(
        f"Completed pomodoros: [bold]{snapshot.completed_work_periods}[/bold]"
    )
