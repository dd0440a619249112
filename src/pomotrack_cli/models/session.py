"""Pomodoro session: the task list and timer cycle driven by the UI loop."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta

from pomotrack_cli.services.alert_service import AlertNotifier

from .selectable import SelectableList
from .task import Task, utc_now
from .timer import Phase, TimerCycle


@dataclass(frozen=True)
class TaskView:
    """Read-only view of a task for rendering."""

    name: str
    is_complete: bool
    total_duration: timedelta
    period_count: int
    is_selected: bool


@dataclass(frozen=True)
class SessionSnapshot:
    """Point-in-time view of a session for rendering."""

    phase: Phase
    elapsed: timedelta
    remaining: timedelta
    current_length: timedelta
    progress_percent: int
    completed_work_periods: int
    selected_index: int | None
    tasks: tuple[TaskView, ...]

    @property
    def selected_name(self) -> str | None:
        """Name of the selected task, None when no task is selected."""
        if self.selected_index is None:
            return None
        return self.tasks[self.selected_index].name


class Session:
    """Composes the task list with the timer cycle.

    The ``handle_*`` methods are the entry points for the input loop;
    ``snapshot`` is what the display reads after every change.
    """

    def __init__(self, tasks: SelectableList[Task], timer: TimerCycle):
        self.tasks = tasks
        self.timer = timer

    @classmethod
    def from_names(
        cls,
        names: Iterable[str],
        work_length: timedelta,
        break_length: timedelta,
        notifier: AlertNotifier | None = None,
        clock: Callable[[], float] = time.monotonic,
        wall_clock: Callable[[], datetime] = utc_now,
    ) -> Session:
        """Build a session from raw task names; blank names are skipped."""
        tasks = [Task(name, clock=wall_clock) for name in names if name.strip()]
        return cls(
            SelectableList(tasks),
            TimerCycle(work_length, break_length, notifier=notifier, clock=clock),
        )

    # -------------------- input handlers --------------------
    def handle_select_next(self) -> None:
        self.tasks.select_next()

    def handle_select_previous(self) -> None:
        self.tasks.select_previous()

    def handle_clear_selection(self) -> None:
        self.tasks.clear_selection()

    def handle_toggle_complete(self) -> None:
        task = self.tasks.selected()
        if task is not None:
            task.toggle_complete()

    def handle_set_complete(self, value: bool) -> None:
        task = self.tasks.selected()
        if task is not None:
            task.set_complete(value)

    def handle_tick(self) -> bool:
        return self.timer.tick()

    def finish(self) -> None:
        """Close the selected task's open period at the end of a run."""
        self.tasks.clear_selection()

    # -------------------- queries --------------------
    def current_task_name(self) -> str | None:
        task = self.tasks.selected()
        if task is None:
            return None
        return task.name

    def snapshot(self) -> SessionSnapshot:
        selected = self.tasks.selected_index
        views = tuple(
            TaskView(
                name=task.name,
                is_complete=task.is_complete,
                total_duration=task.total_duration(),
                period_count=task.period_count,
                is_selected=index == selected,
            )
            for index, task in enumerate(self.tasks)
        )
        return SessionSnapshot(
            phase=self.timer.phase,
            elapsed=self.timer.elapsed(),
            remaining=self.timer.remaining(),
            current_length=self.timer.current_length(),
            progress_percent=self.timer.progress_percent(),
            completed_work_periods=self.timer.completed_work_periods,
            selected_index=selected,
            tasks=views,
        )
