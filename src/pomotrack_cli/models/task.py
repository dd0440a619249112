"""Task model with per-task work period tracking."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


def utc_now() -> datetime:
    """Current wall-clock time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass
class WorkPeriod:
    """A span of time during which a task was the selected task.

    A period whose ``start`` equals its ``end`` is open: the task was
    activated and has not been deactivated yet.
    """

    start: datetime
    end: datetime

    @property
    def is_open(self) -> bool:
        return self.start == self.end

    def duration(self) -> timedelta:
        """Length of the period; open periods contribute zero."""
        return max(timedelta(0), self.end - self.start)


class Task:
    """A named task that records when it was worked on."""

    def __init__(
        self,
        name: str,
        is_complete: bool = False,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._name = name.strip()
        self.is_complete = is_complete
        self.work_periods: list[WorkPeriod] = []
        self._clock = clock

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_active(self) -> bool:
        """True while the last work period is still open."""
        return bool(self.work_periods) and self.work_periods[-1].is_open

    @property
    def period_count(self) -> int:
        return len(self.work_periods)

    def activate(self) -> None:
        """Open a new work period starting now."""
        now = self._clock()
        self.work_periods.append(WorkPeriod(start=now, end=now))

    def deactivate(self) -> None:
        """Close the trailing work period if it is still open.

        Calling this again after the period was closed does nothing, so only
        the first deactivate after an activate has an effect.
        """
        if not self.work_periods:
            return

        last = self.work_periods[-1]
        if not last.is_open:
            return

        last.end = self._clock()

    def total_duration(self) -> timedelta:
        """Sum of all work period durations."""
        return sum(
            (period.duration() for period in self.work_periods), timedelta(0)
        )

    def toggle_complete(self) -> None:
        self.is_complete = not self.is_complete

    def set_complete(self, value: bool) -> None:
        self.is_complete = value

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return (
            f"Task(name={self._name!r}, is_complete={self.is_complete}, "
            f"periods={len(self.work_periods)})"
        )
