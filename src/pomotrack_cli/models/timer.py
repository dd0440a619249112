"""Two-phase pomodoro timer state machine."""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import timedelta
from enum import Enum

from pomotrack_cli.services.alert_service import AlertNotifier, NullNotifier
from pomotrack_cli.utils.logger import get_logger


class Phase(str, Enum):
    """Phase of the pomodoro cycle."""

    WORKING = "working"
    ON_BREAK = "on_break"

    @property
    def label(self) -> str:
        """Short name shown in the timer view."""
        if self is Phase.WORKING:
            return "Task"
        return "Break"

    def following(self) -> Phase:
        if self is Phase.WORKING:
            return Phase.ON_BREAK
        return Phase.WORKING


# Alert fired when the given phase begins
PHASE_ALERTS: dict[Phase, str] = {
    Phase.ON_BREAK: "break_started",
    Phase.WORKING: "work_started",
}


class TimerCycle:
    """Alternates between work and break phases of fixed length.

    The cycle never ends; ``tick`` must be called periodically to advance
    it. A phase is allowed to run exactly to its boundary: it flips only
    once the elapsed time is strictly greater than the phase length.
    """

    def __init__(
        self,
        work_length: timedelta,
        break_length: timedelta,
        notifier: AlertNotifier | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if work_length <= timedelta(0):
            raise ValueError("work_length must be positive")
        if break_length <= timedelta(0):
            raise ValueError("break_length must be positive")

        self._work_length = work_length
        self._break_length = break_length
        self._notifier = notifier or NullNotifier()
        self._clock = clock
        self.phase = Phase.WORKING
        self.phase_start = clock()
        self.completed_work_periods = 0

    @property
    def work_length(self) -> timedelta:
        return self._work_length

    @property
    def break_length(self) -> timedelta:
        return self._break_length

    def current_length(self) -> timedelta:
        if self.phase is Phase.WORKING:
            return self._work_length
        return self._break_length

    def elapsed(self) -> timedelta:
        return timedelta(seconds=max(0.0, self._clock() - self.phase_start))

    def remaining(self) -> timedelta:
        return max(timedelta(0), self.current_length() - self.elapsed())

    def progress_percent(self) -> int:
        """Share of the current phase already elapsed, capped at 100."""
        return min(100, int(self.elapsed() * 100 // self.current_length()))

    def tick(self) -> bool:
        """Advance to the next phase once the current one has run out.

        Returns True when a transition happened.
        """
        if not self.elapsed() > self.current_length():
            return False

        finished = self.phase
        if finished is Phase.WORKING:
            self.completed_work_periods += 1
        self.phase = finished.following()
        self.phase_start = self._clock()

        get_logger("timer").info(
            "phase changed: %s -> %s", finished.value, self.phase.value
        )
        self._fire_alert(PHASE_ALERTS[self.phase])
        return True

    def _fire_alert(self, event: str) -> None:
        # Phase change is already committed at this point
        try:
            self._notifier.alert(event)
        except Exception as e:
            get_logger("timer").warning("alert %r failed: %s", event, e)
