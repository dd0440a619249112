"""pomotrack - pomodoro timer with per-task time tracking."""

__version__ = "0.1.0"
