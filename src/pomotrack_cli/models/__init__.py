"""Core models: tasks, selection and the pomodoro cycle."""

from .selectable import Activatable, SelectableList
from .session import Session, SessionSnapshot, TaskView
from .task import Task, WorkPeriod
from .timer import Phase, TimerCycle

__all__ = [
    "Activatable",
    "Phase",
    "SelectableList",
    "Session",
    "SessionSnapshot",
    "Task",
    "TaskView",
    "TimerCycle",
    "WorkPeriod",
]
