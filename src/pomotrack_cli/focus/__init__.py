"""Focus view - interactive pomodoro timer for pomotrack."""

from .keyboard import KeyboardHandler
from .ui import SessionDisplay, show_summary

__all__ = [
    "KeyboardHandler",
    "SessionDisplay",
    "show_summary",
]
