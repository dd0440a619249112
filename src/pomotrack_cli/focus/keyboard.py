"""Keyboard input for the interactive timer view."""

from __future__ import annotations

import os
import select
import sys
import termios
import tty

# Escape sequences sent by arrow keys
ESCAPE_SEQUENCES = {
    "[A": "up",
    "[B": "down",
    "[C": "right",
    "[D": "left",
    "OA": "up",
    "OB": "down",
}


class KeyboardHandler:
    """Puts the terminal in cbreak mode and reads single keys.

    Use as a context manager; the previous terminal settings are restored
    on exit, whatever the reason for leaving the block. Keys are read from
    the file descriptor directly so escape sequences are not swallowed by
    Python's stdin buffer.
    """

    def __init__(self, stream=None):
        self.stream = stream or sys.stdin
        self.fd = self.stream.fileno()
        self.old_settings = None

    def __enter__(self) -> KeyboardHandler:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def start(self) -> None:
        """Switch the terminal to cbreak mode."""
        try:
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except termios.error:
            # Not a TTY; keys still arrive, line buffered
            self.old_settings = None

    def stop(self) -> None:
        """Restore terminal settings."""
        if self.old_settings is not None:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            self.old_settings = None

    def _ready(self, timeout: float) -> bool:
        return bool(select.select([self.fd], [], [], timeout)[0])

    def _read(self, size: int) -> str:
        return os.read(self.fd, size).decode("utf-8", errors="ignore")

    def read_key(self, timeout: float = 0.0) -> str | None:
        """Wait up to *timeout* seconds for a key.

        Returns a normalised key name (``"up"``, ``"down"``, ``"enter"``,
        ``"escape"``) or the lower-cased character, or None on timeout.
        """
        if not self._ready(timeout):
            return None

        char = self._read(1)
        if not char:
            return None
        if char in ("\n", "\r"):
            return "enter"
        if char == "\x1b":
            return self._read_escape()
        return char.lower()

    def _read_escape(self) -> str:
        if not self._ready(0.01):
            return "escape"
        sequence = self._read(2)
        return ESCAPE_SEQUENCES.get(sequence, "escape")
