"""Alert notifiers fired when the pomodoro cycle changes phase.

Notifiers never wait for playback to finish so the timer view keeps
refreshing while a sound plays.
"""

from __future__ import annotations

import shutil
import subprocess
import sys
from pathlib import Path
from typing import Protocol

from rich.console import Console

from pomotrack_cli.utils.logger import get_logger
from pomotrack_cli.utils.ui.console import get_console

MACOS_SOUNDS = {
    "break_started": "/System/Library/Sounds/Glass.aiff",
    "work_started": "/System/Library/Sounds/Ping.aiff",
}

FREEDESKTOP_SOUNDS = {
    "break_started": "/usr/share/sounds/freedesktop/stereo/complete.oga",
    "work_started": "/usr/share/sounds/freedesktop/stereo/bell.oga",
}


class AlertNotifier(Protocol):
    """Something that can signal a named alert event to the user."""

    def alert(self, event: str) -> None: ...


class NullNotifier:
    """Notifier that does nothing."""

    def alert(self, event: str) -> None:
        return None


class TerminalBellNotifier:
    """Rings the terminal bell."""

    def __init__(self, console: Console | None = None):
        self.console = console or get_console()

    def alert(self, event: str) -> None:
        self.console.bell()


class SystemSoundNotifier:
    """Plays a platform sound in a detached player process.

    Falls back to the terminal bell when no player or sound file is
    available on this machine, or while the previous sound is still
    playing.
    """

    def __init__(self, fallback: AlertNotifier | None = None):
        self.fallback = fallback or TerminalBellNotifier()
        self._player: subprocess.Popen | None = None

    def player_command(self, event: str) -> list[str] | None:
        """Return the command that plays the sound for *event*, if any."""
        if sys.platform == "darwin":
            path = MACOS_SOUNDS.get(event)
            if path and shutil.which("afplay"):
                return ["afplay", path]
            return None

        path = FREEDESKTOP_SOUNDS.get(event)
        if not path or not Path(path).exists():
            return None
        for player in ("paplay", "pw-play"):
            if shutil.which(player):
                return [player, path]
        return None

    def alert(self, event: str) -> None:
        command = self.player_command(event)
        # poll() also reaps a player that has finished
        busy = self._player is not None and self._player.poll() is None
        if command is None or busy:
            self.fallback.alert(event)
            return

        get_logger("alerts").debug("playing %s with %s", event, command[0])
        self._player = subprocess.Popen(
            command,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )


def get_notifier(sound: bool = True) -> AlertNotifier:
    """Pick the notifier for a run."""
    if sound:
        return SystemSoundNotifier()
    return TerminalBellNotifier()
