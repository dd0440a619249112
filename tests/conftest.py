"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real config/log directories
and deterministic clocks for the timer and task models.
"""

from __future__ import annotations

import logging
import logging.handlers
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest


# ---------------------------------------------------------------------------
# Clocks
# ---------------------------------------------------------------------------


class FakeClock:
    """Monotonic clock stand-in returning float seconds."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeWallClock:
    """Wall clock stand-in returning aware UTC datetimes."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 1, 1, 9, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def wall_clock() -> FakeWallClock:
    return FakeWallClock()


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


def _drop_file_handlers() -> None:
    logger = logging.getLogger("pomotrack_cli")
    for handler in list(logger.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            logger.removeHandler(handler)
            handler.close()


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Send log output to *tmp_path* and reset the logger singleton."""
    import pomotrack_cli.utils.logger as logger_mod

    logger_mod._logger = None
    _drop_file_handlers()
    with patch(
        "pomotrack_cli.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")
    ):
        yield
    logger_mod._logger = None
    _drop_file_handlers()


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide the shared ConfigManager backed by a temporary directory.

    Patches the platform config dir and clears the lru_cache so
    get_config_manager() hands out a fresh manager rooted in *tmp_path*.
    """
    from pomotrack_cli.config import get_config_manager

    get_config_manager.cache_clear()
    with patch(
        "pomotrack_cli.config.user_config_dir", return_value=str(tmp_path / "config")
    ):
        yield get_config_manager()
    get_config_manager.cache_clear()
