"""Configuration management for pomotrack.

The configuration is a small JSON document under the platform config
directory. It is read once at startup; a missing file is created with the
defaults and a malformed one is ignored in favour of the defaults.
"""

from __future__ import annotations

from datetime import timedelta
from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError, field_validator

from pomotrack_cli.utils.logger import get_logger

DEFAULT_WORK_LENGTH = timedelta(minutes=25)
DEFAULT_BREAK_LENGTH = timedelta(minutes=5)


class PomodoroConfig(BaseModel):
    """Lengths of the work and break phases."""

    work_length: timedelta = Field(
        default=DEFAULT_WORK_LENGTH, description="Length of one pomodoro"
    )
    break_length: timedelta = Field(
        default=DEFAULT_BREAK_LENGTH, description="Length of a break"
    )

    @field_validator("work_length", "break_length")
    @classmethod
    def validate_positive(cls, v: timedelta) -> timedelta:
        if v <= timedelta(0):
            raise ValueError("duration must be positive")
        return v


class ConfigManager:
    """Loads and saves the pomotrack configuration file."""

    def __init__(self, config_dir: Path | None = None):
        self.config_dir = config_dir or Path(user_config_dir("pomotrack_cli"))
        self.config_file = self.config_dir / "config.json"
        self._config: PomodoroConfig | None = None

    @property
    def config(self) -> PomodoroConfig:
        """Get the current configuration, loading it on first access."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> PomodoroConfig:
        """Load configuration from file, falling back to the defaults."""
        logger = get_logger("config")

        if not self.config_file.exists():
            config = PomodoroConfig()
            try:
                self.save_config(config)
                logger.info("wrote default config to %s", self.config_file)
            except OSError as e:
                logger.warning("could not write default config: %s", e)
            return config

        try:
            return PomodoroConfig.model_validate_json(self.config_file.read_bytes())
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.warning("ignoring unreadable config %s: %s", self.config_file, e)
            return PomodoroConfig()

    def save_config(self, config: PomodoroConfig | None = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(config.model_dump_json(indent=2), encoding="utf-8")

    def get(self, key: str) -> Any:
        """Get a configuration value by name."""
        if key not in PomodoroConfig.model_fields:
            raise KeyError(key)
        return getattr(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Validate and store a configuration value.

        Raises:
            KeyError: If *key* is not a configuration field.
            ValueError: If *value* is not valid for *key*.
        """
        if key not in PomodoroConfig.model_fields:
            raise KeyError(key)

        data = self.config.model_dump()
        data[key] = value
        self._config = PomodoroConfig.model_validate(data)
        self.save_config()

    def reset(self) -> None:
        """Reset configuration to defaults."""
        self._config = PomodoroConfig()
        self.save_config()


@lru_cache(maxsize=1)
def get_config_manager() -> ConfigManager:
    """Get the shared config manager."""
    return ConfigManager()
