"""Overridable application settings.

Values come from the environment (a local `.env` file is honoured) so the
length bounds and the splash delay can be tuned without touching code.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_NAME_MIN_LENGTH = 3
DEFAULT_NAME_MAX_LENGTH = 30
DEFAULT_SPLASH_DELAY_MS = 3000
DEFAULT_LOG_LEVEL = "INFO"


class ConfigError(RuntimeError):
    """Raised when a setting cannot be parsed or is out of range."""


@dataclass(frozen=True)
class Settings:
    name_min_length: int = DEFAULT_NAME_MIN_LENGTH
    name_max_length: int = DEFAULT_NAME_MAX_LENGTH
    splash_delay_ms: int = DEFAULT_SPLASH_DELAY_MS
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        if self.name_min_length < 0 or self.name_max_length < 0:
            raise ConfigError("Name length bounds must not be negative.")
        if self.name_min_length > self.name_max_length:
            raise ConfigError(
                f"NAME_MIN_LENGTH ({self.name_min_length}) is larger than "
                f"NAME_MAX_LENGTH ({self.name_max_length})."
            )
        if self.splash_delay_ms < 0:
            raise ConfigError("SPLASH_DELAY_MS must not be negative.")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigError(f"Unknown LOG_LEVEL: {self.log_level!r}.")

    @property
    def splash_delay_seconds(self) -> float:
        return self.splash_delay_ms / 1000.0


def _read_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}.") from exc


def load_settings() -> Settings:
    """Build `Settings` from the environment, falling back to the defaults."""
    load_dotenv()

    return Settings(
        name_min_length=_read_int("NAME_MIN_LENGTH", DEFAULT_NAME_MIN_LENGTH),
        name_max_length=_read_int("NAME_MAX_LENGTH", DEFAULT_NAME_MAX_LENGTH),
        splash_delay_ms=_read_int("SPLASH_DELAY_MS", DEFAULT_SPLASH_DELAY_MS),
        log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL,
    )


DEFAULT_SETTINGS = Settings()
