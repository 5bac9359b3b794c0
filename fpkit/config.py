"""
Library configuration.

Settings are read from ``FPKIT_*`` environment variables (optionally loaded
from a ``.env`` file with python-dotenv) and validated with pydantic.
``Settings.from_env`` reports problems as a Left instead of raising.
"""

import logging
import os
from collections.abc import Mapping
from typing import Any, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from fpkit.core.either import Either, Left, Right

logger = logging.getLogger(__name__)

ENV_PREFIX = "FPKIT_"

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class ConfigurationError(ValueError):
    """Raised when settings cannot be built from the environment."""


class Settings(BaseModel):
    """Process-wide fpkit settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    log_level: LogLevelName = "WARNING"
    log_to_console: bool = False
    trace_caught_exceptions: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        """Accept level names in any case, and the WARN alias."""
        if isinstance(value, str):
            value = value.strip().upper()
            return "WARNING" if value == "WARN" else value
        return value

    @field_validator("log_to_console", "trace_caught_exceptions", mode="before")
    @classmethod
    def parse_bool(cls, value: Any) -> Any:
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_VALUES:
                return True
            if lowered in _FALSE_VALUES:
                return False
            raise ValueError(f"Invalid boolean value: {value!r}")
        return value

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Either[str, "Settings"]:
        """Build settings from FPKIT_* variables."""
        source = os.environ if env is None else env
        values = {
            name: source[ENV_PREFIX + name.upper()]
            for name in cls.model_fields
            if ENV_PREFIX + name.upper() in source
        }
        try:
            return Right(cls(**values))
        except ValidationError as e:
            messages = "; ".join(
                f"{ENV_PREFIX}{str(err['loc'][0]).upper()}: {err['msg']}"
                for err in e.errors()
            )
            return Left(f"Invalid fpkit configuration: {messages}")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def create_settings(
    env_file: str | None = None, overrides: Mapping[str, Any] | None = None
) -> Settings:
    """Load a .env file, read the environment and apply overrides."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    result = Settings.from_env()
    if result.is_left():
        raise ConfigurationError(result.value)

    settings = result.value
    if overrides:
        try:
            settings = Settings(**{**settings.model_dump(), **overrides})
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e
    logger.debug("fpkit settings loaded: %s", settings)
    return settings


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the cached process-wide settings, creating them on first use."""
    global _settings
    if _settings is None:
        _settings = create_settings()
    return _settings


def current_settings() -> Either[str, Settings]:
    """Return the cached settings, or read the environment without caching.

    Never loads a .env file and never raises.
    """
    if _settings is not None:
        return Right(_settings)
    return Settings.from_env()


def reset_settings(settings: Settings | None = None) -> None:
    """Replace or clear the cached settings (useful for testing)."""
    global _settings
    _settings = settings


__all__ = [
    "ENV_PREFIX",
    "ConfigurationError",
    "Settings",
    "create_settings",
    "current_settings",
    "get_settings",
    "reset_settings",
]
