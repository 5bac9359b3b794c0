"""
Logging factory for consistent logger configuration.

fpkit only ever logs at DEBUG level and leaves handler setup to the
application. ``setup_library_logging`` is the opt-in that wires the
``fpkit`` logger to stderr according to ``Settings``.
"""

import logging
import sys
from typing import Any

from fpkit.config import Settings, get_settings

LIBRARY_LOGGER_NAME = "fpkit"


class ConsoleHandler(logging.StreamHandler):
    """Console handler installed by the factory."""


class LoggingFactory:
    """
    Factory for creating standardized loggers.

    All loggers created here share one formatter and get at most one
    console handler, so repeated calls never duplicate output.
    """

    _initialized = False
    _console_formatter: logging.Formatter | None = None

    @classmethod
    def _initialize(cls) -> None:
        """Initialize shared formatters."""
        if cls._initialized:
            return

        cls._console_formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        cls._initialized = True

    @classmethod
    def create_logger(
        cls,
        name: str,
        level: str | int | None = None,
        enable_console: bool | None = None,
        stream: Any = None,
    ) -> logging.Logger:
        """
        Create a standardized logger.

        Args:
            name: Logger name
            level: Logging level (defaults to settings.log_level)
            enable_console: Enable console logging (defaults to settings.log_to_console)
            stream: Stream for the console handler (defaults to stderr)

        Returns:
            Configured logger instance
        """
        cls._initialize()

        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            if isinstance(handler, ConsoleHandler):
                logger.removeHandler(handler)

        if level is None:
            level = get_settings().log_level
        if isinstance(level, str):
            level = getattr(logging, level.upper(), logging.INFO)
        logger.setLevel(level)

        if enable_console is None:
            enable_console = get_settings().log_to_console

        if enable_console:
            console_handler = ConsoleHandler(stream or sys.stderr)
            console_handler.setLevel(level)
            console_handler.setFormatter(cls._console_formatter)
            logger.addHandler(console_handler)

        return logger


def get_logger(name: str, **kwargs: Any) -> logging.Logger:
    """
    Convenience function to get a logger using the factory.

    Args:
        name: Logger name
        **kwargs: Arguments passed to LoggingFactory.create_logger

    Returns:
        Configured logger instance
    """
    return LoggingFactory.create_logger(name=name, **kwargs)


def setup_library_logging(
    settings: Settings | None = None, stream: Any = None
) -> logging.Logger:
    """Configure the fpkit package logger from settings."""
    settings = settings or get_settings()
    return LoggingFactory.create_logger(
        name=LIBRARY_LOGGER_NAME,
        level=settings.log_level,
        enable_console=settings.log_to_console,
        stream=stream,
    )


__all__ = [
    "LIBRARY_LOGGER_NAME",
    "LoggingFactory",
    "get_logger",
    "setup_library_logging",
]
