# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

"""
Process-wide default logger and the package-level functions delegating to it.

The default logger is created on first access from LoggerSettings (stderr,
WARNING threshold, colors on, RubyDate format, Flags.STD unless overridden by
the environment) and lives for the rest of the process.
"""

import sys
import threading
from typing import Any, Optional, Union

from coreason_logger.config import Flags, LoggerSettings
from coreason_logger.levels import Level
from coreason_logger.logger import Logger, Stream, sprint, sprintf, sprintln
from coreason_logger.utils.logger import logger


class LoggerContext:
    """
    Global context/singleton holding the default Logger.
    """

    _instance: Optional[Logger] = None
    _lock = threading.Lock()

    @classmethod
    def initialize(cls, settings: Optional[LoggerSettings] = None) -> Logger:
        """Replaces the default logger with one built from settings."""
        instance = cls._build(settings)
        with cls._lock:
            cls._instance = instance
        return instance

    @classmethod
    def get_instance(cls) -> Logger:
        instance = cls._instance
        if instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls._build()
                instance = cls._instance
        return instance

    @classmethod
    def reset(cls) -> None:
        with cls._lock:
            cls._instance = None

    @classmethod
    def _build(cls, settings: Optional[LoggerSettings] = None) -> Logger:
        settings = LoggerSettings.from_env() if settings is None else settings
        logger.debug(f"Initializing default logger with {settings!r}")
        return Logger(
            sys.stderr,
            settings.level,
            date_format=settings.date_format,
            flags=Flags.STD,
            colors=settings.colors,
        )


def get_default_logger() -> Logger:
    """Returns the process-wide logger, creating it on first use."""
    return LoggerContext.get_instance()


def reset_default_logger() -> None:
    """Discards the process-wide logger; the next access builds a fresh one."""
    LoggerContext.reset()


# --- Configuration ---


def level() -> Level:
    """Returns the threshold of the default logger."""
    return get_default_logger().level


def set_level(value: Union[Level, int, str]) -> None:
    get_default_logger().level = value


def stream() -> Stream:
    return get_default_logger().stream


def set_stream(value: Stream) -> None:
    get_default_logger().stream = value


def prefix() -> str:
    return get_default_logger().prefix


def set_prefix(value: str) -> None:
    get_default_logger().prefix = value


def date_format() -> str:
    return get_default_logger().date_format


def set_date_format(value: str) -> None:
    """Sets the strftime format used for the date of each record."""
    get_default_logger().date_format = value


def flags() -> Flags:
    return get_default_logger().flags


def set_flags(value: int) -> None:
    get_default_logger().flags = value


def colors() -> bool:
    return get_default_logger().colors


def set_colors(value: bool) -> None:
    get_default_logger().colors = value


# --- Output ---
# Each function calls straight into Logger.output (or Logger._log) so the
# caller location resolves to the code calling the function below.


def print(*args: Any) -> int:  # noqa: A001
    """
    Writes the operands to the default logger's stream regardless of its
    threshold. Returns the number of bytes written.
    """
    return get_default_logger().output(2, sprint(*args))


def println(*args: Any) -> int:
    """Writes the operands separated by spaces regardless of the threshold."""
    return get_default_logger().output(2, sprintln(*args))


def printf(fmt: str, *args: Any) -> int:
    """Writes a printf-style formatted message regardless of the threshold."""
    return get_default_logger().output(2, sprintf(fmt, *args))


def log(lvl: Union[Level, int, str], *args: Any) -> int:
    return get_default_logger()._log(Level.parse(lvl), sprint(*args), 3)


def debug(*args: Any) -> int:
    return get_default_logger()._log(Level.DEBUG, sprint(*args), 3)


def debugf(fmt: str, *args: Any) -> int:
    return get_default_logger()._log(Level.DEBUG, sprintf(fmt, *args), 3)


def info(*args: Any) -> int:
    return get_default_logger()._log(Level.INFO, sprint(*args), 3)


def infof(fmt: str, *args: Any) -> int:
    return get_default_logger()._log(Level.INFO, sprintf(fmt, *args), 3)


def warning(*args: Any) -> int:
    return get_default_logger()._log(Level.WARNING, sprint(*args), 3)


def warningf(fmt: str, *args: Any) -> int:
    return get_default_logger()._log(Level.WARNING, sprintf(fmt, *args), 3)


def error(*args: Any) -> int:
    return get_default_logger()._log(Level.ERROR, sprint(*args), 3)


def errorf(fmt: str, *args: Any) -> int:
    return get_default_logger()._log(Level.ERROR, sprintf(fmt, *args), 3)


def critical(*args: Any) -> int:
    return get_default_logger()._log(Level.CRITICAL, sprint(*args), 3)


def criticalf(fmt: str, *args: Any) -> int:
    return get_default_logger()._log(Level.CRITICAL, sprintf(fmt, *args), 3)
