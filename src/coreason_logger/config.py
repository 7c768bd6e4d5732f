# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

import os
from enum import IntFlag
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from coreason_logger.ansi import BOLD, GREEN, OFF, wrap
from coreason_logger.levels import Level


class Flags(IntFlag):
    """
    Bits or'ed together to control which context is added to each record.
    """

    # Timestamp rendered with the logger's date format
    DATE = 1
    # Full file name and line number: /a/b/c/d.py:23
    LONGFILE = 2
    # Base file name and line number: d.py:23. Overrides LONGFILE
    SHORTFILE = 4
    # Color the level and prefix with ANSI escapes
    ANSI = 8
    # Initial values for the default logger
    STD = DATE | ANSI


CALLER_FLAGS = Flags.LONGFILE | Flags.SHORTFILE

# strftime equivalent of "Mon Jan 02 15:04:05 -0700 2006"
RUBY_DATE = "%a %b %d %H:%M:%S %z %Y"
RFC3339 = "%Y-%m-%dT%H:%M:%S%z"

DEFAULT_PREFIX = ">>>"
DEFAULT_COLOR_PREFIX = wrap(BOLD, GREEN, DEFAULT_PREFIX, OFF)

ENV_LEVEL = "COREASON_LOGGER_LEVEL"
ENV_COLOR = "COREASON_LOGGER_COLOR"
ENV_DATE_FORMAT = "COREASON_LOGGER_DATE_FORMAT"
ENV_NO_COLOR = "NO_COLOR"


class FormatOptions(BaseModel):
    """
    Snapshot of the logger configuration used to format a single record.
    """

    model_config = ConfigDict(frozen=True)

    prefix: str = DEFAULT_COLOR_PREFIX
    date_format: str = RUBY_DATE
    flags: int = int(Flags.STD)
    colors: bool = True

    @field_validator("flags", mode="before")
    @classmethod
    def _flags_as_int(cls, value: Any) -> int:
        return int(value)

    @property
    def use_ansi(self) -> bool:
        return self.colors and bool(self.flags & Flags.ANSI)

    @property
    def wants_caller(self) -> bool:
        return bool(self.flags & CALLER_FLAGS)


class LoggerSettings(BaseModel):
    """
    Defaults for the process-wide logger, overridable from the environment.
    """

    level: Level = Level.WARNING
    colors: bool = True
    date_format: str = RUBY_DATE

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> Level:
        return Level.parse(value)

    @field_validator("date_format")
    @classmethod
    def _non_empty_date_format(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("date format must not be empty")
        return value

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LoggerSettings":
        """
        Reads COREASON_LOGGER_LEVEL, COREASON_LOGGER_COLOR,
        COREASON_LOGGER_DATE_FORMAT and NO_COLOR.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        values: Dict[str, Any] = {}
        if env.get(ENV_LEVEL):
            values["level"] = env[ENV_LEVEL]
        if env.get(ENV_COLOR):
            values["colors"] = env[ENV_COLOR]
        if env.get(ENV_NO_COLOR):
            values["colors"] = False
        if env.get(ENV_DATE_FORMAT):
            values["date_format"] = env[ENV_DATE_FORMAT]
        return cls(**values)
