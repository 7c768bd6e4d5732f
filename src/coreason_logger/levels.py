# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

from enum import IntEnum
from typing import Union

_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


class Level(IntEnum):
    """
    Severity of a log message.

    Levels are totally ordered by their integer value. The default threshold of
    a Logger is WARNING.
    """

    # Development output; dropped once the threshold is raised.
    DEBUG = 0
    # Informative output for a user.
    INFO = 1
    # Something worked, but not with the expected result.
    WARNING = 2
    # Something did not work at all.
    ERROR = 3
    # Completely broken and unrecoverable.
    CRITICAL = 4

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, value: Union["Level", int, str]) -> "Level":
        """
        Resolves a Level from a Level, its integer value, or its name.

        Names are case-insensitive and "WARN" / "FATAL" are accepted as aliases.

        Raises:
            ValueError: If the value does not name a level.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        if isinstance(value, str):
            name = value.strip().upper()
            name = _ALIASES.get(name, name)
            if name in cls.__members__:
                return cls[name]
        raise ValueError(f"Unknown log level: {value!r}")


LEVEL_NAMES = [str(level) for level in Level]
