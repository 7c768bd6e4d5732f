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
ANSI escape helpers for colored terminal output.
"""

import re
from typing import Dict

from coreason_logger.levels import Level

# Styles
OFF = 0
BOLD = 1
UNDERSCORE = 4
BLINK = 5
REVERSE = 7

# Foreground colors
BLACK = 30
RED = 31
GREEN = 32
YELLOW = 33
BLUE = 34
MAGENTA = 35
CYAN = 36
WHITE = 37

_ANSI_PATTERN = re.compile(r"\x1b\[\d+m")

LEVEL_COLORS: Dict[Level, int] = {
    Level.DEBUG: CYAN,
    Level.INFO: GREEN,
    Level.WARNING: YELLOW,
    Level.ERROR: RED,
    Level.CRITICAL: MAGENTA,
}


def escape(code: int) -> str:
    """Returns the escape sequence for a single style or color code."""
    return f"\x1b[{code}m"


def wrap(style: int, color: int, text: str, reset: int = OFF) -> str:
    """
    Surrounds text with a style and color, followed by the reset code.

    Codes are not validated; an undefined code is ignored by the terminal.
    """
    return f"{escape(style)}{escape(color)}{text}{escape(reset)}"


def strip(text: str) -> str:
    """
    Removes every ANSI color escape from the text.

    Removal repeats until nothing matches, since deleting one escape can join
    the pieces of another (e.g. "\\x1b[\\x1b[0m1m").
    """
    count = 1
    while count:
        text, count = _ANSI_PATTERN.subn("", text)
    return text


def colorize_level(level: Level) -> str:
    # CRITICAL is bold, every other level uses the plain style
    style = BOLD if level >= Level.CRITICAL else OFF
    return wrap(style, LEVEL_COLORS[level], str(level))
