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
coreason-logger
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .ansi import strip, wrap
from .config import RFC3339, RUBY_DATE, Flags, FormatOptions, LoggerSettings
from .exceptions import LoggerError, TemplateError
from .facade import get_default_logger, reset_default_logger
from .formatter import DEFAULT_TEMPLATE, LogFields, LogRecord, compile_template
from .levels import Level
from .logger import Logger

DEBUG = Level.DEBUG
INFO = Level.INFO
WARNING = Level.WARNING
ERROR = Level.ERROR
CRITICAL = Level.CRITICAL

__all__ = [
    "Level",
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
    "Flags",
    "RUBY_DATE",
    "RFC3339",
    "DEFAULT_TEMPLATE",
    "FormatOptions",
    "LoggerSettings",
    "LogRecord",
    "LogFields",
    "Logger",
    "LoggerError",
    "TemplateError",
    "compile_template",
    "get_default_logger",
    "reset_default_logger",
    "strip",
    "wrap",
]
