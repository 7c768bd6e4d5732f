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
Turns a log record into the bytes written to the output stream.

Mechanism:
1. Render the timestamp with the configured date format.
2. Render the caller location (long or short form) when requested.
3. Fill the compiled template with prefix, level, date, caller and text.
4. Terminate the line with exactly one newline.
"""

import os
import string
import sys
from datetime import datetime
from typing import Callable, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from coreason_logger.ansi import colorize_level, strip
from coreason_logger.config import Flags, FormatOptions
from coreason_logger.exceptions import TemplateError
from coreason_logger.levels import Level
from coreason_logger.utils.logger import logger

UNKNOWN_FILE = "???"

DEFAULT_TEMPLATE = "{prefix}{level} {date} {caller} {text}"

TEMPLATE_FIELDS = frozenset({"prefix", "level", "date", "caller", "file", "line", "text"})


class LogRecord(BaseModel):
    """
    A single log call, before formatting.
    """

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    level: Level
    text: str
    file: str = ""
    line: int = 0


class LogFields(BaseModel):
    """
    The rendered values a template is filled with.

    Empty strings mark fields that are disabled by the logger flags.
    """

    model_config = ConfigDict(frozen=True)

    prefix: str
    level: str
    date: str
    caller: str
    file: str
    line: str
    text: str


TemplateFunc = Callable[[LogFields], str]


class CompiledTemplate:
    """
    A str.format style template, parsed and validated once.

    A field that renders empty also drops the whitespace literal in front of it,
    so a disabled date or caller leaves no double spaces behind.
    """

    def __init__(self, template: str):
        self.source = template
        try:
            pieces = list(string.Formatter().parse(template))
        except ValueError as e:
            raise TemplateError(f"Malformed log template {template!r}: {e}") from e

        self._pieces: List[Tuple[str, Optional[str], str]] = []
        for literal, field, spec, conversion in pieces:
            if field is not None and field not in TEMPLATE_FIELDS:
                raise TemplateError(
                    f"Unknown field {{{field}}} in log template {template!r}. "
                    f"Expected one of: {', '.join(sorted(TEMPLATE_FIELDS))}"
                )
            if conversion is not None:
                raise TemplateError(f"Conversions are not supported in log template {template!r}")
            self._pieces.append((literal, field, spec or ""))

        # Trial render so a bad format spec fails here, not on the first write
        try:
            self(_SAMPLE_FIELDS)
        except ValueError as e:
            raise TemplateError(f"Invalid format spec in log template {template!r}: {e}") from e

    def __call__(self, fields: LogFields) -> str:
        out: List[str] = []
        for literal, field, spec in self._pieces:
            if field is None:
                out.append(literal)
                continue
            value = format(getattr(fields, field), spec)
            if value or literal.strip():
                out.append(literal)
            out.append(value)
        return "".join(out)

    def __repr__(self) -> str:
        return f"CompiledTemplate({self.source!r})"


_SAMPLE_FIELDS = LogFields(
    prefix=">>>",
    level=str(Level.WARNING),
    date="Mon Jan 02 15:04:05 +0000 2006",
    caller="sample.py:1",
    file="sample.py",
    line="1",
    text="sample",
)


def compile_template(template: Union[str, TemplateFunc]) -> TemplateFunc:
    """
    Compiles a template string, or accepts a callable taking LogFields.

    Callables are rendered once against sample fields, so a wrong signature or
    a non-string result fails here rather than on the first write.

    Raises:
        TemplateError: If the template is malformed or names an unknown field.
    """
    if isinstance(template, str):
        return CompiledTemplate(template)
    if not callable(template):
        raise TemplateError(f"Log template must be a string or a callable, got {type(template).__name__}")

    try:
        rendered = template(_SAMPLE_FIELDS)
    except Exception as e:
        raise TemplateError(f"Log template {template!r} failed on sample fields: {e}") from e
    if not isinstance(rendered, str):
        raise TemplateError(f"Log template {template!r} returned {type(rendered).__name__}, expected str")
    return template


def caller_location(skip: int) -> Tuple[str, int]:
    """
    Returns the file and line of a frame on the current stack.

    skip counts frames above the function calling caller_location: 0 is that
    function itself, 1 is its caller, and so on. When the stack is not that
    deep, the placeholder ("???", 0) is returned.
    """
    try:
        frame = sys._getframe(skip + 1)
    except ValueError:
        logger.debug(f"Caller resolution failed at depth {skip}, using placeholder")
        return UNKNOWN_FILE, 0
    return frame.f_code.co_filename, frame.f_lineno


def render_caller(file: str, line: int, flags: int) -> Tuple[str, str]:
    if not flags & (Flags.LONGFILE | Flags.SHORTFILE):
        return "", ""
    if not file:
        file, line = UNKNOWN_FILE, 0
    if flags & Flags.SHORTFILE:
        file = os.path.basename(file)
    return file, str(line)


def render_fields(record: LogRecord, options: FormatOptions) -> LogFields:
    if options.flags & Flags.DATE:
        timestamp = record.timestamp
        if timestamp.tzinfo is None:
            timestamp = timestamp.astimezone()
        date = timestamp.strftime(options.date_format)
    else:
        date = ""

    file, line = render_caller(record.file, record.line, options.flags)
    level = colorize_level(record.level) if options.use_ansi else str(record.level)

    return LogFields(
        prefix=options.prefix,
        level=level,
        date=date,
        caller=f"{file}:{line}" if file else "",
        file=file,
        line=line,
        text=record.text,
    )


def format_line(record: LogRecord, options: FormatOptions, template: TemplateFunc) -> str:
    """
    Renders a record as a single newline-terminated line.

    When color is disabled, every ANSI escape is stripped from the line,
    including escapes embedded in the prefix or the message text.
    """
    line = template(render_fields(record, options))
    if not options.use_ansi:
        line = strip(line)
    if not line.endswith("\n"):
        line += "\n"
    return line


def format_output(buf: bytearray, record: LogRecord, options: FormatOptions, template: TemplateFunc) -> None:
    """Appends the encoded record to buf."""
    buf += format_line(record, options, template).encode("utf-8")


def now() -> datetime:
    return datetime.now().astimezone()
