# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

import io
import sys
import threading
from typing import IO, Any, Optional, Union

from coreason_logger.config import (
    CALLER_FLAGS,
    DEFAULT_COLOR_PREFIX,
    RUBY_DATE,
    Flags,
    FormatOptions,
)
from coreason_logger.exceptions import TemplateError
from coreason_logger.formatter import (
    DEFAULT_TEMPLATE,
    LogRecord,
    TemplateFunc,
    caller_location,
    compile_template,
    format_output,
    now,
)
from coreason_logger.levels import Level
from coreason_logger.utils.logger import logger

Stream = IO[Any]


def sprint(*args: Any) -> str:
    """Joins operands, adding a space between two operands when neither is a string."""
    parts = []
    for i, arg in enumerate(args):
        if i > 0 and not isinstance(arg, str) and not isinstance(args[i - 1], str):
            parts.append(" ")
        parts.append(str(arg))
    return "".join(parts)


def sprintln(*args: Any) -> str:
    """Joins operands with spaces and appends a newline."""
    return " ".join(str(arg) for arg in args) + "\n"


def sprintf(fmt: str, *args: Any) -> str:
    """
    Applies printf-style formatting, with or without arguments, so "%%" always
    renders as "%".

    A format that does not match its arguments never raises; the format is kept
    verbatim and followed by a "%!(BADARGS ...)" marker.
    """
    try:
        return fmt % args
    except (TypeError, ValueError, KeyError) as e:
        logger.debug(f"Bad printf arguments for {fmt!r}: {e}")
        return f"{fmt} %!(BADARGS {args!r})"


def write_stream(stream: Stream, data: bytes) -> int:
    """
    Writes an encoded record to a binary or text stream.

    Text streams receive the decoded record and are flushed. The number of
    encoded bytes is returned in both cases.
    """
    if isinstance(stream, io.TextIOBase):
        stream.write(data.decode("utf-8"))
        stream.flush()
        return len(data)
    written = stream.write(data)
    return len(data) if written is None else written


class Logger:
    """
    An active logging object that writes one line per call to a stream.

    A Logger can be used from multiple threads at once; every record is
    assembled in a buffer owned by the Logger and written with a single call to
    the stream's write method while holding the Logger's lock, so lines never
    interleave.

    Print-style methods (print, println, printf) always write, whatever the
    threshold, and label the line with the current threshold level. Leveled
    methods (debug ... critical) only write when their level is at or above
    the threshold.
    """

    def __init__(
        self,
        stream: Optional[Stream] = None,
        level: Union[Level, int, str] = Level.WARNING,
        *,
        prefix: str = DEFAULT_COLOR_PREFIX,
        date_format: str = RUBY_DATE,
        template: Union[str, TemplateFunc] = DEFAULT_TEMPLATE,
        flags: int = Flags.STD,
        colors: bool = True,
    ):
        try:
            self._template = compile_template(template)
        except TemplateError as e:
            logger.error(f"Logger construction failed: {e}")
            raise

        self._lock = threading.Lock()
        # Reused for every record; only touched while holding _lock
        self._buf = bytearray()
        self._stream: Stream = sys.stderr if stream is None else stream
        self._level = Level.parse(level)
        self._prefix = prefix
        self._date_format = date_format
        self._flags = Flags(flags)
        self._colors = colors

    def output(
        self,
        call_depth: int,
        text: str,
        level: Optional[Level] = None,
        stream: Optional[Stream] = None,
    ) -> int:
        """
        Formats text and writes it as one record.

        Args:
            call_depth: Number of stack frames to skip when resolving the caller
                location. 0 is output itself, 1 is the function calling output.
            text: The message to append to the formatted prefix.
            level: Level shown on the line. Defaults to the current threshold.
            stream: Written to instead of the configured stream when given.

        Returns:
            The number of bytes written.

        Raises:
            Any error raised by the stream's write, unmodified.
        """
        timestamp = now()
        file, line = "", 0
        self._lock.acquire()
        try:
            if self._flags & CALLER_FLAGS:
                # release lock while getting caller info - it's expensive
                self._lock.release()
                try:
                    file, line = caller_location(call_depth)
                finally:
                    self._lock.acquire()

            record = LogRecord(
                timestamp=timestamp,
                level=self._level if level is None else level,
                text=text,
                file=file,
                line=line,
            )
            self._buf.clear()
            format_output(self._buf, record, self._options(), self._template)

            target = self._stream if stream is None else stream
            try:
                return write_stream(target, bytes(self._buf))
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to write log record to {target!r}: {e}")
                raise
        finally:
            self._lock.release()

    def _options(self) -> FormatOptions:
        return FormatOptions(
            prefix=self._prefix,
            date_format=self._date_format,
            flags=int(self._flags),
            colors=self._colors,
        )

    def _log(self, level: Level, text: str, call_depth: int) -> int:
        if not self.is_enabled_for(level):
            return 0
        return self.output(call_depth, text, level=level)

    def is_enabled_for(self, level: Union[Level, int, str]) -> bool:
        level = Level.parse(level)
        with self._lock:
            return level >= self._level

    # --- Configuration ---

    @property
    def level(self) -> Level:
        with self._lock:
            return self._level

    @level.setter
    def level(self, value: Union[Level, int, str]) -> None:
        level = Level.parse(value)
        with self._lock:
            self._level = level

    @property
    def stream(self) -> Stream:
        with self._lock:
            return self._stream

    @stream.setter
    def stream(self, value: Stream) -> None:
        with self._lock:
            self._stream = value

    @property
    def prefix(self) -> str:
        with self._lock:
            return self._prefix

    @prefix.setter
    def prefix(self, value: str) -> None:
        with self._lock:
            self._prefix = value

    @property
    def date_format(self) -> str:
        with self._lock:
            return self._date_format

    @date_format.setter
    def date_format(self, value: str) -> None:
        with self._lock:
            self._date_format = value

    @property
    def flags(self) -> Flags:
        with self._lock:
            return self._flags

    @flags.setter
    def flags(self, value: int) -> None:
        flags = Flags(value)
        with self._lock:
            self._flags = flags

    @property
    def colors(self) -> bool:
        with self._lock:
            return self._colors

    @colors.setter
    def colors(self, value: bool) -> None:
        with self._lock:
            self._colors = bool(value)

    # --- Unconditional output ---

    def print(self, *args: Any) -> int:
        """Writes the operands regardless of the threshold."""
        return self.output(2, sprint(*args))

    def println(self, *args: Any) -> int:
        """Writes the operands separated by spaces regardless of the threshold."""
        return self.output(2, sprintln(*args))

    def printf(self, fmt: str, *args: Any) -> int:
        """Writes a printf-style formatted message regardless of the threshold."""
        return self.output(2, sprintf(fmt, *args))

    # --- Leveled output ---

    def log(self, level: Union[Level, int, str], *args: Any) -> int:
        return self._log(Level.parse(level), sprint(*args), 3)

    def debug(self, *args: Any) -> int:
        return self._log(Level.DEBUG, sprint(*args), 3)

    def debugf(self, fmt: str, *args: Any) -> int:
        return self._log(Level.DEBUG, sprintf(fmt, *args), 3)

    def info(self, *args: Any) -> int:
        return self._log(Level.INFO, sprint(*args), 3)

    def infof(self, fmt: str, *args: Any) -> int:
        return self._log(Level.INFO, sprintf(fmt, *args), 3)

    def warning(self, *args: Any) -> int:
        return self._log(Level.WARNING, sprint(*args), 3)

    def warningf(self, fmt: str, *args: Any) -> int:
        return self._log(Level.WARNING, sprintf(fmt, *args), 3)

    def error(self, *args: Any) -> int:
        return self._log(Level.ERROR, sprint(*args), 3)

    def errorf(self, fmt: str, *args: Any) -> int:
        return self._log(Level.ERROR, sprintf(fmt, *args), 3)

    def critical(self, *args: Any) -> int:
        return self._log(Level.CRITICAL, sprint(*args), 3)

    def criticalf(self, fmt: str, *args: Any) -> int:
        return self._log(Level.CRITICAL, sprintf(fmt, *args), 3)

    def __repr__(self) -> str:
        return f"Logger(level={self.level}, flags={self.flags!r})"
