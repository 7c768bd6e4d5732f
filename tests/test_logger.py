# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

import inspect
import io
import sys
from typing import Any, Tuple
from unittest.mock import patch

import pytest

from coreason_logger.ansi import strip
from coreason_logger.config import DEFAULT_COLOR_PREFIX, RUBY_DATE, Flags
from coreason_logger.exceptions import TemplateError
from coreason_logger.levels import Level
from coreason_logger.logger import Logger, sprint, sprintf, sprintln, write_stream


def lines_of(stream: io.BytesIO) -> list:
    return stream.getvalue().decode("utf-8").splitlines()


def test_defaults() -> None:
    log = Logger()
    assert log.stream is sys.stderr
    assert log.level is Level.WARNING
    assert log.prefix == DEFAULT_COLOR_PREFIX
    assert log.date_format == RUBY_DATE
    assert log.flags == Flags.STD
    assert log.colors is True


def test_construction_fails_fast_on_bad_template(stream: io.BytesIO) -> None:
    with pytest.raises(TemplateError):
        Logger(stream, template="{level} {msg}")
    with pytest.raises(TemplateError):
        Logger(stream, template=lambda record, options: record.text)  # type: ignore[arg-type,misc]
    assert stream.getvalue() == b""


def test_println_example(plain_logger: Logger, stream: io.BytesIO) -> None:
    written = plain_logger.println("disk low")
    assert stream.getvalue() == b"WARNING disk low\n"
    assert written == len(stream.getvalue())


def test_print_style_ignores_threshold(stream: io.BytesIO) -> None:
    log = Logger(stream, Level.ERROR, prefix="", flags=0, colors=False)
    log.printf("x=%d", 5)
    log.print("a", 1, 2, "b")
    log.println("c", 3)
    assert lines_of(stream) == ["ERROR x=5", "ERROR a1 2b", "ERROR c 3"]


def test_leveled_methods_are_gated(stream: io.BytesIO) -> None:
    log = Logger(stream, Level.ERROR, prefix="", flags=0, colors=False)
    assert log.infof("x=%d", 5) == 0
    assert log.warning("skipped") == 0
    assert stream.getvalue() == b""

    assert log.errorf("x=%d", 5) > 0
    assert log.critical("down", 2) > 0
    assert lines_of(stream) == ["ERROR x=5", "CRITICAL down2"]


@pytest.mark.parametrize("threshold", list(Level))
def test_level_gating_is_monotonic(threshold: Level) -> None:
    for level in Level:
        stream = io.BytesIO()
        log = Logger(stream, threshold, prefix="", flags=0, colors=False)
        written = log.log(level, "msg")
        if level >= threshold:
            assert written > 0
            assert lines_of(stream) == [f"{level} msg"]
        else:
            assert written == 0
            assert stream.getvalue() == b""


def test_each_leveled_method_labels_its_level(stream: io.BytesIO) -> None:
    log = Logger(stream, Level.DEBUG, prefix="", flags=0, colors=False)
    log.debug("a")
    log.debugf("%s", "b")
    log.info("c")
    log.infof("%s", "d")
    log.warning("e")
    log.warningf("%s", "f")
    log.error("g")
    log.errorf("%s", "h")
    log.critical("i")
    log.criticalf("%s", "j")
    assert lines_of(stream) == [
        "DEBUG a",
        "DEBUG b",
        "INFO c",
        "INFO d",
        "WARNING e",
        "WARNING f",
        "ERROR g",
        "ERROR h",
        "CRITICAL i",
        "CRITICAL j",
    ]


def test_is_enabled_for(plain_logger: Logger) -> None:
    assert plain_logger.is_enabled_for(Level.WARNING)
    assert plain_logger.is_enabled_for("critical")
    assert not plain_logger.is_enabled_for(Level.INFO)


def test_no_double_newline(plain_logger: Logger, stream: io.BytesIO) -> None:
    plain_logger.output(1, "hello")
    plain_logger.output(1, "hello\n")
    assert stream.getvalue() == b"WARNING hello\nWARNING hello\n"


def test_output_override_stream(plain_logger: Logger, stream: io.BytesIO) -> None:
    other = io.BytesIO()
    plain_logger.output(1, "elsewhere", stream=other)
    assert stream.getvalue() == b""
    assert other.getvalue() == b"WARNING elsewhere\n"


def test_output_explicit_level(plain_logger: Logger, stream: io.BytesIO) -> None:
    plain_logger.output(1, "boom", level=Level.CRITICAL)
    assert stream.getvalue() == b"CRITICAL boom\n"


def test_each_record_is_one_write(chunk_stream: Any) -> None:
    log = Logger(chunk_stream, Level.DEBUG, prefix="", flags=0, colors=False)
    log.info("first message is longer")
    log.info("second")
    assert chunk_stream.chunks == [b"INFO first message is longer\n", b"INFO second\n"]


def test_text_stream_receives_text() -> None:
    stream = io.StringIO()
    log = Logger(stream, prefix="", flags=0, colors=False)
    written = log.println("café")
    assert stream.getvalue() == "WARNING café\n"
    assert written == len("WARNING café\n".encode("utf-8"))


def test_write_stream_falls_back_to_length() -> None:
    class NoCount:
        def write(self, data: bytes) -> None:
            self.data = data

    sink = NoCount()
    assert write_stream(sink, b"abc") == 3
    assert sink.data == b"abc"


def test_write_error_propagates(broken_stream: Any) -> None:
    log = Logger(broken_stream, prefix="", flags=0, colors=False)
    with pytest.raises(BrokenPipeError):
        log.println("lost")
    with pytest.raises(BrokenPipeError):
        log.error("lost")


def test_closed_stream_error_propagates() -> None:
    stream = io.StringIO()
    log = Logger(stream, prefix="", flags=0, colors=False)
    stream.close()
    with pytest.raises(ValueError):
        log.println("closed")


def test_logger_usable_after_write_error(broken_stream: Any, stream: io.BytesIO) -> None:
    log = Logger(broken_stream, prefix="", flags=0, colors=False)
    with pytest.raises(BrokenPipeError):
        log.println("lost")
    log.stream = stream
    log.println("kept")
    assert stream.getvalue() == b"WARNING kept\n"


def test_short_file_attributes_caller(stream: io.BytesIO) -> None:
    log = Logger(stream, prefix="", flags=Flags.SHORTFILE, colors=False)
    line = inspect.currentframe().f_lineno + 1  # type: ignore[union-attr]
    log.warning("here")
    assert lines_of(stream) == [f"WARNING test_logger.py:{line} here"]


def test_long_file_attributes_caller(stream: io.BytesIO) -> None:
    log = Logger(stream, prefix="", flags=Flags.LONGFILE, colors=False)
    line = inspect.currentframe().f_lineno + 1  # type: ignore[union-attr]
    log.println("here")
    assert lines_of(stream) == [f"WARNING {__file__}:{line} here"]


def test_log_method_attributes_caller(stream: io.BytesIO) -> None:
    log = Logger(stream, prefix="", flags=Flags.SHORTFILE, colors=False)
    line = inspect.currentframe().f_lineno + 1  # type: ignore[union-attr]
    log.log("error", "here")
    assert lines_of(stream) == [f"ERROR test_logger.py:{line} here"]


def test_unresolvable_caller_uses_placeholder(stream: io.BytesIO) -> None:
    log = Logger(stream, prefix="", flags=Flags.SHORTFILE, colors=False)
    written = log.output(100_000, "still written")
    assert written > 0
    assert stream.getvalue() == b"WARNING ???:0 still written\n"


def test_lock_released_during_caller_resolution(stream: io.BytesIO) -> None:
    log = Logger(stream, prefix="", flags=Flags.SHORTFILE, colors=False)
    observed = []

    def fake_caller(skip: int) -> Tuple[str, int]:
        observed.append(log._lock.locked())
        return "/src/app.py", 12

    with patch("coreason_logger.logger.caller_location", side_effect=fake_caller):
        log.println("checked")

    assert observed == [False]
    assert not log._lock.locked()
    assert stream.getvalue() == b"WARNING app.py:12 checked\n"


def test_lock_released_after_caller_resolution_error(stream: io.BytesIO) -> None:
    log = Logger(stream, prefix="", flags=Flags.SHORTFILE, colors=False)
    with patch("coreason_logger.logger.caller_location", side_effect=RuntimeError("boom")):
        with pytest.raises(RuntimeError):
            log.println("never")
    assert not log._lock.locked()


def test_no_caller_resolution_without_flags(plain_logger: Logger) -> None:
    with patch("coreason_logger.logger.caller_location") as mock_caller:
        plain_logger.println("fast")
    mock_caller.assert_not_called()


def test_setters(plain_logger: Logger, stream: io.BytesIO) -> None:
    plain_logger.level = "info"
    plain_logger.prefix = "[app] "
    plain_logger.date_format = "%Y"
    plain_logger.flags = Flags.DATE
    plain_logger.colors = True

    assert plain_logger.level is Level.INFO
    assert plain_logger.prefix == "[app] "
    assert plain_logger.date_format == "%Y"
    assert plain_logger.flags == Flags.DATE
    assert plain_logger.colors is True

    plain_logger.info("set")
    line = stream.getvalue().decode("utf-8")
    assert line.startswith("[app] INFO ")
    assert line.endswith(" set\n")
    # ANSI flag is off, so colors alone do not color the line
    assert strip(line) == line


def test_invalid_level_rejected(plain_logger: Logger) -> None:
    with pytest.raises(ValueError):
        plain_logger.level = "loud"
    assert plain_logger.level is Level.WARNING


def test_colored_output(stream: io.BytesIO) -> None:
    log = Logger(stream, Level.DEBUG, flags=Flags.ANSI)
    log.info("colored")
    line = stream.getvalue().decode("utf-8")
    assert "\x1b[32mINFO" in line
    assert strip(line) == ">>>INFO colored\n"


def test_buffer_reused_and_cleared(plain_logger: Logger, stream: io.BytesIO) -> None:
    plain_logger.println("a much longer first line")
    plain_logger.println("b")
    assert bytes(plain_logger._buf) == b"WARNING b\n"
    assert lines_of(stream) == ["WARNING a much longer first line", "WARNING b"]


def test_sprint_helpers() -> None:
    assert sprint("a", "b") == "ab"
    assert sprint(1, 2) == "1 2"
    assert sprint("x", 1, 2, "y") == "x1 2y"
    assert sprint() == ""
    assert sprintln("a", 1) == "a 1\n"
    assert sprintf("%s=%d", "x", 5) == "x=5"
    assert sprintf("100%%") == "100%"
    assert sprintf("%d%%", 5) == "5%"
    assert sprintf("100%") == "100% %!(BADARGS ())"


@pytest.mark.parametrize(
    "fmt, args, expected",
    [
        ("x=%d", ("abc",), "x=%d %!(BADARGS ('abc',))"),
        ("%s and %s", ("one",), "%s and %s %!(BADARGS ('one',))"),
        ("%s", ("a", "b"), "%s %!(BADARGS ('a', 'b'))"),
        ("%(name)s", (5,), "%(name)s %!(BADARGS (5,))"),
    ],
)
def test_sprintf_mismatch_does_not_raise(fmt: str, args: tuple, expected: str) -> None:
    assert sprintf(fmt, *args) == expected


def test_printf_mismatch_still_writes(plain_logger: Logger, stream: io.BytesIO) -> None:
    plain_logger.printf("x=%d", "abc")
    plain_logger.errorf("%d items", None)
    assert lines_of(stream) == [
        "WARNING x=%d %!(BADARGS ('abc',))",
        "ERROR %d items %!(BADARGS (None,))",
    ]


def test_printf_collapses_percent_without_args(plain_logger: Logger, stream: io.BytesIO) -> None:
    plain_logger.printf("disk 100%% full")
    plain_logger.printf("%d%% used", 5)
    assert lines_of(stream) == ["WARNING disk 100% full", "WARNING 5% used"]


def test_repr(plain_logger: Logger) -> None:
    assert "WARNING" in repr(plain_logger)
