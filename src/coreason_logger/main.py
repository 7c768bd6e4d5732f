# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

import sys
from typing import Annotated, Optional

import typer

from coreason_logger import __version__
from coreason_logger.ansi import strip as strip_ansi
from coreason_logger.config import DEFAULT_COLOR_PREFIX, Flags
from coreason_logger.levels import LEVEL_NAMES, Level
from coreason_logger.logger import Logger
from coreason_logger.utils.logger import logger

app = typer.Typer(
    name="coreason-logger",
    help="CLI for coreason-logger: leveled, colored log lines from the shell.",
    add_completion=False,
)


@app.command()
def emit(
    text: Annotated[str, typer.Argument(help="Message to log")],
    level: Annotated[str, typer.Option("--level", "-l", help="Level of the message")] = "WARNING",
    threshold: Annotated[str, typer.Option("--threshold", "-t", help="Minimum level written")] = "WARNING",
    prefix: Annotated[Optional[str], typer.Option("--prefix", help="Prefix for the line")] = None,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable ANSI colors")] = False,
    no_date: Annotated[bool, typer.Option("--no-date", help="Omit the timestamp")] = False,
    short_file: Annotated[bool, typer.Option("--short-file", help="Add base file name and line")] = False,
    long_file: Annotated[bool, typer.Option("--long-file", help="Add full file path and line")] = False,
    stdout: Annotated[bool, typer.Option("--stdout", help="Write to stdout instead of stderr")] = False,
) -> None:
    """
    Write a single log line.
    """
    try:
        flags = Flags.STD
        if no_date:
            flags &= ~Flags.DATE
        if short_file:
            flags |= Flags.SHORTFILE
        if long_file:
            flags |= Flags.LONGFILE

        log = Logger(
            sys.stdout if stdout else sys.stderr,
            Level.parse(threshold),
            prefix=DEFAULT_COLOR_PREFIX if prefix is None else prefix,
            flags=flags,
            colors=not no_color,
        )
        written = log.log(Level.parse(level), text)
        logger.debug(f"emit wrote {written} bytes")
    except Exception:
        logger.exception("Emit Failed")
        sys.exit(1)


@app.command()
def strip(
    text: Annotated[Optional[str], typer.Argument(help="Text to clean. Reads stdin when omitted")] = None,
) -> None:
    """
    Remove ANSI color escapes from text.
    """
    source = sys.stdin.read() if text is None else text
    typer.echo(strip_ansi(source), nl=not source.endswith("\n"))


@app.command()
def levels() -> None:
    """List the log levels in severity order."""
    for name in LEVEL_NAMES:
        typer.echo(name)


@app.command()
def version() -> None:
    """Print the version of coreason-logger."""
    typer.echo(f"coreason-logger v{__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()  # pragma: no cover
