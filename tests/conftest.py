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
from typing import Generator, List

import pytest

from coreason_logger.facade import reset_default_logger
from coreason_logger.levels import Level
from coreason_logger.logger import Logger

# --- Mocks ---


class ChunkStream:
    """
    Binary stream recording every write call separately.
    """

    def __init__(self) -> None:
        self.chunks: List[bytes] = []

    def write(self, data: bytes) -> int:
        self.chunks.append(bytes(data))
        return len(data)

    def getvalue(self) -> bytes:
        return b"".join(self.chunks)


class BrokenStream:
    """
    Stream whose reader went away.
    """

    def write(self, data: bytes) -> int:
        raise BrokenPipeError(32, "Broken pipe")


# --- Fixtures ---


@pytest.fixture
def stream() -> io.BytesIO:
    return io.BytesIO()


@pytest.fixture
def plain_logger(stream: io.BytesIO) -> Logger:
    """
    Logger without date, color or prefix, so output is fully deterministic.
    """
    return Logger(stream, Level.WARNING, prefix="", flags=0, colors=False)


@pytest.fixture(autouse=True)
def fresh_default_logger() -> Generator[None, None, None]:
    reset_default_logger()
    yield
    reset_default_logger()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("COREASON_LOGGER_LEVEL", "COREASON_LOGGER_COLOR", "COREASON_LOGGER_DATE_FORMAT", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def chunk_stream() -> ChunkStream:
    return ChunkStream()


@pytest.fixture
def broken_stream() -> BrokenStream:
    return BrokenStream()
