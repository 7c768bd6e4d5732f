# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger


class LoggerError(Exception):
    """
    Base class for errors raised by coreason-logger.
    """


class TemplateError(LoggerError, ValueError):
    """
    Raised when a log template cannot be compiled.

    Templates are compiled when a Logger is constructed, so a malformed
    template fails immediately instead of on the first write.
    """
