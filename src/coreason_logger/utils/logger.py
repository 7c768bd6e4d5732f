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
import sys
from typing import Any, Optional

from loguru import logger as _logger

__all__ = ["logger", "DIAGNOSTICS_ENV", "PACKAGE", "handler_id"]

DIAGNOSTICS_ENV = "COREASON_LOGGER_DIAGNOSTICS"
PACKAGE = "coreason_logger"

# Handlers configured by the host application are left alone. The package's
# own diagnostics are silenced unless COREASON_LOGGER_DIAGNOSTICS names a level.
_logger.disable(PACKAGE)

handler_id: Optional[int] = None

_level = os.environ.get(DIAGNOSTICS_ENV, "").strip().upper()
if _level:
    _logger.enable(PACKAGE)
    # Sink: stderr (Human-readable), restricted to records from this package
    handler_id = _logger.add(
        sys.stderr,
        level=_level,
        filter=PACKAGE,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
    )

logger: Any = _logger
