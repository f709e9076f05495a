# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""structlog setup for warmthalert.

Logs never share stdout with scan results or echoed chat lines; they go to
stderr unless another stream is passed in.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

import structlog

if TYPE_CHECKING:
    from warmthalert.settings import Settings

__all__ = ["configure_logging", "get_logger", "resolve_level"]


def resolve_level(level: str | int) -> int:
    """Map a level name ("debug", "WARNING") or number ("10", 20) to a logging level.

    Unknown names fall back to WARNING.
    """
    if isinstance(level, int):
        return level
    text = level.strip()
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelName(text.upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def configure_logging(settings: Settings | None = None, *, stream: TextIO | None = None) -> None:
    """Configure structlog once per process (each CLI command calls this).

    Args:
        settings: Source of ``log_level`` (WARMTHALERT_LOG_LEVEL); created if None
        stream: Destination for log lines, stderr by default
    """
    if settings is None:
        from warmthalert.settings import Settings

        settings = Settings()

    out = stream or sys.stderr
    isatty = getattr(out, "isatty", None)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=bool(isatty and isatty())),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolve_level(settings.log_level)),
        logger_factory=structlog.PrintLoggerFactory(file=out),
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    return structlog.get_logger(name)
