"""
Structured Logging
==================

structlog setup for the distribution pipeline.

Examples
--------
::

    from pysatl_distview.logging import configure_logging, get_logger

    # Configure once in the host application
    configure_logging(log_level="DEBUG", log_format="console")

    # Get logger in any module
    logger = get_logger(__name__)
    logger.debug("distribution_built", count=1000, bins=30)

Importing the package never configures logging; until the host application
calls :func:`configure_logging`, structlog's defaults apply.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import sys
from typing import cast

import structlog
from structlog.typing import FilteringBoundLogger

LOG_FORMATS = ("console", "json")


def configure_logging(
    log_level: str = "INFO",
    log_format: str = "console",
    show_timestamps: bool = True,
    color: bool = True,
) -> None:
    """
    Configure structured logging for the host application.

    Parameters
    ----------
    log_level : str, default "INFO"
        Level name (``DEBUG``, ``INFO``, ``WARNING``, ``ERROR``), any case.
    log_format : {"console", "json"}, default "console"
        Human-readable output for development or one JSON object per line.
    show_timestamps : bool, default True
        Whether to add UTC ISO timestamps.
    color : bool, default True
        Whether the console renderer uses colors.

    Raises
    ------
    ValueError
        If the level or the format is unknown.
    """
    level = logging.getLevelNamesMapping().get(log_level.upper())
    if level is None:
        raise ValueError(f"Unknown log level: {log_level}")
    if log_format not in LOG_FORMATS:
        raise ValueError(f"Unknown log format: {log_format}; expected one of {LOG_FORMATS}")

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if show_timestamps:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso", utc=True))

    if log_format == "json":
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(
                colors=color,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> FilteringBoundLogger:
    """
    Get a structured logger.

    Parameters
    ----------
    name : str, optional
        Logger name, typically ``__name__``.

    Returns
    -------
    FilteringBoundLogger
        Lazily bound structlog logger.
    """
    return cast(FilteringBoundLogger, structlog.get_logger(name))


__all__ = [
    "LOG_FORMATS",
    "configure_logging",
    "get_logger",
]
