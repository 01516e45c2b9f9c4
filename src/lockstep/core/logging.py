"""Structured logging for the ``lockstep`` logger tree.

Library modules log through stdlib ``logging.getLogger(__name__)``; once
configured, those records and any structlog loggers under ``lockstep`` are
rendered by the same structlog processor chain.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

PACKAGE_LOGGER = "lockstep"


def configure_logging(
    json_output: bool = False, level: str = "INFO", stream: TextIO | None = None,
) -> logging.Logger:
    """Route ``lockstep`` log records through structlog.

    Args:
        json_output: If True, render JSON lines; otherwise console output.
        level: Log level name (DEBUG, INFO, WARNING, ERROR).
        stream: Destination; defaults to stdout.

    Returns:
        The configured package logger.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_logger_name,
    ]

    if json_output:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper()))
    logger.propagate = False

    # Reconfiguring replaces the previous handler
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger
