"""Shared fixtures."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog

from lockstep.core.logging import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo configure_logging so caplog sees lockstep records again."""
    yield
    structlog.reset_defaults()
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
