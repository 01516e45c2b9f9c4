"""Tests for structured logging configuration."""

from __future__ import annotations

import io
import json
import logging

import numpy as np
import pytest
import structlog

from lockstep import bind
from lockstep.core.logging import PACKAGE_LOGGER, configure_logging


def _json_lines(stream: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line.strip()]


def test_installs_single_handler_on_package_logger() -> None:
    logger = configure_logging(level="INFO", stream=io.StringIO())
    assert logger is logging.getLogger(PACKAGE_LOGGER)
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_repeated_configuration_does_not_stack_handlers() -> None:
    configure_logging(stream=io.StringIO())
    configure_logging(stream=io.StringIO())
    assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == 1


def test_root_logger_untouched() -> None:
    root = logging.getLogger()
    before = list(root.handlers)
    configure_logging(stream=io.StringIO())
    assert root.handlers == before


def test_structlog_logger_renders_json() -> None:
    stream = io.StringIO()
    configure_logging(json_output=True, level="INFO", stream=stream)

    structlog.get_logger("lockstep.test").info("version bound", kind="int32")

    (data,) = _json_lines(stream)
    assert data["event"] == "version bound"
    assert data["kind"] == "int32"
    assert data["level"] == "info"
    assert data["logger"] == "lockstep.test"
    assert "timestamp" in data


def test_stdlib_records_render_json() -> None:
    stream = io.StringIO()
    configure_logging(json_output=True, level="DEBUG", stream=stream)

    bind(np.int16)

    (data,) = _json_lines(stream)
    assert data["event"] == "Bound version generator for numpy.int16 to kind int16"
    assert data["level"] == "debug"
    assert data["logger"] == "lockstep.core.generator"


@pytest.mark.parametrize(
    ("name", "level"),
    [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("ERROR", logging.ERROR)],
)
def test_level_names(name: str, level: int) -> None:
    configure_logging(level=name, stream=io.StringIO())
    assert logging.getLogger(PACKAGE_LOGGER).level == level


def test_console_output_contains_message() -> None:
    stream = io.StringIO()
    configure_logging(level="DEBUG", stream=stream)

    bind(np.int32)

    assert "Bound version generator for numpy.int32 to kind int32" in stream.getvalue()


def test_debug_message_hidden_at_info() -> None:
    stream = io.StringIO()
    configure_logging(level="INFO", stream=stream)

    bind(np.int16)

    assert stream.getvalue() == ""
