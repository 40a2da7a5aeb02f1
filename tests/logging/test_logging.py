"""Tests for centralized logging behavior and configuration."""

import logging
from io import StringIO

import pytest

from pathgraph.graph import Graph
from pathgraph.logging import (
    ROOT_LOGGER_NAME,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test to avoid cross-test bleed."""
    reset_logging()
    yield
    reset_logging()


def test_effective_levels_enable_disable():
    """INFO by default, DEBUG after enable, back to INFO after disable."""
    logger = get_logger("pathgraph.test")

    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    logger.info("info-1")
    assert "info-1" in capture.getvalue()

    logger.debug("debug-1")
    assert "debug-1" not in capture.getvalue()

    enable_debug_logging()
    logger.debug("debug-2")
    assert "debug-2" in capture.getvalue()

    disable_debug_logging()
    logger.debug("debug-3")
    assert "debug-3" not in capture.getvalue()

    logger.removeHandler(handler)


def test_global_level_propagates_to_children():
    """Changing the global level updates existing and new child loggers."""
    logger1 = get_logger("pathgraph.module1")
    assert logger1.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert get_logger("pathgraph.module2").getEffectiveLevel() == logging.WARNING


def test_setup_root_logger_idempotent():
    """Repeated setup does not add handlers."""
    handler = logging.StreamHandler(StringIO())
    setup_root_logger(level=logging.INFO, handler=handler)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    assert root_logger.handlers == [handler]

    setup_root_logger(level=logging.DEBUG)
    assert root_logger.handlers == [handler]
    assert root_logger.level == logging.INFO


def test_custom_format_string_applied():
    """Custom format string is used by the root handler."""
    capture = StringIO()
    handler = logging.StreamHandler(capture)
    fmt = "LEVEL:%(levelname)s|NAME:%(name)s|MSG:%(message)s"
    setup_root_logger(level=logging.INFO, format_string=fmt, handler=handler)

    get_logger("pathgraph.test.format").info("hello")
    out = capture.getvalue()
    assert "LEVEL:INFO" in out
    assert "NAME:pathgraph.test.format" in out
    assert "MSG:hello" in out


def test_queries_log_at_debug_only():
    """Path queries stay silent at INFO and report counts at DEBUG."""
    capture = StringIO()
    setup_root_logger(
        level=logging.INFO,
        format_string="%(message)s",
        handler=logging.StreamHandler(capture),
    )
    g = Graph.from_edges([(1, 2), (2, 3)])

    g.find_all_paths(1, 3)
    assert capture.getvalue() == ""

    enable_debug_logging()
    g.find_paths_with_max_steps(1, 3, 2)
    out = capture.getvalue()
    assert "Searching paths 1 -> 3 (max_steps=2" in out
    assert "Found 0 path(s) 1 -> 3" in out
