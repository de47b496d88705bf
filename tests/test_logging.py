"""Tests for logging utilities."""

import logging
from io import StringIO

from shortpath import Arc, Dijkstra, BellmanFord, identity_weight
from shortpath.logging import configure_logging, get_logger, set_log_level


def test_get_logger_returns_logger():
    """Test that get_logger returns a logger under the package namespace."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "shortpath.test_module"


def test_get_logger_keeps_package_names():
    assert get_logger("shortpath.dijkstra").name == "shortpath.dijkstra"
    assert get_logger().name == "shortpath"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    assert get_logger("test_module") is get_logger("test_module")


def test_get_logger_different_modules():
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_set_log_level():
    logger = get_logger("test_module")
    try:
        set_log_level(logging.INFO)
        assert logger.level == logging.INFO
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG
        assert all(h.level == logging.DEBUG for h in logger.handlers)
    finally:
        set_log_level(logging.WARNING)


def test_configure_logging_custom_format():
    stream = StringIO()
    try:
        configure_logging(level=logging.INFO, format_string="%(levelname)s|%(message)s", stream=stream)
        get_logger("test_module").info("hello")
        assert "INFO|hello" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)


def test_logger_does_not_propagate():
    assert get_logger("test_module").propagate is False


def test_searches_log_at_debug():
    """One debug line per search, silent at the default level."""
    g = [[Arc(1, 1.0)], []]
    stream = StringIO()
    try:
        configure_logging(level=logging.WARNING, stream=stream)
        Dijkstra(g, identity_weight).path(0, 1)
        assert stream.getvalue() == ""

        configure_logging(level=logging.DEBUG, stream=stream)
        Dijkstra(g, identity_weight).path(0, 1)
        assert "shortpath.dijkstra" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)


def test_negative_cycle_logged():
    g = [[Arc(0, -1.0)]]
    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        assert not BellmanFord(g, identity_weight).run(0)
        assert "negative cycle" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)
