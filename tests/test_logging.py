"""Tests for measurereport.common.logging."""

import logging
import sys

import pytest
import structlog

from measurereport.common.logging import PACKAGE_LOGGER, configure_structlog, get_logger


@pytest.fixture(autouse=True)
def _reset_logging():
    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level = pkg_logger.handlers[:], pkg_logger.level
    yield
    structlog.reset_defaults()
    pkg_logger.handlers = handlers
    pkg_logger.setLevel(level)


def test_configure_structlog_default_level_filters_debug():
    configure_structlog()
    wrapper = structlog.get_config()["wrapper_class"]
    assert wrapper is structlog.make_filtering_bound_logger(logging.INFO)
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.INFO


def test_configure_structlog_debug_level():
    configure_structlog(logging.DEBUG)
    assert structlog.is_configured()
    wrapper = structlog.get_config()["wrapper_class"]
    assert wrapper is structlog.make_filtering_bound_logger(logging.DEBUG)


def test_configure_structlog_adds_stdout_handler_once():
    configure_structlog()
    configure_structlog()
    stdout_handlers = [
        h
        for h in logging.getLogger(PACKAGE_LOGGER).handlers
        if isinstance(h, logging.StreamHandler) and h.stream is sys.stdout
    ]
    assert len(stdout_handlers) == 1


def test_get_logger_silent_until_enabled(capsys):
    get_logger("test").debug("quiet")
    assert capsys.readouterr().out == ""


def test_get_logger_emits_after_configure(capsys):
    configure_structlog(logging.DEBUG)
    get_logger("test").debug("loud", answer=42)
    out = capsys.readouterr().out
    assert "loud" in out
    assert "answer=42" in out
