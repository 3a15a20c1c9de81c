"""
Tests for log records emitted by the domain functions and the showcase.
"""
import logging

import pytest

from core.domain.arithmetic import add
from core.logging_setup import LOGGER_NAME
from core.services.showcase import CallExample, run_showcase


@pytest.fixture
def package_records(caplog):
    """Capture records on the package logger even when propagation is off."""
    logger = logging.getLogger(LOGGER_NAME)
    previous = logger.level
    logger.addHandler(caplog.handler)
    logger.setLevel(logging.DEBUG)
    yield caplog
    logger.removeHandler(caplog.handler)
    logger.setLevel(previous)


def test_failing_example_logs_warning(package_records):
    run_showcase([CallExample("wrong", "1 + 1", lambda: 1 + 1, expected=3)])

    warnings = [
        r for r in package_records.records
        if r.name == "restdoc_examples.showcase" and r.levelno == logging.WARNING
    ]
    assert len(warnings) == 1
    assert "wrong" in warnings[0].getMessage()
    assert "failed" in warnings[0].getMessage()


def test_passing_example_logs_no_warning(package_records):
    run_showcase([CallExample("ok", "1", lambda: 1, expected=1)])

    assert not [r for r in package_records.records if r.levelno >= logging.WARNING]


def test_domain_functions_log_at_debug(package_records):
    add(2, 3)

    records = [r for r in package_records.records if r.name == "restdoc_examples.arithmetic"]
    assert records
    assert records[0].levelno == logging.DEBUG
    assert records[0].getMessage() == "add(2, 3)"
