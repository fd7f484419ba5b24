"""Tests for the logging and performance helpers."""

import logging

from missingvalues.data.imputation import NullImputer
from missingvalues.utils import get_logger, set_verbose, timed_execution


def test_set_verbose() -> None:
    logger = get_logger("missingvalues.tests.verbose")
    set_verbose(logger, False)
    assert logger.level == logging.NOTSET
    set_verbose(logger, True)
    assert logger.level == logging.DEBUG


def test_timed_execution_logs_duration(caplog) -> None:
    @timed_execution
    def work(value: int) -> int:
        return value * 2

    with caplog.at_level(logging.DEBUG, logger="missingvalues.utils.performance"):
        assert work(21) == 42
    assert "executed in" in caplog.text


def test_build_is_timed(caplog, weather) -> None:
    with caplog.at_level(logging.DEBUG, logger="missingvalues.utils.performance"):
        NullImputer().build(weather)
    assert "NullImputer.build executed in" in caplog.text
