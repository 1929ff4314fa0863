# topmark:header:start
#
#   project      : PillarMode
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for log level parsing and the TRACE-aware logger."""

from __future__ import annotations

import logging

import pytest

from pillarmode.config.logging import (
    TRACE_LEVEL,
    PillarLogger,
    get_logger,
    parse_log_level,
    resolve_env_log_level,
)
from tests.conftest import parametrize


@parametrize(
    ("raw", "expected"),
    [
        ("trace", TRACE_LEVEL),
        (" Debug ", logging.DEBUG),
        ("warn", logging.WARNING),
        ("20", 20),
        ("", None),
        (None, None),
        ("chatty", None),
    ],
)
def test_parse_log_level(raw: str | None, expected: int | None) -> None:
    """Level names are case-insensitive; numbers pass through."""
    assert parse_log_level(raw) == expected


def test_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """``PILLARMODE_LOG_LEVEL`` is read from the environment."""
    assert resolve_env_log_level() is None
    monkeypatch.setenv("PILLARMODE_LOG_LEVEL", "error")
    assert resolve_env_log_level() == logging.ERROR


def test_logger_has_trace(caplog: pytest.LogCaptureFixture) -> None:
    """Module loggers are PillarLoggers and can emit TRACE records."""
    logger: PillarLogger = get_logger("pillarmode.tests.trace")
    assert isinstance(logger, PillarLogger)
    with caplog.at_level(TRACE_LEVEL, logger="pillarmode.tests.trace"):
        logger.trace("value=%d", 3)
    assert [(r.levelname, r.getMessage()) for r in caplog.records] == [("TRACE", "value=3")]
