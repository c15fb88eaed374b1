# topmark:header:start
#
#   project      : C4DSL
#   file         : test_diagnostics_logging.py
#   file_relpath : tests/config/test_diagnostics_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the diagnostic log and the environment-driven log level."""

from __future__ import annotations

import logging

import pytest

from c4dsl.config.diagnostics import Diagnostic, DiagnosticLevel, DiagnosticLog
from c4dsl.config.logging import TRACE_LEVEL, C4dslLogger, get_logger, resolve_env_log_level
from c4dsl.constants import LOG_LEVEL_ENV_VAR
from tests.conftest import parametrize


def test_log_keeps_insertion_order_and_levels() -> None:
    log = DiagnosticLog()
    log.add_info("loaded")
    log.add_warning("ignored value")
    assert [d.level for d in log] == [DiagnosticLevel.INFO, DiagnosticLevel.WARNING]
    assert log.has_warning()
    assert not log.has_error()
    log.add_error("broken")
    assert log.has_error()
    assert len(log) == 3


def test_from_iterable_and_extend() -> None:
    first = Diagnostic(DiagnosticLevel.WARNING, "a")
    log = DiagnosticLog.from_iterable([first])
    log.extend([Diagnostic(DiagnosticLevel.INFO, "b")])
    assert [d.message for d in log] == ["a", "b"]


def test_render_plain() -> None:
    assert Diagnostic(DiagnosticLevel.WARNING, "odd").render() == "[warning] odd"


@parametrize(
    ("raw", "expected"),
    [("TRACE", TRACE_LEVEL), ("debug", logging.DEBUG), (" warn ", logging.WARNING), ("15", 15), ("LOUD", None)],
)
def test_resolve_env_log_level(monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, raw)
    assert resolve_env_log_level() == expected


def test_unset_env_log_level() -> None:
    assert resolve_env_log_level() is None


def test_loggers_support_trace() -> None:
    logger = get_logger("c4dsl.tests.trace")
    assert isinstance(logger, C4dslLogger)
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"
