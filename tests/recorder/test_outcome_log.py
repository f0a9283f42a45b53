# topmark:header:start
#
#   project      : API Surface
#   file         : test_outcome_log.py
#   file_relpath : tests/recorder/test_outcome_log.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-memory outcome log."""

from __future__ import annotations

import logging

import pytest

from apisurface.recorder.model import Outcome, OutcomeLog, OutcomeStats


def test_diagnostics_attach_to_latest_outcome() -> None:
    """Diagnostic lines belong to the outcome recorded just before them."""
    log = OutcomeLog()
    log.record(True, "first")
    log.record(False, "second")
    log.diagnostic("missing: a")
    log.diagnostic("extra: b")
    assert log.items == [
        Outcome(True, "first"),
        Outcome(False, "second", ("missing: a", "extra: b")),
    ]


def test_diagnostic_before_any_outcome_is_kept() -> None:
    """Orphan diagnostics are stored, not dropped."""
    log = OutcomeLog()
    log.diagnostic("early")
    assert log.orphans == ["early"]
    assert log.last is None


def test_stats_and_failures() -> None:
    """Counts and failure lists follow insertion order."""
    log = OutcomeLog()
    log.record(True, "a")
    log.record(False, "b")
    log.record(False, "c")
    assert log.stats() == OutcomeStats(n_passed=1, n_failed=2)
    assert log.stats().total == 3
    assert log.has_failures()
    assert [o.label for o in log.failures()] == ["b", "c"]


def test_clear_and_len() -> None:
    """An empty log has length zero, also after clearing."""
    log = OutcomeLog()
    assert len(log) == 0
    log.record(True, "a")
    log.diagnostic("orphan?")
    assert len(log) == 1
    log.clear()
    assert len(log) == 0
    assert log.orphans == []
    assert not log.has_failures()


def test_outcomes_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Passing outcomes log at INFO, failures at ERROR, diagnostics at WARNING."""
    log = OutcomeLog()
    with caplog.at_level(logging.DEBUG, logger="apisurface"):
        log.record(True, "good")
        log.record(False, "bad")
        log.diagnostic("extra: x")
    levels = [
        (r.levelno, r.getMessage()) for r in caplog.records if r.name.startswith("apisurface")
    ]
    assert levels == [
        (logging.INFO, "ok - good"),
        (logging.ERROR, "not ok - bad"),
        (logging.WARNING, "extra: x"),
    ]
