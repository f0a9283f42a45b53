# topmark:header:start
#
#   project      : API Surface
#   file         : api.py
#   file_relpath : src/apisurface/recorder/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural interface for test outcome recorders.

Checks report through two operations only: one pass/fail outcome per check,
followed by zero or more diagnostic lines that belong to it. Anything that
implements this protocol can receive them (an in-memory log, a TAP stream, a
bridge into another test framework).
"""

from __future__ import annotations

from typing import Protocol


class OutcomeRecorder(Protocol):
    """Minimal interface for recording check outcomes."""

    def record(self, passed: bool, label: str) -> None:
        """Record one pass/fail outcome labelled ``label``."""
        ...

    def diagnostic(self, text: str) -> None:
        """Emit a diagnostic line attached to the most recent outcome."""
        ...
