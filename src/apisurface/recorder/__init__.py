# topmark:header:start
#
#   project      : API Surface
#   file         : __init__.py
#   file_relpath : src/apisurface/recorder/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Outcome recorders.

Design:
    - Checks talk to an `OutcomeRecorder` (``record`` + ``diagnostic``).
    - `OutcomeLog` keeps immutable `Outcome` entries in memory.
    - `TapRecorder` streams Test Anything Protocol lines.
    - A process-wide default recorder serves checks called without one.
"""

from __future__ import annotations

from apisurface.recorder.api import OutcomeRecorder
from apisurface.recorder.default import get_recorder, set_recorder, use_recorder
from apisurface.recorder.model import Outcome, OutcomeLog, OutcomeStats
from apisurface.recorder.tap import TapRecorder

__all__ = [
    "Outcome",
    "OutcomeLog",
    "OutcomeRecorder",
    "OutcomeStats",
    "TapRecorder",
    "get_recorder",
    "set_recorder",
    "use_recorder",
]
