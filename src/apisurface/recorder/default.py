# topmark:header:start
#
#   project      : API Surface
#   file         : default.py
#   file_relpath : src/apisurface/recorder/default.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Process-wide default recorder.

Checks called without an explicit recorder report to this one. It starts as
an `OutcomeLog` and can be swapped for the lifetime of the process
(`set_recorder`) or for a block (`use_recorder`).
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

from apisurface.recorder.model import OutcomeLog

if TYPE_CHECKING:
    from collections.abc import Iterator

    from apisurface.recorder.api import OutcomeRecorder

_recorder: OutcomeRecorder = OutcomeLog()


def get_recorder() -> OutcomeRecorder:
    """Return the current default recorder."""
    return _recorder


def set_recorder(recorder: OutcomeRecorder) -> OutcomeRecorder:
    """Install ``recorder`` as the default and return the previous one.

    Args:
        recorder (OutcomeRecorder): The new default recorder.

    Returns:
        OutcomeRecorder: The recorder that was the default before the call.
    """
    global _recorder
    previous: OutcomeRecorder = _recorder
    _recorder = recorder
    return previous


@contextmanager
def use_recorder(recorder: OutcomeRecorder) -> Iterator[OutcomeRecorder]:
    """Temporarily install ``recorder`` as the default.

    Args:
        recorder (OutcomeRecorder): The recorder to use inside the block.

    Yields:
        OutcomeRecorder: ``recorder``.
    """
    previous: OutcomeRecorder = set_recorder(recorder)
    try:
        yield recorder
    finally:
        set_recorder(previous)
