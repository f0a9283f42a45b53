# topmark:header:start
#
#   project      : API Surface
#   file         : loaded.py
#   file_relpath : src/apisurface/core/loaded.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load guard: refuse to introspect modules the test program never imported."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from apisurface.config.logging import get_logger
from apisurface.core.issues import Issue

if TYPE_CHECKING:
    from apisurface.config.logging import ApisurfaceLogger
    from apisurface.recorder.api import OutcomeRecorder

logger: ApisurfaceLogger = get_logger(__name__)


def is_loaded(module_name: str) -> bool:
    """Return True if ``module_name`` is present in `sys.modules`.

    Never triggers an import. A ``None`` entry (an import explicitly blocked
    through `sys.modules`) counts as not loaded.
    """
    return sys.modules.get(module_name) is not None


def ensure_loaded(module_name: str, label: str, recorder: OutcomeRecorder) -> bool:
    """Check that ``module_name`` was loaded, reporting a failure if not.

    Args:
        module_name (str): Dotted module name.
        label (str): Label for the failing outcome.
        recorder (OutcomeRecorder): Receives the failing outcome and diagnostic.

    Returns:
        bool: True if loaded (no side effect), False after recording the failure.
    """
    if is_loaded(module_name):
        return True
    logger.debug("%s: module %r is not in sys.modules", label, module_name)
    recorder.record(False, label)
    recorder.diagnostic(Issue.not_loaded(module_name).message)
    return False
