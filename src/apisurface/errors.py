# topmark:header:start
#
#   project      : API Surface
#   file         : errors.py
#   file_relpath : src/apisurface/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by API Surface.

Surface mismatches are never exceptions: checks return ``False`` and emit
diagnostics through an outcome recorder. Exceptions are reserved for
configuration mistakes and for the ``assert_*`` helpers of
`apisurface.core.checker.SurfaceChecker`, which convert a failed outcome into
an `AssertionError` that pytest reports natively.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class ApisurfaceError(Exception):
    """Base class for all API Surface errors."""


class ConfigError(ApisurfaceError):
    """Error for malformed configuration (wrong value types, unreadable files)."""


class SurfaceMismatchError(ApisurfaceError, AssertionError):
    """A surface check failed inside an ``assert_*`` helper.

    Args:
        label (str): The outcome label (e.g. ``"public API for pkg.mod"``).
        diagnostics (Sequence[str]): Diagnostic lines emitted for the failed outcome.

    Attributes:
        label (str): The outcome label.
        diagnostics (tuple[str, ...]): Diagnostic lines, in emission order.
    """

    label: str
    diagnostics: tuple[str, ...]

    def __init__(self, label: str, diagnostics: Sequence[str] = ()) -> None:
        self.label = label
        self.diagnostics = tuple(diagnostics)
        lines: list[str] = [f"Failed: {label}"]
        lines.extend(f"  {d}" for d in self.diagnostics)
        super().__init__("\n".join(lines))
