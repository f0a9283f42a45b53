# topmark:header:start
#
#   project      : API Surface
#   file         : issues.py
#   file_relpath : src/apisurface/core/issues.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Issue taxonomy for surface checks.

Every problem a check can report is an `Issue`: a kind plus the names it
concerns. Issues render to the diagnostic lines handed to the outcome
recorder. Only `IssueKind.NOT_LOADED` stops a check early; the others are
collected and reported together.

A failed single-symbol import probe is not an issue of its own: the symbol is
simply absent from what landed and surfaces as one of the kinds below.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from apisurface.constants import NOT_LOADED_MESSAGE

if TYPE_CHECKING:
    from collections.abc import Iterable


class IssueKind(Enum):
    """Kinds of problems reported by `public_ok` and `import_ok`.

    Members are listed in the order `import_ok` emits them.
    """

    NOT_LOADED = "not loaded"
    MISSING_EXPECTED = "missing"
    UNEXPECTED_EXTRA = "extra"
    NOT_EXPORTED = "not exported"
    UNEXPECTEDLY_EXPORTED = "unexpectedly exported"
    NOT_OPTIONALLY_EXPORTABLE = "not optionally exportable"
    EXTRA_OPTIONALLY_EXPORTABLE = "extra optionally exportable"

    @property
    def is_fatal(self) -> bool:
        """Return True if this kind stops the check before any comparison."""
        return self is IssueKind.NOT_LOADED


@dataclass(frozen=True)
class Issue:
    """A reportable problem.

    Attributes:
        kind (IssueKind): What went wrong.
        names (tuple[str, ...]): The symbol names involved (or the module name
            for `IssueKind.NOT_LOADED`).
    """

    kind: IssueKind
    names: tuple[str, ...]

    @classmethod
    def not_loaded(cls, module_name: str) -> Issue:
        """Build the issue reported when ``module_name`` was never imported."""
        return cls(kind=IssueKind.NOT_LOADED, names=(module_name,))

    @property
    def message(self) -> str:
        """Return the diagnostic line for this issue."""
        if self.kind is IssueKind.NOT_LOADED:
            return NOT_LOADED_MESSAGE.format(module=self.names[0])
        return f"{self.kind.value}: {' '.join(self.names)}"


def issues_for(
    missing: Iterable[str],
    extra: Iterable[str],
    *,
    missing_kind: IssueKind,
    extra_kind: IssueKind,
) -> list[Issue]:
    """Return issues for the non-empty sides of a reconciliation, missing first.

    Args:
        missing (Iterable[str]): Expected names that were not observed.
        extra (Iterable[str]): Observed names that were not expected.
        missing_kind (IssueKind): Kind to report ``missing`` under.
        extra_kind (IssueKind): Kind to report ``extra`` under.

    Returns:
        list[Issue]: Zero, one or two issues.
    """
    issues: list[Issue] = []
    missing_t: tuple[str, ...] = tuple(missing)
    extra_t: tuple[str, ...] = tuple(extra)
    if missing_t:
        issues.append(Issue(missing_kind, missing_t))
    if extra_t:
        issues.append(Issue(extra_kind, extra_t))
    return issues
