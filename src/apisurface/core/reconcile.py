# topmark:header:start
#
#   project      : API Surface
#   file         : reconcile.py
#   file_relpath : src/apisurface/core/reconcile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reconcile expected and observed name sets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass(frozen=True)
class Reconciliation:
    """Outcome of comparing an expected name list with an observed one.

    Unpacks as the triple ``(is_match, missing, extra)``.

    Attributes:
        missing (tuple[str, ...]): Expected names not observed, sorted and unique.
        extra (tuple[str, ...]): Observed names not expected, sorted and unique.
    """

    missing: tuple[str, ...] = ()
    extra: tuple[str, ...] = ()

    @property
    def is_match(self) -> bool:
        """Return True when nothing is missing and nothing is extra."""
        return not self.missing and not self.extra

    def __iter__(self) -> Iterator[object]:
        """Yield ``is_match``, ``missing`` and ``extra``."""
        yield self.is_match
        yield self.missing
        yield self.extra


def diff(expected: Iterable[str], actual: Iterable[str]) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Return ``(missing, extra)`` between two name collections.

    Input order and duplicates are irrelevant; both outputs are sorted and
    deduplicated.

    Args:
        expected (Iterable[str]): Names that should be present.
        actual (Iterable[str]): Names that are present.

    Returns:
        tuple[tuple[str, ...], tuple[str, ...]]: Names only in ``expected``, and
            names only in ``actual``.
    """
    expected_set: set[str] = set(expected)
    actual_set: set[str] = set(actual)
    return tuple(sorted(expected_set - actual_set)), tuple(sorted(actual_set - expected_set))


def reconcile(expected: Iterable[str], actual: Iterable[str]) -> Reconciliation:
    """Compare ``expected`` with ``actual`` and wrap the result."""
    missing, extra = diff(expected, actual)
    return Reconciliation(missing=missing, extra=extra)
