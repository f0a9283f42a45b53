# topmark:header:start
#
#   project      : API Surface
#   file         : model.py
#   file_relpath : src/apisurface/recorder/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-memory outcome log.

Sections:
    * Outcome: immutable record of one check (pass/fail, label, diagnostics).
    * OutcomeStats: aggregated pass/fail counts.
    * OutcomeLog: mutable recorder collecting outcomes in order, logging each
      entry as it arrives.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from apisurface.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from apisurface.config.logging import ApisurfaceLogger

logger: ApisurfaceLogger = get_logger(__name__)


@dataclass(frozen=True)
class Outcome:
    """One recorded check result.

    Attributes:
        passed (bool): Whether the check passed.
        label (str): Human-readable label (e.g. ``"public API for pkg.mod"``).
        diagnostics (tuple[str, ...]): Diagnostic lines emitted after the outcome.
    """

    passed: bool
    label: str
    diagnostics: tuple[str, ...] = ()

    def with_diagnostic(self, text: str) -> Outcome:
        """Return a copy of this outcome with ``text`` appended to its diagnostics."""
        return replace(self, diagnostics=(*self.diagnostics, text))


@dataclass(frozen=True)
class OutcomeStats:
    """Aggregated counts of recorded outcomes."""

    n_passed: int
    n_failed: int

    @property
    def total(self) -> int:
        """Return the total number of outcomes."""
        return self.n_passed + self.n_failed


@dataclass
class OutcomeLog:
    """Mutable recorder that keeps every outcome in insertion order.

    Diagnostics attach to the most recent outcome. A diagnostic emitted before
    any outcome is kept in `orphans` rather than dropped.
    """

    items: list[Outcome] = field(default_factory=lambda: [])
    orphans: list[str] = field(default_factory=lambda: [])

    def record(self, passed: bool, label: str) -> None:
        """Append a new outcome.

        Args:
            passed (bool): Whether the check passed.
            label (str): The outcome label.
        """
        self.items.append(Outcome(passed=passed, label=label))
        if passed:
            logger.info("ok - %s", label)
        else:
            logger.error("not ok - %s", label)

    def diagnostic(self, text: str) -> None:
        """Attach a diagnostic line to the most recent outcome.

        Args:
            text (str): The diagnostic text.
        """
        logger.warning("%s", text)
        if not self.items:
            self.orphans.append(text)
            return
        self.items[-1] = self.items[-1].with_diagnostic(text)

    @property
    def last(self) -> Outcome | None:
        """Return the most recent outcome, or None if nothing was recorded."""
        return self.items[-1] if self.items else None

    def stats(self) -> OutcomeStats:
        """Return pass/fail counts for the recorded outcomes."""
        n_passed: int = sum(1 for o in self.items if o.passed)
        return OutcomeStats(n_passed=n_passed, n_failed=len(self.items) - n_passed)

    def has_failures(self) -> bool:
        """Return True if any recorded outcome failed."""
        return any(not o.passed for o in self.items)

    def failures(self) -> list[Outcome]:
        """Return the failed outcomes in insertion order."""
        return [o for o in self.items if not o.passed]

    def clear(self) -> None:
        """Forget all recorded outcomes and orphan diagnostics."""
        self.items.clear()
        self.orphans.clear()

    def __iter__(self) -> Iterator[Outcome]:
        """Iterate over outcomes in insertion order."""
        return iter(self.items)

    def __len__(self) -> int:
        """Return the number of recorded outcomes."""
        return len(self.items)
