# topmark:header:start
#
#   project      : API Surface
#   file         : tap.py
#   file_relpath : src/apisurface/recorder/tap.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Test Anything Protocol recorder.

Writes one numbered ``ok``/``not ok`` line per outcome and one ``#`` comment
per diagnostic line, so check results can be fed to any TAP consumer.
"""

from __future__ import annotations

import sys
from typing import TextIO

import click


class TapRecorder:
    """Outcome recorder writing TAP lines to a text stream.

    Args:
        out (TextIO | None): Stream for outcome lines. Defaults to `sys.stdout`.
        err (TextIO | None): Stream for diagnostics. Defaults to ``out``, so the
            two stay interleaved in a single stream.
        enable_color (bool): If True, color ``ok``/``not ok`` with click styles.

    Attributes:
        count (int): Number of outcomes written so far.
        failed (int): Number of failed outcomes written so far.
    """

    count: int
    failed: int

    def __init__(
        self,
        *,
        out: TextIO | None = None,
        err: TextIO | None = None,
        enable_color: bool = False,
    ) -> None:
        self.out = out or sys.stdout
        self.err = err or self.out
        self.enable_color = enable_color
        self.count = 0
        self.failed = 0

    def record(self, passed: bool, label: str) -> None:
        """Write an ``ok N - label`` or ``not ok N - label`` line."""
        self.count += 1
        status: str = "ok" if passed else "not ok"
        if not passed:
            self.failed += 1
        if self.enable_color:
            status = click.style(status, fg="green" if passed else "bright_red")
        click.echo(f"{status} {self.count} - {label}", file=self.out, color=self.enable_color)

    def diagnostic(self, text: str) -> None:
        """Write each line of ``text`` as a ``#`` comment."""
        for line in text.splitlines() or [""]:
            click.echo(f"# {line}".rstrip(), file=self.err, color=self.enable_color)

    def plan(self) -> None:
        """Write the trailing ``1..N`` plan line for the outcomes written so far."""
        click.echo(f"1..{self.count}", file=self.out, color=self.enable_color)
