# topmark:header:start
#
#   project      : API Surface
#   file         : checker.py
#   file_relpath : src/apisurface/core/checker.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""`SurfaceChecker`: the checks bound to one recorder, config and simulator.

The module-level `public_ok` / `import_ok` functions report to the
process-wide recorder. A checker keeps that wiring explicit, which is what
the pytest fixture hands out, and adds ``assert_*`` variants that raise
`SurfaceMismatchError` so pytest shows the diagnostics in its failure report.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from apisurface.config.model import DEFAULT_CONFIG
from apisurface.core.checks import import_ok, public_ok
from apisurface.core.simulator import DEFAULT_SIMULATOR
from apisurface.errors import SurfaceMismatchError
from apisurface.recorder.model import OutcomeLog

if TYPE_CHECKING:
    from apisurface.config.model import SurfaceConfig
    from apisurface.core.checks import NameSpec
    from apisurface.core.simulator import ImportSimulator
    from apisurface.recorder.api import OutcomeRecorder
    from apisurface.recorder.model import Outcome


class _TeeRecorder:
    """Forward to a target recorder while keeping a private copy."""

    def __init__(self, target: OutcomeRecorder) -> None:
        self.target = target
        self.log = OutcomeLog()

    def record(self, passed: bool, label: str) -> None:
        self.target.record(passed, label)
        self.log.record(passed, label)

    def diagnostic(self, text: str) -> None:
        self.target.diagnostic(text)
        self.log.diagnostic(text)


@dataclass
class SurfaceChecker:
    """Run surface checks against a fixed recorder, config and simulator.

    Attributes:
        recorder (OutcomeRecorder): Receives every outcome. A fresh `OutcomeLog`
            by default.
        config (SurfaceConfig): Enumeration and namespace settings.
        simulator (ImportSimulator): Performs the simulated imports.
    """

    recorder: OutcomeRecorder = field(default_factory=OutcomeLog)
    config: SurfaceConfig = DEFAULT_CONFIG
    simulator: ImportSimulator = DEFAULT_SIMULATOR

    def public_ok(self, module_name: str, *names: str) -> bool:
        """Check the public functions of ``module_name``; see `apisurface.public_ok`."""
        return public_ok(module_name, *names, recorder=self.recorder, config=self.config)

    def import_ok(
        self,
        module_name: str,
        *,
        export: NameSpec = None,
        export_ok: NameSpec = None,
    ) -> bool:
        """Check the exports of ``module_name``; see `apisurface.import_ok`."""
        return import_ok(
            module_name,
            export=export,
            export_ok=export_ok,
            recorder=self.recorder,
            config=self.config,
            simulator=self.simulator,
        )

    def assert_public_ok(self, module_name: str, *names: str) -> None:
        """Like `public_ok`, but raise on failure.

        Raises:
            SurfaceMismatchError: If the public surface does not match.
        """
        tee = _TeeRecorder(self.recorder)
        if not public_ok(module_name, *names, recorder=tee, config=self.config):
            _raise_for(tee.log)

    def assert_import_ok(
        self,
        module_name: str,
        *,
        export: NameSpec = None,
        export_ok: NameSpec = None,
    ) -> None:
        """Like `import_ok`, but raise on failure.

        Raises:
            SurfaceMismatchError: If the exports do not match.
        """
        tee = _TeeRecorder(self.recorder)
        if not import_ok(
            module_name,
            export=export,
            export_ok=export_ok,
            recorder=tee,
            config=self.config,
            simulator=self.simulator,
        ):
            _raise_for(tee.log)


def _raise_for(log: OutcomeLog) -> None:
    outcome: Outcome | None = log.last
    if outcome is None:  # pragma: no cover - every check records an outcome
        raise SurfaceMismatchError("surface check", log.orphans)
    raise SurfaceMismatchError(outcome.label, outcome.diagnostics)
