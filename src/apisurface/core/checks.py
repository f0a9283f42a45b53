# topmark:header:start
#
#   project      : API Surface
#   file         : checks.py
#   file_relpath : src/apisurface/core/checks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The two surface checks: `public_ok` and `import_ok`.

Both record exactly one outcome per call, followed by zero or more diagnostic
lines, through an `OutcomeRecorder` (the process-wide default unless one is
passed). Both return the pass/fail result as a bool and never raise on a
mismatch.

Example:
    ```python
    import mypkg.util
    from apisurface import import_ok, public_ok

    assert public_ok("mypkg.util", "parse", "render")
    assert import_ok("mypkg.util", export=["parse"], export_ok=["render"])
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from apisurface.config.logging import get_logger
from apisurface.config.model import DEFAULT_CONFIG
from apisurface.constants import IMPORT_LABEL, PUBLIC_API_LABEL
from apisurface.core.issues import Issue, IssueKind, issues_for
from apisurface.core.loaded import ensure_loaded
from apisurface.core.reconcile import reconcile
from apisurface.core.simulator import DEFAULT_SIMULATOR, probe_optional_exports, simulate_exports
from apisurface.core.symbols import public_symbols
from apisurface.recorder.default import get_recorder

if TYPE_CHECKING:
    from collections.abc import Iterable

    from apisurface.config.logging import ApisurfaceLogger
    from apisurface.config.model import SurfaceConfig
    from apisurface.core.reconcile import Reconciliation
    from apisurface.core.simulator import ImportSimulator
    from apisurface.recorder.api import OutcomeRecorder

logger: ApisurfaceLogger = get_logger(__name__)

NameSpec = Union[str, "Iterable[str]", None]


def as_name_list(value: NameSpec) -> list[str]:
    """Normalize a name expectation to a list.

    A bare string is one name, ``None`` is no names, any other iterable is listed.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


@dataclass(frozen=True)
class ExpectationSpec:
    """Expected default and optional exports of a module.

    Attributes:
        export (tuple[str, ...]): Names installed by ``from module import *``.
        export_ok (tuple[str, ...]): Further names importable by name.
    """

    export: tuple[str, ...] = field(default=())
    export_ok: tuple[str, ...] = field(default=())

    @classmethod
    def build(cls, export: NameSpec = None, export_ok: NameSpec = None) -> ExpectationSpec:
        """Build a spec, wrapping bare names and defaulting omitted keys to empty."""
        return cls(export=tuple(as_name_list(export)), export_ok=tuple(as_name_list(export_ok)))


def public_ok(
    module_name: str,
    *names: str,
    recorder: OutcomeRecorder | None = None,
    config: SurfaceConfig = DEFAULT_CONFIG,
) -> bool:
    """Check that ``module_name`` binds exactly the public functions ``names``.

    Functions imported into the module count as its own; list them too.

    Args:
        module_name (str): Dotted name of an already imported module.
        *names (str): Expected public function names, in any order.
        recorder (OutcomeRecorder | None): Receives the outcome; defaults to the
            process-wide recorder.
        config (SurfaceConfig): Enumeration settings.

    Returns:
        bool: True if the public surface matches exactly.
    """
    if recorder is None:
        recorder = get_recorder()
    label: str = PUBLIC_API_LABEL.format(module=module_name)

    if not ensure_loaded(module_name, label, recorder):
        return False

    result: Reconciliation = reconcile(names, public_symbols(module_name, config))
    recorder.record(result.is_match, label)
    for issue in issues_for(
        result.missing,
        result.extra,
        missing_kind=IssueKind.MISSING_EXPECTED,
        extra_kind=IssueKind.UNEXPECTED_EXTRA,
    ):
        recorder.diagnostic(issue.message)
    return result.is_match


def collect_import_issues(
    module_name: str,
    spec: ExpectationSpec,
    *,
    config: SurfaceConfig = DEFAULT_CONFIG,
    simulator: ImportSimulator = DEFAULT_SIMULATOR,
) -> list[Issue]:
    """Run both export phases for a loaded module and return the issues found.

    Args:
        module_name (str): Dotted name of an already imported module.
        spec (ExpectationSpec): Expected default and optional exports.
        config (SurfaceConfig): Enumeration and namespace settings.
        simulator (ImportSimulator): Performs the imports.

    Returns:
        list[Issue]: Issues in reporting order (not exported, unexpectedly
            exported, not optionally exportable, extra optionally exportable).
    """
    issues: list[Issue] = []

    default: Reconciliation = simulate_exports(
        module_name, spec.export, config=config, simulator=simulator
    )
    issues.extend(
        issues_for(
            default.missing,
            default.extra,
            missing_kind=IssueKind.NOT_EXPORTED,
            extra_kind=IssueKind.UNEXPECTEDLY_EXPORTED,
        )
    )
    # Names already complained about are not probed again
    flagged: set[str] = {*default.missing, *default.extra}

    exportable: list[str] = probe_optional_exports(
        module_name,
        flagged | set(spec.export),
        config=config,
        simulator=simulator,
    )
    optional: Reconciliation = reconcile(spec.export_ok, exportable)
    issues.extend(
        issues_for(
            optional.missing,
            optional.extra,
            missing_kind=IssueKind.NOT_OPTIONALLY_EXPORTABLE,
            extra_kind=IssueKind.EXTRA_OPTIONALLY_EXPORTABLE,
        )
    )
    return issues


def import_ok(
    module_name: str,
    *,
    export: NameSpec = None,
    export_ok: NameSpec = None,
    recorder: OutcomeRecorder | None = None,
    config: SurfaceConfig = DEFAULT_CONFIG,
    simulator: ImportSimulator = DEFAULT_SIMULATOR,
) -> bool:
    """Check what ``module_name`` exports by default and on request.

    ``export`` lists the public functions ``from module import *`` must install
    (and nothing else). ``export_ok`` lists the remaining public functions that
    may be imported by name; any other importable public function is an error.

    Args:
        module_name (str): Dotted name of an already imported module.
        export (NameSpec): Default exports; a bare name is wrapped.
        export_ok (NameSpec): Optional exports; a bare name is wrapped.
        recorder (OutcomeRecorder | None): Receives the outcome; defaults to the
            process-wide recorder.
        config (SurfaceConfig): Enumeration and namespace settings.
        simulator (ImportSimulator): Performs the imports.

    Returns:
        bool: True if both phases produced no issues.
    """
    if recorder is None:
        recorder = get_recorder()
    label: str = IMPORT_LABEL.format(module=module_name)

    if not ensure_loaded(module_name, label, recorder):
        return False

    spec: ExpectationSpec = ExpectationSpec.build(export, export_ok)

    issues: list[Issue] = collect_import_issues(
        module_name, spec, config=config, simulator=simulator
    )
    ok: bool = not issues
    recorder.record(ok, label)
    for issue in issues:
        recorder.diagnostic(issue.message)
    logger.debug("%s: %d issue(s)", label, len(issues))
    return ok
