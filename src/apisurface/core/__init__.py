# topmark:header:start
#
#   project      : API Surface
#   file         : __init__.py
#   file_relpath : src/apisurface/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Symbol introspection and reconciliation engine.

Layout:
    - `loaded`: refuse modules that were never imported.
    - `symbols`: enumerate public callables bound in a namespace.
    - `reconcile`: compute sorted ``missing`` / ``extra`` name lists.
    - `namespaces`: uniquely named, disposable probe namespaces.
    - `simulator`: default and single-symbol imports into those namespaces.
    - `issues`: the issue taxonomy and diagnostic wording.
    - `checks`: the `public_ok` and `import_ok` checks.
    - `checker`: the checks bound to a recorder/config/simulator.
    - `snapshot`: capture a module's current surface.
"""

from __future__ import annotations

from apisurface.core.checker import SurfaceChecker
from apisurface.core.checks import ExpectationSpec, collect_import_issues, import_ok, public_ok
from apisurface.core.issues import Issue, IssueKind
from apisurface.core.loaded import ensure_loaded, is_loaded
from apisurface.core.reconcile import Reconciliation, diff, reconcile
from apisurface.core.simulator import (
    DeclaredExportSimulator,
    ExecImportSimulator,
    ImportSimulator,
    default_exports,
    probe_optional_exports,
    simulate_exports,
)
from apisurface.core.snapshot import SurfaceSnapshot, collect_snapshot
from apisurface.core.symbols import public_symbols

__all__ = [
    "DeclaredExportSimulator",
    "ExecImportSimulator",
    "ExpectationSpec",
    "ImportSimulator",
    "Issue",
    "IssueKind",
    "Reconciliation",
    "SurfaceChecker",
    "SurfaceSnapshot",
    "collect_import_issues",
    "collect_snapshot",
    "default_exports",
    "diff",
    "ensure_loaded",
    "import_ok",
    "is_loaded",
    "probe_optional_exports",
    "public_ok",
    "public_symbols",
    "reconcile",
    "simulate_exports",
]
