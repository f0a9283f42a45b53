# topmark:header:start
#
#   project      : API Surface
#   file         : test_public_api.py
#   file_relpath : tests/api/test_public_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The package's own public surface, checked with its own checks."""

from __future__ import annotations

import apisurface
import apisurface.core
from apisurface import OutcomeLog, SurfaceChecker, import_ok, public_ok

TOP_LEVEL_FUNCTIONS = (
    "get_recorder",
    "import_ok",
    "load_config",
    "public_ok",
    "set_recorder",
    "use_recorder",
)

CORE_FUNCTIONS = (
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
)


def test_top_level_public_functions() -> None:
    """`apisurface` binds exactly the documented functions."""
    log = OutcomeLog()
    assert public_ok("apisurface", *TOP_LEVEL_FUNCTIONS, recorder=log), log.items


def test_top_level_exports() -> None:
    """Every public function of `apisurface` is exported by ``import *``."""
    log = OutcomeLog()
    ok = import_ok("apisurface", export=TOP_LEVEL_FUNCTIONS, export_ok=[], recorder=log)
    assert ok, log.items


def test_core_surface() -> None:
    """`apisurface.core` re-exports the engine functions."""
    checker = SurfaceChecker()
    checker.assert_public_ok("apisurface.core", *CORE_FUNCTIONS)
    checker.assert_import_ok("apisurface.core", export=CORE_FUNCTIONS)


def test_all_names_resolve() -> None:
    """Every name in ``__all__`` is bound."""
    for module in (apisurface, apisurface.core):
        missing = [name for name in module.__all__ if not hasattr(module, name)]
        assert missing == [], module.__name__


def test_version_is_exposed() -> None:
    """``__version__`` is a non-empty string."""
    assert isinstance(apisurface.__version__, str)
    assert apisurface.__version__
