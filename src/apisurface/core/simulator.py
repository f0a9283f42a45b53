# topmark:header:start
#
#   project      : API Surface
#   file         : simulator.py
#   file_relpath : src/apisurface/core/simulator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Observe what importing a module actually installs.

Two phases, both run against disposable namespaces:

- the default-export phase performs ``from <module> import *`` and compares
  the public symbols that landed with the expected default exports;
- the optional-export phase performs ``from <module> import <name>`` once per
  public function of the module, each in its own namespace, and keeps the
  names that land.

The import itself is delegated to an `ImportSimulator`. `ExecImportSimulator`
executes real import statements, so the result reflects whatever the module
does (``__all__``, module ``__getattr__``, lazy loaders). `DeclaredExportSimulator`
only reads the declared ``__all__``; it is useful for exercising the
reconciliation logic without the import machinery.

Probes run strictly one after the other; a name imported by one probe is
never visible to the next.
"""

from __future__ import annotations

import keyword
import sys
from typing import TYPE_CHECKING, Any, Protocol

from apisurface.config.logging import PROBE_NAMESPACE_ATTR, get_logger
from apisurface.config.model import DEFAULT_CONFIG
from apisurface.core.namespaces import disposable_namespace
from apisurface.core.reconcile import reconcile
from apisurface.core.symbols import public_symbols

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable
    from types import ModuleType

    from apisurface.config.logging import ApisurfaceLogger
    from apisurface.config.model import SurfaceConfig
    from apisurface.core.reconcile import Reconciliation

logger: ApisurfaceLogger = get_logger(__name__)


class ImportSimulator(Protocol):
    """Capability to perform imports into a given namespace."""

    def import_default(self, module_name: str, namespace: ModuleType) -> None:
        """Install the module's default exports into ``namespace``."""
        ...

    def import_symbol(self, module_name: str, name: str, namespace: ModuleType) -> None:
        """Install only ``name`` from the module into ``namespace``.

        Raises:
            ImportError: If ``name`` cannot be imported.
        """
        ...


def _is_importable_name(name: str) -> bool:
    return name.isidentifier() and not keyword.iskeyword(name)


def _check_module_name(module_name: str) -> None:
    if not all(_is_importable_name(part) for part in module_name.split(".")):
        raise ImportError(f"Cannot express an import of {module_name!r}", name=module_name)


class ExecImportSimulator:
    """Execute real ``from ... import`` statements inside the namespace."""

    def import_default(self, module_name: str, namespace: ModuleType) -> None:
        """Run ``from <module_name> import *`` with ``namespace`` as globals."""
        _check_module_name(module_name)
        exec(f"from {module_name} import *", vars(namespace))

    def import_symbol(self, module_name: str, name: str, namespace: ModuleType) -> None:
        """Run ``from <module_name> import <name>`` with ``namespace`` as globals."""
        _check_module_name(module_name)
        if not _is_importable_name(name):
            raise ImportError(f"Cannot import {name!r} from {module_name!r}", name=module_name)
        exec(f"from {module_name} import {name}", vars(namespace))


class DeclaredExportSimulator:
    """Resolve imports from the module's declared ``__all__``, without executing them.

    Reduced fidelity: module ``__getattr__`` hooks and import side effects are
    not observed, and names listed in ``__all__`` but missing from the module
    are skipped instead of failing the whole import.
    """

    def import_default(self, module_name: str, namespace: ModuleType) -> None:
        """Copy the names of ``__all__`` (or all non-underscore names) into ``namespace``."""
        module: ModuleType = sys.modules[module_name]
        bindings: dict[str, Any] = vars(module)
        declared: Iterable[str] = bindings.get(
            "__all__", [n for n in bindings if not n.startswith("_")]
        )
        for name in declared:
            if name in bindings:
                setattr(namespace, name, bindings[name])
            else:
                logger.debug("%s.__all__ lists missing name %r", module_name, name)

    def import_symbol(self, module_name: str, name: str, namespace: ModuleType) -> None:
        """Copy ``name`` into ``namespace`` if the module binds it."""
        bindings: dict[str, Any] = vars(sys.modules[module_name])
        if name not in bindings:
            raise ImportError(f"cannot import name {name!r} from {module_name!r}", name=module_name)
        setattr(namespace, name, bindings[name])


DEFAULT_SIMULATOR: ImportSimulator = ExecImportSimulator()


def default_exports(
    module_name: str,
    *,
    config: SurfaceConfig = DEFAULT_CONFIG,
    simulator: ImportSimulator = DEFAULT_SIMULATOR,
) -> frozenset[str]:
    """Return the public symbols a default import of ``module_name`` installs.

    A failing import is logged; whatever landed before the failure is returned.
    """
    with disposable_namespace(config.probe_prefix) as namespace:
        context: dict[str, object] = {PROBE_NAMESPACE_ATTR: namespace.__name__}
        try:
            simulator.import_default(module_name, namespace)
        except Exception as exc:  # module code may raise anything
            logger.warning(
                "Default import from %s failed: %s: %s",
                module_name,
                type(exc).__name__,
                exc,
                extra=context,
            )
        return public_symbols(namespace, config)


def simulate_exports(
    module_name: str,
    expected_default: Iterable[str],
    *,
    config: SurfaceConfig = DEFAULT_CONFIG,
    simulator: ImportSimulator = DEFAULT_SIMULATOR,
) -> Reconciliation:
    """Perform a default import into a disposable namespace and reconcile it.

    Args:
        module_name (str): Dotted name of a loaded module.
        expected_default (Iterable[str]): Names expected to be exported by default.
        config (SurfaceConfig): Enumeration and namespace settings.
        simulator (ImportSimulator): Performs the import.

    Returns:
        Reconciliation: ``missing`` are defaults that did not land, ``extra`` are
            public symbols that landed without being expected.
    """
    landed: frozenset[str] = default_exports(module_name, config=config, simulator=simulator)
    result: Reconciliation = reconcile(expected_default, landed)
    logger.debug(
        "Default exports of %s: landed=%s missing=%s extra=%s",
        module_name,
        sorted(landed),
        result.missing,
        result.extra,
    )
    return result


def probe_symbol(
    module_name: str,
    name: str,
    *,
    config: SurfaceConfig = DEFAULT_CONFIG,
    simulator: ImportSimulator = DEFAULT_SIMULATOR,
) -> bool:
    """Return True if importing only ``name`` installs exactly ``name``.

    A failing import counts as "did not land"; it never propagates.
    """
    with disposable_namespace(config.probe_prefix) as namespace:
        context: dict[str, object] = {PROBE_NAMESPACE_ATTR: namespace.__name__}
        try:
            simulator.import_symbol(module_name, name, namespace)
        except Exception as exc:  # module code may raise anything
            logger.warning(
                "Probe %s from %s failed: %s: %s",
                name,
                module_name,
                type(exc).__name__,
                exc,
                extra=context,
            )
            return False
        landed: bool = reconcile([name], public_symbols(namespace, config)).is_match
        logger.trace(
            "Probe %s from %s: %s",
            name,
            module_name,
            "landed" if landed else "absent",
            extra=context,
        )
    return landed


def probe_optional_exports(
    module_name: str,
    exclude: Collection[str] = (),
    *,
    config: SurfaceConfig = DEFAULT_CONFIG,
    simulator: ImportSimulator = DEFAULT_SIMULATOR,
) -> list[str]:
    """Return the module's public functions that can be imported one by one.

    Args:
        module_name (str): Dotted name of a loaded module.
        exclude (Collection[str]): Names to skip (already flagged, or exported
            by default).
        config (SurfaceConfig): Enumeration and namespace settings.
        simulator (ImportSimulator): Performs the imports.

    Returns:
        list[str]: Importable names in sorted order.
    """
    exportable: list[str] = []
    for name in sorted(public_symbols(module_name, config)):
        if name in exclude:
            continue
        if probe_symbol(module_name, name, config=config, simulator=simulator):
            exportable.append(name)
    logger.debug("Optionally exportable from %s: %s", module_name, exportable)
    return exportable
