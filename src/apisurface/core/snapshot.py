# topmark:header:start
#
#   project      : API Surface
#   file         : snapshot.py
#   file_relpath : src/apisurface/core/snapshot.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Capture the current surface of a loaded module.

A snapshot records what the checks would observe right now: the public
functions bound in the module, the ones ``from module import *`` installs, and
the remaining ones importable by name. Feeding a snapshot back into
`public_ok` / `import_ok` passes by construction, which makes it a starting
point for locking down an existing module.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from apisurface.config.model import DEFAULT_CONFIG
from apisurface.core.simulator import DEFAULT_SIMULATOR, default_exports, probe_optional_exports
from apisurface.core.symbols import public_symbols

if TYPE_CHECKING:
    from apisurface.config.model import SurfaceConfig
    from apisurface.core.simulator import ImportSimulator


@dataclass(frozen=True)
class SurfaceSnapshot:
    """Observed surface of one module.

    Attributes:
        module (str): Dotted module name.
        public (tuple[str, ...]): Public functions bound in the module.
        export (tuple[str, ...]): Public functions installed by a default import.
        export_ok (tuple[str, ...]): Other public functions importable by name.
    """

    module: str
    public: tuple[str, ...]
    export: tuple[str, ...]
    export_ok: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping."""
        return {
            "module": self.module,
            "public": list(self.public),
            "export": list(self.export),
            "export_ok": list(self.export_ok),
        }

    def to_python(self) -> str:
        """Render ready-to-paste ``public_ok`` / ``import_ok`` calls."""
        public_args: str = "".join(f", {name!r}" for name in self.public)
        return (
            f"public_ok({self.module!r}{public_args})\n"
            f"import_ok(\n"
            f"    {self.module!r},\n"
            f"    export={list(self.export)!r},\n"
            f"    export_ok={list(self.export_ok)!r},\n"
            f")"
        )


def collect_snapshot(
    module_name: str,
    *,
    config: SurfaceConfig = DEFAULT_CONFIG,
    simulator: ImportSimulator = DEFAULT_SIMULATOR,
) -> SurfaceSnapshot:
    """Observe the surface of a loaded module.

    Args:
        module_name (str): Dotted name of an already imported module.
        config (SurfaceConfig): Enumeration and namespace settings.
        simulator (ImportSimulator): Performs the simulated imports.

    Returns:
        SurfaceSnapshot: Sorted name lists for each part of the surface.
    """
    export: frozenset[str] = default_exports(module_name, config=config, simulator=simulator)
    export_ok: list[str] = probe_optional_exports(
        module_name, export, config=config, simulator=simulator
    )
    return SurfaceSnapshot(
        module=module_name,
        public=tuple(sorted(public_symbols(module_name, config))),
        export=tuple(sorted(export)),
        export_ok=tuple(export_ok),
    )
