# topmark:header:start
#
#   project      : API Surface
#   file         : symbols.py
#   file_relpath : src/apisurface/core/symbols.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enumerate the public callables bound directly in a namespace.

Only a namespace's own bindings (``vars()``) are considered: nothing inherited,
no recursion into child modules. Functions imported *into* the namespace do
count, since they are part of what a reader of the namespace can reach.
"""

from __future__ import annotations

import inspect
import sys
from types import ModuleType
from typing import TYPE_CHECKING, Any, Union

from apisurface.config.logging import get_logger
from apisurface.config.model import DEFAULT_CONFIG

if TYPE_CHECKING:
    from collections.abc import Mapping

    from apisurface.config.logging import ApisurfaceLogger
    from apisurface.config.model import SurfaceConfig

logger: ApisurfaceLogger = get_logger(__name__)

NamespaceLike = Union[ModuleType, "Mapping[str, Any]", str]


def namespace_bindings(namespace: NamespaceLike) -> Mapping[str, Any]:
    """Return the symbol table of a module, mapping, or loaded module name.

    Args:
        namespace (NamespaceLike): A module object, a namespace mapping, or a
            dotted module name. Names are resolved through `sys.modules` only;
            nothing is imported.

    Returns:
        Mapping[str, Any]: The namespace's own bindings. Empty for a name that is
            not loaded.
    """
    if isinstance(namespace, str):
        module: ModuleType | None = sys.modules.get(namespace)
        if module is None:
            logger.debug("Namespace %r is not loaded; no bindings", namespace)
            return {}
        return vars(module)
    if isinstance(namespace, ModuleType):
        return vars(namespace)
    return namespace


def is_public_callable(name: str, value: object, config: SurfaceConfig = DEFAULT_CONFIG) -> bool:
    """Return True if ``name`` bound to ``value`` belongs to the public surface.

    Args:
        name (str): The bound name.
        value (object): The bound value.
        config (SurfaceConfig): Supplies the private prefix and class policy.

    Returns:
        bool: True for non-private routines (and classes when enabled).
    """
    if name.startswith(config.private_prefix):
        return False
    if inspect.isroutine(value):
        return True
    return config.include_classes and inspect.isclass(value)


def public_symbols(
    namespace: NamespaceLike,
    config: SurfaceConfig = DEFAULT_CONFIG,
) -> frozenset[str]:
    """Return the public callable names bound directly in ``namespace``.

    Args:
        namespace (NamespaceLike): Module, mapping, or loaded module name.
        config (SurfaceConfig): Enumeration settings.

    Returns:
        frozenset[str]: The public symbol set.
    """
    bindings: Mapping[str, Any] = namespace_bindings(namespace)
    # Snapshot items: module dicts may change while we look at them
    symbols: frozenset[str] = frozenset(
        name for name, value in list(bindings.items()) if is_public_callable(name, value, config)
    )
    logger.trace("Public symbols of %s: %s", _describe(namespace), sorted(symbols))
    return symbols


def _describe(namespace: NamespaceLike) -> str:
    if isinstance(namespace, str):
        return namespace
    if isinstance(namespace, ModuleType):
        return namespace.__name__
    return f"<namespace with {len(namespace)} bindings>"
