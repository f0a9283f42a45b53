# topmark:header:start
#
#   project      : API Surface
#   file         : namespaces.py
#   file_relpath : src/apisurface/core/namespaces.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Disposable namespaces for import probes.

Each probe gets a module object with a name that was never handed out before
in this process. The module is never registered in `sys.modules`, so nothing
outside the probe can reach it; its dict is cleared when the probe ends.
"""

from __future__ import annotations

import itertools
from contextlib import contextmanager
from types import ModuleType
from typing import TYPE_CHECKING

from apisurface.config.logging import get_logger
from apisurface.constants import DEFAULT_PROBE_PREFIX

if TYPE_CHECKING:
    from collections.abc import Iterator

    from apisurface.config.logging import ApisurfaceLogger

logger: ApisurfaceLogger = get_logger(__name__)

_counter: Iterator[int] = itertools.count(1)


def unique_namespace_name(prefix: str = DEFAULT_PROBE_PREFIX) -> str:
    """Return a namespace name not returned before in this process.

    Args:
        prefix (str): Dotted prefix; a monotonically increasing suffix is appended.

    Returns:
        str: e.g. ``"apisurface._probe_17"``.
    """
    return f"{prefix}_{next(_counter)}"


@contextmanager
def disposable_namespace(prefix: str = DEFAULT_PROBE_PREFIX) -> Iterator[ModuleType]:
    """Yield a fresh, uniquely named, unregistered module.

    Args:
        prefix (str): Prefix for the generated name.

    Yields:
        ModuleType: An empty module whose only bindings are the module dunders.
    """
    name: str = unique_namespace_name(prefix)
    namespace = ModuleType(name)
    logger.trace("Created disposable namespace %s", name)
    try:
        yield namespace
    finally:
        vars(namespace).clear()
        logger.trace("Discarded disposable namespace %s", name)
