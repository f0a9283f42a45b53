# topmark:header:start
#
#   project      : API Surface
#   file         : model.py
#   file_relpath : src/apisurface/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for API Surface.

`SurfaceConfig` is an immutable snapshot of the settings that influence how a
namespace is enumerated and how disposable probe namespaces are named. It is
built from code defaults, or from a TOML table via `SurfaceConfig.from_table`
(see `apisurface.config.loaders` for locating and parsing the files).

TOML keys use dashes (``private-prefix``); dataclass fields use underscores.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any, Final

from apisurface.config.logging import get_logger
from apisurface.constants import DEFAULT_PRIVATE_PREFIX, DEFAULT_PROBE_PREFIX
from apisurface.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from apisurface.config.logging import ApisurfaceLogger

logger: ApisurfaceLogger = get_logger(__name__)


@dataclass(frozen=True)
class SurfaceConfig:
    """Settings for symbol enumeration and import simulation.

    Attributes:
        private_prefix (str): Names starting with this prefix are never public.
        include_classes (bool): Count classes as public callables in addition to
            functions. Off by default: only routines make up a function surface.
        probe_prefix (str): Dotted prefix for the names of disposable namespaces.
    """

    private_prefix: str = DEFAULT_PRIVATE_PREFIX
    include_classes: bool = False
    probe_prefix: str = DEFAULT_PROBE_PREFIX

    def __post_init__(self) -> None:
        if not self.private_prefix:
            raise ConfigError("private-prefix must be a non-empty string")
        if not self.probe_prefix:
            raise ConfigError("probe-prefix must be a non-empty string")

    @classmethod
    def from_table(cls, table: Mapping[str, Any]) -> SurfaceConfig:
        """Build a config from a parsed ``[tool.apisurface]`` table.

        Unknown keys are logged and ignored. Values of the wrong type raise.

        Args:
            table (Mapping[str, Any]): TOML table with dashed keys.

        Returns:
            SurfaceConfig: A config with the table's values applied over the defaults.

        Raises:
            ConfigError: If a known key holds a value of the wrong type.
        """
        updates: dict[str, Any] = {}
        for key, value in table.items():
            field_name: str | None = _KEY_TO_FIELD.get(key)
            if field_name is None:
                logger.warning("Ignoring unknown configuration key %r", key)
                continue
            expected: type = _FIELD_TYPES[field_name]
            # bool is an int subclass; check exact type for the bool field
            if type(value) is not expected:
                raise ConfigError(
                    f"Configuration key {key!r} expects {expected.__name__}, "
                    f"got {type(value).__name__}: {value!r}"
                )
            updates[field_name] = value
        config = replace(cls(), **updates)
        logger.debug("Resolved configuration: %r", config)
        return config

    def to_table(self) -> dict[str, Any]:
        """Return the config as a TOML-ready table with dashed keys."""
        return {f.name.replace("_", "-"): getattr(self, f.name) for f in fields(self)}


_KEY_TO_FIELD: Final[dict[str, str]] = {
    f.name.replace("_", "-"): f.name for f in fields(SurfaceConfig)
}
_FIELD_TYPES: Final[dict[str, type]] = {
    "private_prefix": str,
    "include_classes": bool,
    "probe_prefix": str,
}

DEFAULT_CONFIG: Final[SurfaceConfig] = SurfaceConfig()
