# topmark:header:start
#
#   project      : API Surface
#   file         : loaders.py
#   file_relpath : src/apisurface/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load API Surface configuration from TOML files.

Two sources are recognized, searched upward from a start directory:

- ``apisurface.toml``: settings at the top level of the document;
- ``pyproject.toml``: settings under ``[tool.apisurface]``. A
  ``pyproject.toml`` without that table does not stop the search.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from apisurface.config.logging import get_logger
from apisurface.config.model import DEFAULT_CONFIG, SurfaceConfig
from apisurface.constants import APISURFACE_TOML_NAME, PYPROJECT_SECTION, PYPROJECT_TOML_NAME
from apisurface.errors import ConfigError

if TYPE_CHECKING:
    from apisurface.config.logging import ApisurfaceLogger

logger: ApisurfaceLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"Error loading TOML from {path}: {e}") from e
    except TomlkitParseError as e:
        raise ConfigError(f"Error decoding TOML from {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_section(data: TomlTable, dotted: str) -> TomlTable | None:
    """Return the nested table at a dotted path (e.g. ``tool.apisurface``), if present.

    Args:
        data (TomlTable): Parsed TOML document.
        dotted (str): Dotted section path.

    Returns:
        TomlTable | None: The nested table, or None when any segment is missing.

    Raises:
        ConfigError: If a segment exists but is not a table.
    """
    node: Any = data
    for part in dotted.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    if not isinstance(node, dict):
        raise ConfigError(f"[{dotted}] must be a table, got {type(node).__name__}")
    return cast("TomlTable", node)


def config_table_from_file(path: Path) -> TomlTable | None:
    """Return the API Surface settings table held by ``path``.

    Args:
        path (Path): An ``apisurface.toml`` or ``pyproject.toml`` file.

    Returns:
        TomlTable | None: The settings, or None for a ``pyproject.toml`` without
            a ``[tool.apisurface]`` table.
    """
    data: TomlTable = load_toml_dict(path)
    if path.name == PYPROJECT_TOML_NAME:
        return extract_section(data, PYPROJECT_SECTION)
    return data


def find_config_file(start: Path) -> Path | None:
    """Search ``start`` and its parents for a file holding API Surface settings.

    Args:
        start (Path): Directory (or file) to start from.

    Returns:
        Path | None: The first matching file, or None when none is found.
    """
    here: Path = start.resolve()
    if here.is_file():
        here = here.parent
    for directory in (here, *here.parents):
        candidate: Path = directory / APISURFACE_TOML_NAME
        if candidate.is_file():
            return candidate
        candidate = directory / PYPROJECT_TOML_NAME
        if candidate.is_file() and config_table_from_file(candidate) is not None:
            return candidate
    return None


def load_config(path: Path | None = None, *, start: Path | None = None) -> SurfaceConfig:
    """Load a `SurfaceConfig` from an explicit file or by searching upward.

    Args:
        path (Path | None): Explicit configuration file. Takes precedence over ``start``.
        start (Path | None): Directory to search from; defaults to the current directory.

    Returns:
        SurfaceConfig: The loaded configuration, or the defaults when no file is found.

    Raises:
        ConfigError: If the file is unreadable, invalid, or holds wrongly-typed values.
    """
    if path is None:
        path = find_config_file(start or Path.cwd())
        if path is None:
            logger.debug("No configuration file found; using defaults")
            return DEFAULT_CONFIG
    elif not path.is_file():
        raise ConfigError(f"Configuration file not found: {path}")

    logger.info("Loading configuration from %s", path)
    table: TomlTable | None = config_table_from_file(path)
    if table is None:
        logger.debug("%s has no [%s] table; using defaults", path, PYPROJECT_SECTION)
        return DEFAULT_CONFIG
    return SurfaceConfig.from_table(table)
