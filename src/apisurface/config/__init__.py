# topmark:header:start
#
#   project      : API Surface
#   file         : __init__.py
#   file_relpath : src/apisurface/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for API Surface.

Settings are held by the immutable `SurfaceConfig`; files are located and
parsed by `apisurface.config.loaders`. Library entry points use the code
defaults (`DEFAULT_CONFIG`) unless handed a config; the pytest plugin and the
CLI read ``apisurface.toml`` / ``pyproject.toml``.
"""

from __future__ import annotations

from apisurface.config.loaders import find_config_file, load_config, load_toml_dict
from apisurface.config.model import DEFAULT_CONFIG, SurfaceConfig

__all__ = [
    "DEFAULT_CONFIG",
    "SurfaceConfig",
    "find_config_file",
    "load_config",
    "load_toml_dict",
]
