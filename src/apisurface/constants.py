# topmark:header:start
#
#   project      : API Surface
#   file         : constants.py
#   file_relpath : src/apisurface/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""API Surface constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    APISURFACE_VERSION: str = get_version("apisurface")
except PackageNotFoundError:  # running from a source checkout
    APISURFACE_VERSION = "0.0.0"

# Environment variable consulted by `apisurface.config.logging.resolve_env_log_level`.
LOG_LEVEL_ENV_VAR: str = "APISURFACE_LOG_LEVEL"

# Configuration file names searched (in order) by `apisurface.config.loaders.find_config_file`.
APISURFACE_TOML_NAME: str = "apisurface.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_SECTION: str = "tool.apisurface"

# Defaults for `apisurface.config.model.SurfaceConfig`.
DEFAULT_PRIVATE_PREFIX: str = "_"
DEFAULT_PROBE_PREFIX: str = "apisurface._probe"

# Outcome labels and diagnostic prefixes.
PUBLIC_API_LABEL: str = "public API for {module}"
IMPORT_LABEL: str = "importing from {module}"
NOT_LOADED_MESSAGE: str = "Module '{module}' not loaded"
