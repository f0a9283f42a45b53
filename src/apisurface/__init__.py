# topmark:header:start
#
#   project      : API Surface
#   file         : __init__.py
#   file_relpath : src/apisurface/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""API Surface package.

API Surface is a test-support library that locks down the public function
surface of a module: which functions the module binds (`public_ok`), and
which ones it exports through ``from module import *`` or by name
(`import_ok`). Checks return a bool and report one outcome plus diagnostics
through an outcome recorder.
"""

from __future__ import annotations

from apisurface.config import SurfaceConfig, load_config
from apisurface.constants import APISURFACE_VERSION
from apisurface.core import SurfaceChecker, import_ok, public_ok
from apisurface.errors import ApisurfaceError, ConfigError, SurfaceMismatchError
from apisurface.recorder import OutcomeLog, TapRecorder, get_recorder, set_recorder, use_recorder

__version__: str = APISURFACE_VERSION

__all__ = [
    "ApisurfaceError",
    "ConfigError",
    "OutcomeLog",
    "SurfaceChecker",
    "SurfaceConfig",
    "SurfaceMismatchError",
    "TapRecorder",
    "get_recorder",
    "import_ok",
    "load_config",
    "public_ok",
    "set_recorder",
    "use_recorder",
]
