# topmark:header:start
#
#   project      : API Surface
#   file         : pytest_plugin.py
#   file_relpath : src/apisurface/pytest_plugin.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""pytest plugin providing the ``api_surface`` fixture.

Registered through the ``pytest11`` entry point. The fixture hands out a
`SurfaceChecker` backed by a fresh `OutcomeLog`, configured from the
``apisurface.toml`` / ``pyproject.toml`` found from the pytest root directory.

Example:
    ```python
    import mypkg.util


    def test_util_surface(api_surface):
        api_surface.assert_public_ok("mypkg.util", "parse", "render")
        api_surface.assert_import_ok("mypkg.util", export="parse", export_ok="render")
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from apisurface.config.loaders import load_config
from apisurface.core.checker import SurfaceChecker
from apisurface.recorder.model import OutcomeLog

if TYPE_CHECKING:
    from pathlib import Path

    from apisurface.config.model import SurfaceConfig

_CONFIG_KEY = pytest.StashKey["SurfaceConfig"]()


def config_for_rootdir(rootdir: Path) -> SurfaceConfig:
    """Load the API Surface configuration that applies to ``rootdir``."""
    return load_config(start=rootdir)


def pytest_configure(config: pytest.Config) -> None:
    """Resolve the API Surface configuration once per session."""
    config.stash[_CONFIG_KEY] = config_for_rootdir(config.rootpath)


@pytest.fixture
def api_surface(request: pytest.FixtureRequest) -> SurfaceChecker:
    """Return a `SurfaceChecker` with a fresh `OutcomeLog` recorder.

    Args:
        request (pytest.FixtureRequest): Gives access to the session configuration.

    Returns:
        SurfaceChecker: Checker bound to the session's API Surface configuration.
    """
    surface_config: SurfaceConfig | None = request.config.stash.get(_CONFIG_KEY, None)
    if surface_config is None:
        surface_config = config_for_rootdir(request.config.rootpath)
    return SurfaceChecker(recorder=OutcomeLog(), config=surface_config)
