# topmark:header:start
#
#   project      : API Surface
#   file         : test_snapshot_command.py
#   file_relpath : tests/cli/test_snapshot_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""`apisurface snapshot MODULE`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from apisurface.cli.exit_codes import ExitCode
from tests.cli.conftest import run_cli

if TYPE_CHECKING:
    from pathlib import Path

    from tests.cli.conftest import ModuleWriter

pytestmark = pytest.mark.cli

SNAPMOD_SOURCE = """
    from os.path import join

    __all__ = ["alpha"]

    LIMIT = 10


    def alpha():
        return 1


    def beta():
        return 2


    def _gamma():
        return 3


    class Widget:
        pass
"""


def test_snapshot_text(write_module: ModuleWriter, module_dir: Path) -> None:
    """Text output lists each part of the surface."""
    write_module("snapmod_text", SNAPMOD_SOURCE)
    result = run_cli(["--no-color", "snapshot", "snapmod_text", "--path", str(module_dir)])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output.splitlines() == [
        "Module: snapmod_text",
        "  public    : alpha beta join",
        "  export    : alpha",
        "  export_ok : beta join",
    ]


def test_snapshot_json(write_module: ModuleWriter, module_dir: Path) -> None:
    """JSON output is machine-readable."""
    write_module("snapmod_json", SNAPMOD_SOURCE)
    result = run_cli(["snapshot", "snapmod_json", "-p", str(module_dir), "--format", "json"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert json.loads(result.output) == {
        "module": "snapmod_json",
        "public": ["alpha", "beta", "join"],
        "export": ["alpha"],
        "export_ok": ["beta", "join"],
    }


def test_snapshot_python(write_module: ModuleWriter, module_dir: Path) -> None:
    """Python output is a pair of ready-to-paste calls."""
    write_module("snapmod_py", SNAPMOD_SOURCE)
    result = run_cli(["snapshot", "snapmod_py", "-p", str(module_dir), "--format", "python"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output.splitlines() == [
        "public_ok('snapmod_py', 'alpha', 'beta', 'join')",
        "import_ok(",
        "    'snapmod_py',",
        "    export=['alpha'],",
        "    export_ok=['beta', 'join'],",
        ")",
    ]


def test_snapshot_include_classes(write_module: ModuleWriter, module_dir: Path) -> None:
    """``--include-classes`` adds public classes to the surface."""
    write_module("snapmod_cls", SNAPMOD_SOURCE)
    result = run_cli(
        ["snapshot", "snapmod_cls", "-p", str(module_dir), "--format", "json", "--include-classes"]
    )
    assert json.loads(result.output)["public"] == ["Widget", "alpha", "beta", "join"]


def test_snapshot_reads_config_file(write_module: ModuleWriter, module_dir: Path) -> None:
    """Settings found from the working directory apply."""
    write_module("snapmod_cfg", SNAPMOD_SOURCE)
    (module_dir / "apisurface.toml").write_text("include-classes = true\n", encoding="utf-8")
    result = run_cli(["snapshot", "snapmod_cfg", "-p", str(module_dir), "--format", "json"])
    assert "Widget" in json.loads(result.output)["public"]


def test_snapshot_missing_module_exit_code(module_dir: Path) -> None:
    """An unknown module exits with the not-found code."""
    result = run_cli(["snapshot", "apisurface_no_such_module_anywhere"])
    assert result.exit_code == ExitCode.MODULE_NOT_FOUND
    assert "Module not found: apisurface_no_such_module_anywhere" in result.output


def test_snapshot_module_raising_on_import(write_module: ModuleWriter, module_dir: Path) -> None:
    """A module that fails to import is a plain failure."""
    write_module("snapmod_broken", "raise RuntimeError('boom')\n")
    result = run_cli(["snapshot", "snapmod_broken", "-p", str(module_dir)])
    assert result.exit_code == ExitCode.FAILURE
    assert "boom" in result.output


def test_snapshot_missing_dependency_is_not_module_not_found(
    write_module: ModuleWriter, module_dir: Path
) -> None:
    """A missing import inside the module is an import failure, not "not found"."""
    write_module("snapmod_dep", "import apisurface_missing_dependency_xyz\n")
    result = run_cli(["snapshot", "snapmod_dep", "-p", str(module_dir)])
    assert result.exit_code == ExitCode.FAILURE


def test_snapshot_bad_config_exit_code(write_module: ModuleWriter, module_dir: Path) -> None:
    """A wrongly typed setting exits with the configuration-error code."""
    write_module("snapmod_badcfg", SNAPMOD_SOURCE)
    config = module_dir / "custom.toml"
    config.write_text('include-classes = "often"\n', encoding="utf-8")
    result = run_cli(["snapshot", "snapmod_badcfg", "-p", str(module_dir), "--config", str(config)])
    assert result.exit_code == ExitCode.CONFIG_ERROR


def test_snapshot_missing_config_exit_code(module_dir: Path) -> None:
    """An explicit configuration file that does not exist is a configuration error."""
    result = run_cli(["snapshot", "os", "--config", str(module_dir / "absent.toml")])
    assert result.exit_code == ExitCode.CONFIG_ERROR
