# topmark:header:start
#
#   project      : API Surface
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running API Surface under Click's test runner.

`run_cli()` invokes the Click group in-process and returns the `Result`.
`module_dir` provides a temporary directory to hold importable modules, and
undoes the import-path and `sys.modules` changes the ``snapshot`` command
makes while importing them.
"""

from __future__ import annotations

import sys
import textwrap
from typing import TYPE_CHECKING, Callable, Sequence

import pytest
from click.testing import CliRunner, Result

from apisurface.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

ModuleWriter = Callable[[str, str], "Path"]


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI with ``argv`` and return the Click result.

    Args:
        argv (Sequence[str]): Arguments after the program name.

    Returns:
        Result: Exit code and captured output.
    """
    runner = CliRunner()
    return runner.invoke(cli, list(argv), catch_exceptions=False)


@pytest.fixture
def module_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """A temporary import root, isolated from the rest of the session.

    Args:
        tmp_path (Path): Per-test temporary directory.
        monkeypatch (pytest.MonkeyPatch): Restores `sys.path` and the working directory.

    Yields:
        Path: The directory to pass with ``--path``.
    """
    monkeypatch.setattr(sys, "path", list(sys.path))
    monkeypatch.chdir(tmp_path)
    yield tmp_path
    for name, module in list(sys.modules.items()):
        origin: str | None = getattr(module, "__file__", None)
        if origin is not None and str(origin).startswith(str(tmp_path)):
            del sys.modules[name]


@pytest.fixture
def write_module(module_dir: Path) -> ModuleWriter:
    """Return a helper writing ``<name>.py`` into `module_dir`."""

    def _write(name: str, source: str) -> Path:
        path = module_dir / f"{name}.py"
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return path

    return _write
