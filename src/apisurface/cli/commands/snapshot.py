# topmark:header:start
#
#   project      : API Surface
#   file         : snapshot.py
#   file_relpath : src/apisurface/cli/commands/snapshot.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""API Surface `snapshot` command.

Imports MODULE and prints what the checks currently observe: its public
functions, its default exports and its optional exports. With
``--format python`` the output is a pair of ``public_ok`` / ``import_ok``
calls to paste into a test.
"""

from __future__ import annotations

import importlib
import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING

import click

from apisurface.cli.errors import CliConfigError, CliModuleImportError, CliModuleNotFoundError
from apisurface.cli.options import OutputFormat, output_format_option
from apisurface.config.loaders import load_config
from apisurface.config.logging import get_logger
from apisurface.core.snapshot import collect_snapshot
from apisurface.errors import ConfigError

if TYPE_CHECKING:
    from apisurface.cli.console import ClickConsole
    from apisurface.config.logging import ApisurfaceLogger
    from apisurface.config.model import SurfaceConfig
    from apisurface.core.snapshot import SurfaceSnapshot

logger: ApisurfaceLogger = get_logger(__name__)


def resolve_config(config_path: Path | None, *, include_classes: bool) -> SurfaceConfig:
    """Load the configuration and apply command-line overrides.

    Raises:
        CliConfigError: If the configuration cannot be loaded.
    """
    try:
        config: SurfaceConfig = load_config(config_path)
    except ConfigError as exc:
        raise CliConfigError(str(exc)) from exc
    if include_classes:
        config = replace(config, include_classes=True)
    return config


def load_module(module_name: str, search_paths: tuple[Path, ...]) -> None:
    """Import ``module_name`` so that it can be inspected.

    Args:
        module_name (str): Dotted module name.
        search_paths (tuple[Path, ...]): Directories prepended to `sys.path`.

    Raises:
        CliModuleNotFoundError: If the module cannot be found.
        CliModuleImportError: If importing the module raises.
    """
    for path in reversed(search_paths):
        sys.path.insert(0, str(path))
    try:
        importlib.import_module(module_name)
    except ModuleNotFoundError as exc:
        if exc.name is not None and (module_name + ".").startswith(exc.name + "."):
            raise CliModuleNotFoundError(f"Module not found: {module_name}") from exc
        raise CliModuleImportError(f"Importing {module_name} failed: {exc}") from exc
    except Exception as exc:
        raise CliModuleImportError(f"Importing {module_name} failed: {exc}") from exc


def render_text(console: ClickConsole, snapshot: SurfaceSnapshot) -> None:
    """Print a human-readable snapshot."""
    console.print(console.styled(f"Module: {snapshot.module}", bold=True))
    rows: list[tuple[str, tuple[str, ...]]] = [
        ("public", snapshot.public),
        ("export", snapshot.export),
        ("export_ok", snapshot.export_ok),
    ]
    for title, names in rows:
        value: str = " ".join(names) if names else console.styled("(none)", dim=True)
        console.print(f"  {title:<10}: {value}")


@click.command(
    name="snapshot",
    help="Show the current public surface of MODULE.",
)
@click.argument("module_name", metavar="MODULE")
@output_format_option
@click.option(
    "--include-classes",
    is_flag=True,
    default=False,
    help="Count classes as public callables.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read settings from this file instead of searching for one.",
)
@click.option(
    "-p",
    "--path",
    "search_paths",
    type=click.Path(file_okay=False, path_type=Path),
    multiple=True,
    help="Directory to prepend to the import path (repeatable).",
)
def snapshot_command(
    *,
    module_name: str,
    output_format: OutputFormat | None,
    include_classes: bool,
    config_path: Path | None,
    search_paths: tuple[Path, ...],
) -> None:
    """Print the current public surface of a module.

    Args:
        module_name (str): Dotted module name.
        output_format (OutputFormat | None): Output format; text by default.
        include_classes (bool): Count classes as public callables.
        config_path (Path | None): Explicit configuration file.
        search_paths (tuple[Path, ...]): Extra import path entries.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    config: SurfaceConfig = resolve_config(config_path, include_classes=include_classes)
    load_module(module_name, search_paths)
    snapshot: SurfaceSnapshot = collect_snapshot(module_name, config=config)
    logger.debug("Snapshot of %s: %r", module_name, snapshot)

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps(snapshot.to_dict(), indent=2))
    elif fmt == OutputFormat.PYTHON:
        console.print(snapshot.to_python())
    else:
        render_text(console, snapshot)
