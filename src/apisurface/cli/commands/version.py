# topmark:header:start
#
#   project      : API Surface
#   file         : version.py
#   file_relpath : src/apisurface/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""API Surface `version` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from apisurface.cli.options import OutputFormat, output_format_option
from apisurface.constants import APISURFACE_VERSION

if TYPE_CHECKING:
    from apisurface.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of API Surface.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Print the installed API Surface version."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": APISURFACE_VERSION}))
    elif fmt == OutputFormat.PYTHON:
        console.print(f"__version__ = {APISURFACE_VERSION!r}")
    else:
        console.print(console.styled(APISURFACE_VERSION, bold=True))
