# topmark:header:start
#
#   project      : API Surface
#   file         : errors.py
#   file_relpath : src/apisurface/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the API Surface CLI.

Raise these in commands to exit with a standardized message and exit code.
When a project console is present in the Click context it renders the
message; otherwise Click's default error display is used.
"""

from __future__ import annotations

from typing import IO, Any

import click

from apisurface.cli.exit_codes import ExitCode


class CliError(click.ClickException):
    """Base class for all API Surface CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text, without Click's coloring."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class CliUsageError(CliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class CliConfigError(CliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class CliModuleNotFoundError(CliError):
    """Error when the requested module cannot be found."""

    exit_code = ExitCode.MODULE_NOT_FOUND


class CliModuleImportError(CliError):
    """Error when the requested module raises while being imported."""

    exit_code = ExitCode.FAILURE
