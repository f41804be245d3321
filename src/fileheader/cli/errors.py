# topmark:header:start
#
#   project      : fileheader
#   file         : errors.py
#   file_relpath : src/fileheader/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the fileheader CLI.

Raise these from commands to abort with a standardized message and exit code.
When a project console is available in the Click context, errors are printed
through it; otherwise Click's default display is used.
"""

from __future__ import annotations

from typing import IO, Any

import click

from fileheader.cli.exit_codes import ExitCode


class FileHeaderCliError(click.ClickException):
    """Base class for all fileheader CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colors are applied in `show`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        console: Any = None
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
        if console is None:
            super().show(file)
            return
        console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))


class FileHeaderUsageError(FileHeaderCliError):
    """Invalid command-line invocation (missing paths, conflicting flags)."""

    exit_code = ExitCode.USAGE_ERROR


class FileHeaderConfigError(FileHeaderCliError):
    """Missing, invalid or malformed configuration."""

    exit_code = ExitCode.CONFIG_ERROR
