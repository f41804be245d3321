# topmark:header:start
#
#   project      : fileheader
#   file         : version.py
#   file_relpath : src/fileheader/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""fileheader `version` command."""

from __future__ import annotations

import click

from fileheader.cli.cmd_common import get_console, get_effective_verbosity
from fileheader.constants import FILEHEADER_VERSION


@click.command(
    name="version",
    help="Show the installed version of fileheader.",
)
def version_command() -> None:
    """Print the fileheader version."""
    ctx: click.Context = click.get_current_context()
    console = get_console(ctx)
    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("fileheader version:", bold=True, underline=True))
        console.print(f"    {console.styled(FILEHEADER_VERSION, bold=True)}")
    else:
        console.print(console.styled(FILEHEADER_VERSION, bold=True))
