# topmark:header:start
#
#   project      : fileheader
#   file         : styles.py
#   file_relpath : src/fileheader/cli/commands/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""fileheader `styles` command.

Lists the comment style table: the built-in mapping plus any overrides from
the ``styles`` table of the configuration file.
"""

from __future__ import annotations

from pathlib import Path

import click

from fileheader.cli.cmd_common import build_config, get_console
from fileheader.cli.options import CONTEXT_SETTINGS, common_config_options


@click.command(
    name="styles",
    help="List the comment style used for each file extension and name.",
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
@click.option("--lookup", "lookup", metavar="PATH", default=None, help="Show the style for PATH.")
def styles_command(*, config_path: Path | None, no_config: bool, lookup: str | None) -> None:
    """List the effective comment style table."""
    ctx: click.Context = click.get_current_context()
    console = get_console(ctx)
    table = build_config(config_path=config_path, no_config=no_config, cli_args={}).style_table()

    if lookup is not None:
        style = table.lookup(Path(lookup))
        text: str = style.describe() if style is not None else "none (not mapped)"
        console.print(f"{lookup}: {text}")
        return

    entries = list(table.items())
    width: int = max((len(key) for key, _ in entries), default=0)
    console.print(console.styled("Comment styles:", bold=True, underline=True))
    for key, style in entries:
        console.print(f"  {key:<{width}}  {style.describe()}")
