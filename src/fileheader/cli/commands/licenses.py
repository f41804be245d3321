# topmark:header:start
#
#   project      : fileheader
#   file         : licenses.py
#   file_relpath : src/fileheader/cli/commands/licenses.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""fileheader `licenses` command.

Lists the predefined license headers usable with ``--license``, or prints one
of them with ``--show``.
"""

from __future__ import annotations

import click

from fileheader.cli.cmd_common import get_console
from fileheader.cli.errors import FileHeaderUsageError
from fileheader.cli.options import CONTEXT_SETTINGS
from fileheader.core.errors import ConfigError
from fileheader.license.spdx import LICENSES, get_license


@click.command(
    name="licenses",
    help="List the predefined license headers.",
    context_settings=CONTEXT_SETTINGS,
)
@click.option("--show", "show", metavar="SPDX-ID", default=None, help="Print the header text.")
@click.option("--year", type=click.IntRange(min=1), default=None, help="Year for --show.")
@click.option("--owner", default=None, help="Copyright owner for --show.")
def licenses_command(*, show: str | None, year: int | None, owner: str | None) -> None:
    """List SPDX identifiers, or render one license header."""
    console = get_console(click.get_current_context())

    if show is not None:
        try:
            lic = get_license(show)
        except ConfigError as e:
            raise FileHeaderUsageError(str(e)) from e
        # Without an owner the template is shown with its placeholders.
        text: str = lic.build_text(year=year, owner=owner) if owner else lic.template
        console.print(text, nl=False)
        return

    width: int = max(len(spdx_id) for spdx_id in LICENSES)
    console.print(console.styled("Predefined licenses:", bold=True, underline=True))
    for spdx_id, lic in sorted(LICENSES.items()):
        tokens: str = " (year, owner)" if lic.needs_owner else ""
        console.print(f"  {console.styled(f'{spdx_id:<{width}}', bold=True)}  {lic.name}{tokens}")
