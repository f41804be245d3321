# topmark:header:start
#
#   project      : fileheader
#   file         : remove.py
#   file_relpath : src/fileheader/cli/commands/remove.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""fileheader `remove` command.

Only an exact occurrence of the header (after normalization) is removed,
together with the blank line that separates it from the rest of the file.
"""

from __future__ import annotations

from pathlib import Path

import click

from fileheader.cli.cmd_common import run_header_command
from fileheader.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    file_selection_options,
    header_source_options,
    run_options,
)
from fileheader.processing.processor import Mode


@click.command(
    name="remove",
    help="Remove the header from files that start with it.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Examples:

  # Remove a previously inserted header
  fileheader remove --header-file HEADER.txt src
""",
)
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@common_config_options
@header_source_options
@file_selection_options
@run_options
def remove_command(
    *,
    paths: tuple[Path, ...],
    config_path: Path | None,
    no_config: bool,
    header: str | None,
    header_file: Path | None,
    license: str | None,
    year: int | None,
    owner: str | None,
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    workers: int | None,
    strict_styles: bool,
    fail_fast: bool,
    summary_mode: bool,
) -> None:
    """Remove the header from files that start with it.

    Exit Status:
        SUCCESS (0): No file starts with the header any more.
        FAILURE (1): At least one file could not be read or written.
        USAGE_ERROR (64): Invalid invocation.
        CONFIG_ERROR (78): Invalid configuration or no header configured.
    """
    run_header_command(
        Mode.REMOVE,
        paths=paths,
        config_path=config_path,
        no_config=no_config,
        summary_mode=summary_mode,
        cli_args={
            "header": header,
            "header_file": header_file,
            "license": license,
            "year": year,
            "owner": owner,
            "include_patterns": include_patterns,
            "exclude_patterns": exclude_patterns,
            "workers": workers,
            "strict_styles": strict_styles,
            "fail_fast": fail_fast,
        },
    )
