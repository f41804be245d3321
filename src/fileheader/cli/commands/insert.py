# topmark:header:start
#
#   project      : fileheader
#   file         : insert.py
#   file_relpath : src/fileheader/cli/commands/insert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""fileheader `insert` command.

Files that already start with the header are left untouched. The header is
placed after a BOM, shebang or directive line, and files are replaced
atomically.
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
    name="insert",
    help="Insert the header into files that lack it.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Examples:

  # Add a literal header to all Python files
  fileheader insert --header "Copyright 2024 Example Corp" --include "*.py" .

  # Add the MIT notice
  fileheader insert --license MIT --owner "Example Corp" src
""",
)
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@common_config_options
@header_source_options
@file_selection_options
@run_options
def insert_command(
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
    """Insert the header into files that lack it.

    Exit Status:
        SUCCESS (0): Every file now starts with the header.
        FAILURE (1): At least one file could not be read or written.
        USAGE_ERROR (64): Invalid invocation.
        CONFIG_ERROR (78): Invalid configuration or no header configured.
    """
    run_header_command(
        Mode.INSERT,
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
