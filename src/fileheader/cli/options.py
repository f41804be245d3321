# topmark:header:start
#
#   project      : fileheader
#   file         : options.py
#   file_relpath : src/fileheader/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable Click options and their resolution logic.

Commands stay thin by stacking the option groups defined here: verbosity and
color (group level), header source, file selection and run options (command
level).
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from typing import Any, Callable, ParamSpec, TypeVar

import click

from fileheader.cli.errors import FileHeaderUsageError

P = ParamSpec("P")
R = TypeVar("R")

CONTEXT_SETTINGS: dict[str, Any] = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v`` / ``-q`` counts.

    Returns:
        int: ``-1`` (quiet), ``0`` (default) or the number of ``-v`` flags.

    Raises:
        FileHeaderUsageError: If both ``--verbose`` and ``--quiet`` are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise FileHeaderUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(*, cli_mode: ColorMode | None, stdout_isatty: bool | None = None) -> bool:
    """Determine whether color output should be enabled.

    Honors ``--color``, then the ``FORCE_COLOR`` and ``NO_COLOR`` environment
    variables, and finally enables color only when stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (counted, mutually exclusive)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (also list compliant files).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report problems and the final summary.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color``."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config FILE`` and ``--no-config``."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore fileheader.toml / pyproject.toml in the working directory.",
    )(f)
    f = click.option(
        "--config",
        "config_path",
        metavar="FILE",
        type=click.Path(exists=True, dir_okay=False, readable=True, path_type=Path),
        default=None,
        help="Configuration file to use instead of the discovered one.",
    )(f)
    return f


def header_source_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the header source options (text, file, or predefined license)."""
    f = click.option("--header", "header", default=None, help="Literal header text.")(f)
    f = click.option(
        "--header-file",
        "header_file",
        type=click.Path(exists=True, dir_okay=False, readable=True, path_type=Path),
        default=None,
        help="Read the header text from FILE.",
    )(f)
    f = click.option(
        "--license",
        "license",
        metavar="SPDX-ID",
        default=None,
        help="Use a predefined license header (see 'fileheader licenses').",
    )(f)
    f = click.option(
        "--year",
        type=click.IntRange(min=1),
        default=None,
        help="Copyright year for --license (default: current year).",
    )(f)
    f = click.option("--owner", default=None, help="Copyright owner for --license.")(f)
    return f


def file_selection_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--include`` / ``--exclude`` (gitignore-style patterns, repeatable)."""
    f = click.option(
        "--include",
        "-i",
        "include_patterns",
        multiple=True,
        help="Filter: keep only files matching these patterns (repeatable).",
    )(f)
    f = click.option(
        "--exclude",
        "-e",
        "exclude_patterns",
        multiple=True,
        help="Filter: remove files matching these patterns (repeatable).",
    )(f)
    return f


def run_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add pool size, strictness, fail-fast and summary options."""
    f = click.option(
        "--workers",
        "-j",
        type=click.IntRange(min=1),
        default=None,
        help="Number of worker threads (default: CPU count).",
    )(f)
    f = click.option(
        "--strict-styles",
        "strict_styles",
        is_flag=True,
        help="Fail files whose type has no known comment style.",
    )(f)
    f = click.option(
        "--fail-fast",
        "fail_fast",
        is_flag=True,
        help="Stop dispatching files after the first failure.",
    )(f)
    f = click.option(
        "--summary",
        "summary_mode",
        is_flag=True,
        help="Show outcome counts instead of per-file details.",
    )(f)
    return f
