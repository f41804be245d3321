# topmark:header:start
#
#   project      : fileheader
#   file         : cmd_common.py
#   file_relpath : src/fileheader/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared implementation of the ``check``, ``insert`` and ``remove`` commands.

The three commands differ only in their `Mode` and exit code policy, so they
all delegate to `run_header_command`, which:

1. merges configuration (defaults, config file, CLI options);
2. resolves the header and the file list;
3. runs the batch coordinator, printing one line per file as it completes;
4. prints the summary and exits with the appropriate `ExitCode`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from fileheader.cli.errors import FileHeaderConfigError, FileHeaderUsageError
from fileheader.cli.exit_codes import ExitCode
from fileheader.config.logging import get_logger
from fileheader.config.model import MutableConfig
from fileheader.core.errors import ConfigError
from fileheader.file_resolver import resolve_file_list
from fileheader.processing.batch import BatchCoordinator
from fileheader.processing.outcomes import OutcomeKind
from fileheader.processing.processor import FileHeaderProcessor, Mode

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from fileheader.cli.console import ConsoleLike
    from fileheader.config.logging import FileHeaderLogger
    from fileheader.config.model import Config
    from fileheader.core.header import Header
    from fileheader.processing.batch import RunSummary
    from fileheader.processing.outcomes import ProcessOutcome

logger: FileHeaderLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context by the group callback."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity resolved at group level (default 0)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def build_config(
    *,
    config_path: Path | None,
    no_config: bool,
    cli_args: dict[str, Any],
) -> Config:
    """Merge defaults, the configuration file and CLI overrides.

    Raises:
        FileHeaderConfigError: If the configuration is invalid.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            config_path=config_path, no_config=no_config
        )
        return draft.apply_cli_args(cli_args).freeze()
    except ConfigError as e:
        raise FileHeaderConfigError(str(e)) from e


def _outcome_line(console: ConsoleLike, path: Path, outcome: ProcessOutcome) -> str:
    kind: OutcomeKind = outcome.kind
    label: str = console.colorize(f"{kind.value:<{kind.value_length}}", kind.color)
    line: str = f"{label}  {path}"
    if outcome.error is not None:
        line += console.styled(f"  ({outcome.error.message})", dim=True)
    return line


def render_summary_counts(console: ConsoleLike, summary: RunSummary, *, total: int) -> None:
    """Print the aligned count of files per outcome."""
    console.print()
    console.print(console.styled("Summary by outcome:", bold=True, underline=True))
    counts = summary.counts()
    num_width: int = len(str(total))
    for kind in OutcomeKind:
        n: int = counts[kind]
        if n:
            label: str = f"  {kind.value:<{kind.value_length}} : {n:>{num_width}}"
            console.print(console.colorize(label, kind.color))
    if summary.binary_files:
        console.print(console.styled(f"  (binary files: {len(summary.binary_files)})", dim=True))


def exit_code_for(mode: Mode, summary: RunSummary, *, interrupted: bool) -> ExitCode:
    """Map a run summary to the process exit code."""
    if summary.failed:
        return ExitCode.FAILURE
    if interrupted:
        return ExitCode.INTERRUPTED
    if mode is Mode.CHECK and summary.missing:
        return ExitCode.WOULD_CHANGE
    return ExitCode.SUCCESS


def run_header_command(
    mode: Mode,
    *,
    paths: Sequence[Path],
    config_path: Path | None,
    no_config: bool,
    summary_mode: bool,
    cli_args: dict[str, Any],
) -> None:
    """Run ``mode`` over ``paths`` and exit with the resulting code.

    Raises:
        FileHeaderUsageError: If no paths are given.
        FileHeaderConfigError: If the configuration or header is invalid.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    if not paths:
        raise FileHeaderUsageError(f"{ctx.command.name}: no PATHS given.")

    config: Config = build_config(config_path=config_path, no_config=no_config, cli_args=cli_args)
    try:
        header: Header = config.build_header()
    except ConfigError as e:
        raise FileHeaderConfigError(str(e)) from e
    if header.is_empty:
        raise FileHeaderConfigError("The configured header is empty.")

    logger.debug("Effective config: %s", config)

    files: list[Path] = resolve_file_list(
        paths, config.include_patterns, config.exclude_patterns
    )
    if not files:
        console.print(console.styled("No files to process.", fg="yellow"))
        return

    if vlevel > 0:
        console.print(
            console.styled(f"{ctx.command.name}: {len(files)} file(s)", bold=True, underline=True)
        )

    def _on_outcome(path: Path, outcome: ProcessOutcome) -> None:
        if summary_mode:
            return
        if outcome.kind is OutcomeKind.ALREADY_PRESENT and vlevel <= 0:
            return
        if outcome.kind is not OutcomeKind.FAILED and vlevel < 0:
            return
        console.print(_outcome_line(console, path, outcome))

    processor = FileHeaderProcessor(
        header, mode, config.style_table(), strict_styles=config.strict_styles
    )
    coordinator = BatchCoordinator(
        processor, config.workers, fail_fast=config.fail_fast, on_outcome=_on_outcome
    )
    summary: RunSummary = coordinator.run(files)

    interrupted: bool = summary.aborted and not (config.fail_fast and summary.failed)
    if summary.aborted:
        console.warn(f"Run stopped early: {len(files) - len(summary)} file(s) not processed.")

    if summary_mode or vlevel >= 0:
        render_summary_counts(console, summary, total=len(files))

    if mode is Mode.CHECK and summary.missing and vlevel >= 0 and not summary_mode:
        console.print(
            console.styled("Run `fileheader insert` to add the missing headers.", fg="yellow")
        )

    code: ExitCode = exit_code_for(mode, summary, interrupted=interrupted)
    if code is not ExitCode.SUCCESS:
        ctx.exit(code)
