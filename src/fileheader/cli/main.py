# topmark:header:start
#
#   project      : fileheader
#   file         : main.py
#   file_relpath : src/fileheader/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the fileheader CLI.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` together with the program-output console; subcommands read them
from there.
"""

from __future__ import annotations

import click

from fileheader.cli.commands.check import check_command
from fileheader.cli.commands.insert import insert_command
from fileheader.cli.commands.licenses import licenses_command
from fileheader.cli.commands.remove import remove_command
from fileheader.cli.commands.styles import styles_command
from fileheader.cli.commands.version import version_command
from fileheader.cli.console import ClickConsole
from fileheader.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from fileheader.config.logging import (
    FileHeaderLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)

logger: FileHeaderLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize verbosity, logging, color and the console on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color``.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Diagnostics are configured from the environment only.
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_mode: ColorMode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug(
        "CLI state: verbosity=%s, color=%s, log level=%s",
        ctx.obj["verbosity_level"],
        enable_color,
        level_env,
    )


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Check for, insert and remove license headers in source files.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the fileheader CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        console = ctx.obj["console"]
        console.print("Hint: use 'fileheader check PATHS...' to verify headers.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(check_command)

cli.add_command(insert_command)

cli.add_command(remove_command)

cli.add_command(styles_command)

cli.add_command(licenses_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
