# topmark:header:start
#
#   project      : fileheader
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers.

`run_cli` invokes the Click group in-process with color disabled, from the
current working directory (tests that rely on relative paths use the
``isolation`` fixture to change into a scratch project first).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from fileheader.cli.exit_codes import ExitCode
from fileheader.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke ``fileheader --no-color ARGV`` and return the Click result."""
    return CliRunner().invoke(cli, ["--no-color", *argv])


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert the exit code, showing the output on failure."""
    assert result.exit_code == code, f"exit {result.exit_code}, output:\n{result.output}"


def assert_SUCCESS(result: Result) -> None:  # noqa: N802
    """Assert that the command exited with `ExitCode.SUCCESS`."""
    assert_exit(result, ExitCode.SUCCESS)
