# topmark:header:start
#
#   project      : fileheader
#   file         : test_cli_header_commands.py
#   file_relpath : tests/cli/test_cli_header_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the ``check``, ``insert`` and ``remove`` commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from fileheader.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli
from tests.conftest import read, write

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.cli

HEADER = "Copyright 2024 Example Corp"


def _project(root: Path) -> None:
    write(root / "src" / "ok.py", f"# {HEADER}\n\nok = 1\n")
    write(root / "src" / "missing.rs", "fn main() {}\n")


def test_check_reports_missing_with_would_change(isolation: Path) -> None:
    _project(isolation)
    result = run_cli(["check", "--header", HEADER, "src"])
    assert_exit(result, ExitCode.WOULD_CHANGE)
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "missing" in result.output
    assert "src/missing.rs" in result.output.replace("\\", "/")
    assert "Summary by outcome:" in result.output
    assert "fileheader insert" in result.output
    # check never writes
    assert read(isolation / "src" / "missing.rs") == "fn main() {}\n"


def test_check_all_present_succeeds(isolation: Path) -> None:
    write(isolation / "a.py", f"# {HEADER}\n\na = 1\n")
    result = run_cli(["check", "--header", HEADER, "a.py"])
    assert_SUCCESS(result)
    # Compliant files are only listed with -v.
    assert "a.py" not in result.output
    verbose = run_cli(["-v", "check", "--header", HEADER, "a.py"])
    assert_SUCCESS(verbose)
    assert "already present" in verbose.output
    assert "a.py" in verbose.output


def test_insert_then_check_then_remove(isolation: Path) -> None:
    _project(isolation)
    assert_SUCCESS(run_cli(["insert", "--header", HEADER, "src"]))
    assert read(isolation / "src" / "missing.rs") == f"// {HEADER}\n\nfn main() {{}}\n"
    assert read(isolation / "src" / "ok.py") == f"# {HEADER}\n\nok = 1\n"

    assert_SUCCESS(run_cli(["check", "--header", HEADER, "src"]))

    result = run_cli(["remove", "--header", HEADER, "src"])
    assert_SUCCESS(result)
    assert "removed" in result.output
    assert read(isolation / "src" / "missing.rs") == "fn main() {}\n"
    assert read(isolation / "src" / "ok.py") == "ok = 1\n"


def test_unreadable_file_fails(isolation: Path) -> None:
    (isolation / "blob.py").write_bytes(b"\xff\xfe\x00")
    result = run_cli(["insert", "--header", HEADER, "blob.py"])
    assert_exit(result, ExitCode.FAILURE)
    assert "failed" in result.output
    assert "binary" in result.output


def test_strict_styles(isolation: Path) -> None:
    write(isolation / "NOTES", "n\n")
    assert_exit(
        run_cli(["check", "--strict-styles", "--header", HEADER, "NOTES"]), ExitCode.FAILURE
    )
    assert_exit(run_cli(["check", "--header", HEADER, "NOTES"]), ExitCode.WOULD_CHANGE)


def test_no_paths_is_usage_error(isolation: Path) -> None:
    result = run_cli(["check", "--header", HEADER])
    assert_exit(result, ExitCode.USAGE_ERROR)
    assert "no PATHS given" in result.output


def test_no_header_is_config_error(isolation: Path) -> None:
    write(isolation / "a.py", "a = 1\n")
    result = run_cli(["check", "a.py"])
    assert_exit(result, ExitCode.CONFIG_ERROR)
    assert "No header configured" in result.output


def test_conflicting_header_sources(isolation: Path) -> None:
    write(isolation / "a.py", "a = 1\n")
    result = run_cli(["check", "--header", HEADER, "--license", "MIT", "a.py"])
    assert_exit(result, ExitCode.CONFIG_ERROR)
    assert "Conflicting header sources" in result.output


def test_unknown_license_is_config_error(isolation: Path) -> None:
    write(isolation / "a.py", "a = 1\n")
    result = run_cli(["check", "--license", "Nope-1.0", "a.py"])
    assert_exit(result, ExitCode.CONFIG_ERROR)
    assert "Unknown license" in result.output


def test_license_with_owner_and_year(isolation: Path) -> None:
    write(isolation / "a.c", "int a;\n")
    result = run_cli(
        ["insert", "--license", "Apache-2.0", "--owner", "Example Corp", "--year", "2021", "a.c"]
    )
    assert_SUCCESS(result)
    content = read(isolation / "a.c")
    assert content.startswith("/*\n * Copyright 2021 Example Corp\n *\n * Licensed under")
    assert content.endswith(" */\n\nint a;\n")


def test_no_files_to_process(isolation: Path) -> None:
    (isolation / "empty").mkdir()
    result = run_cli(["check", "--header", HEADER, "empty"])
    assert_SUCCESS(result)
    assert "No files to process." in result.output


def test_config_file_is_discovered(isolation: Path) -> None:
    write(isolation / "fileheader.toml", f'header = "{HEADER}"\nexclude = ["vendor/"]\n')
    write(isolation / "src" / "a.py", "a = 1\n")
    write(isolation / "vendor" / "b.py", "b = 1\n")
    result = run_cli(["insert", "src", "vendor"])
    assert_SUCCESS(result)
    assert read(isolation / "src" / "a.py") == f"# {HEADER}\n\na = 1\n"
    assert read(isolation / "vendor" / "b.py") == "b = 1\n"

    # --no-config ignores it again.
    assert_exit(run_cli(["check", "--no-config", "src"]), ExitCode.CONFIG_ERROR)


def test_explicit_config_with_header_file(isolation: Path) -> None:
    write(isolation / "conf" / "HEADER.txt", f"{HEADER}\n")
    cfg = write(isolation / "conf" / "custom.toml", 'header_file = "HEADER.txt"\n')
    write(isolation / "a.sh", "#!/bin/sh\necho\n")
    assert_SUCCESS(run_cli(["insert", "--config", str(cfg), "a.sh"]))
    assert read(isolation / "a.sh") == f"#!/bin/sh\n# {HEADER}\n\necho\n"


def test_invalid_config_file(isolation: Path) -> None:
    write(isolation / "fileheader.toml", "workers = 'many'\n")
    write(isolation / "a.py", "a = 1\n")
    result = run_cli(["check", "--header", HEADER, "a.py"])
    assert_exit(result, ExitCode.CONFIG_ERROR)
    assert "workers" in result.output


def test_include_exclude_options(isolation: Path) -> None:
    write(isolation / "a.py", "a\n")
    write(isolation / "b.js", "b\n")
    write(isolation / "c.py", "c\n")
    result = run_cli(["insert", "--header", HEADER, "-i", "*.py", "-e", "c.py", "."])
    assert_SUCCESS(result)
    assert read(isolation / "a.py").startswith("# ")
    assert read(isolation / "b.js") == "b\n"
    assert read(isolation / "c.py") == "c\n"


def test_summary_mode_hides_per_file_lines(isolation: Path) -> None:
    _project(isolation)
    result = run_cli(["check", "--summary", "--header", HEADER, "src"])
    assert_exit(result, ExitCode.WOULD_CHANGE)
    assert "missing.rs" not in result.output
    assert "Summary by outcome:" in result.output


def test_quiet_shows_only_failures(isolation: Path) -> None:
    _project(isolation)
    result = run_cli(["-q", "check", "--header", HEADER, "src"])
    assert_exit(result, ExitCode.WOULD_CHANGE)
    assert "missing.rs" not in result.output
    assert "Summary by outcome:" not in result.output


def test_verbose_and_quiet_conflict(isolation: Path) -> None:
    assert_exit(run_cli(["-v", "-q", "version"]), ExitCode.USAGE_ERROR)


def test_fail_fast_with_single_worker(isolation: Path) -> None:
    (isolation / "a.py").write_bytes(b"\xff")
    write(isolation / "b.py", "b\n")
    result = run_cli(["insert", "--fail-fast", "-j", "1", "--header", HEADER, "a.py", "b.py"])
    assert_exit(result, ExitCode.FAILURE)
    assert "Run stopped early" in result.output
    assert read(isolation / "b.py") == "b\n"


def test_invalid_worker_count_is_rejected_by_click(isolation: Path) -> None:
    write(isolation / "a.py", "a\n")
    result = run_cli(["check", "-j", "0", "--header", HEADER, "a.py"])
    assert result.exit_code == 2
    assert result.exception is not None
