# topmark:header:start
#
#   project      : fileheader
#   file         : test_writer.py
#   file_relpath : tests/processing/test_writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for atomic file replacement."""

from __future__ import annotations

import os
import stat
import sys
import tempfile
from typing import TYPE_CHECKING

import pytest

from fileheader.core.errors import WriteError
from fileheader.processing.writer import write_atomic

if TYPE_CHECKING:
    from pathlib import Path


def test_replaces_content(tmp_path: Path) -> None:
    f = tmp_path / "a.txt"
    f.write_bytes(b"old")
    assert write_atomic(f, b"new content") == len(b"new content")
    assert f.read_bytes() == b"new content"
    assert [p.name for p in tmp_path.iterdir()] == ["a.txt"]


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
def test_preserves_permission_bits(tmp_path: Path) -> None:
    f = tmp_path / "run.sh"
    f.write_bytes(b"echo\n")
    f.chmod(0o750)
    write_atomic(f, b"# hi\necho\n")
    assert stat.S_IMODE(f.stat().st_mode) == 0o750


def test_failed_replace_keeps_original(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    f = tmp_path / "a.txt"
    f.write_bytes(b"old")

    def _fail(src: str, dst: object) -> None:
        raise OSError(28, "No space left on device")

    monkeypatch.setattr(os, "replace", _fail)
    with pytest.raises(WriteError) as excinfo:
        write_atomic(f, b"new")
    assert excinfo.value.path == f
    assert "No space left on device" in excinfo.value.message
    assert f.read_bytes() == b"old"
    assert [p.name for p in tmp_path.iterdir()] == ["a.txt"]


def test_temp_file_creation_failure(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    f = tmp_path / "a.txt"
    f.write_bytes(b"old")

    def _fail(*args: object, **kwargs: object) -> tuple[int, str]:
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(tempfile, "mkstemp", _fail)
    with pytest.raises(WriteError, match="cannot create temporary file"):
        write_atomic(f, b"new")
    assert f.read_bytes() == b"old"


@pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")
def test_symlink_replaces_target_and_keeps_link(tmp_path: Path) -> None:
    real = tmp_path / "real.py"
    real.write_bytes(b"print(1)\n")
    link = tmp_path / "link.py"
    link.symlink_to(real)

    write_atomic(link, b"# hi\nprint(1)\n")

    assert link.is_symlink()
    assert real.read_bytes() == b"# hi\nprint(1)\n"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["link.py", "real.py"]


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
def test_read_only_file_is_refused(tmp_path: Path) -> None:
    f = tmp_path / "frozen.py"
    f.write_bytes(b"print(1)\n")
    f.chmod(0o444)
    try:
        with pytest.raises(WriteError, match="read-only") as excinfo:
            write_atomic(f, b"# hi\nprint(1)\n")
        assert excinfo.value.path == f
        assert f.read_bytes() == b"print(1)\n"
        assert stat.S_IMODE(f.stat().st_mode) == 0o444
    finally:
        f.chmod(0o644)
