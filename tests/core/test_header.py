# topmark:header:start
#
#   project      : fileheader
#   file         : test_header.py
#   file_relpath : tests/core/test_header.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `Header` value object."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from fileheader.core.header import Header

if TYPE_CHECKING:
    from pathlib import Path


def test_from_text_accepts_any_newline() -> None:
    assert Header.from_text("a\r\nb\rc\n").lines == ("a", "b", "c")


def test_from_lines_strips_terminators() -> None:
    assert Header.from_lines(["a\n", "b\r\n", "c"]).lines == ("a", "b", "c")


def test_canonical_form_ignores_spacing_and_blank_edges() -> None:
    h = Header.from_text("\n  Copyright   2024 \n\n Example\n\n")
    assert h.canonical == ("Copyright 2024", "", "Example")
    assert h.text == "\n  Copyright   2024 \n\n Example\n"


def test_equality_uses_lines_only() -> None:
    assert Header(("a", "b")) == Header.from_text("a\nb\n")
    assert Header(("a",)) != Header(("a ",))


def test_empty_header() -> None:
    assert Header(()).is_empty
    assert Header.from_text("\n   \n").is_empty
    assert not Header.from_text("x").is_empty
    assert len(Header.from_text("a\nb")) == 2


def test_is_immutable() -> None:
    h = Header(("a",))
    with pytest.raises(AttributeError):
        h.lines = ("b",)  # type: ignore[misc]


def test_from_file(tmp_path: Path) -> None:
    p = tmp_path / "HEADER.txt"
    p.write_text("Copyright 2024\nExample\n", encoding="utf-8")
    assert Header.from_file(p).lines == ("Copyright 2024", "Example")


def test_from_file_drops_byte_order_mark(tmp_path: Path) -> None:
    p = tmp_path / "HEADER.txt"
    p.write_bytes(b"\xef\xbb\xbfCopyright 2024\nExample\n")
    header = Header.from_file(p)
    assert header.lines == ("Copyright 2024", "Example")
    assert header.canonical == ("Copyright 2024", "Example")
