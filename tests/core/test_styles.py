# topmark:header:start
#
#   project      : fileheader
#   file         : test_styles.py
#   file_relpath : tests/core/test_styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the comment style table and style definitions from configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from fileheader.core.errors import ConfigError
from fileheader.core.styles import (
    DEFAULT_STYLE_TABLE,
    NO_STYLE,
    POUND,
    SLASH,
    SLASH_STAR,
    SLASH_STAR_STAR,
    XML_COMMENT,
    BlockStyle,
    LineStyle,
    StyleTable,
    style_from_spec,
)
from tests.conftest import parametrize


@parametrize(
    "name, expected",
    [
        ("main.c", SLASH_STAR),
        ("lib.rs", SLASH),
        ("app.ts", SLASH_STAR_STAR),
        ("script.py", POUND),
        ("index.html", XML_COMMENT),
        ("Dockerfile", POUND),
        ("Makefile", POUND),
        ("deep/dir/UPPER.PY", POUND),
    ],
)
def test_default_table_resolves_known_files(name: str, expected: object) -> None:
    assert DEFAULT_STYLE_TABLE.resolve(Path(name)) == expected
    assert DEFAULT_STYLE_TABLE.is_known(name)


def test_unmapped_file_resolves_to_plain_text() -> None:
    assert DEFAULT_STYLE_TABLE.lookup("README") is None
    assert DEFAULT_STYLE_TABLE.resolve("notes.unknownext") is NO_STYLE
    assert not DEFAULT_STYLE_TABLE.is_known("notes.unknownext")


def test_extension_wins_over_file_name() -> None:
    table = StyleTable(by_extension={"rs": SLASH}, by_filename={"build.rs": POUND})
    assert table.resolve("build.rs") == SLASH


def test_extensions_are_normalized() -> None:
    table = StyleTable(by_extension={".TPL": SLASH})
    assert table.lookup("page.tpl") == SLASH
    assert "tpl" in table.by_extension


def test_with_overrides_returns_new_table() -> None:
    custom = LineStyle("!")
    table = DEFAULT_STYLE_TABLE.with_overrides({".py": custom, "Justfile": POUND})
    assert table.resolve("x.py") == custom
    assert table.resolve("Justfile") == POUND
    # The default table is untouched.
    assert DEFAULT_STYLE_TABLE.resolve("x.py") == POUND
    assert DEFAULT_STYLE_TABLE.lookup("Justfile") is None


def test_table_mappings_are_read_only() -> None:
    with pytest.raises(TypeError):
        DEFAULT_STYLE_TABLE.by_extension["py"] = SLASH  # type: ignore[index]


def test_items_lists_extensions_then_names() -> None:
    table = StyleTable(by_extension={"b": POUND, "a": SLASH}, by_filename={"Z": POUND})
    assert [key for key, _ in table.items()] == [".a", ".b", "Z"]


def test_block_style_tokens() -> None:
    style = BlockStyle("/*", " */", " * ")
    assert style.open_token == "/*"
    assert style.close_token == "*/"
    assert style.continuation_token == "*"
    assert style.describe() == "block '/*' ... '*/'"


def test_describe() -> None:
    assert SLASH.describe() == "line '//'"
    assert NO_STYLE.describe() == "none"


@parametrize(
    "spec, expected",
    [
        ({"kind": "line", "prefix": " ; "}, LineStyle(";")),
        ({"kind": "block", "open": "{{/*", "close": "*/}}"}, BlockStyle("{{/*", "*/}}", "")),
        (
            {"kind": "BLOCK", "open": "/*", "close": " */", "continuation": " * "},
            BlockStyle("/*", " */", " * "),
        ),
        ({"kind": "none"}, NO_STYLE),
    ],
)
def test_style_from_spec(spec: dict[str, str], expected: object) -> None:
    assert style_from_spec(spec) == expected


@parametrize(
    "spec",
    [
        {},
        {"kind": "wavy"},
        {"kind": "line"},
        {"kind": "line", "prefix": "  "},
        {"kind": "block", "open": "/*"},
        {"kind": "block", "close": "*/"},
        {"kind": "block", "open": "/*", "close": "*/", "continuation": 3},
    ],
)
def test_style_from_spec_rejects_invalid(spec: dict[str, object]) -> None:
    with pytest.raises(ConfigError):
        style_from_spec(spec)
