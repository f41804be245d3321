# topmark:header:start
#
#   project      : fileheader
#   file         : test_matcher.py
#   file_relpath : tests/core/test_matcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for exact header matching."""

from __future__ import annotations

from hypothesis import assume, given
from hypothesis import strategies as st

from fileheader.core.header import Header
from fileheader.core.insertion import find_insertion_point_in_text
from fileheader.core.matcher import find_header, matches
from fileheader.core.renderer import render
from fileheader.core.styles import (
    NO_STYLE,
    OCAML_COMMENT,
    POUND,
    SLASH,
    SLASH_STAR,
    XML_COMMENT,
    CommentStyle,
)
from tests.conftest import parametrize
from tests.strategies_fileheader import LINE_ENDINGS, s_body, s_header, s_style

HEADER = Header.from_text("Copyright 2024 Example Corp\nAll rights reserved.")


def test_line_comment_header_matches() -> None:
    content = "// Copyright 2024 Example Corp\n// All rights reserved.\n\nint main;\n"
    span = find_header(content, HEADER, SLASH)
    assert span is not None
    assert span.start == 0
    assert content[span.end :] == "int main;\n"
    assert span.lines == ("// Copyright 2024 Example Corp", "// All rights reserved.")


def test_block_comment_header_matches() -> None:
    content = "/*\n * Copyright 2024 Example Corp\n * All rights reserved.\n */\nint x;\n"
    assert matches(content, HEADER, SLASH_STAR)


def test_compact_block_comment_matches() -> None:
    content = "/* Copyright 2024 Example Corp\n   All rights reserved. */\n"
    assert matches(content, HEADER, SLASH_STAR)


def test_spacing_differences_are_tolerated() -> None:
    content = "//   Copyright  2024   Example Corp   \n//All rights reserved.\n"
    assert matches(content, HEADER, SLASH)


def test_wording_difference_does_not_match() -> None:
    content = "// Copyright 2025 Example Corp\n// All rights reserved.\n"
    assert not matches(content, HEADER, SLASH)


def test_extra_comment_lines_do_not_match() -> None:
    content = "// Copyright 2024 Example Corp\n// All rights reserved.\n// Extra.\n"
    assert not matches(content, HEADER, SLASH)


def test_header_must_be_at_the_top() -> None:
    content = "int x;\n// Copyright 2024 Example Corp\n// All rights reserved.\n"
    assert not matches(content, HEADER, SLASH)


def test_leading_blank_lines_are_skipped() -> None:
    content = "\n\n# Copyright 2024 Example Corp\n# All rights reserved.\n"
    span = find_header(content, HEADER, POUND)
    assert span is not None
    assert span.start == 2


def test_header_after_shebang() -> None:
    content = "#!/bin/sh\n# Copyright 2024 Example Corp\n# All rights reserved.\n\necho\n"
    span = find_header(content, HEADER, POUND)
    assert span is not None
    assert content[: span.start] == "#!/bin/sh\n"
    assert content[span.end :] == "echo\n"


def test_header_whose_first_line_looks_like_a_directive() -> None:
    header = Header.from_text("-*- coding: utf-8 -*-\nCopyright 2024")
    content = "# -*- coding: utf-8 -*-\n# Copyright 2024\n"
    assert matches(content, header, POUND)


def test_unterminated_block_does_not_match() -> None:
    content = "/*\n * Copyright 2024 Example Corp\n * All rights reserved.\n"
    assert not matches(content, HEADER, SLASH_STAR)


@parametrize(
    ("style", "text"),
    [
        (OCAML_COMMENT, "Licensed (see LICENSE *)"),
        (SLASH_STAR, "glob src/*/ files"),
        (SLASH_STAR, "ends with */"),
        (XML_COMMENT, "a --> b"),
        (XML_COMMENT, "-->"),
    ],
)
def test_header_containing_close_delimiter_matches(style: CommentStyle, text: str) -> None:
    header = Header.from_text(f"Copyright 2024\n{text}\nAll rights reserved.")
    content: str = render(header, style) + "body\n"
    span = find_header(content, header, style)
    assert span is not None
    assert content[span.end :] == "body\n"


def test_close_delimiter_inside_content_line_does_not_end_block() -> None:
    content = "/*\n * Copyright 2024 */\n * All rights reserved.\n */\n"
    assert matches(
        content, Header.from_text("Copyright 2024 */\nAll rights reserved."), SLASH_STAR
    )


def test_plain_text_compares_leading_lines() -> None:
    content = "Copyright 2024 Example Corp\nAll rights reserved.\nBody text\n"
    assert matches(content, HEADER, NO_STYLE)


def test_bytes_with_invalid_utf8_never_raise() -> None:
    assert not matches(b"\xff\xfe garbage", HEADER, SLASH)


def test_empty_header_always_matches_with_empty_span() -> None:
    span = find_header("#!/bin/sh\necho\n", Header(()), POUND)
    assert span is not None
    assert span.is_empty
    assert span.start == len("#!/bin/sh\n")


def test_empty_file_has_no_header() -> None:
    assert find_header("", HEADER, POUND) is None


@given(
    header=s_header(with_delimiters=True),
    style=s_style,
    newline=st.sampled_from(LINE_ENDINGS),
    data=st.data(),
)
def test_rendered_header_is_always_found(
    header: Header, style: CommentStyle, newline: str, data: st.DataObject
) -> None:
    body: str = data.draw(s_body(newline))
    content: str = render(header, style, newline) + body
    span = find_header(content, header, style)
    assert span is not None
    assert span.start == 0
    assert content[span.end :] == body


@given(header=s_header(), other=s_header(), style=s_style)
def test_different_header_is_not_found(header: Header, other: Header, style: CommentStyle) -> None:
    assume(other.canonical != header.canonical)
    # Plain text compares only as many lines as the header has.
    assume(style is not NO_STYLE)
    rendered: str = render(other, style)
    # A first line that reads like a directive would be skipped as preamble.
    assume(find_insertion_point_in_text(rendered).char_offset == 0)
    assert not matches(rendered, header, style)
