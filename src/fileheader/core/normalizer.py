# topmark:header:start
#
#   project      : fileheader
#   file         : normalizer.py
#   file_relpath : src/fileheader/core/normalizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical comparison form for header text.

License texts are reproduced with varying comment decoration (``//`` vs
``/* ... */`` vs ``#``) and incidental spacing. `normalize` removes both so
that equivalent headers compare equal, without touching their wording. The
result is only ever used for equality checks; it is never written out.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from fileheader.core.styles import BlockStyle, LineStyle, NoStyle

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from fileheader.core.styles import CommentStyle

#: Normalized header lines; equality is the only supported operation.
CanonicalForm = tuple[str, ...]

_RE_WHITESPACE_RUN: Final[re.Pattern[str]] = re.compile(r"\s+")


def collapse_whitespace(line: str) -> str:
    """Strip ``line`` and collapse interior whitespace runs to a single space."""
    return _RE_WHITESPACE_RUN.sub(" ", line).strip()


def _strip_line_prefix(line: str, prefix: str) -> str:
    s: str = line.strip()
    if s.startswith(prefix):
        s = s[len(prefix) :]
    return s


def _strip_block_decoration(lines: Sequence[str], style: BlockStyle) -> list[str]:
    open_token: str = style.open_token
    close_token: str = style.close_token
    continuation: str = style.continuation_token
    last: int = len(lines) - 1
    out: list[str] = []
    for i, line in enumerate(lines):
        s: str = line.strip()
        if i == 0 and s.startswith(open_token):
            s = s[len(open_token) :].strip()
        if i == last and s.endswith(close_token):
            s = s[: -len(close_token)].strip()
        if i > 0 and continuation and s.startswith(continuation):
            s = s[len(continuation) :]
        out.append(s)
    return out


def trim_blank_edges(lines: Sequence[str]) -> CanonicalForm:
    """Drop blank lines at the start and the end; interior blanks are kept."""
    start: int = 0
    end: int = len(lines)
    while start < end and not lines[start]:
        start += 1
    while end > start and not lines[end - 1]:
        end -= 1
    return tuple(lines[start:end])


def normalize(text: str | Iterable[str], style: CommentStyle) -> CanonicalForm:
    """Return the canonical form of ``text`` under ``style``.

    Args:
        text (str | Iterable[str]): Raw text, or an already split sequence of lines.
        style (CommentStyle): The comment style whose decoration is removed.

    Returns:
        CanonicalForm: Normalized lines with blank edges removed.

    Notes:
        * `LineStyle`: one leading occurrence of the prefix is removed per line.
        * `BlockStyle`: the open delimiter is removed from the first line, the
          close delimiter from the last one, and the continuation marker from
          every line after the first.
        * `NoStyle`: only whitespace is normalized.
    """
    lines: list[str] = text.splitlines() if isinstance(text, str) else list(text)

    match style:
        case LineStyle(prefix=prefix):
            stripped: list[str] = [_strip_line_prefix(line, prefix) for line in lines]
        case BlockStyle():
            stripped = _strip_block_decoration(lines, style) if lines else []
        case NoStyle():
            stripped = lines

    return trim_blank_edges([collapse_whitespace(line) for line in stripped])
