# topmark:header:start
#
#   project      : fileheader
#   file         : matcher.py
#   file_relpath : src/fileheader/core/matcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Detect whether a file already starts with a given header.

The matcher extracts the leading run of the file that is plausibly a comment
block under the file's comment style, normalizes it, and compares it with the
header's canonical form for exact equality:

* `LineStyle`: the maximal run of consecutive lines starting with the prefix;
* `BlockStyle`: an ``open ... close`` span starting on the first non-blank
  line; any line ending with the close delimiter may end it, since header
  text can contain the delimiter itself;
* `NoStyle`: as many leading lines as the header has.

The BOM/shebang/directive preamble and blank lines after it are skipped first.
Matching is equality, not containment: a run holding more or fewer lines than
the header does not match. Normalization is total, so matching never fails.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from fileheader.config.logging import get_logger
from fileheader.core.insertion import find_insertion_point_in_text
from fileheader.core.normalizer import CanonicalForm, normalize
from fileheader.core.styles import BlockStyle, LineStyle, NoStyle

if TYPE_CHECKING:
    from collections.abc import Iterator

    from fileheader.config.logging import FileHeaderLogger
    from fileheader.core.header import Header
    from fileheader.core.insertion import InsertionPoint
    from fileheader.core.styles import CommentStyle

logger: FileHeaderLogger = get_logger(__name__)

_RE_LINE: Final[re.Pattern[str]] = re.compile(r"[^\r\n]*(?:\r\n|\n|\r)?")


@dataclass(frozen=True)
class HeaderSpan:
    """Location of a header occurrence in decoded file text.

    Attributes:
        start (int): Character offset of the first header line.
        end (int): Character offset just past the header, including one
            trailing blank separator line when present.
        lines (tuple[str, ...]): The matched lines as found in the file.
    """

    start: int
    end: int
    lines: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True for the zero-length span reported for an empty header."""
        return self.start == self.end


@dataclass(frozen=True)
class _Line:
    start: int
    text: str
    end: int

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


def _iter_lines(text: str, pos: int) -> Iterator[_Line]:
    while pos < len(text):
        m: re.Match[str] | None = _RE_LINE.match(text, pos)
        if m is None or not m.group(0):
            return
        raw: str = m.group(0)
        yield _Line(pos, raw.rstrip("\r\n"), pos + len(raw))
        pos += len(raw)


def _extract_run(
    lines: Iterator[_Line], style: CommentStyle, wanted: CanonicalForm
) -> list[_Line]:
    """Return the leading comment run from ``lines`` (blank lines already skipped).

    For block styles, header text may itself contain the close token, so every
    line ending with it is a candidate end; the first candidate whose content
    normalizes to ``wanted`` closes the block.
    """
    run: list[_Line] = []
    match style:
        case LineStyle(prefix=prefix):
            for line in lines:
                if not line.text.strip().startswith(prefix):
                    break
                run.append(line)
        case BlockStyle():
            open_token: str = style.open_token
            close_token: str = style.close_token
            # Open line, content lines, close line.
            limit: int = len(wanted) + 2
            filled: int = 0
            for line in lines:
                s: str = line.text.strip()
                if not run and not s.startswith(open_token):
                    return []
                run.append(line)
                if s:
                    filled += 1
                body: str = s[len(open_token) :] if len(run) == 1 else s
                if body.endswith(close_token):
                    if normalize([ln.text for ln in run], style) == wanted:
                        return run
                if filled >= limit:
                    break
            return []
        case NoStyle():
            for line in lines:
                run.append(line)
                if len(run) >= len(wanted):
                    break
    return run


def _match_at(text: str, offset: int, header: Header, style: CommentStyle) -> HeaderSpan | None:
    lines: Iterator[_Line] = _iter_lines(text, offset)
    first: _Line | None = next((ln for ln in lines if not ln.is_blank), None)
    if first is None:
        return None

    def _chain() -> Iterator[_Line]:
        yield first
        yield from lines

    rest: Iterator[_Line] = _chain()
    run: list[_Line] = _extract_run(rest, style, header.canonical)
    if not run:
        return None
    if normalize([ln.text for ln in run], style) != header.canonical:
        return None

    end: int = run[-1].end
    separator: _Line | None = next(_iter_lines(text, end), None)
    if separator is not None and separator.is_blank:
        end = separator.end
    return HeaderSpan(start=run[0].start, end=end, lines=tuple(ln.text for ln in run))


def find_header(
    content: str,
    header: Header,
    style: CommentStyle,
    *,
    point: InsertionPoint | None = None,
) -> HeaderSpan | None:
    """Locate ``header`` at the top of ``content``.

    Args:
        content (str): Decoded file text (a leading BOM is allowed).
        header (Header): The header to look for.
        style (CommentStyle): The file's comment style.
        point (InsertionPoint | None): Precomputed insertion point for ``content``.

    Returns:
        HeaderSpan | None: The span of the occurrence, or None when the file
        does not start with the header. An empty header yields an empty span.
    """
    if point is None:
        point = find_insertion_point_in_text(content)
    if header.is_empty:
        return HeaderSpan(start=point.char_offset, end=point.char_offset)

    for offset in point.candidate_offsets:
        span: HeaderSpan | None = _match_at(content, offset, header, style)
        if span is not None:
            logger.trace("Header found at [%d, %d) (style: %s)", span.start, span.end, style)
            return span
    return None


def matches(content: str | bytes, header: Header, style: CommentStyle) -> bool:
    """Return True if ``content`` starts with ``header`` under ``style``.

    Bytes are decoded as UTF-8 with replacement characters, so this function
    always returns a definite answer.
    """
    text: str = content.decode("utf-8", errors="replace") if isinstance(content, bytes) else content
    return find_header(text, header, style) is not None
