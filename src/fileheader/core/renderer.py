# topmark:header:start
#
#   project      : fileheader
#   file         : renderer.py
#   file_relpath : src/fileheader/core/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serialize a header as a comment block for a given style.

The rendered text always ends with one blank separator line so that the
header stands apart from the code that follows it. For every header ``H`` and
style ``S``, ``matches(render(H, S), H, S)`` holds.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from fileheader.core.styles import BlockStyle, LineStyle, NoStyle

if TYPE_CHECKING:
    from fileheader.core.header import Header
    from fileheader.core.styles import CommentStyle

DEFAULT_NEWLINE: Final[str] = "\n"


def detect_newline(text: str) -> str:
    """Return the dominant line terminator of ``text``.

    Counts ``\\r\\n``, lone ``\\n`` and lone ``\\r``; ties and text without any
    terminator resolve to ``\\n``.
    """
    crlf: int = text.count("\r\n")
    lf: int = text.count("\n") - crlf
    cr: int = text.count("\r") - crlf
    best: str = DEFAULT_NEWLINE
    best_count: int = lf
    if crlf > best_count:
        best, best_count = "\r\n", crlf
    if cr > best_count:
        best = "\r"
    return best


def _content_lines(header: Header) -> list[str]:
    # Leading/trailing blank lines are not significant for matching; keeping
    # them out of the output makes removal restore the original exactly.
    lines: list[str] = [line.rstrip() for line in header.lines]
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


def render_lines(header: Header, style: CommentStyle) -> list[str]:
    """Return the decorated header lines (without the blank separator)."""
    lines: list[str] = _content_lines(header)
    if not lines:
        return []

    match style:
        case LineStyle(prefix=prefix):
            return [f"{prefix} {line}".rstrip() for line in lines]
        case BlockStyle():
            body: list[str] = [f"{style.continuation}{line}".rstrip() for line in lines]
            return [style.open.rstrip(), *body, style.close.rstrip()]
        case NoStyle():
            return lines


def render(header: Header, style: CommentStyle, newline: str = DEFAULT_NEWLINE) -> str:
    """Render ``header`` as a comment in ``style``.

    Args:
        header (Header): The header to render.
        style (CommentStyle): The target comment style.
        newline (str): Line terminator to use (normally the file's dominant one).

    Returns:
        str: The rendered text followed by a blank separator line, or an empty
        string for an empty header.
    """
    lines: list[str] = render_lines(header, style)
    if not lines:
        return ""
    return newline.join(lines) + newline + newline
