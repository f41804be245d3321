# topmark:header:start
#
#   project      : fileheader
#   file         : insertion.py
#   file_relpath : src/fileheader/core/insertion.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Insertion point detection (BOM, shebang and directive lines).

A header goes at the top of a file, but some leading content must stay first:

* a UTF-8 byte-order mark,
* a shebang line (``#!...``),
* one *directive line* right after those: an XML declaration, an HTML doctype,
  a PHP open tag, a Ruby/Python encoding pragma, or a Dockerfile parser
  directive.

`find_insertion_point` returns where the header must be spliced in. The same
preamble is skipped by the matcher when it looks for an existing header.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from fileheader.config.logging import FileHeaderLogger, get_logger

logger: FileHeaderLogger = get_logger(__name__)

BOM_CHAR: Final[str] = "\ufeff"

_RE_LINE: Final[re.Pattern[str]] = re.compile(r"[^\r\n]*(?:\r\n|\n|\r)?")
_RE_CODING_PRAGMA: Final[re.Pattern[str]] = re.compile(r"^[ \t\f]*#.*?coding[:=][ \t]*[-\w.]+")

#: Lowercase prefixes of lines that must remain the first line of a file.
DIRECTIVE_PREFIXES: Final[tuple[str, ...]] = (
    "<?xml",
    "<!doctype",
    "<?php",
    "# encoding:",
    "# frozen_string_literal:",
    "# escape",
    "# syntax",
)


def is_shebang(line: str) -> bool:
    """Return True for a shebang line."""
    return line.startswith("#!")


def is_directive(line: str) -> bool:
    """Return True for a directive line that must precede the header."""
    lowered: str = line.lstrip().lower()
    if lowered.startswith(DIRECTIVE_PREFIXES):
        return True
    return bool(_RE_CODING_PRAGMA.match(line))


@dataclass(frozen=True)
class InsertionPoint:
    """Where a rendered header must be spliced into a file.

    Attributes:
        offset (int): Byte offset into the original file content.
        char_offset (int): The same position as an index into the decoded text
            (the BOM, when present, counts as one character).
        has_bom (bool): Whether the content starts with a UTF-8 BOM.
        preamble (tuple[str, ...]): Lines kept before the header (shebang and/or
            directive line), without terminators.
        needs_newline (bool): The last preamble line has no line terminator, so
            one must be written before the header.
        alternatives (tuple[int, ...]): Character offsets of shorter preambles
            (e.g. after the shebang but before the directive line). The matcher
            also tries these so that a header whose first line happens to look
            like a directive is still recognized.
    """

    offset: int
    char_offset: int
    has_bom: bool = False
    preamble: tuple[str, ...] = ()
    needs_newline: bool = False
    alternatives: tuple[int, ...] = ()

    @property
    def candidate_offsets(self) -> tuple[int, ...]:
        """All character offsets where an existing header may start, preferred first."""
        return (self.char_offset, *self.alternatives)


def _next_line(text: str, pos: int) -> tuple[str, int]:
    """Return the line starting at ``pos`` (without terminator) and the offset after it."""
    m: re.Match[str] | None = _RE_LINE.match(text, pos)
    raw: str = m.group(0) if m else ""
    return raw.rstrip("\r\n"), pos + len(raw)


def find_insertion_point_in_text(text: str) -> InsertionPoint:
    """Locate the insertion point in decoded ``text``.

    Args:
        text (str): File content decoded as UTF-8 (a BOM, if any, is kept as
            the first character).

    Returns:
        InsertionPoint: The computed insertion point.
    """
    has_bom: bool = text.startswith(BOM_CHAR)
    pos: int = 1 if has_bom else 0
    offsets: list[int] = [pos]
    preamble: list[str] = []

    if pos < len(text):
        line, end = _next_line(text, pos)
        if is_shebang(line):
            preamble.append(line)
            pos = end
            offsets.append(pos)
            line, end = _next_line(text, pos) if pos < len(text) else ("", pos)
        if line and is_directive(line):
            preamble.append(line)
            pos = end
            offsets.append(pos)

    needs_newline: bool = bool(preamble) and not text[:pos].endswith(("\n", "\r"))
    point = InsertionPoint(
        offset=len(text[:pos].encode("utf-8")),
        char_offset=pos,
        has_bom=has_bom,
        preamble=tuple(preamble),
        needs_newline=needs_newline,
        alternatives=tuple(reversed(offsets[:-1])),
    )
    logger.trace("Insertion point: %s", point)
    return point


def find_insertion_point(data: bytes) -> InsertionPoint:
    """Locate the insertion point in raw file bytes.

    Args:
        data (bytes): The file content.

    Returns:
        InsertionPoint: The computed insertion point.

    Raises:
        UnicodeDecodeError: If ``data`` is not valid UTF-8.
    """
    return find_insertion_point_in_text(data.decode("utf-8"))
