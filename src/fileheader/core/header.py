# topmark:header:start
#
#   project      : fileheader
#   file         : header.py
#   file_relpath : src/fileheader/core/header.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The header value object.

A `Header` is the notice text that must be present in every file, held as an
ordered, immutable sequence of lines without any comment decoration. Its
canonical form is computed once at construction and shared read-only by every
worker that compares a file against it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from fileheader.core.normalizer import CanonicalForm, normalize
from fileheader.core.styles import NO_STYLE

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


@dataclass(frozen=True)
class Header:
    """Immutable header text.

    Attributes:
        lines (tuple[str, ...]): Header lines without line terminators.
        canonical (CanonicalForm): Whitespace-normalized lines used for matching.
            Header text carries no comment decoration, so no comment marker is
            ever stripped from it.
    """

    lines: tuple[str, ...]
    canonical: CanonicalForm = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))
        object.__setattr__(self, "canonical", normalize(self.lines, NO_STYLE))

    @classmethod
    def from_text(cls, text: str) -> Header:
        """Build a header from raw text.

        Any newline convention is accepted; a single trailing newline does not
        add an empty last line.
        """
        return cls(tuple(text.splitlines()))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Header:
        """Build a header from an iterable of lines (terminators are removed)."""
        return cls(tuple(line.rstrip("\r\n") for line in lines))

    @classmethod
    def from_file(cls, path: Path) -> Header:
        """Read header text from a UTF-8 file (a leading BOM is dropped)."""
        return cls.from_text(path.read_text(encoding="utf-8-sig"))

    @property
    def text(self) -> str:
        """The header text joined with ``\\n``."""
        return "\n".join(self.lines)

    @property
    def is_empty(self) -> bool:
        """True when the header has no significant (non-blank) content."""
        return not self.canonical

    def __len__(self) -> int:
        return len(self.lines)
