# topmark:header:start
#
#   project      : fileheader
#   file         : processor.py
#   file_relpath : src/fileheader/processing/processor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-file header processing.

`FileHeaderProcessor.process` runs one file through a fixed sequence of steps:

1. read the raw bytes and decode them as UTF-8;
2. locate the insertion point (after BOM, shebang and directive line);
3. resolve the comment style from the file name;
4. look for an existing header and, depending on the mode, report it, insert
   the rendered header, or remove the existing one.

Every per-file problem is reported as a FAILED `ProcessOutcome`; the
processor only raises for programming errors.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from fileheader.config.logging import get_logger
from fileheader.core.errors import (
    BinaryFileError,
    FileHeaderError,
    ReadError,
    UnknownFileTypeError,
)
from fileheader.core.insertion import find_insertion_point_in_text
from fileheader.core.matcher import find_header
from fileheader.core.renderer import detect_newline, render
from fileheader.core.styles import DEFAULT_STYLE_TABLE
from fileheader.processing.outcomes import OutcomeKind, ProcessOutcome
from fileheader.processing.writer import write_atomic

if TYPE_CHECKING:
    from fileheader.config.logging import FileHeaderLogger
    from fileheader.core.header import Header
    from fileheader.core.insertion import InsertionPoint
    from fileheader.core.matcher import HeaderSpan
    from fileheader.core.styles import CommentStyle, StyleTable

logger: FileHeaderLogger = get_logger(__name__)


class Mode(str, Enum):
    """Processing mode.

    Members:
        CHECK: Report whether the header is present; never write.
        INSERT: Insert the header where it is missing.
        REMOVE: Remove an exact occurrence of the header.
    """

    CHECK = "check"
    INSERT = "insert"
    REMOVE = "remove"


def read_text(path: Path) -> tuple[bytes, str]:
    """Read ``path`` and decode it as UTF-8.

    Returns:
        tuple[bytes, str]: The raw bytes and the decoded text.

    Raises:
        ReadError: If the file cannot be read.
        BinaryFileError: If the content is not valid UTF-8.
    """
    try:
        data: bytes = path.read_bytes()
    except OSError as exc:
        raise ReadError(path, f"cannot read file: {exc.strerror or exc}") from exc
    try:
        text: str = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise BinaryFileError(path, "file appears to be binary (not UTF-8 text)") from exc
    return data, text


class FileHeaderProcessor:
    """Check, insert or remove a header in individual files.

    Instances hold only read-only state and may be shared by worker threads.

    Args:
        header (Header): The required header.
        mode (Mode): What to do with each file.
        styles (StyleTable): File name → comment style table.
        strict_styles (bool): Fail files without a mapped comment style instead
            of treating them as plain text.
    """

    def __init__(
        self,
        header: Header,
        mode: Mode = Mode.CHECK,
        styles: StyleTable = DEFAULT_STYLE_TABLE,
        *,
        strict_styles: bool = False,
    ) -> None:
        self.header = header
        self.mode = mode
        self.styles = styles
        self.strict_styles = strict_styles

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(mode={self.mode.value!r}, "
            f"header_lines={len(self.header)}, strict_styles={self.strict_styles})"
        )

    def resolve_style(self, path: Path) -> CommentStyle:
        """Return the comment style for ``path``.

        Raises:
            UnknownFileTypeError: If ``strict_styles`` is set and no style is mapped.
        """
        style: CommentStyle | None = self.styles.lookup(path)
        if style is not None:
            return style
        if self.strict_styles:
            raise UnknownFileTypeError(path, "no comment style is configured for this file type")
        return self.styles.resolve(path)

    def process(self, path: Path | str) -> ProcessOutcome:
        """Process a single file according to ``mode``.

        Args:
            path (Path | str): The file to process.

        Returns:
            ProcessOutcome: The result; FAILED outcomes carry the error.
        """
        path = Path(path)
        try:
            outcome: ProcessOutcome = self._process(path)
        except FileHeaderError as exc:
            logger.info("%s", exc)
            return ProcessOutcome.failed(exc)
        logger.debug("%s: %s", path, outcome.kind.value)
        return outcome

    def _process(self, path: Path) -> ProcessOutcome:
        data, text = read_text(path)
        point: InsertionPoint = find_insertion_point_in_text(text)
        style: CommentStyle = self.resolve_style(path)
        logger.trace("%s: style=%s, insertion point=%s", path, style, point)

        span: HeaderSpan | None = find_header(text, self.header, style, point=point)

        if self.mode is Mode.REMOVE:
            if span is None or span.is_empty:
                return ProcessOutcome(OutcomeKind.MISSING)
            updated: str = text[: span.start] + text[span.end :]
            write_atomic(path, updated.encode("utf-8"))
            return ProcessOutcome(OutcomeKind.REMOVED)

        if span is not None:
            return ProcessOutcome(OutcomeKind.ALREADY_PRESENT)
        if self.mode is Mode.CHECK:
            return ProcessOutcome(OutcomeKind.MISSING)

        newline: str = detect_newline(text)
        rendered: str = render(self.header, style, newline)
        if point.needs_newline:
            rendered = newline + rendered
        payload: bytes = data[: point.offset] + rendered.encode("utf-8") + data[point.offset :]
        write_atomic(path, payload)
        return ProcessOutcome(OutcomeKind.INSERTED)
