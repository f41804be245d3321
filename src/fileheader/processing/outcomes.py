# topmark:header:start
#
#   project      : fileheader
#   file         : outcomes.py
#   file_relpath : src/fileheader/processing/outcomes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-file results of a header run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from yachalk import chalk

from fileheader.core.errors import BinaryFileError
from fileheader.rendering.colored_enum import ColoredStrEnum

if TYPE_CHECKING:
    from fileheader.core.errors import FileHeaderError


class OutcomeKind(ColoredStrEnum):
    """What happened to a single file.

    Members:
        ALREADY_PRESENT: The file already starts with the header.
        INSERTED: The header was added and the file rewritten.
        MISSING: The header is absent and nothing was written.
        REMOVED: The header was found and removed.
        FAILED: The file could not be processed; see `ProcessOutcome.error`.
    """

    ALREADY_PRESENT = ("already present", chalk.green)
    INSERTED = ("inserted", chalk.yellow)
    MISSING = ("missing", chalk.red)
    REMOVED = ("removed", chalk.yellow)
    FAILED = ("failed", chalk.red_bright)


@dataclass(frozen=True)
class ProcessOutcome:
    """Result of processing one file.

    Attributes:
        kind (OutcomeKind): The outcome classification.
        error (FileHeaderError | None): The cause when ``kind`` is FAILED.
    """

    kind: OutcomeKind
    error: FileHeaderError | None = None

    @classmethod
    def failed(cls, error: FileHeaderError) -> ProcessOutcome:
        """Build a FAILED outcome for ``error``."""
        return cls(OutcomeKind.FAILED, error)

    @property
    def is_failure(self) -> bool:
        """True when the file could not be processed."""
        return self.kind is OutcomeKind.FAILED

    @property
    def is_binary(self) -> bool:
        """True when the file was rejected as binary (not UTF-8)."""
        return isinstance(self.error, BinaryFileError)

    def describe(self) -> str:
        """Human-readable description, including the error message if any."""
        if self.error is not None:
            return f"{self.kind.value}: {self.error.message}"
        return self.kind.value
