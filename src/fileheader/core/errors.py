# topmark:header:start
#
#   project      : fileheader
#   file         : errors.py
#   file_relpath : src/fileheader/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the header engine.

Per-file problems are raised as `FileHeaderError` subclasses inside the file
processor and converted into failed outcomes there, so a single bad file never
aborts a batch run. `ConfigError` is raised while building the run (bad TOML,
unknown license, invalid style definition) and is fatal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class FileHeaderError(Exception):
    """Base class for per-file errors.

    Attributes:
        path (Path): The file the error relates to.
        message (str): Human-readable description.
    """

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


class ReadError(FileHeaderError):
    """The file could not be read (missing, permission denied, I/O error)."""


class BinaryFileError(ReadError):
    """The file content is not valid UTF-8 text."""


class WriteError(FileHeaderError):
    """Updated content could not be persisted; the original file is unchanged."""


class UnknownFileTypeError(FileHeaderError):
    """No comment style is mapped for the file and strict resolution is enabled."""


class ConfigError(Exception):
    """Invalid configuration (header source, license, style table or TOML)."""
