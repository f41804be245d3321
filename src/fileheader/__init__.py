# topmark:header:start
#
#   project      : fileheader
#   file         : __init__.py
#   file_relpath : src/fileheader/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""fileheader package.

fileheader checks that source files begin with a required header (typically a
license notice) and inserts it where it is missing. The header is written once,
without comment decoration, and rendered per file type using that type's
comment syntax.

Typical use:

    ```python
    from fileheader import Header, Mode, check_headers_recursively

    header = Header.from_text("Copyright 2024 Example Corp\\nLicensed under Apache-2.0")
    summary = check_headers_recursively("src", header)
    if summary.has_failure(Mode.CHECK):
        print(summary.missing)
    ```
"""

from __future__ import annotations

from fileheader.core.errors import (
    BinaryFileError,
    ConfigError,
    FileHeaderError,
    ReadError,
    UnknownFileTypeError,
    WriteError,
)
from fileheader.core.header import Header
from fileheader.core.insertion import InsertionPoint, find_insertion_point
from fileheader.core.matcher import HeaderSpan, find_header, matches
from fileheader.core.normalizer import normalize
from fileheader.core.renderer import render
from fileheader.core.styles import (
    DEFAULT_STYLE_TABLE,
    NO_STYLE,
    BlockStyle,
    CommentStyle,
    LineStyle,
    NoStyle,
    StyleTable,
)
from fileheader.processing.batch import (
    BatchCoordinator,
    RunSummary,
    add_headers,
    add_headers_recursively,
    check_headers,
    check_headers_recursively,
    remove_headers,
    remove_headers_recursively,
)
from fileheader.processing.outcomes import OutcomeKind, ProcessOutcome
from fileheader.processing.processor import FileHeaderProcessor, Mode

__all__ = [
    "DEFAULT_STYLE_TABLE",
    "NO_STYLE",
    "BatchCoordinator",
    "BinaryFileError",
    "BlockStyle",
    "CommentStyle",
    "ConfigError",
    "FileHeaderError",
    "FileHeaderProcessor",
    "Header",
    "HeaderSpan",
    "InsertionPoint",
    "LineStyle",
    "Mode",
    "NoStyle",
    "OutcomeKind",
    "ProcessOutcome",
    "ReadError",
    "RunSummary",
    "StyleTable",
    "UnknownFileTypeError",
    "WriteError",
    "add_headers",
    "add_headers_recursively",
    "check_headers",
    "check_headers_recursively",
    "find_header",
    "find_insertion_point",
    "matches",
    "normalize",
    "remove_headers",
    "remove_headers_recursively",
    "render",
]
