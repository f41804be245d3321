# topmark:header:start
#
#   project      : fileheader
#   file         : keys.py
#   file_relpath : src/fileheader/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML key names used in fileheader configuration files."""

from __future__ import annotations

from typing import Final


class Toml:
    """Keys of the ``[tool.fileheader]`` table (or the root of ``fileheader.toml``)."""

    KEY_HEADER: Final[str] = "header"
    KEY_HEADER_FILE: Final[str] = "header_file"
    KEY_LICENSE: Final[str] = "license"
    KEY_YEAR: Final[str] = "year"
    KEY_OWNER: Final[str] = "owner"

    KEY_INCLUDE: Final[str] = "include"
    KEY_EXCLUDE: Final[str] = "exclude"

    KEY_WORKERS: Final[str] = "workers"
    KEY_STRICT_STYLES: Final[str] = "strict_styles"
    KEY_FAIL_FAST: Final[str] = "fail_fast"

    SECTION_STYLES: Final[str] = "styles"

    #: All keys accepted at the top level of the table.
    ALL_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_HEADER,
            KEY_HEADER_FILE,
            KEY_LICENSE,
            KEY_YEAR,
            KEY_OWNER,
            KEY_INCLUDE,
            KEY_EXCLUDE,
            KEY_WORKERS,
            KEY_STRICT_STYLES,
            KEY_FAIL_FAST,
            SECTION_STYLES,
        }
    )
