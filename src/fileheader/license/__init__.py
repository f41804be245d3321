# topmark:header:start
#
#   project      : fileheader
#   file         : __init__.py
#   file_relpath : src/fileheader/license/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Predefined license headers."""

from __future__ import annotations

from fileheader.license.spdx import LICENSES, SpdxLicense, get_license

__all__ = ["LICENSES", "SpdxLicense", "get_license"]
