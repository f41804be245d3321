# topmark:header:start
#
#   project      : fileheader
#   file         : __init__.py
#   file_relpath : src/fileheader/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header engine: comment styles, normalization, matching, rendering and insertion points.

Everything in this package is pure computation on text; file I/O lives in
`fileheader.processing`.
"""
