# topmark:header:start
#
#   project      : fileheader
#   file         : __init__.py
#   file_relpath : src/fileheader/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration: logging setup, TOML loading and the layered config model.

`fileheader.config.logging` has no dependencies on the rest of the package so
that every module can import it. Import the model explicitly from
`fileheader.config.model`.
"""
