# topmark:header:start
#
#   project      : fileheader
#   file         : __init__.py
#   file_relpath : src/fileheader/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""fileheader CLI package.

The console script entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    fileheader = "fileheader.cli.main:cli"

All subcommands live in `fileheader.cli.commands`.
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
