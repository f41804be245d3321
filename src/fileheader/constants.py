# topmark:header:start
#
#   project      : fileheader
#   file         : constants.py
#   file_relpath : src/fileheader/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""fileheader constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

FILEHEADER_VERSION: str = get_version("fileheader")

#: Standalone configuration file, looked up in the working directory.
CONFIG_FILE_NAME: Final[str] = "fileheader.toml"
#: Project file holding a ``[tool.fileheader]`` table.
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
#: Table name inside ``pyproject.toml``.
PYPROJECT_TOOL_TABLE: Final[str] = "fileheader"
