# topmark:header:start
#
#   project      : fileheader
#   file         : loaders.py
#   file_relpath : src/fileheader/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Configuration lives either in a standalone ``fileheader.toml`` (keys at the
root) or in the ``[tool.fileheader]`` table of ``pyproject.toml``. Parsing is
done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from fileheader.config.logging import get_logger
from fileheader.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_TABLE
from fileheader.core.errors import ConfigError

if TYPE_CHECKING:
    from fileheader.config.logging import FileHeaderLogger

TomlTable = dict[str, Any]

logger: FileHeaderLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_tool_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the fileheader table of a parsed config file.

    For ``pyproject.toml`` this is ``[tool.fileheader]`` (None if absent); for
    any other file the whole document is the table.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get("tool", {})
    table: Any = tool.get(PYPROJECT_TOOL_TABLE) if isinstance(tool, dict) else None
    if table is None:
        logger.debug("No [tool.%s] table in %s", PYPROJECT_TOOL_TABLE, path)
        return None
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.{PYPROJECT_TOOL_TABLE}] in {path} must be a table")
    return cast("TomlTable", table)


def discover_config_file(start: Path | None = None) -> Path | None:
    """Find the configuration file for the directory ``start`` (default: CWD).

    ``fileheader.toml`` wins over ``pyproject.toml``; a ``pyproject.toml``
    only counts when it has a ``[tool.fileheader]`` table.
    """
    base: Path = start if start is not None else Path.cwd()
    candidate: Path = base / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    pyproject: Path = base / PYPROJECT_FILE_NAME
    if pyproject.is_file() and extract_tool_table(pyproject, load_toml_dict(pyproject)):
        return pyproject
    return None
