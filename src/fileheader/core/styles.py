# topmark:header:start
#
#   project      : fileheader
#   file         : styles.py
#   file_relpath : src/fileheader/core/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment styles and the file-name → style table.

A comment style describes how a header is embedded in a file as a comment. The
set of styles is closed: `LineStyle` (every line carries a prefix such as ``#``
or ``//``), `BlockStyle` (an open/close delimiter pair with an optional
per-line continuation such as ``*``) and `NoStyle` (plain text files). Code
that needs style-specific behavior matches on the variant instead of
dispatching through subclasses.

`StyleTable` resolves a path to its style, first by extension, then by exact
file name. Unmapped files resolve to `NO_STYLE`. Tables are immutable; use
`StyleTable.with_overrides` to extend one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePath
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final, Union

from fileheader.config.logging import get_logger
from fileheader.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from fileheader.config.logging import FileHeaderLogger

logger: FileHeaderLogger = get_logger(__name__)


@dataclass(frozen=True)
class LineStyle:
    """Line comments: each header line starts with ``prefix``.

    Attributes:
        prefix (str): Comment introducer without trailing space (e.g. ``"//"``).
    """

    prefix: str

    def describe(self) -> str:
        """Return a short human-readable form, e.g. ``line '//'``."""
        return f"line {self.prefix!r}"


@dataclass(frozen=True)
class BlockStyle:
    """Block comments: ``open`` line, content lines, ``close`` line.

    The delimiters are stored as they are written when rendering; matching
    compares them with surrounding whitespace removed.

    Attributes:
        open (str): Opening delimiter line (e.g. ``"/*"``).
        close (str): Closing delimiter line (e.g. ``" */"``).
        continuation (str): Literal prefix written before each content line
            (e.g. ``" * "``). May be whitespace-only or empty.
    """

    open: str
    close: str
    continuation: str = ""

    @property
    def open_token(self) -> str:
        """Opening delimiter without surrounding whitespace."""
        return self.open.strip()

    @property
    def close_token(self) -> str:
        """Closing delimiter without surrounding whitespace."""
        return self.close.strip()

    @property
    def continuation_token(self) -> str:
        """Continuation marker without surrounding whitespace (may be empty)."""
        return self.continuation.strip()

    def describe(self) -> str:
        """Return a short human-readable form, e.g. ``block '/*' ... '*/'``."""
        return f"block {self.open_token!r} ... {self.close_token!r}"


@dataclass(frozen=True)
class NoStyle:
    """Plain text: the header is written without comment decoration."""

    def describe(self) -> str:
        """Return a short human-readable form."""
        return "none"


CommentStyle = Union[LineStyle, BlockStyle, NoStyle]

NO_STYLE: Final[NoStyle] = NoStyle()

SLASH_STAR: Final[BlockStyle] = BlockStyle("/*", " */", " * ")
SLASH_STAR_STAR: Final[BlockStyle] = BlockStyle("/**", " */", " * ")
SLASH: Final[LineStyle] = LineStyle("//")
POUND: Final[LineStyle] = LineStyle("#")
SEMICOLONS: Final[LineStyle] = LineStyle(";;")
PERCENT: Final[LineStyle] = LineStyle("%")
DASHES: Final[LineStyle] = LineStyle("--")
XML_COMMENT: Final[BlockStyle] = BlockStyle("<!--", "-->", " ")
OCAML_COMMENT: Final[BlockStyle] = BlockStyle("(**", "*)", "   ")


def _normalize_extension(ext: str) -> str:
    return ext.lower().lstrip(".")


@dataclass(frozen=True)
class StyleTable:
    """Immutable mapping from extensions and file names to comment styles.

    Attributes:
        by_extension (Mapping[str, CommentStyle]): Lowercase extension (without
            the leading dot) → style.
        by_filename (Mapping[str, CommentStyle]): Exact base name → style.
    """

    by_extension: Mapping[str, CommentStyle] = field(default_factory=dict)
    by_filename: Mapping[str, CommentStyle] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze the mappings so a table can be shared across worker threads.
        object.__setattr__(
            self,
            "by_extension",
            MappingProxyType({_normalize_extension(k): v for k, v in self.by_extension.items()}),
        )
        object.__setattr__(self, "by_filename", MappingProxyType(dict(self.by_filename)))

    def lookup(self, path: str | PurePath) -> CommentStyle | None:
        """Return the mapped style for ``path``, or None when nothing matches.

        The extension is tried first, then the exact file name.
        """
        p = PurePath(path)
        suffix: str = _normalize_extension(p.suffix)
        if suffix and suffix in self.by_extension:
            return self.by_extension[suffix]
        return self.by_filename.get(p.name)

    def resolve(self, path: str | PurePath) -> CommentStyle:
        """Return the style for ``path``, defaulting to `NO_STYLE`."""
        style: CommentStyle | None = self.lookup(path)
        if style is None:
            logger.trace("No comment style mapped for %s; using plain text", path)
            return NO_STYLE
        return style

    def is_known(self, path: str | PurePath) -> bool:
        """Return True if ``path`` has an explicitly mapped style."""
        return self.lookup(path) is not None

    def with_overrides(self, overrides: Mapping[str, CommentStyle]) -> StyleTable:
        """Return a new table extended with ``overrides``.

        Keys starting with a dot (``".foo"``) are extensions; any other key
        (``"Jenkinsfile"``, ``"BUILD"``) is an exact file name.
        """
        by_extension: dict[str, CommentStyle] = dict(self.by_extension)
        by_filename: dict[str, CommentStyle] = dict(self.by_filename)
        for key, style in overrides.items():
            if key.startswith("."):
                by_extension[_normalize_extension(key)] = style
            else:
                by_filename[key] = style
        return StyleTable(by_extension=by_extension, by_filename=by_filename)

    def items(self) -> Iterable[tuple[str, CommentStyle]]:
        """Iterate over all entries, extensions as ``.ext`` then file names, sorted."""
        for ext in sorted(self.by_extension):
            yield f".{ext}", self.by_extension[ext]
        for name in sorted(self.by_filename):
            yield name, self.by_filename[name]


def _table(groups: Iterable[tuple[CommentStyle, Iterable[str]]]) -> dict[str, CommentStyle]:
    out: dict[str, CommentStyle] = {}
    for style, keys in groups:
        for key in keys:
            out[key] = style
    return out


DEFAULT_STYLE_TABLE: Final[StyleTable] = StyleTable(
    by_extension=_table(
        [
            (SLASH_STAR, ("c", "h", "gv", "java", "scala", "kt", "kts")),
            (
                SLASH_STAR_STAR,
                ("js", "mjs", "cjs", "jsx", "ts", "tsx", "css", "scss", "sass"),
            ),
            (
                SLASH,
                (
                    "cc", "cpp", "cs", "go", "hcl", "hh", "hpp", "m", "mm", "proto",
                    "rs", "swift", "dart", "groovy", "v", "sv", "php",
                ),
            ),
            (
                POUND,
                (
                    "py", "sh", "yaml", "yml", "dockerfile", "rb", "gemfile", "tcl",
                    "tf", "bzl", "pl", "pp", "build", "toml", "cfg", "r",
                ),
            ),
            (SEMICOLONS, ("el", "lisp")),
            (PERCENT, ("erl",)),
            (DASHES, ("hs", "lua", "sql", "sdl")),
            (XML_COMMENT, ("html", "xml", "vue", "wxi", "wxl", "wxs")),
            (OCAML_COMMENT, ("ml", "mli", "mll", "mly")),
        ]
    ),
    by_filename=_table([(POUND, ("Dockerfile", "Makefile", "BUILD", "Gemfile"))]),
)  # fmt: skip


def style_from_spec(spec: Mapping[str, Any]) -> CommentStyle:
    """Build a comment style from a configuration table.

    Accepted shapes:

    * ``{kind = "line", prefix = "#"}``
    * ``{kind = "block", open = "/*", close = " */", continuation = " * "}``
    * ``{kind = "none"}``

    Args:
        spec (Mapping[str, Any]): The table read from configuration.

    Returns:
        CommentStyle: The corresponding style.

    Raises:
        ConfigError: If the kind is unknown or a required key is missing.
    """
    kind: str = str(spec.get("kind", "")).strip().lower()
    match kind:
        case "line":
            prefix = spec.get("prefix")
            if not isinstance(prefix, str) or not prefix.strip():
                raise ConfigError("Line comment style requires a non-empty 'prefix'")
            return LineStyle(prefix.strip())
        case "block":
            open_, close = spec.get("open"), spec.get("close")
            if not isinstance(open_, str) or not open_.strip():
                raise ConfigError("Block comment style requires a non-empty 'open'")
            if not isinstance(close, str) or not close.strip():
                raise ConfigError("Block comment style requires a non-empty 'close'")
            continuation = spec.get("continuation", "")
            if not isinstance(continuation, str):
                raise ConfigError("Block comment 'continuation' must be a string")
            return BlockStyle(open_, close, continuation)
        case "none":
            return NO_STYLE
        case _:
            raise ConfigError(f"Unknown comment style kind: {kind!r}")
