# topmark:header:start
#
#   project      : fileheader
#   file         : model.py
#   file_relpath : src/fileheader/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model: immutable `Config` and its `MutableConfig` builder.

Configuration is assembled in layers with last-wins precedence:

1. built-in defaults (`MutableConfig.from_defaults`);
2. the configuration file (explicit ``--config FILE``, or the discovered
   ``fileheader.toml`` / ``pyproject.toml``);
3. command-line options (`MutableConfig.apply_cli_args`).

The merged draft is frozen into a `Config`, which resolves the header text
and the effective comment style table for a run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from fileheader.config.keys import Toml
from fileheader.config.loaders import (
    discover_config_file,
    extract_tool_table,
    load_toml_dict,
)
from fileheader.config.logging import get_logger
from fileheader.core.errors import ConfigError
from fileheader.core.header import Header
from fileheader.core.styles import DEFAULT_STYLE_TABLE, style_from_spec
from fileheader.license.spdx import get_license

if TYPE_CHECKING:
    from collections.abc import Mapping

    from fileheader.config.loaders import TomlTable
    from fileheader.config.logging import FileHeaderLogger
    from fileheader.core.styles import CommentStyle, StyleTable

logger: FileHeaderLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        config_files (tuple[Path, ...]): Configuration files that were loaded.
        header_text (str | None): Literal header text.
        header_file (Path | None): File holding the header text.
        license (str | None): SPDX id of a predefined license header.
        year (int | None): Copyright year substituted into license headers.
        owner (str | None): Copyright owner substituted into license headers.
        include_patterns (tuple[str, ...]): Gitwildmatch patterns to keep.
        exclude_patterns (tuple[str, ...]): Gitwildmatch patterns to drop.
        workers (int | None): Thread pool size (None = CPU count).
        strict_styles (bool): Fail files without a mapped comment style.
        fail_fast (bool): Stop dispatching after the first failure.
        style_overrides (Mapping[str, CommentStyle]): Extension (``.ext``) or
            file name → comment style, layered over the default table.
    """

    config_files: tuple[Path, ...]
    header_text: str | None
    header_file: Path | None
    license: str | None
    year: int | None
    owner: str | None
    include_patterns: tuple[str, ...]
    exclude_patterns: tuple[str, ...]
    workers: int | None
    strict_styles: bool
    fail_fast: bool
    style_overrides: Mapping[str, CommentStyle]

    def build_header(self) -> Header:
        """Resolve the configured header source into a `Header`.

        Raises:
            ConfigError: If no header source is configured, the header file
                cannot be read, or the license is unknown.
        """
        if self.header_text is not None:
            return Header.from_text(self.header_text)
        if self.header_file is not None:
            try:
                return Header.from_file(self.header_file)
            except (OSError, UnicodeDecodeError) as e:
                raise ConfigError(f"Cannot read header file {self.header_file}: {e}") from e
        if self.license is not None:
            return get_license(self.license).build_header(year=self.year, owner=self.owner)
        raise ConfigError("No header configured: use --header, --header-file or --license")

    def style_table(self) -> StyleTable:
        """Return the default style table extended with the configured overrides."""
        if not self.style_overrides:
            return DEFAULT_STYLE_TABLE
        return DEFAULT_STYLE_TABLE.with_overrides(self.style_overrides)

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            config_files=list(self.config_files),
            header_text=self.header_text,
            header_file=self.header_file,
            license=self.license,
            year=self.year,
            owner=self.owner,
            include_patterns=list(self.include_patterns),
            exclude_patterns=list(self.exclude_patterns),
            workers=self.workers,
            strict_styles=self.strict_styles,
            fail_fast=self.fail_fast,
            style_overrides=dict(self.style_overrides),
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Tri-state fields (``None``) mean "not set by this layer" so that
    `merge_with` can tell an explicit value from an inherited one.
    """

    config_files: list[Path] = field(default_factory=lambda: [])

    # Header source
    header_text: str | None = None
    header_file: Path | None = None
    license: str | None = None
    year: int | None = None
    owner: str | None = None

    # File selection
    include_patterns: list[str] = field(default_factory=lambda: [])
    exclude_patterns: list[str] = field(default_factory=lambda: [])

    # Run options
    workers: int | None = None
    strict_styles: bool | None = None
    fail_fast: bool | None = None

    style_overrides: dict[str, CommentStyle] = field(default_factory=lambda: {})

    # ---------------------------- Build/freeze ----------------------------
    def header_sources(self) -> list[str]:
        """Names of the header sources set on this draft."""
        sources: list[str] = []
        if self.header_text is not None:
            sources.append(Toml.KEY_HEADER)
        if self.header_file is not None:
            sources.append(Toml.KEY_HEADER_FILE)
        if self.license is not None:
            sources.append(Toml.KEY_LICENSE)
        return sources

    def freeze(self) -> Config:
        """Validate this draft and return an immutable `Config`.

        Raises:
            ConfigError: If more than one header source is set or ``workers``
                is not positive.
        """
        sources: list[str] = self.header_sources()
        if len(sources) > 1:
            raise ConfigError(f"Conflicting header sources: {', '.join(sources)} (choose one)")
        if self.workers is not None and self.workers < 1:
            raise ConfigError(f"'workers' must be at least 1, got {self.workers}")

        return Config(
            config_files=tuple(self.config_files),
            header_text=self.header_text,
            header_file=self.header_file,
            license=self.license,
            year=self.year,
            owner=self.owner,
            include_patterns=tuple(self.include_patterns),
            exclude_patterns=tuple(self.exclude_patterns),
            workers=self.workers,
            strict_styles=bool(self.strict_styles),
            fail_fast=bool(self.fail_fast),
            style_overrides=MappingProxyType(dict(self.style_overrides)),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return the built-in defaults (no header, all options off)."""
        return cls(strict_styles=False, fail_fast=False)

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig:
        """Load a draft from ``fileheader.toml`` or ``pyproject.toml``.

        Raises:
            ConfigError: If the file cannot be parsed or holds invalid values.
        """
        logger.debug("Loading configuration from %s", path)
        table: TomlTable | None = extract_tool_table(path, load_toml_dict(path))
        draft: MutableConfig = cls.from_toml_dict(table or {}, config_file=path)
        draft.config_files = [path]
        return draft

    @classmethod
    def from_toml_dict(
        cls,
        data: Mapping[str, Any],
        *,
        config_file: Path | None = None,
    ) -> MutableConfig:
        """Build a draft from a parsed fileheader table.

        Relative ``header_file`` paths are resolved against the directory of
        ``config_file`` (or the working directory when it is None).

        Raises:
            ConfigError: On unknown keys or values of the wrong type.
        """
        where: str = str(config_file) if config_file is not None else "<config>"
        unknown: list[str] = sorted(set(data) - Toml.ALL_KEYS)
        if unknown:
            raise ConfigError(f"Unknown key(s) in {where}: {', '.join(unknown)}")

        def _get(key: str, kind: type | tuple[type, ...]) -> Any:
            value: Any = data.get(key)
            # bool is a subclass of int; reject it where a number is expected.
            if value is not None and (
                not isinstance(value, kind) or (kind is int and isinstance(value, bool))
            ):
                raise ConfigError(f"Invalid value for {key!r} in {where}: {value!r}")
            return value

        def _patterns(key: str) -> list[str]:
            value: Any = _get(key, list) or []
            if not all(isinstance(v, str) for v in value):
                raise ConfigError(f"{key!r} in {where} must be a list of strings")
            return list(value)

        draft = cls(
            header_text=_get(Toml.KEY_HEADER, str),
            license=_get(Toml.KEY_LICENSE, str),
            year=_get(Toml.KEY_YEAR, int),
            owner=_get(Toml.KEY_OWNER, str),
            include_patterns=_patterns(Toml.KEY_INCLUDE),
            exclude_patterns=_patterns(Toml.KEY_EXCLUDE),
            workers=_get(Toml.KEY_WORKERS, int),
            strict_styles=_get(Toml.KEY_STRICT_STYLES, bool),
            fail_fast=_get(Toml.KEY_FAIL_FAST, bool),
        )

        header_file: str | None = _get(Toml.KEY_HEADER_FILE, str)
        if header_file is not None:
            base: Path = config_file.parent if config_file is not None else Path.cwd()
            draft.header_file = (base / header_file).resolve()

        styles: Any = _get(Toml.SECTION_STYLES, dict) or {}
        for key, spec in styles.items():
            if not isinstance(spec, dict):
                raise ConfigError(f"Style for {key!r} in {where} must be a table")
            draft.style_overrides[key] = style_from_spec(spec)

        logger.trace("Parsed config table from %s: %s", where, draft)
        return draft

    @classmethod
    def load_merged(
        cls,
        *,
        config_path: Path | None = None,
        no_config: bool = False,
        cwd: Path | None = None,
    ) -> MutableConfig:
        """Return defaults merged with the applicable configuration file.

        Args:
            config_path (Path | None): Explicit configuration file (wins over discovery).
            no_config (bool): Skip file discovery entirely.
            cwd (Path | None): Directory used for discovery (default: CWD).

        Returns:
            MutableConfig: The merged draft (CLI overrides not yet applied).
        """
        draft: MutableConfig = cls.from_defaults()
        path: Path | None = config_path
        if path is None and not no_config:
            path = discover_config_file(cwd)
        if path is not None:
            draft = draft.merge_with(cls.from_toml_file(path))
        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        A header source set in ``other`` replaces all header sources of this
        draft; style overrides are merged key by key.
        """
        replaces_header: bool = bool(other.header_sources())
        return MutableConfig(
            config_files=self.config_files + other.config_files,
            header_text=other.header_text if replaces_header else self.header_text,
            header_file=other.header_file if replaces_header else self.header_file,
            license=other.license if replaces_header else self.license,
            year=other.year if other.year is not None else self.year,
            owner=other.owner if other.owner is not None else self.owner,
            include_patterns=other.include_patterns or self.include_patterns,
            exclude_patterns=other.exclude_patterns or self.exclude_patterns,
            workers=other.workers if other.workers is not None else self.workers,
            strict_styles=other.strict_styles
            if other.strict_styles is not None
            else self.strict_styles,
            fail_fast=other.fail_fast if other.fail_fast is not None else self.fail_fast,
            style_overrides={**self.style_overrides, **other.style_overrides},
        )

    def apply_cli_args(self, args: Mapping[str, Any]) -> MutableConfig:
        """Return a new draft with command-line overrides applied.

        Recognized keys: ``header``, ``header_file``, ``license``, ``year``,
        ``owner``, ``include_patterns``, ``exclude_patterns``, ``workers``,
        ``strict_styles``, ``fail_fast``. ``None``, empty sequences and
        ``False`` flags mean "not given".
        """
        header_file: Any = args.get("header_file")
        overrides = MutableConfig(
            header_text=args.get("header"),
            header_file=Path(header_file).resolve() if header_file else None,
            license=args.get("license"),
            year=args.get("year"),
            owner=args.get("owner"),
            include_patterns=list(args.get("include_patterns") or ()),
            exclude_patterns=list(args.get("exclude_patterns") or ()),
            workers=args.get("workers"),
            strict_styles=True if args.get("strict_styles") else None,
            fail_fast=True if args.get("fail_fast") else None,
        )
        return self.merge_with(overrides)
