# topmark:header:start
#
#   project      : fileheader
#   file         : file_resolver.py
#   file_relpath : src/fileheader/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve input paths into the list of files to process.

Positional arguments may be files, directories (walked recursively) or glob
patterns (expanded relative to the current working directory). Include and
exclude patterns use ``.gitignore`` semantics (via `pathspec`) and are matched
against paths relative to the workspace root. ``.git`` directories are never
entered. The result is a sorted list without duplicates.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Final

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from fileheader.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from fileheader.config.logging import FileHeaderLogger

logger: FileHeaderLogger = get_logger(__name__)

#: Directory names that are never descended into.
SKIPPED_DIRECTORIES: Final[frozenset[str]] = frozenset({".git", ".hg", ".svn"})

_GLOB_CHARS: Final[tuple[str, ...]] = ("*", "?", "[")


def _is_glob(raw: str) -> bool:
    return any(ch in raw for ch in _GLOB_CHARS)


def walk_files(root: Path) -> Iterator[Path]:
    """Yield every regular file below ``root``, skipping VCS directories."""
    for dirpath, dirnames, filenames in os.walk(root):
        # Prune in place so os.walk does not descend.
        dirnames[:] = [d for d in dirnames if d not in SKIPPED_DIRECTORIES]
        for name in filenames:
            p = Path(dirpath) / name
            if p.is_file():
                yield p


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def _expand(raw: str | Path) -> list[Path]:
    text: str = str(raw)
    if _is_glob(text):
        matched: list[Path] = []
        for p in Path(".").glob(text):
            matched.extend(walk_files(p) if p.is_dir() else [p])
        if not matched:
            logger.warning("No matches for glob pattern: %s", text)
        return matched
    p = Path(raw)
    if p.is_dir():
        return list(walk_files(p))
    if p.is_file():
        return [p]
    logger.warning("No such file or directory: %s", p)
    return []


def resolve_file_list(
    paths: Iterable[str | Path],
    include: Iterable[str] = (),
    exclude: Iterable[str] = (),
    *,
    root: Path | None = None,
    predicate: Callable[[Path], bool] | None = None,
) -> list[Path]:
    """Return the files to process.

    Args:
        paths (Iterable[str | Path]): Files, directories or glob patterns.
        include (Iterable[str]): If given, keep only files matching any of these
            gitwildmatch patterns.
        exclude (Iterable[str]): Drop files matching any of these patterns.
        root (Path | None): Base for pattern matching; defaults to the
            current working directory.
        predicate (Callable[[Path], bool] | None): Optional extra filter.

    Returns:
        list[Path]: Sorted, de-duplicated list of files.
    """
    base: Path = root if root is not None else Path.cwd()
    include_patterns: list[str] = [p for p in include if p.strip()]
    exclude_patterns: list[str] = [p for p in exclude if p.strip()]

    candidates: set[Path] = set()
    for raw in paths:
        candidates.update(_expand(raw))

    if include_patterns:
        spec_in: PathSpec = PathSpec.from_lines(GitWildMatchPattern, include_patterns)
        candidates = {p for p in candidates if spec_in.match_file(_rel_for_match(p, base))}

    if exclude_patterns:
        spec_ex: PathSpec = PathSpec.from_lines(GitWildMatchPattern, exclude_patterns)
        candidates = {p for p in candidates if not spec_ex.match_file(_rel_for_match(p, base))}

    if predicate is not None:
        candidates = {p for p in candidates if predicate(p)}

    files: list[Path] = sorted(candidates)
    logger.trace("Files to process: %d -- %s", len(files), files)
    return files
