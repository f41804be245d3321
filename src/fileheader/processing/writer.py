# topmark:header:start
#
#   project      : fileheader
#   file         : writer.py
#   file_relpath : src/fileheader/processing/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Atomic file replacement.

Updated content is written to a temporary file in the target's directory,
flushed and fsync'ed, then moved over the target with `os.replace`. Readers
therefore see either the old or the new content, never a partial write. The
target's permission bits are copied to the replacement.

A symbolic link is followed: the file it points to is replaced and the link
itself is left in place. Files without any write permission bit are refused.
"""

from __future__ import annotations

import contextlib
import os
import stat
import tempfile
from typing import TYPE_CHECKING, Final

from fileheader.config.logging import get_logger
from fileheader.core.errors import WriteError

if TYPE_CHECKING:
    from pathlib import Path

    from fileheader.config.logging import FileHeaderLogger

logger: FileHeaderLogger = get_logger(__name__)

_WRITE_BITS: Final[int] = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH


def write_atomic(path: Path, data: bytes) -> int:
    """Replace the content of ``path`` with ``data`` atomically.

    Args:
        path (Path): The file to replace.
        data (bytes): The new content.

    Returns:
        int: The number of bytes written.

    Raises:
        WriteError: If the content could not be persisted or the file is
            read-only. The original file is left untouched and the temporary
            file is removed.
    """
    target: Path = path.resolve() if path.is_symlink() else path
    directory: Path = target.parent
    try:
        mode: int | None = stat.S_IMODE(target.stat().st_mode)
    except OSError:
        mode = None

    if mode is not None and not mode & _WRITE_BITS:
        raise WriteError(path, "file is read-only")

    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=directory)
    except OSError as exc:
        raise WriteError(path, f"cannot create temporary file: {exc.strerror or exc}") from exc

    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
            fh.flush()
            os.fsync(fh.fileno())
        if mode is not None:
            os.chmod(tmp_name, mode)
        os.replace(tmp_name, target)
    except OSError as exc:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        raise WriteError(path, f"cannot write file: {exc.strerror or exc}") from exc

    logger.debug("Wrote %d bytes to %s", len(data), path)
    return len(data)
