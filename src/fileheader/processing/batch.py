# topmark:header:start
#
#   project      : fileheader
#   file         : batch.py
#   file_relpath : src/fileheader/processing/batch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run a `FileHeaderProcessor` over many files concurrently.

`BatchCoordinator` dispatches one task per file to a bounded thread pool and
collects the outcomes in the calling thread, so the only shared state is
read-only (the header and the style table). At most ``max_workers`` files are
in flight at any time: a stop request (``fail_fast``, `BatchCoordinator.stop`
or Ctrl-C) prevents new files from being dispatched while the files already
being processed run to completion. A file is never abandoned half-written.

The module-level helpers (`check_headers`, `add_headers`, `remove_headers`
and their ``*_recursively`` variants) cover the common library use cases.
"""

from __future__ import annotations

import os
import threading
from collections import Counter
from concurrent.futures import FIRST_COMPLETED, ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from fileheader.config.logging import get_logger
from fileheader.core.styles import DEFAULT_STYLE_TABLE
from fileheader.file_resolver import resolve_file_list
from fileheader.processing.outcomes import OutcomeKind
from fileheader.processing.processor import FileHeaderProcessor, Mode

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator
    from concurrent.futures import Future

    from fileheader.config.logging import FileHeaderLogger
    from fileheader.core.header import Header
    from fileheader.core.styles import StyleTable
    from fileheader.processing.outcomes import ProcessOutcome

logger: FileHeaderLogger = get_logger(__name__)


@dataclass
class RunSummary:
    """Aggregated outcomes of a batch run.

    Attributes:
        outcomes (dict[Path, ProcessOutcome]): Outcome per processed file, in
            completion order.
        aborted (bool): True if the run was stopped before every file was
            dispatched.
    """

    outcomes: dict[Path, ProcessOutcome] = field(default_factory=dict)
    aborted: bool = False

    def record(self, path: Path, outcome: ProcessOutcome) -> None:
        """Store the outcome for ``path``."""
        self.outcomes[path] = outcome

    def __len__(self) -> int:
        return len(self.outcomes)

    def __iter__(self) -> Iterator[Path]:
        return iter(sorted(self.outcomes))

    def __getitem__(self, path: Path) -> ProcessOutcome:
        return self.outcomes[path]

    def __contains__(self, path: object) -> bool:
        return path in self.outcomes

    def items(self) -> list[tuple[Path, ProcessOutcome]]:
        """Return ``(path, outcome)`` pairs sorted by path."""
        return sorted(self.outcomes.items())

    def counts(self) -> Counter[OutcomeKind]:
        """Return the number of files per outcome kind."""
        return Counter(outcome.kind for outcome in self.outcomes.values())

    def paths_with(self, kind: OutcomeKind) -> list[Path]:
        """Return the sorted paths whose outcome is ``kind``."""
        return sorted(p for p, o in self.outcomes.items() if o.kind is kind)

    @property
    def already_present(self) -> list[Path]:
        """Files that already carried the header."""
        return self.paths_with(OutcomeKind.ALREADY_PRESENT)

    @property
    def missing(self) -> list[Path]:
        """Files without the header (check mode, or nothing to remove)."""
        return self.paths_with(OutcomeKind.MISSING)

    @property
    def inserted(self) -> list[Path]:
        """Files that received the header."""
        return self.paths_with(OutcomeKind.INSERTED)

    @property
    def removed(self) -> list[Path]:
        """Files the header was removed from."""
        return self.paths_with(OutcomeKind.REMOVED)

    @property
    def failed(self) -> list[Path]:
        """Files that could not be processed."""
        return self.paths_with(OutcomeKind.FAILED)

    @property
    def binary_files(self) -> list[Path]:
        """Files rejected because they are not UTF-8 text."""
        return sorted(p for p, o in self.outcomes.items() if o.is_binary)

    def has_failure(self, mode: Mode) -> bool:
        """Return True if the run should be reported as unsuccessful.

        In check mode a missing header counts as a failure; in insert and
        remove mode only files that could not be processed do.
        """
        counts: Counter[OutcomeKind] = self.counts()
        if counts[OutcomeKind.FAILED]:
            return True
        return mode is Mode.CHECK and counts[OutcomeKind.MISSING] > 0


class BatchCoordinator:
    """Fan a processor out over many files with a bounded thread pool.

    Args:
        processor (FileHeaderProcessor): The per-file processor (shared read-only).
        max_workers (int | None): Pool size; defaults to ``os.cpu_count()``.
        fail_fast (bool): Stop dispatching after the first FAILED outcome.
        on_outcome (Callable[[Path, ProcessOutcome], None] | None): Called in
            the coordinating thread as each file completes.
    """

    def __init__(
        self,
        processor: FileHeaderProcessor,
        max_workers: int | None = None,
        *,
        fail_fast: bool = False,
        on_outcome: Callable[[Path, ProcessOutcome], None] | None = None,
    ) -> None:
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self.processor = processor
        self.max_workers: int = max_workers or os.cpu_count() or 1
        self.fail_fast = fail_fast
        self.on_outcome = on_outcome
        self._stop = threading.Event()

    def stop(self) -> None:
        """Request the current run to stop dispatching new files."""
        self._stop.set()

    @property
    def stop_requested(self) -> bool:
        """Whether a stop has been requested for the current run."""
        return self._stop.is_set()

    def run(self, paths: Iterable[Path | str]) -> RunSummary:
        """Process ``paths`` and return the aggregated summary.

        Duplicate paths are processed once.

        Raises:
            Exception: An unexpected error raised by a worker is re-raised once
                the files still in flight have finished.
        """
        self._stop.clear()
        unique: list[Path] = list(dict.fromkeys(Path(p) for p in paths))
        queue: Iterator[Path] = iter(unique)
        summary = RunSummary()
        in_flight: dict[Future[ProcessOutcome], Path] = {}
        dispatched: int = 0
        fatal: BaseException | None = None

        logger.info(
            "Processing %d file(s) with %d worker(s) (%s)",
            len(unique),
            self.max_workers,
            self.processor.mode.value,
        )

        def _collect(done: Iterable[Future[ProcessOutcome]]) -> None:
            nonlocal fatal
            for fut in done:
                path: Path = in_flight.pop(fut)
                try:
                    outcome: ProcessOutcome = fut.result()
                except Exception as exc:
                    logger.error("Unexpected error while processing %s: %s", path, exc)
                    if fatal is None:
                        fatal = exc
                    continue
                summary.record(path, outcome)
                if self.on_outcome is not None:
                    self.on_outcome(path, outcome)
                if outcome.is_failure and self.fail_fast:
                    logger.info("Stopping after failure on %s (fail-fast)", path)
                    self._stop.set()

        with ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="fileheader"
        ) as pool:
            try:
                while True:
                    while (
                        fatal is None
                        and not self._stop.is_set()
                        and len(in_flight) < self.max_workers
                    ):
                        path: Path | None = next(queue, None)
                        if path is None:
                            break
                        in_flight[pool.submit(self.processor.process, path)] = path
                        dispatched += 1
                    if not in_flight:
                        break
                    done, _ = wait(in_flight, return_when=FIRST_COMPLETED)
                    _collect(done)
            except KeyboardInterrupt:
                logger.warning("Interrupted; waiting for %d file(s) in flight", len(in_flight))
                self._stop.set()
                done, _ = wait(in_flight)
                _collect(done)

        summary.aborted = dispatched < len(unique)
        if fatal is not None:
            raise fatal
        logger.info("Processed %d file(s): %s", len(summary), dict(summary.counts()))
        return summary


def _run(
    mode: Mode,
    paths: Iterable[Path | str],
    header: Header,
    *,
    styles: StyleTable = DEFAULT_STYLE_TABLE,
    max_workers: int | None = None,
    strict_styles: bool = False,
    fail_fast: bool = False,
) -> RunSummary:
    processor = FileHeaderProcessor(header, mode, styles, strict_styles=strict_styles)
    return BatchCoordinator(processor, max_workers, fail_fast=fail_fast).run(paths)


def check_headers(paths: Iterable[Path | str], header: Header, **kwargs: Any) -> RunSummary:
    """Check ``paths`` for ``header`` without modifying any file."""
    return _run(Mode.CHECK, paths, header, **kwargs)


def add_headers(paths: Iterable[Path | str], header: Header, **kwargs: Any) -> RunSummary:
    """Insert ``header`` into every file of ``paths`` that lacks it."""
    return _run(Mode.INSERT, paths, header, **kwargs)


def remove_headers(paths: Iterable[Path | str], header: Header, **kwargs: Any) -> RunSummary:
    """Remove ``header`` from every file of ``paths`` that starts with it."""
    return _run(Mode.REMOVE, paths, header, **kwargs)


def _files_below(
    root: Path | str,
    predicate: Callable[[Path], bool] | None,
    include: Iterable[str],
    exclude: Iterable[str],
) -> list[Path]:
    base = Path(root)
    return resolve_file_list([base], include, exclude, root=base, predicate=predicate)


def check_headers_recursively(
    root: Path | str,
    header: Header,
    *,
    predicate: Callable[[Path], bool] | None = None,
    include: Iterable[str] = (),
    exclude: Iterable[str] = (),
    **kwargs: Any,
) -> RunSummary:
    """Check every file below ``root`` (see `check_headers`).

    Args:
        root (Path | str): Directory to walk.
        header (Header): The required header.
        predicate (Callable[[Path], bool] | None): Only files for which this
            returns True are checked.
        include (Iterable[str]): Gitwildmatch patterns relative to ``root``.
        exclude (Iterable[str]): Gitwildmatch patterns relative to ``root``.
        **kwargs (Any): Forwarded to the coordinator (``styles``,
            ``max_workers``, ``strict_styles``, ``fail_fast``).

    Returns:
        RunSummary: The aggregated outcomes.
    """
    return check_headers(_files_below(root, predicate, include, exclude), header, **kwargs)


def add_headers_recursively(
    root: Path | str,
    header: Header,
    *,
    predicate: Callable[[Path], bool] | None = None,
    include: Iterable[str] = (),
    exclude: Iterable[str] = (),
    **kwargs: Any,
) -> RunSummary:
    """Insert ``header`` into every file below ``root`` that lacks it."""
    return add_headers(_files_below(root, predicate, include, exclude), header, **kwargs)


def remove_headers_recursively(
    root: Path | str,
    header: Header,
    *,
    predicate: Callable[[Path], bool] | None = None,
    include: Iterable[str] = (),
    exclude: Iterable[str] = (),
    **kwargs: Any,
) -> RunSummary:
    """Remove ``header`` from every file below ``root`` that starts with it."""
    return remove_headers(_files_below(root, predicate, include, exclude), header, **kwargs)
