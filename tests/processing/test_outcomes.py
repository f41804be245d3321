# topmark:header:start
#
#   project      : fileheader
#   file         : test_outcomes.py
#   file_relpath : tests/processing/test_outcomes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for outcome kinds and per-file outcomes."""

from __future__ import annotations

from pathlib import Path

from fileheader.core.errors import BinaryFileError, WriteError
from fileheader.processing.outcomes import OutcomeKind, ProcessOutcome


def test_outcome_kind_values() -> None:
    assert [k.value for k in OutcomeKind] == [
        "already present",
        "inserted",
        "missing",
        "removed",
        "failed",
    ]
    assert OutcomeKind.MISSING == "missing"
    assert OutcomeKind.INSERTED.value_length == len("already present")


def test_describe() -> None:
    assert ProcessOutcome(OutcomeKind.INSERTED).describe() == "inserted"
    failed = ProcessOutcome.failed(WriteError(Path("a.py"), "disk full"))
    assert failed.is_failure
    assert not failed.is_binary
    assert failed.describe() == "failed: disk full"
    assert str(failed.error) == "a.py: disk full"


def test_binary_outcome() -> None:
    outcome = ProcessOutcome.failed(BinaryFileError(Path("x"), "binary"))
    assert outcome.is_binary
    assert outcome.kind is OutcomeKind.FAILED
