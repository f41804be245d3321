# topmark:header:start
#
#   project      : fileheader
#   file         : colored_enum.py
#   file_relpath : src/fileheader/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enums that carry a colorizer for terminal output.

`ColoredStrEnum` members are plain strings (their ``.value``) with a
colorizer attached separately, so Enum hashing, equality and ``repr`` are
unaffected. Colorizers are any callables compatible with
`yachalk.ChalkBuilder.__call__`.

Example:
    ```python
    from yachalk import chalk

    class Verdict(ColoredStrEnum):
        OK = ("ok", chalk.green)
        BAD = ("bad", chalk.red_bright)

    Verdict.OK.color("done")  # green "done"
    ```
"""

from __future__ import annotations

from enum import Enum
from functools import cached_property
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and join ``args`` with ``sep``."""
        ...


class ColoredStrEnum(str, Enum):
    """String enum whose members carry an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Create a member with textual value ``text`` and colorizer ``color``."""
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """The textual value of the member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """The colorizer associated with the member."""
        return self._color

    @cached_property
    def value_length(self) -> int:
        """Length of the longest ``.value`` in this enum, for aligned output."""
        return max(len(member.value) for member in type(self))
