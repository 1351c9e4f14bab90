# unistr:header:start
#
#   project      : UniStr
#   file         : ordering.py
#   file_relpath : src/unistr/core/ordering.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""Three-way comparison results.

Text is ordered lexicographically by code point. This is the order of the
Unicode code charts, not a culturally correct collation.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class Ordering(IntEnum):
    """Result of a three-way comparison."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @property
    def label(self) -> str:
        """Lower-case name used in CLI output."""
        return self.name.lower()

    def reverse(self) -> Ordering:
        """Return the ordering seen from the other operand."""
        return Ordering(-self.value)


def compare_scalars(left: Sequence[str], right: Sequence[str]) -> Ordering:
    """Compare two scalar-value sequences lexicographically by code point.

    A shorter sequence that is a prefix of the longer one orders first.
    """
    for a, b in zip(left, right):
        if a != b:
            return Ordering.LESS if a < b else Ordering.GREATER
    if len(left) == len(right):
        return Ordering.EQUAL
    return Ordering.LESS if len(left) < len(right) else Ordering.GREATER
