# unistr:header:start
#
#   project      : UniStr
#   file         : ranges.py
#   file_relpath : src/unistr/core/ranges.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""Range values accepted by view slicing, and their bounds policy.

Indices address whole scalar values, so every position from ``0`` to
``length`` is a legal cut point. Each range shape is rewritten into a
half-open ``[begin, end)`` pair and checked with a single rule:
``begin <= end <= length``.

Shapes:
    - `RangeFull` (``..``): the whole span; never fails.
    - `Range` (``begin..end``): half-open.
    - `RangeFrom` (``begin..``): rewritten to ``[begin, length)``.
    - `RangeTo` (``..end``): rewritten to ``[0, end)``.
    - `RangeInclusive` (``begin..=end``): rewritten to ``[begin, end + 1)``.
    - `RangeToInclusive` (``..=end``): rewritten to ``[0, end + 1)``.

The two closed shapes fail with `SliceOverflowError` when ``end`` equals
`MAX_INDEX`, whatever the length of the view, because ``end + 1`` would not
be a valid index.

Python ``slice`` objects map onto the open shapes (``v[a:b]``, ``v[a:]``,
``v[:b]``, ``v[:]``) through `from_slice`. Negative slice bounds are not
wrapped around: they are invalid ranges like any other negative endpoint.
"""

from __future__ import annotations

import operator
import re
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Union

from unistr.core.errors import SliceIndexError, SliceOverflowError

if TYPE_CHECKING:
    from collections.abc import Iterator

# Largest index a Python sequence accepts (``Py_ssize_t`` max).
MAX_INDEX: Final[int] = sys.maxsize


def _fail_order(begin: int, end: int, length: int) -> SliceIndexError:
    return SliceIndexError(
        f"slice index starts at {begin} but ends at {end}",
        begin=begin,
        end=end,
        length=length,
    )


def _fail_end(begin: int, end: int, length: int) -> SliceIndexError:
    return SliceIndexError(
        f"range end index {end} out of range for view of length {length}",
        begin=begin,
        end=end,
        length=length,
    )


def _fail_overflow() -> SliceOverflowError:
    return SliceOverflowError("attempted to index view up to maximum index")


def coerce_index(value: object, *, length: int) -> int:
    """Return ``value`` as a non-negative index no larger than `MAX_INDEX`.

    Args:
        value (object): Any object implementing ``__index__``.
        length (int): Length of the view being indexed (for diagnostics).

    Returns:
        int: The validated index.

    Raises:
        TypeError: If ``value`` is not an integer.
        SliceIndexError: If ``value`` is negative or above `MAX_INDEX`.
    """
    index: int = operator.index(value)  # type: ignore[arg-type]
    if index < 0 or index > MAX_INDEX:
        raise SliceIndexError(
            f"index {index} is not a valid position (0..={MAX_INDEX})",
            begin=index,
            end=None,
            length=length,
        )
    return index


def check_half_open(begin: int, end: int, length: int) -> tuple[int, int]:
    """Validate a half-open range against a view length.

    Args:
        begin (int): Inclusive start.
        end (int): Exclusive end.
        length (int): Length of the view being indexed.

    Returns:
        tuple[int, int]: ``(begin, end)`` unchanged.

    Raises:
        SliceIndexError: If ``begin > end`` or ``end > length``.
    """
    if begin > end:
        raise _fail_order(begin, end, length)
    if end > length:
        raise _fail_end(begin, end, length)
    return begin, end


@dataclass(frozen=True, slots=True)
class RangeFull:
    """The unbounded range ``..``: selects the whole span."""

    def bounds(self, length: int) -> tuple[int, int]:
        """Return ``(0, length)``; never fails."""
        return 0, length

    def __str__(self) -> str:
        return ".."


@dataclass(frozen=True, slots=True)
class Range:
    """Half-open range ``begin..end``."""

    begin: int
    end: int

    def bounds(self, length: int) -> tuple[int, int]:
        """Return the validated ``(begin, end)`` pair for a view of ``length``."""
        begin: int = coerce_index(self.begin, length=length)
        end: int = coerce_index(self.end, length=length)
        return check_half_open(begin, end, length)

    def __str__(self) -> str:
        return f"{self.begin}..{self.end}"


@dataclass(frozen=True, slots=True)
class RangeFrom:
    """Range ``begin..`` extending to the end of the view."""

    begin: int

    def bounds(self, length: int) -> tuple[int, int]:
        """Return ``(begin, length)`` once ``begin <= length`` is checked."""
        begin: int = coerce_index(self.begin, length=length)
        return check_half_open(begin, length, length)

    def __str__(self) -> str:
        return f"{self.begin}.."


@dataclass(frozen=True, slots=True)
class RangeTo:
    """Range ``..end`` starting at the beginning of the view."""

    end: int

    def bounds(self, length: int) -> tuple[int, int]:
        """Return ``(0, end)`` once ``end <= length`` is checked."""
        end: int = coerce_index(self.end, length=length)
        return check_half_open(0, end, length)

    def __str__(self) -> str:
        return f"..{self.end}"


@dataclass(slots=True)
class RangeInclusive:
    """Closed range ``begin..=end``.

    Instances are also iterators over the positions they cover. Iteration
    advances ``start`` and, once the last position has been produced, sets
    the persistent ``exhausted`` flag. A drained range used as a slice index
    selects the empty range ``[end + 1, end + 1)``; a partially drained one
    selects ``[start, end + 1)``.

    Attributes:
        start (int): Current start position (advances during iteration).
        end (int): Inclusive end position.
        exhausted (bool): Whether iteration has produced ``end`` already.
    """

    start: int
    end: int
    exhausted: bool = False

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if self.exhausted or self.start > self.end:
            raise StopIteration
        current: int = self.start
        if current < self.end:
            self.start = current + 1
        else:
            self.exhausted = True
        return current

    def is_empty(self) -> bool:
        """Return True if iterating this range would produce nothing."""
        return self.exhausted or self.start > self.end

    def bounds(self, length: int) -> tuple[int, int]:
        """Return the half-open equivalent of this closed range.

        Raises:
            SliceOverflowError: If ``end`` equals `MAX_INDEX`.
            SliceIndexError: If the rewritten range is invalid for ``length``.
        """
        end: int = coerce_index(self.end, length=length)
        if end == MAX_INDEX:
            raise _fail_overflow()
        exclusive_end: int = end + 1
        begin: int = (
            exclusive_end if self.exhausted else coerce_index(self.start, length=length)
        )
        return check_half_open(begin, exclusive_end, length)

    def __str__(self) -> str:
        return f"{self.start}..={self.end}"


@dataclass(frozen=True, slots=True)
class RangeToInclusive:
    """Closed range ``..=end`` starting at the beginning of the view."""

    end: int

    def bounds(self, length: int) -> tuple[int, int]:
        """Return ``(0, end + 1)``; same overflow rule as `RangeInclusive`."""
        end: int = coerce_index(self.end, length=length)
        if end == MAX_INDEX:
            raise _fail_overflow()
        return check_half_open(0, end + 1, length)

    def __str__(self) -> str:
        return f"..={self.end}"


SliceRange = Union[RangeFull, Range, RangeFrom, RangeTo, RangeInclusive, RangeToInclusive]

FULL: Final[RangeFull] = RangeFull()


def from_slice(index: slice) -> SliceRange:
    """Map a Python ``slice`` onto the matching open range shape.

    Args:
        index (slice): A slice with ``step`` left unset.

    Returns:
        SliceRange: `RangeFull`, `Range`, `RangeFrom` or `RangeTo`.

    Raises:
        TypeError: If the slice carries a step.
    """
    if index.step is not None:
        raise TypeError(f"views do not support stepped slices (step={index.step!r})")
    start, stop = index.start, index.stop
    if start is None and stop is None:
        return FULL
    if start is None:
        return RangeTo(stop)
    if stop is None:
        return RangeFrom(start)
    return Range(start, stop)


def resolve(index: SliceRange | slice, length: int) -> tuple[int, int]:
    """Return the validated half-open bounds selected by ``index``.

    Args:
        index (SliceRange | slice): A range value or a Python slice.
        length (int): Length of the view being indexed.

    Returns:
        tuple[int, int]: ``(begin, end)`` with ``0 <= begin <= end <= length``.

    Raises:
        TypeError: If ``index`` is not a supported range value.
    """
    if isinstance(index, slice):
        index = from_slice(index)
    if not isinstance(
        index, (RangeFull, Range, RangeFrom, RangeTo, RangeInclusive, RangeToInclusive)
    ):
        raise TypeError(f"view indices must be ranges or slices, not {type(index).__name__}")
    return index.bounds(length)


_RANGE_RE: re.Pattern[str] = re.compile(r"^\s*(?P<begin>\d+)?\s*\.\.(?P<eq>=)?\s*(?P<end>\d+)?\s*$")


def parse_range(text: str) -> SliceRange:
    """Parse range syntax (``a..b``, ``a..``, ``..b``, ``..``, ``a..=b``, ``..=b``).

    Args:
        text (str): The range expression.

    Returns:
        SliceRange: The parsed range value.

    Raises:
        ValueError: If ``text`` is not a range expression.
    """
    m: re.Match[str] | None = _RANGE_RE.match(text)
    if m is None:
        raise ValueError(f"not a range expression: {text!r}")
    begin_s, end_s = m.group("begin"), m.group("end")
    begin: int | None = int(begin_s) if begin_s is not None else None
    end: int | None = int(end_s) if end_s is not None else None
    if m.group("eq"):
        if end is None:
            raise ValueError(f"closed range needs an end: {text!r}")
        return RangeToInclusive(end) if begin is None else RangeInclusive(begin, end)
    if begin is None and end is None:
        return FULL
    if begin is None:
        assert end is not None
        return RangeTo(end)
    if end is None:
        return RangeFrom(begin)
    return Range(begin, end)
