# unistr:header:start
#
#   project      : UniStr
#   file         : errors.py
#   file_relpath : src/unistr/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""Exception taxonomy for UniStr.

Indexing and aliasing failures signal programmer error at the call site and
are raised, never returned. Each exception also derives from the closest
builtin so that generic ``except IndexError`` style handlers keep working:

- `SliceIndexError` (``IndexError``): inverted or out-of-bounds range.
- `SliceOverflowError` (``OverflowError``): closed range ending at
  [`MAX_INDEX`][unistr.core.ranges.MAX_INDEX].
- `InvalidScalarError` (``ValueError``): input is not a Unicode scalar value.
- `BorrowError` (``RuntimeError``): the single-writer discipline was violated.
- `StaleViewError` (``BorrowError``): a view outlived the shape of its storage.
- `ReadOnlyViewError` (``TypeError``): assignment through a shared view.
- `ConfigError` and `CodegenError` (``ValueError``): code generator settings and
  literal names that cannot be used.

Decode failures live in [`unistr.text.utf8`][unistr.text.utf8] because they
carry the rejected input back to the caller.
"""

from __future__ import annotations


class UnistrError(Exception):
    """Base class for all UniStr errors."""


class SliceIndexError(UnistrError, IndexError):
    """A range is inverted, negative, or extends past the end of a view.

    Attributes:
        begin (int | None): Start of the offending range (None if the start was open).
        end (int | None): Exclusive end of the offending range (None for scalar indices).
        length (int): Length of the view that was indexed.
    """

    begin: int | None
    end: int | None
    length: int

    def __init__(self, message: str, *, begin: int | None, end: int | None, length: int) -> None:
        super().__init__(message)
        self.begin = begin
        self.end = end
        self.length = length


class SliceOverflowError(UnistrError, OverflowError):
    """A closed range ends at the maximum index, so ``end + 1`` is not representable."""


class InvalidScalarError(UnistrError, ValueError):
    """A value is not a single Unicode scalar value."""


class BorrowError(UnistrError, RuntimeError):
    """Storage was accessed in a way that breaks the single-writer discipline."""


class StaleViewError(BorrowError):
    """A view was used after its storage changed or its borrow ended."""


class ReadOnlyViewError(UnistrError, TypeError):
    """An element assignment was attempted through a shared (read-only) view."""


class ConfigError(UnistrError, ValueError):
    """A configuration source is unreadable or holds values of the wrong type."""


class CodegenError(UnistrError, ValueError):
    """Literal definitions cannot be turned into a Python module."""
