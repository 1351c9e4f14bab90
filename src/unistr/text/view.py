# unistr:header:start
#
#   project      : UniStr
#   file         : view.py
#   file_relpath : src/unistr/text/view.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""Borrowed views over runs of Unicode scalar values.

A `UnicodeStr` never owns storage. It is a ``(storage, start, stop)``
window created by slicing a buffer or another view, by
[`UnicodeString.as_view`][unistr.text.buffer.UnicodeString.as_view], or by
`UnicodeStr.from_chars` over a static tuple (which is what generated literal
modules use).

Slicing is O(1) and never copies::

    s = UnicodeString.from_text("Löwe 老虎 Léopard")
    assert s[0:1] == UnicodeString.from_text("L")
    assert s[1:6] == UnicodeString.from_text("öwe 老")
    s[3:100]  # SliceIndexError

Every operation first validates the view against its storage (see
[`unistr.text.storage`][unistr.text.storage]), so a view that outlived an
append or a mutable borrow of its buffer raises `StaleViewError` instead
of reading changed data.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from unistr.core.errors import ReadOnlyViewError, SliceIndexError
from unistr.core.ordering import Ordering, compare_scalars
from unistr.core.ranges import coerce_index, resolve
from unistr.text.scalar import check_scalar, scalars_from_iterable
from unistr.text.storage import Storage

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from unistr.core.ranges import SliceRange
    from unistr.text.buffer import UnicodeString
    from unistr.text.storage import Borrow


class UnicodeStr:
    """Borrowed, fixed-length window over scalar values.

    Views are created by slicing or by the classmethods below; the
    constructor is internal.

    Args:
        storage (Storage): Storage the view borrows from.
        start (int): Absolute start offset into ``storage.chars``.
        stop (int): Absolute exclusive end offset.
        borrow (Borrow | None): Writer borrow this view was derived from.
        writable (bool): Whether element assignment is allowed.
    """

    __slots__ = ("_borrow", "_epoch", "_start", "_stop", "_storage", "_writable")

    _EMPTY: ClassVar[UnicodeStr]

    _storage: Storage
    _start: int
    _stop: int
    _epoch: int
    _borrow: Borrow | None
    _writable: bool

    def __init__(
        self,
        storage: Storage,
        start: int,
        stop: int,
        *,
        borrow: Borrow | None = None,
        writable: bool = False,
    ) -> None:
        self._storage = storage
        self._start = start
        self._stop = stop
        self._epoch = storage.epoch
        self._borrow = borrow
        self._writable = writable

    # --- construction ---

    @classmethod
    def default(cls) -> UnicodeStr:
        """Return the shared empty view (no allocation)."""
        return cls._EMPTY

    @classmethod
    def from_chars(cls, chars: Sequence[str]) -> UnicodeStr:
        """Return a read-only view over a sequence of scalar values.

        A ``tuple`` is borrowed as is; any other sequence is copied into one.

        Raises:
            InvalidScalarError: If an element is not a scalar value.
        """
        if isinstance(chars, tuple):
            for ch in chars:
                check_scalar(ch)
            static: tuple[str, ...] = chars
        else:
            static = tuple(scalars_from_iterable(chars))
        return cls(Storage(static), 0, len(static))

    # --- accessors ---

    def _check(self) -> None:
        self._storage.validate(self._epoch, self._borrow)

    def _span(self) -> Sequence[str]:
        self._check()
        return self._storage.chars[self._start : self._stop]

    def chars(self) -> tuple[str, ...]:
        """Return the scalar values of this view.

        Remember that a scalar value might not match a reader's idea of a
        character: ``"y̆"`` is two scalar values, ``'y'`` and ``'\\u0306'``.
        """
        return tuple(self._span())

    content = chars

    def len(self) -> int:
        """Return the number of scalar values (not bytes)."""
        self._check()
        return self._stop - self._start

    length = len

    def __len__(self) -> int:
        return self.len()

    def is_empty(self) -> bool:
        """Return True if the view has length 0."""
        return self.len() == 0

    @property
    def writable(self) -> bool:
        """Whether elements can be assigned through this view."""
        return self._writable

    def as_readonly(self) -> UnicodeStr:
        """Return a shared reborrow of this view's span.

        A reborrow of a mutable view stays tied to its borrow and becomes stale
        once the borrow ends.
        """
        self._check()
        return UnicodeStr(self._storage, self._start, self._stop, borrow=self._borrow)

    # --- slicing ---

    def view_of(self, index: SliceRange | slice) -> UnicodeStr:
        """Return the sub-view selected by ``index`` in O(1).

        Args:
            index (SliceRange | slice): Any range value from
                [`unistr.core.ranges`][unistr.core.ranges] or a step-less slice.

        Returns:
            UnicodeStr: A view sharing this view's storage and mutability.

        Raises:
            SliceIndexError: If the range is inverted or extends past the end.
            SliceOverflowError: If a closed range ends at ``MAX_INDEX``.
        """
        self._check()
        begin, end = resolve(index, self._stop - self._start)
        return UnicodeStr(
            self._storage,
            self._start + begin,
            self._start + end,
            borrow=self._borrow,
            writable=self._writable,
        )

    def get(self, index: SliceRange | slice) -> UnicodeStr | None:
        """Return the sub-view selected by ``index``, or None if it is invalid."""
        self._check()
        try:
            return self.view_of(index)
        except (SliceIndexError, OverflowError):
            return None

    def _position(self, index: int) -> int:
        length: int = self._stop - self._start
        position: int = coerce_index(index, length=length)
        if position >= length:
            raise SliceIndexError(
                f"index {position} out of range for view of length {length}",
                begin=position,
                end=None,
                length=length,
            )
        return self._start + position

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, int):
            self._check()
            return self._storage.chars[self._position(index)]
        return self.view_of(index)

    def __setitem__(self, index: Any, value: Any) -> None:
        if not self._writable:
            raise ReadOnlyViewError("cannot assign through a shared view; use borrow_mut()")
        self._check()
        chars = self._storage.mutable_chars()
        if isinstance(index, int):
            chars[self._position(index)] = check_scalar(value)
            return
        begin, end = resolve(index, self._stop - self._start)
        values: list[str] = _scalars_of(value)
        if len(values) != end - begin:
            raise ValueError(
                f"replacement has {len(values)} scalar values, span has {end - begin}; "
                "a view cannot change length"
            )
        chars[self._start + begin : self._start + end] = values

    # --- conversions ---

    def to_owned(self) -> UnicodeString:
        """Return a new buffer holding a copy of this span."""
        from unistr.text.buffer import UnicodeString

        return UnicodeString._from_list(list(self._span()))

    def clone_into(self, target: UnicodeString) -> None:
        """Replace the content of ``target`` with a copy of this span."""
        target._replace(list(self._span()))

    def encode(self, encoding: str = "utf-8", errors: str = "strict") -> bytes:
        """Encode the span (UTF-8 by default)."""
        return str(self).encode(encoding, errors)

    def __iter__(self) -> Iterator[str]:
        return iter(self.chars())

    def __contains__(self, item: object) -> bool:
        return item in self._span()

    # --- comparison ---

    def cmp(self, other: UnicodeStr | UnicodeString) -> Ordering:
        """Three-way compare by code point."""
        return compare_scalars(self._span(), _span_of(other))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnicodeStr):
            return NotImplemented
        return _same_scalars(self._span(), other._span())

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, UnicodeStr):
            return NotImplemented
        return not _same_scalars(self._span(), other._span())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, UnicodeStr):
            return NotImplemented
        return self.cmp(other) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, UnicodeStr):
            return NotImplemented
        return self.cmp(other) is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, UnicodeStr):
            return NotImplemented
        return self.cmp(other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, UnicodeStr):
            return NotImplemented
        return self.cmp(other) is not Ordering.LESS

    __hash__ = None  # type: ignore[assignment]

    # --- formatting ---

    def __str__(self) -> str:
        return "".join(self._span())

    # Debug and display render the same text.
    __repr__ = __str__

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


UnicodeStr._EMPTY = UnicodeStr(Storage(()), 0, 0)


def _same_scalars(left: Sequence[str], right: Sequence[str]) -> bool:
    # Static storage is a tuple and buffer storage a list.
    return len(left) == len(right) and all(a == b for a, b in zip(left, right))


def _span_of(value: UnicodeStr | UnicodeString) -> Sequence[str]:
    if isinstance(value, UnicodeStr):
        return value._span()
    return value.as_view()._span()


def _scalars_of(value: object) -> list[str]:
    if isinstance(value, UnicodeStr):
        return list(value._span())
    if hasattr(value, "as_view"):
        return list(value.as_view()._span())  # type: ignore[attr-defined]
    return scalars_from_iterable(value)  # type: ignore[arg-type]
