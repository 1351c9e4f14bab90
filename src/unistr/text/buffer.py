# unistr:header:start
#
#   project      : UniStr
#   file         : buffer.py
#   file_relpath : src/unistr/text/buffer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""Owned, growable buffers of Unicode scalar values.

`UnicodeString` owns its storage and contributes construction, UTF-8
validation, capacity management and appends. Everything else (slicing,
comparison, formatting) goes through a full-span
[`UnicodeStr`][unistr.text.view.UnicodeStr] obtained from `as_view` (shared)
or `borrow_mut` (exclusive).

Capacity is tracked explicitly and grows by doubling, with a minimum
non-zero capacity of 4 scalar values. Any mutation that changes the length,
and every mutable borrow, moves the storage to a new epoch, so views taken
before it raise
[`StaleViewError`][unistr.core.errors.StaleViewError] on their next use.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from unistr.config.logging import get_logger
from unistr.core.errors import BorrowError
from unistr.core.ordering import Ordering
from unistr.text.scalar import check_scalar, scalars_from_iterable, scalars_from_text
from unistr.text.storage import Storage
from unistr.text.utf8 import FromUtf8Error, decode_utf8, decode_utf8_lossy
from unistr.text.view import UnicodeStr

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from unistr.config.logging import UnistrLogger
    from unistr.core.ranges import SliceRange
    from unistr.text.utf8 import BytesLike

logger: UnistrLogger = get_logger(__name__)

MIN_NON_ZERO_CAPACITY: int = 4


class UnicodeString:
    """Owned, growable sequence of scalar values.

    Example:
        ```python
        s = UnicodeString.from_text("abc")
        s.push("1")
        assert str(s) == "abc1"
        assert s[1:3] == UnicodeString.from_text("bc")
        with s.borrow_mut() as view:
            view[0] = "A"
        assert str(s) == "Abc1"
        ```
    """

    __slots__ = ("_capacity", "_storage")

    _storage: Storage
    _capacity: int

    def __init__(self) -> None:
        self._storage = Storage([])
        self._capacity = 0

    # --- construction ---

    @classmethod
    def new(cls) -> UnicodeString:
        """Return an empty buffer; nothing is reserved until the first append."""
        return cls()

    @classmethod
    def with_capacity(cls, capacity: int) -> UnicodeString:
        """Return an empty buffer able to hold ``capacity`` scalar values without growing.

        Raises:
            ValueError: If ``capacity`` is negative.
        """
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0 (got {capacity})")
        buf = cls()
        buf._capacity = capacity
        return buf

    @classmethod
    def _from_list(cls, chars: list[str]) -> UnicodeString:
        """Adopt an already checked list of scalar values."""
        buf = cls()
        buf._storage.chars = chars
        buf._capacity = len(chars)
        return buf

    @classmethod
    def from_text(cls, text: str | BytesLike) -> UnicodeString:
        """Return a buffer holding a copy of ``text``.

        ``str`` input is copied code point by code point; bytes-like input is
        decoded as UTF-8.

        Raises:
            InvalidScalarError: If ``text`` contains a surrogate code point.
            FromUtf8Error: If bytes-like input is not valid UTF-8.
        """
        if isinstance(text, str):
            return cls._from_list(scalars_from_text(text))
        return cls.from_utf8(text)

    @classmethod
    def from_string(cls, text: str) -> UnicodeString:
        """Return a buffer holding a copy of ``text``."""
        return cls._from_list(scalars_from_text(text))

    @classmethod
    def from_chars(cls, chars: Iterable[str]) -> UnicodeString:
        """Return a buffer holding a copy of the given scalar values."""
        return cls._from_list(scalars_from_iterable(chars))

    @classmethod
    def from_utf8(cls, data: BytesLike) -> UnicodeString:
        """Decode UTF-8 bytes into a new buffer.

        Raises:
            FromUtf8Error: If ``data`` is not valid UTF-8. The error keeps ``data``.
        """
        # The codec never yields surrogates, so the result needs no further checks.
        return cls._from_list(list(decode_utf8(data)))

    @classmethod
    def try_from_utf8(cls, data: BytesLike) -> UnicodeString | FromUtf8Error:
        """Decode UTF-8 bytes, returning the failure as a value instead of raising.

        Example:
            ```python
            ok = UnicodeString.try_from_utf8(bytes([240, 159, 146, 150]))
            assert isinstance(ok, UnicodeString) and ok.len() == 1

            err = UnicodeString.try_from_utf8(bytes([0, 159]))
            assert isinstance(err, FromUtf8Error)
            assert err.into_bytes() == bytes([0, 159])
            ```
        """
        try:
            return cls.from_utf8(data)
        except FromUtf8Error as exc:
            return exc

    @classmethod
    def from_utf8_lossy(cls, data: BytesLike) -> UnicodeString:
        """Decode UTF-8 bytes, replacing invalid sequences with U+FFFD."""
        return cls._from_list(list(decode_utf8_lossy(data)))

    # --- capacity ---

    def capacity(self) -> int:
        """Return how many scalar values fit before the next reallocation."""
        return self._capacity

    def _grow_to(self, needed: int) -> None:
        if needed <= self._capacity:
            return
        new_capacity: int = max(self._capacity * 2, needed, MIN_NON_ZERO_CAPACITY)
        logger.debug("reallocating buffer %#x: %d -> %d", id(self), self._capacity, new_capacity)
        self._capacity = new_capacity

    def reserve(self, additional: int) -> None:
        """Make room for at least ``additional`` more scalar values.

        A reallocation invalidates existing views even though the length is
        unchanged.
        """
        if additional < 0:
            raise ValueError(f"additional must be >= 0 (got {additional})")
        self._storage.ensure_unborrowed("reserve")
        needed: int = len(self._storage.chars) + additional
        if needed > self._capacity:
            self._grow_to(needed)
            self._storage.bump()

    # --- mutation ---

    def _chars(self, operation: str) -> list[str]:
        self._storage.ensure_unborrowed(operation)
        return self._storage.chars  # type: ignore[return-value]

    def push(self, ch: str) -> None:
        """Append one scalar value.

        Raises:
            InvalidScalarError: If ``ch`` is not a scalar value.
            BorrowError: If the buffer is mutably borrowed.
        """
        value: str = check_scalar(ch)
        chars: list[str] = self._chars("push")
        self._grow_to(len(chars) + 1)
        chars.append(value)
        self._storage.bump()

    append = push

    def extend(self, chars: Iterable[str]) -> None:
        """Append every scalar value of ``chars`` (a ``str``, view, buffer or iterable)."""
        if isinstance(chars, UnicodeStr):
            values: list[str] = list(chars.chars())
        elif isinstance(chars, UnicodeString):
            values = list(chars.as_view().chars())
        else:
            values = scalars_from_iterable(chars)
        target: list[str] = self._chars("extend")
        self._grow_to(len(target) + len(values))
        target.extend(values)
        self._storage.bump()

    def pop(self) -> str | None:
        """Remove and return the last scalar value, or None if empty."""
        chars: list[str] = self._chars("pop")
        if not chars:
            return None
        value: str = chars.pop()
        self._storage.bump()
        return value

    def truncate(self, new_len: int) -> None:
        """Shorten the buffer to ``new_len``; no effect if it is already shorter.

        Raises:
            ValueError: If ``new_len`` is negative.
        """
        if new_len < 0:
            raise ValueError(f"new_len must be >= 0 (got {new_len})")
        chars: list[str] = self._chars("truncate")
        if new_len < len(chars):
            del chars[new_len:]
            self._storage.bump()

    def clear(self) -> None:
        """Remove all content, keeping the capacity."""
        self.truncate(0)

    def _replace(self, chars: list[str]) -> None:
        self._chars("replace content")
        self._grow_to(len(chars))
        self._storage.chars = chars
        self._storage.bump()

    # --- borrowing ---

    def as_view(self) -> UnicodeStr:
        """Return a shared view over the whole content.

        Raises:
            BorrowError: If the buffer is mutably borrowed.
        """
        self._storage.ensure_unborrowed("borrow")
        return UnicodeStr(self._storage, 0, len(self._storage.chars))

    @contextmanager
    def borrow_mut(self) -> Iterator[UnicodeStr]:
        """Borrow the whole content exclusively for in-place writes.

        The yielded view (and any sub-view cut from it) can assign elements
        but never change length. It becomes stale when the block exits.

        Raises:
            BorrowError: If the buffer is already mutably borrowed.
        """
        borrow = self._storage.acquire_writer()
        try:
            yield UnicodeStr(
                self._storage,
                0,
                len(self._storage.chars),
                borrow=borrow,
                writable=True,
            )
        finally:
            self._storage.release_writer(borrow)

    @property
    def is_borrowed_mut(self) -> bool:
        """Whether a writer borrow is active."""
        return self._storage.writer is not None

    # --- forwarding to the full-span view ---

    def len(self) -> int:
        """Return the number of scalar values (not bytes)."""
        return self.as_view().len()

    length = len

    def __len__(self) -> int:
        return self.len()

    def is_empty(self) -> bool:
        """Return True if the buffer has length 0."""
        return self.len() == 0

    def chars(self) -> tuple[str, ...]:
        """Return the scalar values of the buffer."""
        return self.as_view().chars()

    def view_of(self, index: SliceRange | slice) -> UnicodeStr:
        """Return a shared sub-view; see [`UnicodeStr.view_of`][unistr.text.view.UnicodeStr.view_of]."""
        return self.as_view().view_of(index)

    def __getitem__(self, index: Any) -> Any:
        return self.as_view()[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        with self.borrow_mut() as view:
            view[index] = value

    def __iter__(self) -> Iterator[str]:
        return iter(self.as_view())

    def __contains__(self, item: object) -> bool:
        return item in self.as_view()

    def encode(self, encoding: str = "utf-8", errors: str = "strict") -> bytes:
        """Encode the content (UTF-8 by default)."""
        return self.as_view().encode(encoding, errors)

    def into_bytes(self) -> bytes:
        """Return the UTF-8 encoding of the content."""
        return self.encode()

    def cmp(self, other: UnicodeStr | UnicodeString) -> Ordering:
        """Three-way compare by code point."""
        return self.as_view().cmp(other)

    def __eq__(self, other: object) -> bool:
        view: UnicodeStr | None = _as_view(other)
        if view is None:
            return NotImplemented
        return self.as_view() == view

    def __ne__(self, other: object) -> bool:
        view: UnicodeStr | None = _as_view(other)
        if view is None:
            return NotImplemented
        return self.as_view() != view

    def __lt__(self, other: object) -> bool:
        view: UnicodeStr | None = _as_view(other)
        if view is None:
            return NotImplemented
        return self.cmp(view) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        view: UnicodeStr | None = _as_view(other)
        if view is None:
            return NotImplemented
        return self.cmp(view) is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        view: UnicodeStr | None = _as_view(other)
        if view is None:
            return NotImplemented
        return self.cmp(view) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        view: UnicodeStr | None = _as_view(other)
        if view is None:
            return NotImplemented
        return self.cmp(view) is not Ordering.LESS

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return str(self.as_view())

    __repr__ = __str__

    def __format__(self, format_spec: str) -> str:
        return format(self.as_view(), format_spec)

    # --- copying ---

    def clone(self) -> UnicodeString:
        """Return an independent buffer with the same content."""
        return self.as_view().to_owned()

    def __copy__(self) -> UnicodeString:
        return self.clone()

    def __deepcopy__(self, memo: dict[int, Any]) -> UnicodeString:
        return self.clone()

    def __reduce__(self) -> tuple[Any, tuple[list[str]]]:
        if self._storage.writer is not None:
            raise BorrowError("cannot pickle a mutably borrowed buffer")
        return (UnicodeString.from_chars, (list(self._storage.chars),))


def _as_view(value: object) -> UnicodeStr | None:
    if isinstance(value, UnicodeStr):
        return value
    if isinstance(value, UnicodeString):
        return value.as_view()
    return None
