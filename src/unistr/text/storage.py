# unistr:header:start
#
#   project      : UniStr
#   file         : storage.py
#   file_relpath : src/unistr/text/storage.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""Shared storage bookkeeping for buffers and views.

Python cannot prove statically that a view never outlives the shape of the
buffer it was cut from, so the discipline is enforced at runtime:

- `Storage.epoch` is a generation counter. Every length-changing mutation
  bumps it; a view remembers the epoch it was created under and refuses to
  read once the two differ.
- `Storage.writer` holds at most one active `Borrow`. Starting a writer
  bumps the epoch, so shared views cut before it never read again; while the
  writer exists the owner refuses new views and length changes.

Views hold ``(storage, start, stop, epoch)`` and never copy on slicing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from unistr.config.logging import get_logger
from unistr.core.errors import BorrowError, StaleViewError

if TYPE_CHECKING:
    from collections.abc import MutableSequence, Sequence

    from unistr.config.logging import UnistrLogger

logger: UnistrLogger = get_logger(__name__)


class Borrow:
    """Token for the single active writer of a `Storage`.

    Attributes:
        active (bool): False once the borrow has been released.
    """

    __slots__ = ("active",)

    active: bool

    def __init__(self) -> None:
        self.active = True


class Storage:
    """Scalar values plus the epoch and writer state that guard them.

    Args:
        chars (Sequence[str]): Backing sequence. Buffers pass a ``list`` they own;
            static literals pass a ``tuple``.

    Attributes:
        chars (Sequence[str]): The backing sequence.
        epoch (int): Generation counter, bumped on every length change and
            every writer borrow.
        writer (Borrow | None): The active writer borrow, if any.
    """

    __slots__ = ("chars", "epoch", "writer")

    chars: Sequence[str]
    epoch: int
    writer: Borrow | None

    def __init__(self, chars: Sequence[str]) -> None:
        self.chars = chars
        self.epoch = 0
        self.writer = None

    @property
    def is_static(self) -> bool:
        """Return True if the backing sequence is immutable."""
        return isinstance(self.chars, tuple)

    def mutable_chars(self) -> MutableSequence[str]:
        """Return the backing sequence for in-place writes.

        Raises:
            BorrowError: If the storage is static.
        """
        if self.is_static:
            raise BorrowError("static storage cannot be written")
        return self.chars  # type: ignore[return-value]

    def bump(self) -> None:
        """Invalidate every view created under the current epoch."""
        self.epoch += 1
        logger.trace("storage %#x moved to epoch %d", id(self), self.epoch)

    def ensure_unborrowed(self, operation: str) -> None:
        """Raise if a writer borrow is active.

        Args:
            operation (str): Name of the attempted operation, for the message.

        Raises:
            BorrowError: If a writer borrow is active.
        """
        if self.writer is not None:
            raise BorrowError(f"cannot {operation}: storage is mutably borrowed")

    def acquire_writer(self) -> Borrow:
        """Start the single writer borrow.

        Returns:
            Borrow: The new borrow token.

        Raises:
            BorrowError: If another writer borrow is active or the storage is static.
        """
        if self.is_static:
            raise BorrowError("static storage cannot be borrowed mutably")
        self.ensure_unborrowed("borrow mutably")
        self.bump()
        borrow = Borrow()
        self.writer = borrow
        logger.trace("storage %#x mutably borrowed", id(self))
        return borrow

    def release_writer(self, borrow: Borrow) -> None:
        """End ``borrow``; views created from it become stale."""
        borrow.active = False
        if self.writer is borrow:
            self.writer = None
            logger.trace("storage %#x borrow released", id(self))

    def validate(self, epoch: int, borrow: Borrow | None) -> None:
        """Check that a view created under ``epoch``/``borrow`` may still be used.

        Args:
            epoch (int): Epoch recorded by the view.
            borrow (Borrow | None): Writer borrow the view was derived from, if any.

        Raises:
            StaleViewError: If the storage changed shape or was borrowed mutably after
                the view was cut, or the view's borrow ended.
            BorrowError: If a shared view is used while a writer borrow is active.
        """
        if epoch != self.epoch:
            logger.trace("stale view: epoch %d, storage at %d", epoch, self.epoch)
            raise StaleViewError(
                f"view created at epoch {epoch} used after its storage changed "
                f"shape or was mutably borrowed (now epoch {self.epoch})"
            )
        if borrow is None:
            if self.writer is not None:
                raise BorrowError("cannot read through a shared view: storage is mutably borrowed")
        elif not borrow.active:
            raise StaleViewError("view used after its mutable borrow ended")
