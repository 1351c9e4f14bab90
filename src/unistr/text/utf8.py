# unistr:header:start
#
#   project      : UniStr
#   file         : utf8.py
#   file_relpath : src/unistr/text/utf8.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""UTF-8 decoding boundary.

Decoding is delegated to Python's ``utf-8`` codec, which rejects overlong
forms and encoded surrogates, so its output is always made of scalar
values. A failure is reported as `FromUtf8Error`, which carries the input
bytes back unchanged together with a `Utf8Error` describing where and why
decoding stopped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from unistr.config.logging import get_logger
from unistr.core.errors import UnistrError

if TYPE_CHECKING:
    from unistr.config.logging import UnistrLogger

logger: UnistrLogger = get_logger(__name__)

# Reason reported by the codec when the input stops inside a sequence.
_INCOMPLETE_REASON: str = "unexpected end of data"

BytesLike = bytes | bytearray | memoryview


@dataclass(frozen=True, slots=True)
class Utf8Error:
    """Where and why a byte sequence stopped being valid UTF-8.

    Attributes:
        valid_up_to (int): Length of the longest valid prefix, in bytes.
        error_len (int | None): Length of the invalid sequence at ``valid_up_to``
            (1 to 3), or None if the input ended in the middle of a sequence
            that more bytes could complete.
        reason (str): Codec diagnostic (e.g. ``"invalid start byte"``).
    """

    valid_up_to: int
    error_len: int | None
    reason: str = ""

    @classmethod
    def from_decode_error(cls, exc: UnicodeDecodeError) -> Utf8Error:
        """Build a `Utf8Error` from the codec's ``UnicodeDecodeError``."""
        incomplete: bool = exc.reason == _INCOMPLETE_REASON and exc.end == len(exc.object)
        return cls(
            valid_up_to=exc.start,
            error_len=None if incomplete else exc.end - exc.start,
            reason=exc.reason,
        )

    def __str__(self) -> str:
        if self.error_len is None:
            return f"incomplete utf-8 byte sequence from index {self.valid_up_to}"
        return f"invalid utf-8 sequence of {self.error_len} bytes from index {self.valid_up_to}"


class FromUtf8Error(UnistrError, ValueError):
    """Bytes that could not be converted to a buffer.

    The rejected input is kept so nothing is lost; retry with repaired bytes
    or fall back to
    [`UnicodeString.from_utf8_lossy`][unistr.text.buffer.UnicodeString.from_utf8_lossy].

    Example:
        ```python
        result = UnicodeString.try_from_utf8(b"\\x00\\x9f")
        assert isinstance(result, FromUtf8Error)
        assert result.into_bytes() == b"\\x00\\x9f"
        ```

    Args:
        data (bytes): The bytes that failed to decode.
        error (Utf8Error): The decode diagnostic.
    """

    def __init__(self, data: bytes, error: Utf8Error) -> None:
        super().__init__(str(error))
        self._bytes: bytes = data
        self._error: Utf8Error = error

    def as_bytes(self) -> bytes:
        """Return the bytes that were attempted to convert."""
        return self._bytes

    def into_bytes(self) -> bytes:
        """Return the bytes that were attempted to convert.

        Bytes are immutable, so this is the same object as `as_bytes`; both
        names are kept for callers that think in terms of moving the input back.
        """
        return self._bytes

    def utf8_error(self) -> Utf8Error:
        """Return the low-level decode diagnostic."""
        return self._error

    @property
    def valid_up_to(self) -> int:
        """Length of the longest valid prefix, in bytes."""
        return self._error.valid_up_to

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FromUtf8Error):
            return NotImplemented
        return self._bytes == other._bytes and self._error == other._error

    def __hash__(self) -> int:
        return hash((self._bytes, self._error))

    def __reduce__(self) -> tuple[type[FromUtf8Error], tuple[bytes, Utf8Error]]:
        return (type(self), (self._bytes, self._error))


def decode_utf8(data: BytesLike) -> str:
    """Decode ``data`` as strict UTF-8.

    Args:
        data (BytesLike): Encoded input.

    Returns:
        str: The decoded text (never contains surrogates).

    Raises:
        FromUtf8Error: If ``data`` is not valid UTF-8.
    """
    raw: bytes = bytes(data)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        error = Utf8Error.from_decode_error(exc)
        logger.debug("UTF-8 decode failed after %d valid bytes: %s", error.valid_up_to, exc.reason)
        raise FromUtf8Error(raw, error) from exc


def decode_utf8_lossy(data: BytesLike) -> str:
    """Decode ``data`` as UTF-8, replacing invalid sequences with U+FFFD."""
    return bytes(data).decode("utf-8", errors="replace")
