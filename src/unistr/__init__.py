# unistr:header:start
#
#   project      : UniStr
#   file         : __init__.py
#   file_relpath : src/unistr/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""UniStr package.

UniStr provides Unicode text as decoded scalar values: an owned, growable
`UnicodeString` and a borrowed `UnicodeStr` view. Indices count scalar
values, not bytes, so any position from 0 to the length is a valid cut.

Example:
    ```python
    from unistr import RangeInclusive, UnicodeString

    s = UnicodeString.from_text("Löwe 老虎 Léopard")
    assert str(s[5:7]) == "老虎"
    assert str(s[RangeInclusive(5, 6)]) == "老虎"
    ```
"""

from __future__ import annotations

from unistr.core.errors import (
    BorrowError,
    InvalidScalarError,
    ReadOnlyViewError,
    SliceIndexError,
    SliceOverflowError,
    StaleViewError,
    UnistrError,
)
from unistr.core.ordering import Ordering
from unistr.core.ranges import (
    FULL,
    MAX_INDEX,
    Range,
    RangeFrom,
    RangeFull,
    RangeInclusive,
    RangeTo,
    RangeToInclusive,
)
from unistr.text.buffer import UnicodeString
from unistr.text.utf8 import FromUtf8Error, Utf8Error
from unistr.text.view import UnicodeStr

__all__ = [
    "FULL",
    "MAX_INDEX",
    "BorrowError",
    "FromUtf8Error",
    "InvalidScalarError",
    "Ordering",
    "Range",
    "RangeFrom",
    "RangeFull",
    "RangeInclusive",
    "RangeTo",
    "RangeToInclusive",
    "ReadOnlyViewError",
    "SliceIndexError",
    "SliceOverflowError",
    "StaleViewError",
    "UnicodeStr",
    "UnicodeString",
    "UnistrError",
    "Utf8Error",
]
