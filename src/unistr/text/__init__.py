# unistr:header:start
#
#   project      : UniStr
#   file         : __init__.py
#   file_relpath : src/unistr/text/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""Text types: owned buffers, borrowed views, and the UTF-8 boundary.

Included modules:

- ``view``
  `UnicodeStr`, the borrowed view and its slicing engine.

- ``buffer``
  `UnicodeString`, the owned growable buffer.

- ``storage``
  Epoch and single-writer bookkeeping shared by buffers and views.

- ``utf8``
  Strict and lossy UTF-8 decoding with structured errors.

- ``scalar``
  Unicode scalar value checks.
"""

from __future__ import annotations

from unistr.text.buffer import UnicodeString
from unistr.text.utf8 import FromUtf8Error, Utf8Error
from unistr.text.view import UnicodeStr

__all__ = [
    "FromUtf8Error",
    "UnicodeStr",
    "UnicodeString",
    "Utf8Error",
]
