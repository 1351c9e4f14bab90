# unistr:header:start
#
#   project      : UniStr
#   file         : scalar.py
#   file_relpath : src/unistr/text/scalar.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""Unicode scalar value checks.

A scalar value is represented as a one-character ``str`` whose code point is
outside the surrogate block ``U+D800..U+DFFF``. Python strings may carry lone
surrogates (e.g. from ``surrogateescape``), so text entering a buffer is
checked here.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from unistr.core.errors import InvalidScalarError

if TYPE_CHECKING:
    from collections.abc import Iterable

_SURROGATE_RE: re.Pattern[str] = re.compile("[\ud800-\udfff]")


def is_scalar(value: object) -> bool:
    """Return True if ``value`` is a single Unicode scalar value."""
    return isinstance(value, str) and len(value) == 1 and not 0xD800 <= ord(value) <= 0xDFFF


def check_scalar(value: object) -> str:
    """Return ``value`` if it is a scalar value.

    Raises:
        InvalidScalarError: If ``value`` is not a one-character, non-surrogate ``str``.
    """
    if not is_scalar(value):
        raise InvalidScalarError(f"not a Unicode scalar value: {value!r}")
    return value  # type: ignore[return-value]


def scalars_from_text(text: str) -> list[str]:
    """Split ``text`` into scalar values.

    Args:
        text (str): Source text.

    Returns:
        list[str]: One entry per code point of ``text``.

    Raises:
        InvalidScalarError: If ``text`` contains a surrogate code point.
    """
    m: re.Match[str] | None = _SURROGATE_RE.search(text)
    if m is not None:
        raise InvalidScalarError(
            f"surrogate code point U+{ord(m.group()):04X} at position {m.start()} "
            "is not a Unicode scalar value"
        )
    return list(text)


def scalars_from_iterable(values: Iterable[object]) -> list[str]:
    """Collect and check scalar values from any iterable.

    Plain strings take the fast path through `scalars_from_text`.
    """
    if isinstance(values, str):
        return scalars_from_text(values)
    return [check_scalar(v) for v in values]
