# unistr:header:start
#
#   project      : UniStr
#   file         : test_scalar_checks.py
#   file_relpath : tests/text/test_scalar_checks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""Unit tests for Unicode scalar value checks."""

from __future__ import annotations

import pytest

from tests.conftest import parametrize
from unistr import InvalidScalarError, UnicodeStr
from unistr.text.scalar import check_scalar, is_scalar, scalars_from_iterable, scalars_from_text


@parametrize("value", ["a", "\x00", "\ud7ff", "\ue000", "💖", "\U0010ffff"])
def test_scalar_values(value: str) -> None:
    """One code point outside the surrogate block is a scalar value."""
    assert is_scalar(value)
    assert check_scalar(value) == value


@parametrize("value", ["", "ab", "\ud800", "\udfff", b"a", 97, None])
def test_non_scalar_values(value: object) -> None:
    """Empty strings, longer strings, surrogates and non-strings are rejected."""
    assert not is_scalar(value)
    with pytest.raises(InvalidScalarError):
        check_scalar(value)


def test_scalars_from_text_reports_surrogate_position() -> None:
    """The error names the surrogate and where it sits."""
    with pytest.raises(InvalidScalarError, match="U\\+DC80 at position 2"):
        scalars_from_text("ab\udc80")


def test_scalars_from_iterable() -> None:
    """Strings and iterables of one-character strings both work."""
    assert scalars_from_iterable("老虎") == ["老", "虎"]
    assert scalars_from_iterable(iter(["a", "b"])) == ["a", "b"]
    with pytest.raises(InvalidScalarError):
        scalars_from_iterable(["a", "bc"])


def test_from_chars_validates_tuples() -> None:
    """Even borrowed tuples are checked once."""
    with pytest.raises(InvalidScalarError):
        UnicodeStr.from_chars(("a", "\ud800"))
    assert str(UnicodeStr.from_chars(["a", "b"])) == "ab"
