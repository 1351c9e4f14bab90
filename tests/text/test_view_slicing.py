# unistr:header:start
#
#   project      : UniStr
#   file         : test_view_slicing.py
#   file_relpath : tests/text/test_view_slicing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""Unit tests for slicing views and buffers by scalar-value position."""

from __future__ import annotations

import pytest

from tests.conftest import parametrize
from unistr import (
    FULL,
    MAX_INDEX,
    Range,
    RangeFrom,
    RangeInclusive,
    RangeTo,
    RangeToInclusive,
    SliceIndexError,
    SliceOverflowError,
    UnicodeStr,
    UnicodeString,
)

TEXT = "Löwe 老虎 Léopard"


def _s(text: str) -> UnicodeString:
    return UnicodeString.from_text(text)


@parametrize(
    "index, expected",
    [
        (slice(0, 1), "L"),
        (slice(1, 6), "öwe 老"),
        (Range(5, 7), "老虎"),
        (RangeInclusive(5, 6), "老虎"),
        (RangeFrom(8), "Léopard"),
        (RangeTo(4), "Löwe"),
        (RangeToInclusive(3), "Löwe"),
        (FULL, TEXT),
        (slice(None, None), TEXT),
        (Range(15, 15), ""),
    ],
)
def test_view_of_selects_scalar_values(index: object, expected: str) -> None:
    """Slices address scalar values, not bytes."""
    assert str(_s(TEXT).view_of(index)) == expected  # type: ignore[arg-type]


def test_getitem_slice_and_view_of_agree() -> None:
    """``v[a:b]`` is `view_of(Range(a, b))`."""
    s = _s(TEXT)
    assert s[1:6] == s.view_of(Range(1, 6))
    assert s[1:6] == _s("öwe 老")


def test_getitem_int_returns_a_scalar() -> None:
    """Integer indexing returns the scalar value at that position."""
    s = _s(TEXT)
    assert s[5] == "老"
    assert s.as_view()[0] == "L"


@parametrize("index", [15, -1, MAX_INDEX])
def test_getitem_int_out_of_range(index: int) -> None:
    """Positions outside ``[0, len)`` raise; negatives never wrap."""
    with pytest.raises(SliceIndexError):
        _s(TEXT)[index]


def test_out_of_bounds_slice_raises() -> None:
    """A range past the end raises, as in the module example."""
    with pytest.raises(SliceIndexError):
        _s(TEXT)[3:100]


def test_inverted_slice_raises() -> None:
    """``begin > end`` is an invalid range."""
    with pytest.raises(SliceIndexError):
        _s(TEXT).view_of(Range(4, 3))


def test_closed_range_to_max_index_overflows_on_views() -> None:
    """The overflow rule holds for any non-empty view."""
    with pytest.raises(SliceOverflowError):
        _s("abc").view_of(RangeInclusive(0, MAX_INDEX))


def test_get_returns_none_for_invalid_ranges() -> None:
    """`get` is the non-raising variant of `view_of`."""
    s = _s("abc")
    assert s.as_view().get(Range(0, 9)) is None
    assert s.as_view().get(RangeInclusive(0, MAX_INDEX)) is None
    got = s.as_view().get(Range(1, 3))
    assert got is not None and str(got) == "bc"


def test_sub_view_of_sub_view_is_relative() -> None:
    """Indices of a sub-view are relative to that sub-view."""
    sub = _s(TEXT)[5:]
    assert str(sub[0:2]) == "老虎"
    assert str(sub.view_of(RangeFrom(3))) == "Léopard"
    with pytest.raises(SliceIndexError):
        sub.view_of(RangeTo(11))


def test_full_range_on_empty_view() -> None:
    """The full range never fails, even on an empty view."""
    empty = UnicodeStr.default()
    assert empty.view_of(FULL).len() == 0
    assert empty[:] == empty


def test_drained_range_inclusive_selects_empty_view() -> None:
    """A drained closed range selects ``[end + 1, end + 1)``."""
    rng = RangeInclusive(1, 2)
    list(rng)
    view = _s("abcd").view_of(rng)
    assert view.is_empty()


def test_slicing_does_not_copy() -> None:
    """Sub-views see in-place writes made through a mutable borrow."""
    s = _s("abcd")
    with s.borrow_mut() as view:
        tail = view[2:]
        tail[0] = "X"
        assert str(view) == "abXd"
    assert str(s) == "abXd"


def test_chars_and_len_count_scalar_values() -> None:
    """A combining sequence counts as two scalar values."""
    s = _s("y\u0306")
    assert s.len() == 2
    assert s.length() == 2
    assert len(s) == 2
    assert s.chars() == ("y", "\u0306")
    assert s.as_view().content() == ("y", "\u0306")


def test_default_view_is_shared_and_empty() -> None:
    """`default` returns the same empty view every time."""
    assert UnicodeStr.default() is UnicodeStr.default()
    assert str(UnicodeStr.default()) == ""


def test_from_chars_borrows_a_tuple() -> None:
    """A static view over a tuple is read-only and compares by content."""
    chars = ("h", "é")
    view = UnicodeStr.from_chars(chars)
    assert view == _s("hé").as_view()
    assert not view.writable


def test_iteration_and_membership() -> None:
    """Views iterate over and test membership of scalar values."""
    view = _s("老虎").as_view()
    assert list(view) == ["老", "虎"]
    assert "虎" in view
    assert "x" not in view
