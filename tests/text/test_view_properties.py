# unistr:header:start
#
#   project      : UniStr
#   file         : test_view_properties.py
#   file_relpath : tests/text/test_view_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

# pyright: strict

"""Property tests for slicing, equality and ordering of views."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tests.strategies_unistr import (
    s_scalar,
    s_text,
    s_text_with_bad_bounds,
    s_text_with_bounds,
    s_view,
)
from unistr import (
    FULL,
    MAX_INDEX,
    Ordering,
    Range,
    RangeInclusive,
    SliceIndexError,
    SliceOverflowError,
    UnicodeStr,
    UnicodeString,
)

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


@settings(max_examples=200)
@given(sample=s_text_with_bounds())
def test_valid_range_selects_elements(sample: tuple[str, int, int]) -> None:
    """``view_of([begin, end))`` holds exactly elements ``begin..end``."""
    text, begin, end = sample
    view = UnicodeString.from_text(text).view_of(Range(begin, end))
    assert view.chars() == tuple(text[begin:end])
    assert view.len() == end - begin


@settings(max_examples=200)
@given(sample=s_text_with_bad_bounds())
def test_invalid_range_raises(sample: tuple[str, int, int]) -> None:
    """Inverted or too-long ranges always raise."""
    text, begin, end = sample
    with pytest.raises(SliceIndexError):
        UnicodeString.from_text(text).view_of(Range(begin, end))


@given(text=s_text)
def test_full_range_is_identity(text: str) -> None:
    """The full range never fails and returns the same content."""
    view = UnicodeString.from_text(text).as_view()
    assert view.view_of(FULL) == view
    assert str(view.view_of(FULL)) == text


@given(text=s_text.filter(bool), begin=st.integers(min_value=0, max_value=MAX_INDEX))
def test_closed_range_to_max_index_overflows(text: str, begin: int) -> None:
    """Overflow wins over every other range check."""
    with pytest.raises(SliceOverflowError):
        UnicodeString.from_text(text).view_of(RangeInclusive(begin, MAX_INDEX))


@given(text=s_text)
def test_round_trip_through_view(text: str) -> None:
    """``from_text(t).as_view().to_owned()`` equals the original."""
    s = UnicodeString.from_text(text)
    assert s.as_view().to_owned() == s
    assert str(s) == text
    assert s.encode() == text.encode("utf-8")
    assert UnicodeString.from_utf8(s.encode()) == s


@given(a=s_view(), b=s_view(), c=s_view())
def test_equality_is_an_equivalence_consistent_with_ordering(
    a: tuple[str, UnicodeStr], b: tuple[str, UnicodeStr], c: tuple[str, UnicodeStr]
) -> None:
    """Equality is reflexive, symmetric and transitive, and agrees with cmp.

    Views over static and buffer storage are mixed freely.
    """
    x, y, z = a[1], b[1], c[1]
    assert (x == y) == (a[0] == b[0])
    assert (x != y) == (a[0] != b[0])
    assert x == x
    assert (x == y) == (y == x)
    if x == y and y == z:
        assert x == z
    assert (x == y) == (x.cmp(y) is Ordering.EQUAL)


@given(left=s_view(), right=s_view())
def test_ordering_matches_code_point_order(
    left: tuple[str, UnicodeStr], right: tuple[str, UnicodeStr]
) -> None:
    """Python's own str ordering is lexicographic by code point too."""
    (a, x), (b, y) = left, right
    expected = Ordering.LESS if a < b else Ordering.GREATER if a > b else Ordering.EQUAL
    assert x.cmp(y) is expected
    assert y.cmp(x) is expected.reverse()
    assert (x < y) == (a < b)
    assert (x >= y) == (a >= b)
    assert (x <= y) == (x < y or x == y)


@given(text=s_text, ch=s_scalar)
def test_push_extends_by_one(text: str, ch: str) -> None:
    """Append keeps the prefix and grows length and capacity as needed."""
    s = UnicodeString.from_text(text)
    n = s.len()
    s.push(ch)
    assert s.len() == n + 1
    assert s.chars()[:n] == tuple(text)
    assert s.capacity() >= n + 1
