from __future__ import annotations

import dataclasses

import pytest

from hexcore.core.errors import (
    NegativeOffsetError,
    OffsetOverflowError,
    OutOfLowerBoundsError,
    OutOfUpperBoundsError,
)
from hexcore.core.offsets import (
    MAX_DELTA,
    MAX_POSITION,
    MIN_DELTA,
    ViewRange,
    apply_offset,
)


def test_view_range_keeps_sorted_bounds() -> None:
    view_range = ViewRange(0, 5)

    assert (view_range.start, view_range.end) == (0, 5)
    assert view_range.limit == 5


def test_view_range_swaps_reversed_bounds() -> None:
    view_range = ViewRange(100, 5)

    assert (view_range.start, view_range.end) == (5, 100)
    assert ViewRange(0, MAX_POSITION).limit == MAX_POSITION


def test_view_range_is_immutable() -> None:
    view_range = ViewRange(1, 2)

    with pytest.raises(dataclasses.FrozenInstanceError):
        view_range.start = 0  # type: ignore[misc]


def test_view_range_rejects_unrepresentable_bounds() -> None:
    with pytest.raises(NegativeOffsetError):
        ViewRange(-1, 5)
    with pytest.raises(OffsetOverflowError):
        ViewRange(0, MAX_POSITION + 1)


def test_position_offset_conversion() -> None:
    view_range = ViewRange(3, 7)

    assert view_range.position_from_offset(0) == 3
    assert view_range.position_from_offset(4) == 7
    assert view_range.position_into_offset(3) == 0
    assert view_range.position_into_offset(7) == 4

    with pytest.raises(OutOfLowerBoundsError):
        view_range.position_into_offset(2)
    with pytest.raises(OutOfUpperBoundsError):
        view_range.position_into_offset(8)


def test_position_from_offset_overflow() -> None:
    with pytest.raises(OffsetOverflowError):
        ViewRange(10, 20).position_from_offset(MAX_POSITION)


def test_apply_offset_moves_both_ways() -> None:
    assert apply_offset(10, 5) == 15
    assert apply_offset(10, -10) == 0
    assert apply_offset(10, 0) == 10
    assert apply_offset(0, MAX_DELTA) == MAX_DELTA


def test_apply_offset_rejects_negative_result() -> None:
    with pytest.raises(NegativeOffsetError):
        apply_offset(3, -4)


def test_apply_offset_rejects_most_negative_delta() -> None:
    # Even a position large enough to absorb it must fail.
    with pytest.raises(NegativeOffsetError):
        apply_offset(MAX_POSITION, MIN_DELTA)


def test_apply_offset_rejects_overflow() -> None:
    with pytest.raises(OffsetOverflowError):
        apply_offset(MAX_POSITION, 1)
    with pytest.raises(OffsetOverflowError):
        apply_offset(0, MAX_DELTA + 1)


def test_offset_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        apply_offset(0, -1)
