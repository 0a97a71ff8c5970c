"""
Checked offset arithmetic and the range type used by constrained views.

Positions are unsigned 64-bit values and deltas are signed 64-bit values.
Python integers never overflow, so every operation checks the bounds
explicitly instead of relying on wraparound.
"""

from dataclasses import dataclass
from typing import Final

from .errors import (
    NegativeOffsetError,
    OffsetOverflowError,
    OutOfLowerBoundsError,
    OutOfUpperBoundsError,
)

MAX_POSITION: Final[int] = 2 ** 64 - 1
MIN_DELTA: Final[int] = -(2 ** 63)
MAX_DELTA: Final[int] = 2 ** 63 - 1


def check_position(position: int) -> int:
    """Make sure a value is a valid unsigned position."""

    if position < 0:
        raise NegativeOffsetError(0, position)
    if position > MAX_POSITION:
        raise OffsetOverflowError(f"Position {position} exceeds {MAX_POSITION}")

    return position


def checked_add(position: int, amount: int) -> int:
    """Add an unsigned amount to a position, failing on overflow."""

    result = check_position(position) + check_position(amount)
    if result > MAX_POSITION:
        raise OffsetOverflowError(f"{position} + {amount} overflows")

    return result


def apply_offset(position: int, delta: int) -> int:
    """
    Apply a signed delta to an absolute position.

    Args:
        position (int): Unsigned starting position
        delta (int): Signed 64-bit delta

    Returns:
        int: The resulting position

    Raises:
        NegativeOffsetError: If the result would be below zero. ``MIN_DELTA``
            has no positive counterpart and is always rejected this way.
        OffsetOverflowError: If the result would exceed ``MAX_POSITION`` or
            the delta is not a 64-bit value.
    """

    check_position(position)

    if delta > MAX_DELTA or delta < MIN_DELTA:
        raise OffsetOverflowError(f"Delta {delta} is not a 64-bit signed value")

    if delta < 0:
        if delta == MIN_DELTA:
            raise NegativeOffsetError(position, delta)

        magnitude = -delta
        if magnitude > position:
            raise NegativeOffsetError(position, delta)

        return position - magnitude

    return checked_add(position, delta)


@dataclass(frozen=True)
class ViewRange:
    """An inclusive ``[start, end]`` window of absolute positions."""

    start: int
    end: int

    def __post_init__(self) -> None:
        check_position(self.start)
        check_position(self.end)

        if self.start > self.end:
            start, end = self.end, self.start
            object.__setattr__(self, 'start', start)
            object.__setattr__(self, 'end', end)

    @property
    def limit(self) -> int:
        """Number of addressable bytes in the window."""

        return self.end - self.start

    def __contains__(self, position: int) -> bool:
        return self.start <= position <= self.end

    def position_from_offset(self, offset: int) -> int:
        """Convert an offset relative to ``start`` into an absolute position."""

        return checked_add(self.start, offset)

    def position_into_offset(self, position: int) -> int:
        """Convert an absolute position into an offset relative to ``start``."""

        if position < self.start:
            raise OutOfLowerBoundsError(position, self.start, self.end)
        if position > self.end:
            raise OutOfUpperBoundsError(position, self.start, self.end)

        return position - self.start
