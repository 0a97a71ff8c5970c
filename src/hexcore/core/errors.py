"""
Exception hierarchy for the editing core.
"""

from typing import Any, Optional


class HexcoreError(Exception):
    """Base class for every error raised by hexcore itself."""


class OffsetError(HexcoreError, ValueError):
    """Offset or position arithmetic could not be carried out."""


class NegativeOffsetError(OffsetError):
    """Applying an offset would produce a position below zero."""

    def __init__(self, position: int, delta: int) -> None:
        super().__init__(f"Offset {delta} applied to position {position} is negative")
        self.position = position
        self.delta = delta


class OffsetOverflowError(OffsetError):
    """A position would leave the representable 64-bit range."""


class IntoOffsetError(OffsetError):
    """An absolute position cannot be expressed as an offset into a view."""

    def __init__(self, position: int, start: int, end: int) -> None:
        super().__init__(f"Position {position} is outside of range [{start}, {end}]")
        self.position = position
        self.start = start
        self.end = end


class OutOfLowerBoundsError(IntoOffsetError):
    """The position is before the start of the range."""


class OutOfUpperBoundsError(IntoOffsetError):
    """The position is after the end of the range."""


class StoreReleasedError(HexcoreError, ValueError):
    """The editor has already handed its store back to the caller."""

    def __init__(self) -> None:
        super().__init__("Editor store has been released")


class ActionError(HexcoreError):
    """Base class for failures while performing an action."""


class InvalidActionError(ActionError):
    """The action cannot be performed without changing the store length."""


class ActionRejectedError(ActionError):
    """
    An action could not be added to the history.

    The action was not consumed: it is available on ``action`` so the caller
    can inspect it or try again. ``error`` holds the original failure.
    """

    def __init__(self, action: Any, error: Optional[BaseException]) -> None:
        super().__init__(f"Action rejected: {error}")
        self.action = action
        self.error = error
