"""
Core package for byte editing with undo/redo.

This package implements the editing core. It includes the HexEditor facade
tying a byte store to its ActionList history, the EditAction that replaces
bytes in place, and the ConstrainedView used to keep I/O inside a window of
the store.
"""

from .action import Action, ActionList, MemoryUsage, total_memory_usage
from .editor import EditAction, HexEditor
from .errors import (
    ActionError,
    ActionRejectedError,
    HexcoreError,
    IntoOffsetError,
    InvalidActionError,
    NegativeOffsetError,
    OffsetError,
    OffsetOverflowError,
    OutOfLowerBoundsError,
    OutOfUpperBoundsError,
    StoreReleasedError,
)
from .offsets import ViewRange, apply_offset
from .stream import Truncatable, resize, scratch_copy, stream_len, stream_position
from .view import ConstrainedView

__all__ = [
    'Action',
    'ActionList',
    'MemoryUsage',
    'total_memory_usage',
    'EditAction',
    'HexEditor',
    'ConstrainedView',
    'ViewRange',
    'apply_offset',
    'Truncatable',
    'resize',
    'scratch_copy',
    'stream_len',
    'stream_position',
    'HexcoreError',
    'OffsetError',
    'NegativeOffsetError',
    'OffsetOverflowError',
    'IntoOffsetError',
    'OutOfLowerBoundsError',
    'OutOfUpperBoundsError',
    'StoreReleasedError',
    'ActionError',
    'InvalidActionError',
    'ActionRejectedError',
]
