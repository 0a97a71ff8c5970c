"""
hexcore - byte editing core for hex-editor-like tools.
"""

from .core import (
    ActionList,
    ActionRejectedError,
    ConstrainedView,
    EditAction,
    HexEditor,
    InvalidActionError,
    ViewRange,
)

__all__ = [
    'ActionList',
    'ActionRejectedError',
    'ConstrainedView',
    'EditAction',
    'HexEditor',
    'InvalidActionError',
    'ViewRange',
]

__version__ = "0.1.0"
