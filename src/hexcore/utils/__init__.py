"""
Utility package for hex formatting and parsing helpers.
"""

from .hex_utils import (
    parse_hex_string,
    parse_position,
    parse_edit_spec,
    format_offset,
    to_ascii
)
from .hexdump import HexdumpHighlighter, format_hexdump

__all__ = [
    'parse_hex_string',
    'parse_position',
    'parse_edit_spec',
    'format_offset',
    'to_ascii',
    'HexdumpHighlighter',
    'format_hexdump'
]
