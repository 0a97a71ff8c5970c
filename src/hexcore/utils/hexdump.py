"""
Hexdump rendering and highlighting using Pygments.
"""

from typing import Final, List

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers.hexdump import HexdumpLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .hex_utils import format_offset, to_ascii

BYTES_PER_LINE: Final[int] = 16
GROUP_SIZE: Final[int] = 8
DEFAULT_STYLE: Final[str] = 'default'


def _hex_column_width(bytes_per_line: int) -> int:
    groups = (bytes_per_line + GROUP_SIZE - 1) // GROUP_SIZE
    return bytes_per_line * 3 - 1 + (groups - 1)


def format_hex_line(chunk: bytes) -> str:
    """Format bytes as hex pairs, with an extra space between groups of eight."""

    groups = [
        ' '.join(f"{b:02X}" for b in chunk[i:i + GROUP_SIZE])
        for i in range(0, len(chunk), GROUP_SIZE)
    ]

    return '  '.join(groups)


def format_hexdump(data: bytes, base_offset: int = 0, bytes_per_line: int = BYTES_PER_LINE) -> str:
    """
    Format data in the canonical ``hexdump -C`` layout.

    Args:
        data (bytes): Bytes to dump
        base_offset (int): Offset of the first byte, shown in the left column
        bytes_per_line (int): Number of bytes on each line

    Returns:
        str: The dump, ending with a line holding the offset past the data
    """

    if bytes_per_line <= 0:
        raise ValueError("bytes_per_line must be positive")

    width = _hex_column_width(bytes_per_line)
    lines: List[str] = []

    for start in range(0, len(data), bytes_per_line):
        chunk = data[start:start + bytes_per_line]
        lines.append(
            f"{format_offset(base_offset + start)}  "
            f"{format_hex_line(chunk).ljust(width)}  |{to_ascii(chunk)}|"
        )

    lines.append(format_offset(base_offset + len(data)))
    return '\n'.join(lines)


class HexdumpHighlighter:
    """Colors hexdump text for 256-color terminals."""

    def __init__(self, style: str = DEFAULT_STYLE) -> None:
        try:
            get_style_by_name(style)
        except ClassNotFound:
            raise ValueError(f"Unknown style: {style}") from None

        self.style = style
        self.lexer = HexdumpLexer()
        self.formatter = Terminal256Formatter(style=style)

    def highlight(self, text: str) -> str:
        """Highlight hexdump text, returning it with ANSI color codes."""

        return highlight(text, self.lexer, self.formatter).rstrip('\n')
