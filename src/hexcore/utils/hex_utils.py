"""
Utility functions for hex string and offset handling.
"""

from typing import Optional, Tuple


def parse_hex_string(hex_str: str) -> Optional[bytes]:
    """
    Parse a hex string into bytes.

    Args:
        hex_str (str): String of hex values (e.g. "FF 00 A5")

    Returns:
        bytes: Parsed bytes or None if invalid
    """

    clean_str = ''.join(hex_str.split())
    if not all(c in '0123456789ABCDEFabcdef' for c in clean_str):
        return None

    try:
        return bytes.fromhex(clean_str)
    except ValueError:
        return None


def parse_position(text: str) -> int:
    """
    Parse a byte position written in decimal or with a 0x prefix.

    Raises:
        ValueError: If the text is not a non-negative integer
    """

    position = int(text.strip(), 0)
    if position < 0:
        raise ValueError(f"Negative position: {text}")

    return position


def parse_edit_spec(text: str) -> Tuple[int, bytes]:
    """
    Parse an edit written as ``POSITION:HEXBYTES``.

    Args:
        text (str): Edit description, e.g. "0x10:DE AD BE EF"

    Returns:
        Tuple[int, bytes]: The position and the replacement bytes

    Raises:
        ValueError: If either half is malformed
    """

    position_text, separator, hex_text = text.partition(':')
    if not separator:
        raise ValueError(f"Expected POSITION:HEX, got {text!r}")

    data = parse_hex_string(hex_text)
    if data is None:
        raise ValueError(f"Invalid hex bytes: {hex_text!r}")

    return parse_position(position_text), data


def format_offset(offset: int, width: int = 8) -> str:
    """
    Format a byte offset as a hex string.

    Args:
        offset (int): Byte offset to format
        width (int): Number of hex digits to use

    Returns:
        str: Formatted hex string
    """

    return f"{offset:0{width}X}"


def to_ascii(data: bytes) -> str:
    """Render bytes as printable ASCII, using '.' for everything else."""

    return ''.join(chr(b) if 32 <= b <= 126 else '.' for b in data)
