from __future__ import annotations

import re

import pytest

from hexcore.utils import HexdumpHighlighter, format_hexdump

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def test_format_hexdump_layout() -> None:
    dump = format_hexdump(b"ABCDEFGHIJKLMNOPQ")

    assert dump.splitlines() == [
        "00000000  41 42 43 44 45 46 47 48  49 4A 4B 4C 4D 4E 4F 50  |ABCDEFGHIJKLMNOP|",
        "00000010  51" + " " * 46 + "  |Q|",
        "00000011",
    ]


def test_format_hexdump_base_offset() -> None:
    dump = format_hexdump(b"\x00\x01", base_offset=0x20, bytes_per_line=8)

    assert dump.splitlines()[0].startswith("00000020  00 01 ")
    assert dump.splitlines()[0].endswith("|..|")
    assert dump.splitlines()[-1] == "00000022"


def test_format_hexdump_empty() -> None:
    assert format_hexdump(b"", base_offset=5) == "00000005"


def test_format_hexdump_rejects_bad_width() -> None:
    with pytest.raises(ValueError):
        format_hexdump(b"abc", bytes_per_line=0)


def test_highlight_only_adds_color_codes() -> None:
    text = format_hexdump(b"hello world")

    colored = HexdumpHighlighter().highlight(text)

    assert "\x1b[" in colored
    assert ANSI_ESCAPE.sub("", colored) == text


def test_unknown_style() -> None:
    with pytest.raises(ValueError):
        HexdumpHighlighter("no-such-style")
