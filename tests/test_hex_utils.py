from __future__ import annotations

import pytest

from hexcore.utils import (
    format_offset,
    parse_edit_spec,
    parse_hex_string,
    parse_position,
    to_ascii,
)


def test_parse_hex_string() -> None:
    assert parse_hex_string("FF 00 a5") == b"\xff\x00\xa5"
    assert parse_hex_string("") == b""
    assert parse_hex_string("GG") is None
    assert parse_hex_string("F") is None


def test_parse_position() -> None:
    assert parse_position("16") == 16
    assert parse_position("0x10") == 16

    with pytest.raises(ValueError):
        parse_position("-1")
    with pytest.raises(ValueError):
        parse_position("ten")


def test_parse_edit_spec() -> None:
    assert parse_edit_spec("0x10:DE AD") == (16, b"\xde\xad")
    assert parse_edit_spec("1:5A4458") == (1, b"ZDX")

    with pytest.raises(ValueError):
        parse_edit_spec("5:zz")
    with pytest.raises(ValueError):
        parse_edit_spec("nope")


def test_format_offset() -> None:
    assert format_offset(255) == "000000FF"
    assert format_offset(10, width=4) == "000A"


def test_to_ascii() -> None:
    assert to_ascii(b"Hi\x00\x7f~") == "Hi..~"
