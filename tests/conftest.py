"""Shared fixtures and path setup for the hexcore test suite."""
from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

_SRC = Path(__file__).resolve().parents[1] / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from hexcore.core import HexEditor  # noqa: E402

ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"


@pytest.fixture
def alphabet_store() -> io.BytesIO:
    return io.BytesIO(ALPHABET)


@pytest.fixture
def editor(alphabet_store: io.BytesIO) -> HexEditor:
    return HexEditor(alphabet_store)


@pytest.fixture
def alphabet_file(tmp_path: Path) -> Path:
    path = tmp_path / "alphabet.bin"
    path.write_bytes(ALPHABET)
    return path
