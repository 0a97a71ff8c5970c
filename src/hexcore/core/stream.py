"""
Helpers for working with the byte stores an editor wraps.

A store is any binary file-like object supporting ``read``, ``write``,
``seek`` and ``tell``. Files, ``io.BytesIO`` and temporary files all qualify.
"""

import io
import logging
import shutil
import tempfile
from typing import BinaryIO, Final, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

SPOOL_SIZE: Final[int] = 10 * 1024 * 1024


@runtime_checkable
class Truncatable(Protocol):
    """A store that can change its reported length."""

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        ...

    def write(self, data: bytes) -> int:
        ...

    def truncate(self, size: int) -> int:
        ...


def stream_position(store: BinaryIO) -> int:
    """Get the absolute position of a store with a zero-length relative seek."""

    return store.seek(0, io.SEEK_CUR)


def stream_len(store: BinaryIO) -> int:
    """
    Get the length of a store using seeks.

    The position is restored afterwards, unless it already equals the
    length. If a seek fails the position is unspecified.
    """

    position = stream_position(store)
    length = store.seek(0, io.SEEK_END)

    if position != length:
        store.seek(position, io.SEEK_SET)

    return length


def read_up_to(store: BinaryIO, amount: int) -> bytes:
    """Read until ``amount`` bytes are collected or the store is exhausted."""

    chunks = bytearray()
    while len(chunks) < amount:
        chunk = store.read(amount - len(chunks))
        if not chunk:
            break
        chunks += chunk

    return bytes(chunks)


def read_exact(store: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes, raising EOFError if the store runs out."""

    data = read_up_to(store, size)
    if len(data) != size:
        raise EOFError(f"Expected {size} bytes, only {len(data)} available")

    return data


def write_all(store: BinaryIO, data: bytes) -> int:
    """
    Write ``data`` until it is consumed or the store stops accepting bytes.

    Returns the number of bytes written, which is less than ``len(data)``
    when the store ran out of capacity.
    """

    view = memoryview(data)
    written = 0
    while written < len(view):
        count = store.write(view[written:])
        if not count:
            break
        written += count

    return written


def resize(store: BinaryIO, new_length: int) -> None:
    """
    Grow or shrink a store to exactly ``new_length`` bytes.

    Growing pads the store with zero bytes. The position is preserved when it
    is still before the new end, otherwise it is moved to the last byte.

    Args:
        store (BinaryIO): Store to resize
        new_length (int): Length the store should report afterwards

    Raises:
        io.UnsupportedOperation: If the store cannot be truncated
        ValueError: If ``new_length`` is negative
    """

    if new_length < 0:
        raise ValueError(f"Negative length: {new_length}")

    if not isinstance(store, Truncatable):
        raise io.UnsupportedOperation("Store does not support truncation")

    position = stream_position(store)
    length = stream_len(store)

    if new_length < length:
        store.truncate(new_length)
    elif new_length > length:
        store.seek(length, io.SEEK_SET)
        store.write(bytes(new_length - length))

    if position >= new_length:
        position = max(new_length - 1, 0)

    store.seek(position, io.SEEK_SET)
    logger.debug("Resized store from %d to %d bytes", length, new_length)


def scratch_copy(source: BinaryIO, spool_size: int = SPOOL_SIZE) -> BinaryIO:
    """
    Copy a readable stream into a temporary store.

    Editing the copy leaves ``source`` untouched until the copy is saved back.
    Small copies stay in memory, larger ones roll over to disk.

    Args:
        source (BinaryIO): Stream to copy, read from its current position
            and rewound to it afterwards when seekable
        spool_size (int): Size above which the copy is moved to disk

    Returns:
        BinaryIO: The copy, positioned at its start
    """

    start = source.tell() if source.seekable() else None

    copy = tempfile.SpooledTemporaryFile(max_size=spool_size, mode='w+b')
    shutil.copyfileobj(source, copy)
    copy.seek(0)

    if start is not None:
        source.seek(start, io.SEEK_SET)

    return copy
