"""
Range-constrained view over a seekable byte store.

A ConstrainedView borrows a store and only lets reads, writes and seeks
happen inside a ``[start, end]`` window of it. Offsets reported by the view
are relative to ``start``.
"""

import io
from typing import BinaryIO, Tuple, Union

from .errors import NegativeOffsetError, OutOfLowerBoundsError
from .offsets import ViewRange, apply_offset
from .stream import stream_len, stream_position

RangeLike = Union[ViewRange, Tuple[int, int]]


def _as_range(view_range: RangeLike) -> ViewRange:
    if isinstance(view_range, ViewRange):
        return view_range

    start, end = view_range
    return ViewRange(start, end)


class ConstrainedView(io.RawIOBase):
    """
    File-like window onto part of a store.

    After every successful operation the store position lies within the
    window. Closing the view releases the borrow but never closes the store.
    """

    def __init__(self, store: BinaryIO, view_range: RangeLike, check: bool = True) -> None:
        super().__init__()
        self._store = store
        self._range = _as_range(view_range)

        if not check:
            assert stream_position(store) in self._range
            return

        position = stream_position(store)
        if position not in self._range:
            store.seek(self._range.start, io.SEEK_SET)

    @classmethod
    def unchecked(cls, store: BinaryIO, view_range: RangeLike) -> 'ConstrainedView':
        """
        Create a view over a store that is already positioned inside the range.

        The position check is an assert and is skipped under ``python -O``.
        """

        return cls(store, view_range, check=False)

    def __repr__(self) -> str:
        return f"<ConstrainedView [{self._range.start}, {self._range.end}]>"

    @property
    def range(self) -> ViewRange:
        return self._range

    @property
    def limit(self) -> int:
        """Number of bytes that can be reached through the view."""

        return self._range.limit

    def into_inner(self) -> BinaryIO:
        """Close the view and hand back the borrowed store."""

        store = self._store
        self.close()
        return store

    def position_from_offset(self, offset: int) -> int:
        return self._range.position_from_offset(offset)

    def position_into_offset(self, position: int) -> int:
        return self._range.position_into_offset(position)

    def _check_open(self) -> None:
        if self.closed:
            raise ValueError("I/O operation on closed view")

    def _remaining_bytes(self) -> int:
        """Get the number of bytes between the current offset and the end."""

        if stream_len(self._store) < self._range.start:
            return 0

        current_offset = self.seek(0, io.SEEK_CUR)
        return self._range.limit - current_offset

    def readable(self) -> bool:
        self._check_open()
        readable = getattr(self._store, 'readable', None)
        return readable() if callable(readable) else True

    def writable(self) -> bool:
        self._check_open()
        writable = getattr(self._store, 'writable', None)
        return writable() if callable(writable) else hasattr(self._store, 'write')

    def seekable(self) -> bool:
        self._check_open()
        return True

    def readinto(self, buffer) -> int:
        """
        Read into the prefix of ``buffer`` without leaving the window.

        Returns 0 once the end of the window is reached.
        """

        self._check_open()

        target = memoryview(buffer).cast('B')
        max_length = min(self._remaining_bytes(), len(target))
        if max_length == 0:
            return 0

        data = self._store.read(max_length)
        target[:len(data)] = data

        assert stream_position(self._store) <= self._range.end
        return len(data)

    def write(self, buffer) -> int:
        """
        Write as much of ``buffer`` as fits before the end of the window.

        Short writes are silent: callers that need the whole buffer written
        must compare the returned count with its length.
        """

        self._check_open()
        if not self.writable():
            raise io.UnsupportedOperation("write")

        if stream_position(self._store) >= self._range.end:
            return 0

        data = memoryview(buffer).cast('B')
        max_length = min(self._remaining_bytes(), len(data))
        written = self._store.write(bytes(data[:max_length]))

        return max_length if written is None else written

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        """
        Seek within the window and return the new offset.

        Targets past the end of the window land on its end, and targets past
        the end of the store land on the end of the store. Targets before the
        start of the window are rejected without moving the store.
        A store that ends before the window starts therefore cannot be
        seeked at all, although reads and writes on it return 0.

        Raises:
            NegativeOffsetError: If the target position would be negative
            OffsetOverflowError: If the target position would overflow
            OutOfLowerBoundsError: If the target is before the window
        """

        self._check_open()

        if whence == io.SEEK_CUR:
            base, delta = stream_position(self._store), offset
        elif whence == io.SEEK_END:
            base, delta = self._range.end, offset
        elif whence == io.SEEK_SET:
            if offset < 0:
                raise NegativeOffsetError(self._range.start, offset)
            base, delta = self._range.position_from_offset(offset), 0
        else:
            raise ValueError(f"Invalid whence ({whence})")

        destination = apply_offset(base, delta)
        if destination < self._range.start:
            raise OutOfLowerBoundsError(destination, self._range.start, self._range.end)

        destination = min(destination, self._range.end, stream_len(self._store))

        resulting_position = self._store.seek(destination, io.SEEK_SET)

        return self._range.position_into_offset(resulting_position)

    def tell(self) -> int:
        return self.seek(0, io.SEEK_CUR)

    def flush(self) -> None:
        super().flush()

        if getattr(self._store, 'closed', False):
            return

        flush = getattr(self._store, 'flush', None)
        if callable(flush):
            flush()
