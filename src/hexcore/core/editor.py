"""
Editor module combining a byte store with its undo/redo history.
"""

import io
import logging
import shutil
from dataclasses import dataclass, field
from typing import Any, BinaryIO, Final, Optional

from .action import Action, ActionList
from .errors import InvalidActionError, StoreReleasedError
from .offsets import check_position, checked_add
from .stream import (
    read_exact,
    read_up_to,
    scratch_copy,
    stream_len,
    stream_position,
    write_all,
)
from .view import ConstrainedView

logger = logging.getLogger(__name__)

POSITION_SIZE: Final[int] = 8


@dataclass
class EditAction(Action):
    """
    Replaces bytes at a position with the same number of new bytes.

    An edit that would reach or pass the end of the store is invalid: the
    store is never allowed to grow.
    """

    position: int
    new_bytes: bytes
    previous_bytes: bytes = field(default=b'', init=False, repr=False)
    _applied: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        check_position(self.position)
        self.new_bytes = bytes(self.new_bytes)

    def apply(self, store: BinaryIO, context: Any = None) -> None:
        length = stream_len(store)
        end = checked_add(self.position, len(self.new_bytes))

        if end >= length:
            raise InvalidActionError(
                f"Edit of {len(self.new_bytes)} bytes at {self.position} "
                f"does not fit in store of {length} bytes"
            )

        logger.debug("Applying %d byte edit at %d", len(self.new_bytes), self.position)

        store.seek(self.position, io.SEEK_SET)
        previous = self.previous_bytes
        if not self._applied:
            previous = read_exact(store, len(self.new_bytes))

        store.seek(self.position, io.SEEK_SET)
        self._write_in_place(store, self.new_bytes)

        # Only a completed apply may pin the bytes used by unapply.
        self.previous_bytes = previous
        self._applied = True

    def unapply(self, store: BinaryIO, context: Any = None) -> None:
        logger.debug("Reverting %d byte edit at %d", len(self.previous_bytes), self.position)

        store.seek(self.position, io.SEEK_SET)
        self._write_in_place(store, self.previous_bytes)

    def _write_in_place(self, store: BinaryIO, data: bytes) -> None:
        """Write ``data`` at the current position without going past its end."""

        with ConstrainedView(store, (self.position, self.position + len(data))) as view:
            written = write_all(view, data)

        if written != len(data):
            raise InvalidActionError(
                f"Only {written} of {len(data)} bytes could be written at {self.position}"
            )

    def memory_usage(self) -> int:
        return POSITION_SIZE + len(self.previous_bytes) + len(self.new_bytes)


class HexEditor:
    """Main editor class: one store plus the history of edits made to it."""

    CHUNK_SIZE = 1024 * 1024

    def __init__(self, store: BinaryIO, actions: Optional[ActionList] = None) -> None:
        """
        Take ownership of ``store``.

        Edits are written straight into the store. To keep the original data
        intact until saving, pass a copy (see ``from_path``).
        """

        self._store: Optional[BinaryIO] = store
        self.actions = actions if actions is not None else ActionList()
        self.filename: Optional[str] = None
        self.modified = False

    @classmethod
    def from_path(cls, filename: str) -> 'HexEditor':
        """Open a file for editing through a temporary copy of it."""

        with open(filename, 'rb') as f:
            editor = cls(scratch_copy(f))

        editor.filename = filename
        return editor

    def __enter__(self) -> 'HexEditor':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @property
    def store(self) -> BinaryIO:
        if self._store is None:
            raise StoreReleasedError()

        return self._store

    def into_inner(self) -> BinaryIO:
        """Release the store to the caller. The editor can't be used afterwards."""

        store = self.store
        self._store = None
        return store

    def into_inner_actions(self) -> ActionList:
        """Close the store and hand back the history."""

        self.close()
        return self.actions

    def close(self) -> None:
        """Close the store and release it."""

        if self._store is None:
            return

        self._store.close()
        self._store = None

    def position(self) -> int:
        """Current absolute position in the store."""

        return stream_position(self.store)

    def length(self) -> int:
        """Size of the store in bytes."""

        return stream_len(self.store)

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return self.store.seek(offset, whence)

    def read(self, size: int = -1) -> bytes:
        return self.store.read(size)

    def add_action(self, action: Action, context: Any = None) -> None:
        """Apply an action and record it for undo."""

        self.actions.add(action, self.store, context)
        self.modified = True

    def edit(self, position: int, new_bytes: bytes, context: Any = None) -> EditAction:
        """Replace bytes at ``position`` and return the recorded action."""

        action = EditAction(position, new_bytes)
        self.add_action(action, context)
        return action

    def undo(self, context: Any = None) -> bool:
        """Undo the last action. Returns False if there was nothing to undo."""

        if not self.actions.undo(self.store, context):
            return False

        self.modified = self.actions.can_undo()
        return True

    def redo(self, context: Any = None) -> bool:
        """Redo the last undone action. Returns False if there was nothing to redo."""

        if not self.actions.redo(self.store, context):
            return False

        self.modified = True
        return True

    def read_at(self, position: int, size: int) -> bytes:
        """Seek to ``position`` and read exactly ``size`` bytes."""

        self.seek(position)
        return read_exact(self.store, size)

    def read_amount(self, amount: int) -> bytes:
        """Read up to ``amount`` bytes from the current position."""

        return read_up_to(self.store, amount)

    def read_amount_at(self, position: int, amount: int) -> bytes:
        """
        Read up to ``amount`` bytes starting at ``position``.

        Fewer bytes are returned when the store ends first.
        """

        self.seek(position)
        return self.read_amount(amount)

    def view(self, start: int, end: int) -> ConstrainedView:
        """Get a constrained view over ``[start, end]`` of the store."""

        return ConstrainedView(self.store, (start, end))

    def save_to(self, destination: BinaryIO) -> None:
        """
        Copy the whole store into ``destination``.

        Writing starts wherever ``destination`` is currently positioned; it is
        not rewound.
        """

        self.seek(0)
        shutil.copyfileobj(self.store, destination, self.CHUNK_SIZE)

    def save_as(self, filename: Optional[str] = None) -> None:
        """
        Save the edited data to a file.

        Args:
            filename: Optional filename to save to. If None, uses current filename.

        Raises:
            ValueError: If no filename is known
        """

        save_filename = filename or self.filename
        if not save_filename:
            raise ValueError("No filename specified")

        with open(save_filename, 'wb') as f:
            self.save_to(f)

        self.filename = save_filename
        self.modified = False
