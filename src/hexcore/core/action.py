"""
Reversible actions and the linear undo/redo history that replays them.
"""

import abc
import logging
from typing import Any, BinaryIO, Iterable, Iterator, List, Protocol, Tuple

from .errors import ActionRejectedError

logger = logging.getLogger(__name__)


class MemoryUsage(Protocol):
    """Anything that can estimate how much memory it holds on to."""

    def memory_usage(self) -> int:
        ...


def total_memory_usage(items: Iterable[MemoryUsage]) -> int:
    """Sum the memory reported by each item."""

    return sum(item.memory_usage() for item in items)


class Action(abc.ABC):
    """
    A reversible edit to a store.

    ``context`` is an extra value chosen by the caller and passed through
    unchanged on every apply and unapply. Actions that don't need it ignore it.
    """

    @abc.abstractmethod
    def apply(self, store: BinaryIO, context: Any = None) -> None:
        """Perform the action."""

    @abc.abstractmethod
    def unapply(self, store: BinaryIO, context: Any = None) -> None:
        """Reverse the action. It must already have been applied."""

    @abc.abstractmethod
    def memory_usage(self) -> int:
        """Approximate number of bytes this action keeps alive."""


class ActionList:
    """
    Linear undo/redo history.

    Actions before the cursor are applied (the past), actions from the cursor
    onward have been undone and can be redone (the future). Adding a new
    action drops the whole future.
    """

    def __init__(self) -> None:
        self._actions: List[Action] = []
        self._index = 0

    def __len__(self) -> int:
        return len(self._actions)

    def __iter__(self) -> Iterator[Action]:
        return iter(self._actions)

    def __repr__(self) -> str:
        return f"<ActionList past={self.past_len()} future={self.future_len()}>"

    @property
    def cursor(self) -> int:
        return self._index

    @property
    def past(self) -> Tuple[Action, ...]:
        """Applied actions, oldest first."""

        return tuple(self._actions[:self._index])

    @property
    def future(self) -> Tuple[Action, ...]:
        """Undone actions in the order they would be redone."""

        return tuple(self._actions[self._index:])

    def is_empty(self) -> bool:
        return not self._actions

    def past_len(self) -> int:
        return self._index

    def future_len(self) -> int:
        return len(self._actions) - self._index

    def is_past_empty(self) -> bool:
        return self.past_len() == 0

    def is_future_empty(self) -> bool:
        return self.future_len() == 0

    def can_undo(self) -> bool:
        return not self.is_past_empty()

    def can_redo(self) -> bool:
        return not self.is_future_empty()

    def clear_future(self) -> None:
        """Drop every undone action, making redo impossible."""

        if self.is_future_empty():
            return

        logger.debug("Discarding %d undone action(s)", self.future_len())
        del self._actions[self._index:]

    def add(self, action: Action, store: BinaryIO, context: Any = None) -> None:
        """
        Apply an action and record it as the most recent one.

        Args:
            action (Action): The action to perform
            store (BinaryIO): Store the action operates on
            context: Value passed through to the action

        Raises:
            ActionRejectedError: If applying failed. The history is left as it
                was and the action is available on the exception.
        """

        try:
            action.apply(store, context)
        except Exception as e:
            logger.debug("Rejected %r: %s", action, e)
            raise ActionRejectedError(action, e) from e

        self.clear_future()
        self._actions.append(action)
        self._index += 1

    def undo(self, store: BinaryIO, context: Any = None) -> bool:
        """
        Undo the most recently applied action.

        Returns False when there is nothing to undo. If unapplying fails the
        error propagates and the cursor stays put, so the undo can be retried.
        """

        if self.is_past_empty():
            return False

        self._actions[self._index - 1].unapply(store, context)
        self._index -= 1

        return True

    def redo(self, store: BinaryIO, context: Any = None) -> bool:
        """
        Reapply the most recently undone action.

        Returns False when there is nothing to redo. If applying fails the
        error propagates and the cursor stays put.
        """

        if self.is_future_empty():
            return False

        self._actions[self._index].apply(store, context)
        self._index += 1

        return True

    def memory_usage(self) -> int:
        """Total memory reported by every action, past and future."""

        return total_memory_usage(self._actions)
