"""A first-in, first-out adapter over a double-ended sequence."""

from __future__ import annotations

from .deque import Deque


class Queue:
    """A queue that pushes at the back and pops at the front of a ``Deque``.

    The initial contents are copied from ``container``, front first.
    """

    def __init__(self, container=()):
        self._items = Deque(container)

    def __len__(self):
        return len(self._items)

    def empty(self) -> bool:
        return self._items.empty()

    def front(self):
        """Return the oldest element."""
        return self._items.front()

    def set_front(self, value) -> None:
        """Replace the oldest element."""
        if self._items.empty():
            raise IndexError("front of an empty queue")
        self._items[0] = value

    def back(self):
        """Return the newest element."""
        return self._items.back()

    def push(self, value) -> None:
        self._items.push_back(value)

    def pop(self) -> None:
        """Drop the oldest element; does nothing when empty."""
        self._items.pop_front()

    def copy(self) -> Queue:
        return type(self)(self._items)

    def __eq__(self, other):
        if not isinstance(other, Queue):
            return NotImplemented
        return self._items == other._items

    __hash__ = None

    def __lt__(self, other):
        if not isinstance(other, Queue):
            return NotImplemented
        return self._items < other._items

    def __le__(self, other):
        if not isinstance(other, Queue):
            return NotImplemented
        return self._items <= other._items

    def __gt__(self, other):
        if not isinstance(other, Queue):
            return NotImplemented
        return self._items > other._items

    def __ge__(self, other):
        if not isinstance(other, Queue):
            return NotImplemented
        return self._items >= other._items

    def __repr__(self):
        return f"{type(self).__name__}({list(self._items)!r})"