"""A last-in, first-out adapter over a double-ended sequence."""

from __future__ import annotations

from .deque import Deque


class Stack:
    """A stack whose top is the back of an underlying ``Deque``.

    The initial contents are copied from ``container``, bottom first, so
    later changes to the stack never touch the container it was built from.
    """

    def __init__(self, container=()):
        self._items = Deque(container)

    def __len__(self):
        return len(self._items)

    def empty(self) -> bool:
        return self._items.empty()

    def top(self):
        """Return the most recently pushed element."""
        return self._items.back()

    def set_top(self, value) -> None:
        """Replace the most recently pushed element."""
        if self._items.empty():
            raise IndexError("top of an empty stack")
        self._items[-1] = value

    def push(self, value) -> None:
        self._items.push_back(value)

    def pop(self) -> None:
        """Drop the top element; does nothing when empty."""
        self._items.pop_back()

    def copy(self) -> Stack:
        return type(self)(self._items)

    def _from_top(self) -> list:
        return list(reversed(self._items))

    def __eq__(self, other):
        if not isinstance(other, Stack):
            return NotImplemented
        return self._from_top() == other._from_top()

    __hash__ = None

    def __lt__(self, other):
        if not isinstance(other, Stack):
            return NotImplemented
        return self._from_top() < other._from_top()

    def __le__(self, other):
        if not isinstance(other, Stack):
            return NotImplemented
        return self._from_top() <= other._from_top()

    def __gt__(self, other):
        if not isinstance(other, Stack):
            return NotImplemented
        return self._from_top() > other._from_top()

    def __ge__(self, other):
        if not isinstance(other, Stack):
            return NotImplemented
        return self._from_top() >= other._from_top()

    def __repr__(self):
        return f"{type(self).__name__}({list(self._items)!r})"