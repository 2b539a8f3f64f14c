"""A double-ended sequence container with positional editing."""

from __future__ import annotations

from collections import deque as _deque
from itertools import repeat

from .cursor import Cursor, ReverseCursor

MAX_SIZE = 4611686018427387903


class Deque:
    """A sequence that grows and shrinks cheaply at both ends.

    Positions may be given as integers or as cursors obtained from
    ``begin()`` and ``end()``. Fill values default to 0.
    """

    __slots__ = ("_items",)
    __hash__ = None

    def __init__(self, iterable=()):
        self._items = _deque(iterable)
        self._check_capacity(len(self._items))

    @classmethod
    def filled(cls, n, value=0):
        """Build a deque holding ``n`` copies of ``value``."""
        if n < 0:
            raise ValueError("count must not be negative")
        cls._check_capacity(n)
        return cls(repeat(value, n))

    @staticmethod
    def _check_capacity(n: int) -> None:
        if n > MAX_SIZE:
            raise OverflowError("deque would exceed its maximum size")

    def _position(self, pos, *, allow_end: bool) -> int:
        if isinstance(pos, Cursor):
            if pos.sequence is not self:
                raise ValueError("cursor belongs to another container")
            index = pos.index
        elif isinstance(pos, int) and not isinstance(pos, bool):
            index = pos
        else:
            raise TypeError("position must be an int or a Cursor")
        upper = len(self._items) if allow_end else len(self._items) - 1
        if not 0 <= index <= upper:
            raise IndexError(f"position {index} is out of range")
        return index

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __reversed__(self):
        return reversed(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index, value):
        self._items[index] = value

    def begin(self) -> Cursor:
        return Cursor(self, 0)

    def end(self) -> Cursor:
        return Cursor(self, len(self._items))

    def rbegin(self) -> ReverseCursor:
        return ReverseCursor(self.end())

    def rend(self) -> ReverseCursor:
        return ReverseCursor(self.begin())

    def empty(self) -> bool:
        return not self._items

    def max_size(self) -> int:
        return MAX_SIZE

    def at(self, index):
        """Return the element at ``index``, checking the bounds."""
        if not 0 <= index < len(self._items):
            raise IndexError("Deque.at: index out of range")
        return self._items[index]

    def front(self):
        if not self._items:
            raise IndexError("front of an empty deque")
        return self._items[0]

    def back(self):
        if not self._items:
            raise IndexError("back of an empty deque")
        return self._items[-1]

    def push_back(self, value) -> None:
        self._check_capacity(len(self._items) + 1)
        self._items.append(value)

    def push_front(self, value) -> None:
        self._check_capacity(len(self._items) + 1)
        self._items.appendleft(value)

    def pop_back(self) -> None:
        """Drop the last element; does nothing when empty."""
        if self._items:
            self._items.pop()

    def pop_front(self) -> None:
        """Drop the first element; does nothing when empty."""
        if self._items:
            self._items.popleft()

    def resize(self, n, value=0) -> None:
        """Grow with copies of ``value`` or shrink from the back to ``n``."""
        if n < 0:
            raise ValueError("size must not be negative")
        self._check_capacity(n)
        surplus = len(self._items) - n
        if surplus < 0:
            self._items.extend(repeat(value, -surplus))
        else:
            for _ in range(surplus):
                self._items.pop()

    def assign(self, iterable) -> None:
        """Replace the contents with the items of ``iterable``."""
        items = _deque(iterable)
        self._check_capacity(len(items))
        self._items = items

    def assign_fill(self, n, value) -> None:
        """Replace the contents with ``n`` copies of ``value``."""
        if n < 0:
            raise ValueError("count must not be negative")
        self._check_capacity(n)
        self._items = _deque(repeat(value, n))

    def insert(self, index, value, count=1) -> int:
        """Insert ``count`` copies of ``value`` before ``index``; return the index."""
        pos = self._position(index, allow_end=True)
        if count < 0:
            raise ValueError("count must not be negative")
        self._check_capacity(len(self._items) + count)
        self._items.rotate(-pos)
        self._items.extendleft(repeat(value, count))
        self._items.rotate(pos)
        return pos

    def insert_all(self, index, iterable) -> int:
        """Insert the items of ``iterable`` in order before ``index``."""
        pos = self._position(index, allow_end=True)
        values = list(iterable)
        self._check_capacity(len(self._items) + len(values))
        self._items.rotate(-pos)
        self._items.extendleft(reversed(values))
        self._items.rotate(pos)
        return pos

    def erase(self, index) -> int:
        """Remove the element at ``index``; return the position that follows."""
        pos = self._position(index, allow_end=False)
        del self._items[pos]
        return pos

    def erase_range(self, start, stop) -> int:
        """Remove the elements in ``[start, stop)``; return ``start``."""
        first = self._position(start, allow_end=True)
        last = self._position(stop, allow_end=True)
        if last < first:
            raise IndexError("range end lies before its start")
        self._items.rotate(-first)
        for _ in range(last - first):
            self._items.popleft()
        self._items.rotate(first)
        return first

    def clear(self) -> None:
        self._items.clear()

    def swap(self, other) -> None:
        if not isinstance(other, Deque):
            raise TypeError("can only swap with another Deque")
        self._items, other._items = other._items, self._items

    def copy(self) -> Deque:
        return Deque(self._items)

    def __eq__(self, other):
        if not isinstance(other, Deque):
            return NotImplemented
        return list(self._items) == list(other._items)

    def __lt__(self, other):
        if not isinstance(other, Deque):
            return NotImplemented
        return list(self._items) < list(other._items)

    def __le__(self, other):
        if not isinstance(other, Deque):
            return NotImplemented
        return list(self._items) <= list(other._items)

    def __gt__(self, other):
        if not isinstance(other, Deque):
            return NotImplemented
        return list(self._items) > list(other._items)

    def __ge__(self, other):
        if not isinstance(other, Deque):
            return NotImplemented
        return list(self._items) >= list(other._items)

    def __repr__(self):
        return f"Deque({list(self._items)!r})"