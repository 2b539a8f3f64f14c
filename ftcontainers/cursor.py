"""Random-access positions into mutable sequences, and reversed positions."""

from __future__ import annotations

from typing import Any


class Cursor:
    """An immutable position within a mutable sequence.

    A cursor may sit anywhere from the first element to one past the last;
    only positions that hold an element can be read or written.
    """

    __slots__ = ("_sequence", "_index")

    def __init__(self, sequence, index):
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError("cursor index must be an integer")
        self._sequence = sequence
        self._index = index

    @property
    def sequence(self):
        """The sequence this cursor points into."""
        return self._sequence

    @property
    def index(self) -> int:
        """The position within the sequence."""
        return self._index

    def _check_dereferenceable(self) -> None:
        if not 0 <= self._index < len(self._sequence):
            raise IndexError(f"cursor position {self._index} holds no element")

    def _check_same_sequence(self, other: Cursor) -> None:
        if other._sequence is not self._sequence:
            raise ValueError("cursors refer to different sequences")

    def get(self) -> Any:
        """Return the element at this position."""
        self._check_dereferenceable()
        return self._sequence[self._index]

    def set(self, value) -> None:
        """Replace the element at this position."""
        self._check_dereferenceable()
        self._sequence[self._index] = value

    def __add__(self, n):
        if isinstance(n, bool) or not isinstance(n, int):
            return NotImplemented
        return Cursor(self._sequence, self._index + n)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Cursor):
            self._check_same_sequence(other)
            return self._index - other._index
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return Cursor(self._sequence, self._index - other)

    def __eq__(self, other):
        if not isinstance(other, Cursor):
            return NotImplemented
        return other._sequence is self._sequence and other._index == self._index

    def __hash__(self):
        return hash((id(self._sequence), self._index))

    def __lt__(self, other):
        if not isinstance(other, Cursor):
            return NotImplemented
        self._check_same_sequence(other)
        return self._index < other._index

    def __le__(self, other):
        if not isinstance(other, Cursor):
            return NotImplemented
        self._check_same_sequence(other)
        return self._index <= other._index

    def __gt__(self, other):
        if not isinstance(other, Cursor):
            return NotImplemented
        self._check_same_sequence(other)
        return self._index > other._index

    def __ge__(self, other):
        if not isinstance(other, Cursor):
            return NotImplemented
        self._check_same_sequence(other)
        return self._index >= other._index

    def __repr__(self):
        return f"Cursor(index={self._index})"


class ReverseCursor:
    """A position that walks a sequence backwards.

    It wraps a base cursor and refers to the element just before it, so a
    reverse cursor built on the end of a sequence reads its last element.
    Ordering compares the base cursors directly.
    """

    __slots__ = ("_base",)

    def __init__(self, base):
        if not isinstance(base, Cursor):
            raise TypeError("a reverse cursor wraps a Cursor")
        self._base = base

    def base(self) -> Cursor:
        """Return the wrapped forward cursor."""
        return self._base

    def get(self) -> Any:
        """Return the element just before the base position."""
        return (self._base - 1).get()

    def set(self, value) -> None:
        """Replace the element just before the base position."""
        (self._base - 1).set(value)

    def __add__(self, n):
        if isinstance(n, bool) or not isinstance(n, int):
            return NotImplemented
        return ReverseCursor(self._base - n)

    def __radd__(self, n):
        return self.__add__(n)

    def __sub__(self, n):
        if isinstance(n, ReverseCursor):
            return n._base - self._base
        if isinstance(n, bool) or not isinstance(n, int):
            return NotImplemented
        return ReverseCursor(self._base + n)

    def __getitem__(self, n):
        return (self + n).get()

    def __eq__(self, other):
        if not isinstance(other, ReverseCursor):
            return NotImplemented
        return self._base == other._base

    def __hash__(self):
        return hash(("reverse", self._base))

    def __lt__(self, other):
        if not isinstance(other, ReverseCursor):
            return NotImplemented
        return self._base < other._base

    def __le__(self, other):
        if not isinstance(other, ReverseCursor):
            return NotImplemented
        return self._base <= other._base

    def __gt__(self, other):
        if not isinstance(other, ReverseCursor):
            return NotImplemented
        return self._base > other._base

    def __ge__(self, other):
        if not isinstance(other, ReverseCursor):
            return NotImplemented
        return self._base >= other._base

    def __repr__(self):
        return f"ReverseCursor(base={self._base!r})"