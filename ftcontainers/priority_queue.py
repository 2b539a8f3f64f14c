"""A binary-heap priority queue with a pluggable ordering."""

from __future__ import annotations

from typing import Any, Callable


def less(x, y) -> bool:
    """Order by ``<``: the largest element comes out first."""
    return x < y


def greater(x, y) -> bool:
    """Order by ``>``: the smallest element comes out first."""
    return x > y


class PriorityQueue:
    """A heap whose top is the element that ``compare`` ranks highest.

    ``compare(a, b)`` is true when ``a`` has lower priority than ``b``.
    """

    def __init__(self, iterable=(), compare: Callable[[Any, Any], bool] = less):
        self._compare = compare
        self._heap: list = []
        for value in iterable:
            self.push(value)

    def __len__(self):
        return len(self._heap)

    def empty(self) -> bool:
        return not self._heap

    def top(self):
        """Return the highest-priority element."""
        if not self._heap:
            raise IndexError("top of an empty priority queue")
        return self._heap[0]

    def push(self, value) -> None:
        self._heap.append(value)
        self._sift_up()

    def pop(self) -> None:
        """Remove the highest-priority element."""
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)

    def swap(self, other: PriorityQueue) -> None:
        """Exchange contents and orderings with ``other``."""
        if not isinstance(other, PriorityQueue):
            raise TypeError("can only swap with another PriorityQueue")
        self._heap, other._heap = other._heap, self._heap
        self._compare, other._compare = other._compare, self._compare

    def _sift_up(self) -> None:
        heap = self._heap
        n = len(heap) - 1
        while n > 0:
            parent = (n - 1) // 2
            if not self._compare(heap[n], heap[parent]):
                heap[n], heap[parent] = heap[parent], heap[n]
            n = parent

    def _sift_down(self, idx: int) -> None:
        heap = self._heap
        for child in (2 * idx + 1, 2 * idx + 2):
            if child < len(heap) and self._compare(heap[idx], heap[child]):
                heap[idx], heap[child] = heap[child], heap[idx]
                self._sift_down(child)

    def __repr__(self):
        return f"PriorityQueue(size={len(self._heap)})"