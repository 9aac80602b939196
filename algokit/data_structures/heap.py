"""A binary heap ordered by a comparison function, consumed as an iterator."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

__all__ = ["Heap", "MinHeap", "MaxHeap"]

T = TypeVar("T")


class Heap(Generic[T]):
    """Binary heap; ``comparator(a, b)`` is true when ``a`` should come out before ``b``.

    Iterating the heap removes its items in order.
    """

    def __init__(self, comparator: Callable[[T, T], bool]) -> None:
        self._comparator = comparator
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Return whether the heap holds no items."""
        return not self._items

    def add(self, value: T) -> None:
        """Add ``value`` to the heap."""
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if self._comparator(items[index], items[parent]):
                items[index], items[parent] = items[parent], items[index]
            index = parent

    def _preferred_child(self, index: int) -> int:
        left = 2 * index + 1
        right = left + 1
        if right >= len(self._items):
            return left
        return left if self._comparator(self._items[left], self._items[right]) else right

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        items = self._items
        if not items:
            raise StopIteration
        last = items.pop()
        if not items:
            return last
        top, items[0] = items[0], last
        index = 0
        while 2 * index + 1 < len(items):
            child = self._preferred_child(index)
            if not self._comparator(items[index], items[child]):
                items[index], items[child] = items[child], items[index]
            index = child
        return top


class MinHeap(Heap[T]):
    """Heap yielding the smallest item first."""

    def __init__(self) -> None:
        super().__init__(operator.lt)


class MaxHeap(Heap[T]):
    """Heap yielding the largest item first."""

    def __init__(self) -> None:
        super().__init__(operator.gt)