"""A doubly linked list with positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

__all__ = ["LinkedList"]

T = TypeVar("T")


@dataclass(eq=False)
class _Node:
    val: Any
    prev: _Node | None = None
    next: _Node | None = None


class LinkedList(Generic[T]):
    """A doubly linked list of values."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def _check_index(self, index: int) -> None:
        if index < 0 or index > self._length:
            raise IndexError("Index out of bounds")

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert_at_head(self, obj: T) -> None:
        """Insert ``obj`` at the front."""
        node = _Node(obj, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._length += 1

    def insert_at_tail(self, obj: T) -> None:
        """Insert ``obj`` at the back."""
        node = _Node(obj, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def insert_at_ith(self, index: int, obj: T) -> None:
        """Insert ``obj`` so that it ends up at position ``index``.

        Raises:
            IndexError: if ``index`` is negative or greater than the length.
        """
        self._check_index(index)
        if index == 0 or self._head is None:
            self.insert_at_head(obj)
            return
        if index == self._length:
            self.insert_at_tail(obj)
            return
        successor = self._node_at(index)
        predecessor = successor.prev
        assert predecessor is not None
        node = _Node(obj, prev=predecessor, next=successor)
        predecessor.next = node
        successor.prev = node
        self._length += 1

    def delete_head(self) -> T | None:
        """Remove and return the first value, or ``None`` if the list is empty."""
        old = self._head
        if old is None:
            return None
        self._head = old.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._length -= 1
        return old.val

    def delete_tail(self) -> T | None:
        """Remove and return the last value, or ``None`` if the list is empty."""
        old = self._tail
        if old is None:
            return None
        self._tail = old.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._length -= 1
        return old.val

    def delete_ith(self, index: int) -> T | None:
        """Remove and return the value at ``index``.

        An index equal to the length removes the last value; an empty list gives
        ``None``.

        Raises:
            IndexError: if ``index`` is negative or greater than the length.
        """
        self._check_index(index)
        if index == 0 or self._head is None:
            return self.delete_head()
        if index >= self._length - 1:
            return self.delete_tail()
        node = self._node_at(index)
        assert node.prev is not None and node.next is not None
        node.prev.next = node.next
        node.next.prev = node.prev
        self._length -= 1
        return node.val

    def get(self, index: int) -> T | None:
        """Return the value at ``index``, or ``None`` if there is none."""
        if index < 0 or index >= self._length:
            return None
        return self._node_at(index).val

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.val
            node = node.next

    def __str__(self) -> str:
        return ", ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"LinkedList([{', '.join(repr(value) for value in self)}])"