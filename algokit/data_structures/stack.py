"""A last-in, first-out stack."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

__all__ = ["StackEmptyError", "Stack"]

T = TypeVar("T")


class StackEmptyError(IndexError):
    """Raised when taking from an empty stack."""

    def __init__(self) -> None:
        super().__init__("Stack is empty")


class Stack(Generic[T]):
    """LIFO stack; iteration runs from the top down."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, elem: T) -> None:
        """Put ``elem`` on top."""
        self._items.append(elem)

    def pop(self) -> T:
        """Remove and return the top element.

        Raises:
            StackEmptyError: if the stack is empty.
        """
        if not self._items:
            raise StackEmptyError()
        return self._items.pop()

    def is_empty(self) -> bool:
        """Return whether the stack holds no elements."""
        return not self._items

    def peek(self) -> T | None:
        """Return the top element without removing it, or ``None``."""
        return self._items[-1] if self._items else None

    def replace_top(self, value: T) -> T:
        """Replace the top element with ``value`` and return the old one.

        Raises:
            StackEmptyError: if the stack is empty.
        """
        if not self._items:
            raise StackEmptyError()
        old, self._items[-1] = self._items[-1], value
        return old

    def drain(self) -> Iterator[T]:
        """Pop and yield elements until the stack is empty."""
        while self._items:
            yield self._items.pop()

    def __iter__(self) -> Iterator[T]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"