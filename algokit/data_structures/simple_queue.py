"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

__all__ = ["Queue"]

T = TypeVar("T")


class Queue(Generic[T]):
    """FIFO queue; removing from or peeking at an empty queue gives ``None``."""

    def __init__(self) -> None:
        self._elements: deque[T] = deque()

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the back."""
        self._elements.append(value)

    def dequeue(self) -> T | None:
        """Remove and return the front value, or ``None`` if the queue is empty."""
        return self._elements.popleft() if self._elements else None

    def peek_front(self) -> T | None:
        """Return the front value without removing it, or ``None``."""
        return self._elements[0] if self._elements else None

    def __len__(self) -> int:
        return len(self._elements)

    def is_empty(self) -> bool:
        """Return whether the queue holds no values."""
        return not self._elements

    def __repr__(self) -> str:
        return f"Queue({list(self._elements)!r})"