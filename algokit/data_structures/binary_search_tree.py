"""An unbalanced binary search tree of ordered values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

__all__ = ["BinarySearchTree"]

T = TypeVar("T")


@dataclass
class _Node:
    value: Any
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree(Generic[T]):
    """A binary search tree; equal values go to the right subtree."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def search(self, value: T) -> bool:
        """Return whether ``value`` is in the tree."""
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if node.value > value else node.right
        return False

    def __contains__(self, value: object) -> bool:
        return self.search(value)  # type: ignore[arg-type]

    def insert(self, value: T) -> None:
        """Insert ``value`` at its place in the tree."""
        if self._root is None:
            self._root = _Node(value)
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(value)
                    return
                node = node.right

    def minimum(self) -> T | None:
        """Return the smallest value, or ``None`` for an empty tree."""
        node = self._root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node.value

    def maximum(self) -> T | None:
        """Return the largest value, or ``None`` for an empty tree."""
        node = self._root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node.value

    def floor(self, value: T) -> T | None:
        """Return the largest value not greater than ``value``, or ``None``."""
        best: T | None = None
        node = self._root
        while node is not None:
            if node.value == value:
                return node.value
            if node.value > value:
                node = node.left
            else:
                best = node.value
                node = node.right
        return best

    def ceil(self, value: T) -> T | None:
        """Return the smallest value not less than ``value``, or ``None``."""
        best: T | None = None
        node = self._root
        while node is not None:
            if node.value == value:
                return node.value
            if node.value < value:
                node = node.right
            else:
                best = node.value
                node = node.left
        return best

    def __iter__(self) -> Iterator[T]:
        """Yield the values in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self)!r})"