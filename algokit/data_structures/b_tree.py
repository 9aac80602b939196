"""A B-tree of ordered keys supporting insertion and search."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

__all__ = ["BTree"]

T = TypeVar("T")


@dataclass
class _Node:
    keys: list[Any] = field(default_factory=list)
    children: list[_Node] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children


class BTree(Generic[T]):
    """A B-tree whose nodes hold up to ``2 * branch_factor - 1`` keys."""

    def __init__(self, branch_factor: int) -> None:
        if branch_factor < 1:
            raise ValueError(f"branch factor must be at least 1, got {branch_factor}")
        self._degree = 2 * branch_factor
        self._max_keys = self._degree - 1
        self._mid_key_index = (self._degree - 1) // 2
        self._root = _Node()

    def _is_full(self, node: _Node) -> bool:
        return len(node.keys) == self._max_keys

    def _split_child(self, parent: _Node, child_index: int) -> None:
        """Move the middle key of a full child up and split the child in two."""
        child = parent.children[child_index]
        mid = self._mid_key_index
        middle_key = child.keys[mid]
        right = _Node(keys=child.keys[mid + 1 :])
        child.keys = child.keys[:mid]
        if not child.is_leaf:
            right.children = child.children[mid + 1 :]
            child.children = child.children[: mid + 1]
        parent.keys.insert(child_index, middle_key)
        parent.children.insert(child_index + 1, right)

    def _insert_non_full(self, node: _Node, key: T) -> None:
        while True:
            index = bisect_left(node.keys, key)
            if node.is_leaf:
                node.keys.insert(index, key)
                return
            if self._is_full(node.children[index]):
                self._split_child(node, index)
                if node.keys[index] < key:
                    index += 1
            node = node.children[index]

    def insert(self, key: T) -> None:
        """Insert ``key``; duplicates are kept."""
        if self._is_full(self._root):
            old_root = self._root
            self._root = _Node(children=[old_root])
            self._split_child(self._root, 0)
        self._insert_non_full(self._root, key)

    def search(self, key: T) -> bool:
        """Return whether ``key`` is in the tree."""
        node = self._root
        while True:
            index = bisect_right(node.keys, key)
            if index > 0 and node.keys[index - 1] == key:
                return True
            if node.is_leaf:
                return False
            node = node.children[index]

    def __contains__(self, key: object) -> bool:
        return self.search(key)  # type: ignore[arg-type]

    def _render(self, node: _Node, depth: int) -> str:
        def wrap(text: str, level: int) -> str:
            return "{" * level + text + "}" * level

        if node.is_leaf:
            return f" {wrap(repr(node.keys), depth)} "
        parts = []
        for child, key in zip(node.children, node.keys):
            parts.append(self._render(child, depth + 1))
            parts.append(wrap(repr(key), depth))
        parts.append(self._render(node.children[-1], depth + 1))
        return "".join(parts)

    def traverse(self) -> str:
        """Return an in-order rendering of the tree, nesting shown by braces."""
        return self._render(self._root, 0)