"""An ordered map backed by a red-black tree."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

__all__ = ["RBTree"]

K = TypeVar("K")
V = TypeVar("V")


class _Color(enum.Enum):
    RED = enum.auto()
    BLACK = enum.auto()


@dataclass(eq=False)
class _Node:
    key: Any
    value: Any
    color: _Color = _Color.RED
    parent: _Node | None = None
    left: _Node | None = None
    right: _Node | None = None


def _is_red(node: _Node | None) -> bool:
    return node is not None and node.color is _Color.RED


class RBTree(Generic[K, V]):
    """A map from ordered keys to values, kept balanced as a red-black tree."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def find(self, key: K) -> V | None:
        """Return the value stored under ``key``, or ``None``."""
        node = self._root
        while node is not None:
            if node.key < key:
                node = node.right
            elif node.key == key:
                return node.value
            else:
                node = node.left
        return None

    def insert(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        parent: _Node | None = None
        node = self._root
        while node is not None:
            parent = node
            if node.key < key:
                node = node.right
            elif node.key == key:
                node.value = value
                return
            else:
                node = node.left

        new = _Node(key, value, parent=parent)
        if parent is None:
            self._root = new
        elif key < parent.key:
            parent.left = new
        else:
            parent.right = new
        self._insert_fixup(new)

    def delete(self, key: K) -> bool:
        """Remove ``key`` and its value; return ``True`` if it was present."""
        parent: _Node | None = None
        node = self._root
        while node is not None:
            if node.key < key:
                parent = node
                node = node.right
            elif node.key == key:
                break
            else:
                parent = node
                node = node.left

        if node is None:
            return False

        cl, cr = node.left, node.right
        if cl is None:
            self._replace_node(parent, node, cr)
            if cr is None:
                deleted_color = node.color
            else:
                cr.parent = parent
                cr.color = _Color.BLACK
                deleted_color = _Color.RED
        elif cr is None:
            self._replace_node(parent, node, cl)
            cl.parent = parent
            cl.color = _Color.BLACK
            deleted_color = _Color.RED
        else:
            victim = cr
            while victim.left is not None:
                victim = victim.left
            if victim is cr:
                self._replace_node(parent, node, victim)
                victim.parent = parent
                deleted_color = victim.color
                victim.color = node.color
                victim.left = cl
                cl.parent = victim
                if victim.right is None:
                    parent = victim
                else:
                    deleted_color = _Color.RED
                    victim.right.color = _Color.BLACK
            else:
                vp = victim.parent
                assert vp is not None
                vr = victim.right
                vp.left = vr
                if vr is None:
                    deleted_color = victim.color
                else:
                    deleted_color = _Color.RED
                    vr.parent = vp
                    vr.color = _Color.BLACK
                self._replace_node(parent, node, victim)
                victim.parent = parent
                victim.color = node.color
                victim.left = cl
                victim.right = cr
                cl.parent = victim
                cr.parent = victim
                parent = vp

        if deleted_color is _Color.BLACK and parent is not None:
            self._delete_fixup(parent)
        return True

    def items(self) -> Iterator[tuple[K, V]]:
        """Yield ``(key, value)`` pairs in ascending key order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key, node.value
            node = node.right

    def __iter__(self) -> Iterator[K]:
        """Yield the keys in ascending order."""
        return (key for key, _ in self.items())

    def __repr__(self) -> str:
        return f"RBTree({dict(self.items())!r})"

    def _replace_node(self, parent: _Node | None, node: _Node, new: _Node | None) -> None:
        if parent is None:
            self._root = new
        elif parent.left is node:
            parent.left = new
        else:
            parent.right = new

    def _left_rotate(self, x: _Node) -> None:
        p = x.parent
        y = x.right
        assert y is not None
        c = y.left
        y.left = x
        x.parent = y
        x.right = c
        if c is not None:
            c.parent = x
        if p is None:
            self._root = y
        elif p.left is x:
            p.left = y
        else:
            p.right = y
        y.parent = p

    def _right_rotate(self, x: _Node) -> None:
        p = x.parent
        y = x.left
        assert y is not None
        c = y.right
        y.right = x
        x.parent = y
        x.left = c
        if c is not None:
            c.parent = x
        if p is None:
            self._root = y
        elif p.left is x:
            p.left = y
        else:
            p.right = y
        y.parent = p

    def _insert_fixup(self, node: _Node) -> None:
        parent = node.parent
        while True:
            if parent is None:
                node.color = _Color.BLACK
                return
            if parent.color is _Color.BLACK:
                return
            gparent = parent.parent
            assert gparent is not None
            if parent is not gparent.right:
                uncle = gparent.right
                if _is_red(uncle):
                    assert uncle is not None
                    parent.color = _Color.BLACK
                    uncle.color = _Color.BLACK
                    gparent.color = _Color.RED
                    node = gparent
                    parent = node.parent
                    continue
                if node is parent.right:
                    self._left_rotate(parent)
                    parent = node
                parent.color = _Color.BLACK
                gparent.color = _Color.RED
                self._right_rotate(gparent)
            else:
                uncle = gparent.left
                if _is_red(uncle):
                    assert uncle is not None
                    parent.color = _Color.BLACK
                    uncle.color = _Color.BLACK
                    gparent.color = _Color.RED
                    node = gparent
                    parent = node.parent
                    continue
                if node is parent.left:
                    self._right_rotate(parent)
                    parent = node
                parent.color = _Color.BLACK
                gparent.color = _Color.RED
                self._left_rotate(gparent)
            return

    def _delete_fixup(self, parent: _Node) -> None:
        node: _Node | None = None
        while True:
            sibling = parent.right
            if node is not sibling:
                assert sibling is not None
                if sibling.color is _Color.RED:
                    self._left_rotate(parent)
                    parent.color = _Color.RED
                    sibling.color = _Color.BLACK
                    sibling = parent.right
                    assert sibling is not None
                sl, sr = sibling.left, sibling.right
                if _is_red(sl):
                    assert sl is not None
                    sl.color = parent.color
                    parent.color = _Color.BLACK
                    self._right_rotate(sibling)
                    self._left_rotate(parent)
                elif _is_red(sr):
                    assert sr is not None
                    sr.color = parent.color
                    self._left_rotate(parent)
                else:
                    sibling.color = _Color.RED
                    if parent.color is _Color.BLACK:
                        node = parent
                        if node.parent is None:
                            return
                        parent = node.parent
                        continue
                    parent.color = _Color.BLACK
            else:
                sibling = parent.left
                assert sibling is not None
                if sibling.color is _Color.RED:
                    self._right_rotate(parent)
                    parent.color = _Color.RED
                    sibling.color = _Color.BLACK
                    sibling = parent.left
                    assert sibling is not None
                sl, sr = sibling.left, sibling.right
                if _is_red(sr):
                    assert sr is not None
                    sr.color = parent.color
                    parent.color = _Color.BLACK
                    self._left_rotate(sibling)
                    self._right_rotate(parent)
                elif _is_red(sl):
                    assert sl is not None
                    sl.color = parent.color
                    self._right_rotate(parent)
                else:
                    sibling.color = _Color.RED
                    if parent.color is _Color.BLACK:
                        node = parent
                        if node.parent is None:
                            return
                        parent = node.parent
                        continue
                    parent.color = _Color.BLACK
            return