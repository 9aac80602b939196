"""A prefix tree mapping sequences of hashable keys to values."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

__all__ = ["Trie"]

V = TypeVar("V")

_MISSING: Any = object()


@dataclass
class _Node:
    children: dict[Hashable, _Node] = field(default_factory=dict)
    value: Any = _MISSING


class Trie(Generic[V]):
    """Map from iterables of hashable parts (such as strings) to values."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, key: Iterable[Hashable], value: V) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        node = self._root
        for part in key:
            node = node.children.setdefault(part, _Node())
        node.value = value

    def get(self, key: Iterable[Hashable]) -> V | None:
        """Return the value stored under ``key``, or ``None``."""
        node = self._root
        for part in key:
            child = node.children.get(part)
            if child is None:
                return None
            node = child
        return None if node.value is _MISSING else node.value