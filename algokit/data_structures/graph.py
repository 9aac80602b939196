"""Weighted directed and undirected graphs stored as adjacency tables."""

from __future__ import annotations

__all__ = ["NodeNotInGraph", "Graph", "DirectedGraph", "UndirectedGraph"]

Edge = tuple[str, str, int]


class NodeNotInGraph(LookupError):
    """Raised when a node that is not in the graph is accessed."""

    def __init__(self, node: str | None = None) -> None:
        super().__init__("accessing a node that is not in the graph")
        self.node = node


class Graph:
    """Adjacency table mapping each node to its outgoing ``(node, weight)`` pairs."""

    def __init__(self) -> None:
        self._adjacency: dict[str, list[tuple[str, int]]] = {}

    def add_node(self, node: str) -> bool:
        """Add ``node``; return ``True`` if it was not yet in the graph."""
        if node in self._adjacency:
            return False
        self._adjacency[node] = []
        return True

    def add_edge(self, edge: Edge) -> None:
        """Add the edge ``(from, to, weight)``, adding its nodes as needed."""
        source, target, weight = edge
        self.add_node(source)
        self.add_node(target)
        self._adjacency[source].append((target, weight))

    def neighbours(self, node: str) -> list[tuple[str, int]]:
        """Return the ``(node, weight)`` pairs reachable from ``node``.

        Raises:
            NodeNotInGraph: if ``node`` is not in the graph.
        """
        try:
            return list(self._adjacency[node])
        except KeyError:
            raise NodeNotInGraph(node) from None

    def contains(self, node: str) -> bool:
        """Return whether ``node`` is in the graph."""
        return node in self._adjacency

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def nodes(self) -> set[str]:
        """Return the set of nodes."""
        return set(self._adjacency)

    def edges(self) -> list[Edge]:
        """Return every edge as ``(from, to, weight)``."""
        return [
            (source, target, weight)
            for source, targets in self._adjacency.items()
            for target, weight in targets
        ]


class DirectedGraph(Graph):
    """A graph whose edges go one way."""


class UndirectedGraph(Graph):
    """A graph whose edges go both ways."""

    def add_edge(self, edge: Edge) -> None:
        """Add ``(a, b, weight)`` as edges from ``a`` to ``b`` and from ``b`` to ``a``."""
        first, second, weight = edge
        self.add_node(first)
        self.add_node(second)
        self._adjacency[first].append((second, weight))
        self._adjacency[second].append((first, weight))