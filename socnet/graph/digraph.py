"""Adjacency-list directed graph over integer vertex ids."""
from __future__ import annotations

from typing import FrozenSet

import networkx as nx

from socnet.exceptions import InvalidVertexError


class DirectedGraph:
    """Thin wrapper over ``networkx.DiGraph`` with strict edge insertion.

    networkx silently creates missing endpoints when an edge is added; here
    both endpoints must be added as vertices first.
    """

    def __init__(self) -> None:
        self._graph = nx.DiGraph()

    def add_vertex(self, vertex: int) -> None:
        self._graph.add_node(vertex)

    def add_edge(self, source: int, target: int) -> None:
        for vertex in (source, target):
            if vertex not in self._graph:
                raise InvalidVertexError(vertex)
        self._graph.add_edge(source, target)

    def adjacent(self, vertex: int) -> FrozenSet[int]:
        """Outgoing neighbours of ``vertex``; empty if it has none."""
        if vertex not in self._graph:
            return frozenset()
        return frozenset(self._graph.successors(vertex))

    def out_degree(self, vertex: int) -> int:
        if vertex not in self._graph:
            return 0
        return self._graph.out_degree(vertex)

    def has_vertex(self, vertex: int) -> bool:
        return vertex in self._graph

    def has_edge(self, source: int, target: int) -> bool:
        return self._graph.has_edge(source, target)

    def vertex_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    @property
    def view(self) -> nx.DiGraph:
        """Read-only view of the underlying networkx graph (no copy)."""
        return self._graph.copy(as_view=True)

    def to_networkx(self) -> nx.DiGraph:
        """Return a copy of the underlying networkx graph."""
        return self._graph.copy()
