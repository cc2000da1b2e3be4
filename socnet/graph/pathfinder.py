"""Breadth-first shortest paths over the ``following`` graph."""
from __future__ import annotations

from typing import Dict, List, Optional

import networkx as nx

from socnet.graph.model import NetworkModel


class PathFinder:
    """Unweighted shortest paths between users of a :class:`NetworkModel`."""

    def __init__(self, model: NetworkModel) -> None:
        self._model = model

    def predecessors(self, source: int, destination: Optional[int] = None) -> Dict[int, int]:
        """Run BFS from ``source`` and return the predecessor map.

        Neighbours are expanded in ascending id order, so the chosen shortest
        path is the same on every run. The search stops once ``destination``
        is discovered; with no destination it explores everything reachable.
        """
        prev: Dict[int, int] = {}
        for parent, vertex in nx.bfs_edges(self._model.following.view, source, sort_neighbors=sorted):
            prev[vertex] = parent
            if vertex == destination:
                break
        return prev

    def shortest_path(self, source: int, destination: int) -> List[str]:
        """Names from ``destination`` back to ``source`` (source excluded).

        Returns an empty list if ``destination`` is unreachable. The self case
        also yields an empty list; callers decide what a user's distance to
        itself means. ``len()`` of a non-empty result is the hop distance.
        """
        if source == destination:
            return []

        prev = self.predecessors(source, destination)
        if destination not in prev:
            return []

        path: List[str] = []
        vertex = destination
        while vertex != source:
            path.append(self._model.user_name(vertex))
            vertex = prev[vertex]
        return path

    def hop_distances(self, source: int) -> Dict[int, int]:
        """Hop count from ``source`` to every vertex it reaches (itself excluded)."""
        distances = nx.single_source_shortest_path_length(self._model.following.view, source)
        distances.pop(source, None)
        return distances
