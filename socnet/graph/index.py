"""Stable name <-> vertex id mapping."""
from __future__ import annotations

from typing import Dict, FrozenSet, List

from socnet.exceptions import UserNotFoundError


class VertexIndex:
    """Assigns each distinct user name a dense integer id.

    Ids are handed out in order of first appearance, starting at 0, so two
    distinct names can never share an id and iteration in ascending id order
    follows the input order.
    """

    def __init__(self) -> None:
        self._ids: Dict[str, int] = {}
        self._names: List[str] = []

    def id_for(self, name: str) -> int:
        """Return the id for ``name``, registering it on first use."""
        vertex = self._ids.get(name)
        if vertex is None:
            vertex = len(self._names)
            self._ids[name] = vertex
            self._names.append(name)
        return vertex

    def lookup(self, name: str) -> int:
        """Return the id of an already registered name."""
        try:
            return self._ids[name]
        except KeyError:
            raise UserNotFoundError(name) from None

    def name_for(self, vertex: int) -> str:
        if isinstance(vertex, int) and 0 <= vertex < len(self._names):
            return self._names[vertex]
        raise UserNotFoundError(vertex)

    def all_ids(self) -> FrozenSet[int]:
        return frozenset(range(len(self._names)))

    def names(self) -> List[str]:
        """Registered names in ascending id order."""
        return list(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._ids

    def __len__(self) -> int:
        return len(self._names)
