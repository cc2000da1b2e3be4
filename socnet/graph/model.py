"""Build the two follow graphs from raw (follower, followee) pairs."""
from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple

from socnet.exceptions import MalformedInputError, UserNotFoundError
from socnet.graph.digraph import DirectedGraph
from socnet.graph.index import VertexIndex
from socnet.performance_profiler import profile_operation, profile_phase

logger = logging.getLogger(__name__)

FollowPair = Tuple[str, str]


def _validate_pair(position: int, pair: Sequence) -> FollowPair:
    if isinstance(pair, (str, bytes)) or not isinstance(pair, Sequence) or len(pair) != 2:
        raise MalformedInputError(
            f"pair #{position} must be a (follower, followee) 2-tuple; received {pair!r}"
        )
    follower, followee = pair
    for role, name in (("follower", follower), ("followee", followee)):
        if not isinstance(name, str) or not name.strip():
            raise MalformedInputError(
                f"pair #{position} has an empty or non-string {role}: {pair!r}"
            )
    return follower, followee


class NetworkModel:
    """Immutable snapshot of a follow relation.

    Holds the name index plus two graphs over the same vertices:

    - ``followed_by``: ``adjacent(u)`` is the set of users following ``u``
    - ``following``: ``adjacent(u)`` is the set of users ``u`` follows

    Build instances with :meth:`from_pairs`; nothing mutates them afterwards,
    so a finished model can be shared by concurrent readers.
    """

    def __init__(self, index: VertexIndex, followed_by: DirectedGraph, following: DirectedGraph) -> None:
        self._index = index
        self._followed_by = followed_by
        self._following = following

    @classmethod
    def from_pairs(cls, pairs: Iterable[Sequence[str]]) -> "NetworkModel":
        """Single pass over ``(follower, followee)`` pairs.

        Raises:
            MalformedInputError: a pair is not two non-empty names.
        """
        pairs = list(pairs)
        index = VertexIndex()
        followed_by = DirectedGraph()
        following = DirectedGraph()

        with profile_operation("build_network_model", {"pairs": len(pairs)}):
            with profile_phase("add_relations", "build_network_model"):
                for position, raw in enumerate(pairs):
                    follower, followee = _validate_pair(position, raw)
                    follower_id = index.id_for(follower)
                    followee_id = index.id_for(followee)

                    for graph in (followed_by, following):
                        graph.add_vertex(follower_id)
                        graph.add_vertex(followee_id)

                    followed_by.add_edge(followee_id, follower_id)
                    following.add_edge(follower_id, followee_id)

        duplicates = len(pairs) - following.edge_count()
        logger.info(
            f"Built network model: {len(index)} users, {following.edge_count()} follow edges"
            + (f" ({duplicates} duplicate pairs ignored)" if duplicates else "")
        )
        return cls(index, followed_by, following)

    @property
    def index(self) -> VertexIndex:
        return self._index

    @property
    def followed_by(self) -> DirectedGraph:
        return self._followed_by

    @property
    def following(self) -> DirectedGraph:
        return self._following

    def user_count(self) -> int:
        return len(self._index)

    def user_ids(self) -> List[int]:
        """All user ids in ascending order (first-seen order of the input)."""
        return sorted(self._index.all_ids())

    def user_names(self) -> List[str]:
        return self._index.names()

    def user_id(self, name: str) -> int:
        return self._index.lookup(name)

    def user_name(self, vertex: int) -> str:
        return self._index.name_for(vertex)

    def follower_count(self, vertex: int) -> int:
        self._require(vertex)
        return self._followed_by.out_degree(vertex)

    def following_count(self, vertex: int) -> int:
        self._require(vertex)
        return self._following.out_degree(vertex)

    def _require(self, vertex: int) -> None:
        if not self._followed_by.has_vertex(vertex):
            raise UserNotFoundError(vertex)

    def __repr__(self) -> str:
        return f"NetworkModel(users={self.user_count()}, edges={self._following.edge_count()})"
