"""Structural queries over a built :class:`NetworkModel`."""
from __future__ import annotations

import logging
import sys
from typing import Any, Callable, Dict, List, Optional

from socnet.config import AnalyticsSettings, get_analytics_settings
from socnet.exceptions import DegenerateGraphError
from socnet.graph.digraph import DirectedGraph
from socnet.graph.model import NetworkModel
from socnet.graph.pathfinder import PathFinder
from socnet.performance_profiler import profile_operation, profile_phase

logger = logging.getLogger(__name__)

# Distance reported for a pair with no directed path.
UNREACHABLE = sys.maxsize
NO_PATH = "[NONE]"


class NetworkAnalytics:
    """Read-only metrics over a follow network.

    Every method that takes a user name raises ``UserNotFoundError`` for names
    that never appeared in the input. Ties in :meth:`most_popular` and
    :meth:`top_follower` go to the lowest id, i.e. the user seen first.
    """

    def __init__(self, model: NetworkModel, settings: Optional[AnalyticsSettings] = None) -> None:
        self._model = model
        self._paths = PathFinder(model)
        self._settings = settings if settings is not None else get_analytics_settings()

    @property
    def model(self) -> NetworkModel:
        return self._model

    @property
    def settings(self) -> AnalyticsSettings:
        return self._settings

    def _max_degree_user(self, graph: DirectedGraph, label: str) -> str:
        if self._model.user_count() == 0:
            raise DegenerateGraphError(f"cannot compute {label} of an empty network")
        best_id = None
        best_size = -1
        for vertex in self._model.user_ids():
            size = graph.out_degree(vertex)
            if size > best_size:
                best_id, best_size = vertex, size
        return self._model.user_name(best_id)

    def most_popular(self) -> str:
        """User with the largest number of followers."""
        return self._max_degree_user(self._model.followed_by, "most popular user")

    def top_follower(self) -> str:
        """User who follows the largest number of accounts."""
        return self._max_degree_user(self._model.following, "top follower")

    def leaders(self) -> List[str]:
        """Users followed by at least the threshold share of all users who
        also have more followers than accounts they follow. Sorted by name."""
        total = self._model.user_count()
        cutoff = self._settings.leader_threshold * total
        leaders = []
        for vertex in self._model.user_ids():
            followers = self._model.follower_count(vertex)
            following = self._model.following_count(vertex)
            if followers >= cutoff and followers > following:
                leaders.append(self._model.user_name(vertex))
        return sorted(leaders)

    def density(self) -> float:
        """Edges divided by the N * (N - 1) possible directed edges."""
        graph = self._model.followed_by
        n = graph.vertex_count()
        if n <= 1:
            raise DegenerateGraphError(f"density needs at least 2 users; network has {n}")
        return graph.edge_count() / (n * (n - 1))

    def reciprocity(self) -> float:
        """Share of follow edges that are returned in the other direction."""
        followed_by = self._model.followed_by
        following = self._model.following
        edges = followed_by.edge_count()
        if edges == 0:
            raise DegenerateGraphError("reciprocity needs at least 1 follow edge; network has none")

        mutual = 0
        for vertex in self._model.user_ids():
            followees = following.adjacent(vertex)
            mutual += sum(1 for follower in followed_by.adjacent(vertex) if follower in followees)
        return mutual / edges

    def distance(self, user1: str, user2: str) -> int:
        """Hop count of the shortest follow chain, ``UNREACHABLE`` if none."""
        source = self._model.user_id(user1)
        destination = self._model.user_id(user2)
        if user1 == user2:
            return 0
        hops = len(self._paths.shortest_path(source, destination))
        return hops if hops else UNREACHABLE

    def path(self, user1: str, user2: str) -> str:
        """Shortest follow chain rendered as ``[user1|...|user2]``.

        Returns ``NO_PATH`` when there is none, which includes ``user1 == user2``.
        """
        source = self._model.user_id(user1)
        destination = self._model.user_id(user2)
        chain = self._paths.shortest_path(source, destination)
        if not chain:
            return NO_PATH
        return "[" + "|".join([user1, *reversed(chain)]) + "]"

    def centrality(self, user: str, reachable_only: Optional[bool] = None) -> float:
        """Mean shortest-path distance from ``user`` to every other user.

        Unreachable users count as ``UNREACHABLE`` unless ``reachable_only``
        (or the configured default) is set, in which case they add nothing to
        the sum. The divisor is always ``user_count - 1``.
        """
        source = self._model.user_id(user)
        total = self._model.user_count()
        if total <= 1:
            raise DegenerateGraphError(f"centrality needs at least 2 users; network has {total}")
        if reachable_only is None:
            reachable_only = self._settings.centrality_reachable_only

        hops = self._paths.hop_distances(source)
        distance_sum = float(sum(hops.values()))
        unreachable = total - 1 - len(hops)
        if unreachable and not reachable_only:
            logger.debug(f"centrality({user!r}): {unreachable} users unreachable")
            distance_sum += float(UNREACHABLE) * unreachable
        return distance_sum / (total - 1)

    def reachable(self, user: str) -> List[str]:
        """Every other user reachable from ``user`` by following edges, sorted."""
        source = self._model.user_id(user)
        hops = self._paths.hop_distances(source)
        return sorted(self._model.user_name(vertex) for vertex in hops)

    def summary(self) -> Dict[str, Any]:
        """Graph-wide metrics as a JSON-friendly dict.

        Metrics whose preconditions fail are reported as ``None`` with the
        reason under ``"errors"``.
        """
        metrics: Dict[str, Callable[[], Any]] = {
            "most_popular": self.most_popular,
            "top_follower": self.top_follower,
            "leaders": self.leaders,
            "density": self.density,
            "reciprocity": self.reciprocity,
        }
        result: Dict[str, Any] = {
            "users": self._model.user_count(),
            "edges": self._model.following.edge_count(),
        }
        errors: Dict[str, str] = {}

        with profile_operation("network_summary", dict(result)):
            for name, compute in metrics.items():
                with profile_phase(name, "network_summary"):
                    try:
                        result[name] = compute()
                    except DegenerateGraphError as exc:
                        logger.warning(f"{name} unavailable: {exc}")
                        result[name] = None
                        errors[name] = str(exc)

        result["errors"] = errors
        return result
