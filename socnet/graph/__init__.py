"""Graph construction and analysis for follow networks."""

from .analytics import NO_PATH, UNREACHABLE, NetworkAnalytics
from .digraph import DirectedGraph
from .index import VertexIndex
from .model import FollowPair, NetworkModel
from .pathfinder import PathFinder

__all__ = [
    "DirectedGraph",
    "FollowPair",
    "NO_PATH",
    "NetworkAnalytics",
    "NetworkModel",
    "PathFinder",
    "UNREACHABLE",
    "VertexIndex",
]
