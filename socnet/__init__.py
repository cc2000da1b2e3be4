"""Follow-graph analytics for small social networks."""

from .graph import NetworkAnalytics, NetworkModel, PathFinder

__all__ = [
    "NetworkAnalytics",
    "NetworkModel",
    "PathFinder",
]
