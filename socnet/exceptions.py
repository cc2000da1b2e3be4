"""Error types raised by the socnet analytics core."""
from __future__ import annotations


class SocNetError(Exception):
    """Base class for all socnet errors."""


class InvalidVertexError(SocNetError, ValueError):
    """An edge references a vertex that was never added to the graph."""

    def __init__(self, vertex: int) -> None:
        super().__init__(f"vertex {vertex} is not registered in the graph")
        self.vertex = vertex


class UserNotFoundError(SocNetError, LookupError):
    """A query names a user (or id) that never appeared in the input."""

    def __init__(self, user) -> None:
        super().__init__(f"unknown user: {user!r}")
        self.user = user


class DegenerateGraphError(SocNetError, ArithmeticError):
    """A metric is undefined for the current graph (too few users or edges)."""


class MalformedInputError(SocNetError, ValueError):
    """Follow pairs could not be parsed into (follower, followee) names."""
