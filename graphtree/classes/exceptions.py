"""
Exception types raised by the graph store.
"""

from typing import Any


class GraphError(Exception):
    """Base class for graph store errors."""


class MissingVertexError(GraphError, KeyError):
    """Raised when an edge references a vertex that was never added."""

    def __init__(self, vertex: Any):
        super().__init__(vertex)
        self.vertex = vertex

    def __str__(self) -> str:
        return f"Vertex {self.vertex!r} is not registered; add it before inserting edges"


class NotFoundError(GraphError, KeyError):
    """Raised when looking up a vertex that was never added."""

    def __init__(self, vertex: Any):
        super().__init__(vertex)
        self.vertex = vertex

    def __str__(self) -> str:
        return f"Vertex {self.vertex!r} not found in graph"
