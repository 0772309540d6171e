"""
Core adjacency-list graph store.

This module provides the fundamental graph structure without higher-level
algorithms such as path finding or traversal ordering.
"""

import logging
from typing import Dict, Generic, Hashable, Iterable, Iterator, List, Optional, Tuple, TypeVar

from ..classes.exceptions import MissingVertexError, NotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


class AdjacencyGraph(Generic[T]):
    """
    Adjacency-list graph keyed by arbitrary hashable vertex identifiers.

    This class manages the vertex -> neighbors mapping. It provides:
    - Idempotent vertex registration
    - Directed or undirected edge insertion
    - Neighbor lookup and enumeration in insertion order
    - Basic graph queries (counts, degree)

    Duplicate edges and self-loops are stored as given.
    """

    def __init__(self, directed: bool = False):
        """
        Initialize an empty graph.

        Args:
            directed: Default edge mode for add_edge when no mode is passed
        """
        self.directed = directed
        self.adjacency_list: Dict[T, List[T]] = {}
        self._edge_count = 0

        logger.debug(f"Initialized {'directed' if directed else 'undirected'} AdjacencyGraph")

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[T, T]], vertices: Iterable[T] = (),
                   directed: bool = False) -> "AdjacencyGraph[T]":
        """
        Build a graph from an edge iterable.

        Args:
            edges: (source, destination) pairs, inserted in order
            vertices: Vertices registered up front, before any edge
            directed: Edge mode for the whole graph

        Returns:
            The populated graph
        """
        graph = cls(directed=directed)
        for vertex in vertices:
            graph.add_vertex(vertex)
        for source, destination in edges:
            graph.add_edge(source, destination, auto_add=True)
        return graph

    def add_vertex(self, vertex: T) -> None:
        """Register a vertex with an empty neighbor list if not already present."""
        if vertex not in self.adjacency_list:
            self.adjacency_list[vertex] = []
            logger.debug(f"Added vertex {vertex!r}")

    def add_edge(self, source: T, destination: T, directed: Optional[bool] = None,
                 auto_add: bool = False) -> None:
        """
        Insert an edge between two vertices.

        Args:
            source: Source vertex, must already be registered
            destination: Destination vertex; must be registered for undirected edges
            directed: Edge mode for this call, defaults to the graph's mode
            auto_add: Register missing endpoints instead of raising

        Raises:
            MissingVertexError: If a required endpoint is not registered
        """
        if directed is None:
            directed = self.directed

        if auto_add:
            self.add_vertex(source)
            if not directed:
                self.add_vertex(destination)

        # Check both endpoints before touching the map
        if source not in self.adjacency_list:
            raise MissingVertexError(source)
        if not directed and destination not in self.adjacency_list:
            raise MissingVertexError(destination)

        self.adjacency_list[source].append(destination)
        if not directed:
            self.adjacency_list[destination].append(source)
        self._edge_count += 1

        logger.debug(f"Added {'directed' if directed else 'undirected'} edge {source!r} -> {destination!r}")

    def neighbors(self, vertex: T) -> List[T]:
        """
        Get the neighbors of a vertex.

        Args:
            vertex: The vertex to look up

        Returns:
            Copy of the vertex's adjacency list, in insertion order

        Raises:
            NotFoundError: If the vertex was never added
        """
        try:
            return list(self.adjacency_list[vertex])
        except KeyError:
            raise NotFoundError(vertex) from None

    def enumerate(self) -> Iterator[Tuple[T, List[T]]]:
        """Yield (vertex, neighbors) pairs in insertion order."""
        for vertex, neighbors in self.adjacency_list.items():
            yield vertex, list(neighbors)

    def has_vertex(self, vertex: T) -> bool:
        return vertex in self.adjacency_list

    def vertices(self) -> List[T]:
        """Get all registered vertices in insertion order."""
        return list(self.adjacency_list)

    def vertex_count(self) -> int:
        return len(self.adjacency_list)

    def edge_count(self) -> int:
        """
        Count inserted edges.

        Every successful add_edge call counts once, whatever its direction,
        including duplicates and self-loops.

        Returns:
            Number of edges
        """
        return self._edge_count

    def degree(self, vertex: T) -> int:
        """Get the length of a vertex's adjacency list."""
        return len(self.neighbors(vertex))

    def to_dict(self) -> Dict[T, List[T]]:
        """Return a copy of the adjacency map."""
        return {vertex: list(neighbors) for vertex, neighbors in self.adjacency_list.items()}

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.adjacency_list

    def __len__(self) -> int:
        return len(self.adjacency_list)

    def __repr__(self) -> str:
        mode = "directed" if self.directed else "undirected"
        return f"AdjacencyGraph({mode}, vertices={self.vertex_count()})"
