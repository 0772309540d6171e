"""
Adjacency matrix conversion for the graph store.

This module converts between AdjacencyGraph and dense numpy matrices.
"""

import logging
from typing import Hashable, List, Optional, Sequence, Tuple

import numpy as np

from ..classes.exceptions import NotFoundError
from .graph import AdjacencyGraph

logger = logging.getLogger(__name__)


def to_adjacency_matrix(graph: AdjacencyGraph,
                        order: Optional[Sequence[Hashable]] = None) -> Tuple[np.ndarray, List[Hashable]]:
    """
    Build a dense adjacency matrix from a graph.

    Args:
        graph: Graph to convert
        order: Row/column vertex order, defaults to the graph's insertion order

    Returns:
        Tuple of (matrix, labels). Cell [i, j] counts how many times labels[j]
        appears in the adjacency list of labels[i].

    Raises:
        NotFoundError: If order names a vertex that is not in the graph
        ValueError: If order repeats a vertex
    """
    labels = list(order) if order is not None else graph.vertices()
    if len(set(labels)) != len(labels):
        raise ValueError(f"Vertex order contains repeated labels: {labels}")
    index = {vertex: i for i, vertex in enumerate(labels)}

    matrix = np.zeros((len(labels), len(labels)), dtype=np.int64)
    for vertex in labels:
        if vertex not in graph:
            raise NotFoundError(vertex)
        row = index[vertex]
        for neighbor in graph.adjacency_list[vertex]:
            col = index.get(neighbor)
            # Neighbors outside the requested order are dropped
            if col is not None:
                matrix[row, col] += 1

    logger.debug(f"Built {len(labels)}x{len(labels)} adjacency matrix")
    return matrix, labels


def from_adjacency_matrix(matrix, labels: Optional[Sequence[Hashable]] = None,
                          directed: bool = True) -> AdjacencyGraph:
    """
    Build a graph from a square adjacency matrix.

    Args:
        matrix: Square array-like of non-negative edge counts
        labels: Vertex identifiers for rows/columns, defaults to 0..n-1
        directed: If False, only the upper triangle is read and every
                  edge is inserted in both directions. A diagonal value
                  of 2k then means k self-loops, matching to_adjacency_matrix.

    Returns:
        The populated AdjacencyGraph

    Raises:
        ValueError: If the matrix is not square, holds negative or fractional
                    cells, or has an odd undirected diagonal, or if labels
                    repeat or do not match its size
    """
    array = np.asarray(matrix)
    if array.ndim != 2 or array.shape[0] != array.shape[1]:
        raise ValueError(f"Adjacency matrix must be square, got shape {array.shape}")
    if array.dtype == np.bool_:
        array = array.astype(np.int64)
    if not (np.issubdtype(array.dtype, np.integer) or np.issubdtype(array.dtype, np.floating)):
        raise ValueError(f"Adjacency matrix must be numeric, got dtype {array.dtype}")
    if not np.all(np.isfinite(array)) or np.any(array < 0) or np.any(array != np.floor(array)):
        raise ValueError("Adjacency matrix cells must be non-negative whole numbers")

    counts = array.astype(np.int64)
    if not directed and np.any(np.diagonal(counts) % 2):
        raise ValueError("Undirected adjacency matrix must have an even diagonal")

    n = array.shape[0]
    labels = list(labels) if labels is not None else list(range(n))
    if len(labels) != n:
        raise ValueError(f"Expected {n} labels, got {len(labels)}")
    if len(set(labels)) != n:
        raise ValueError(f"Matrix labels contain repeats: {labels}")

    graph = AdjacencyGraph(directed=directed)
    for vertex in labels:
        graph.add_vertex(vertex)

    for i in range(n):
        start = 0 if directed else i
        for j in range(start, n):
            count = int(counts[i, j])
            # Undirected self-loops appear twice in their own list
            if not directed and i == j:
                count //= 2
            for _ in range(count):
                graph.add_edge(labels[i], labels[j])

    logger.debug(f"Built graph with {n} vertices from adjacency matrix")
    return graph
