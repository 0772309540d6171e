"""
Console formatting for graphs.

Presentation helpers kept outside the graph store: the store only exposes
enumerate(), these functions turn it into printable lines.
"""

from typing import Hashable, List, Optional, Sequence

from ..core.graph import AdjacencyGraph
from ..core.matrix import to_adjacency_matrix


def format_adjacency_list(graph: AdjacencyGraph) -> List[str]:
    """Format one 'Vertex v: [a, b]' line per vertex."""
    return [
        f"Vertex {vertex}: [{', '.join(str(n) for n in neighbors)}]"
        for vertex, neighbors in graph.enumerate()
    ]


def format_adjacency_matrix(graph: AdjacencyGraph, order: Optional[Sequence[Hashable]] = None) -> List[str]:
    """
    Format the adjacency matrix as aligned text rows.

    Args:
        graph: Graph to format
        order: Row/column vertex order, defaults to insertion order

    Returns:
        Header line of labels followed by one line per vertex
    """
    matrix, labels = to_adjacency_matrix(graph, order)
    cells = [str(label) for label in labels] + [str(value) for value in matrix.flat]
    width = max((len(cell) for cell in cells), default=1)

    lines = [" " * width + " " + " ".join(str(label).rjust(width) for label in labels)]
    for label, row in zip(labels, matrix):
        lines.append(str(label).rjust(width) + " " + " ".join(str(value).rjust(width) for value in row))
    return lines


def print_graph(graph: AdjacencyGraph, matrix: bool = False) -> None:
    """Print the adjacency list, or the adjacency matrix when matrix is True."""
    lines = format_adjacency_matrix(graph) if matrix else format_adjacency_list(graph)
    for line in lines:
        print(line)
