"""
Core graph data structures.

This module contains the adjacency-list graph store and its
adjacency-matrix conversions.
"""

from .graph import AdjacencyGraph
from .matrix import from_adjacency_matrix, to_adjacency_matrix

__all__ = [
    'AdjacencyGraph',
    'from_adjacency_matrix',
    'to_adjacency_matrix',
]
