"""
graphtree - Adjacency-list graphs and binary tree height

A small Python library with two independent components: a generic
adjacency-list graph store supporting directed and undirected edges, and
binary tree height computation by recursive and level-order traversal.

Main Classes:
    AdjacencyGraph: Vertex -> neighbors graph store
    TreeNode: Binary tree node

Example:
    >>> from graphtree import AdjacencyGraph, TreeNode, height_iterative
    >>> graph = AdjacencyGraph()
    >>> graph.add_vertex(1); graph.add_vertex(2)
    >>> graph.add_edge(1, 2)
    >>> graph.neighbors(2)
    [1]
    >>> height_iterative(TreeNode(1, left=TreeNode(2)))
    2
"""

__version__ = "0.1.0"

from graphtree.classes.node import TreeNode
from graphtree.classes.exceptions import GraphError, MissingVertexError, NotFoundError
from graphtree.core.graph import AdjacencyGraph
from graphtree.core.matrix import from_adjacency_matrix, to_adjacency_matrix
from graphtree.analysis.height import HeightMethod, height, height_iterative, height_recursive, level_order

__all__ = [
    'AdjacencyGraph',
    'TreeNode',
    'GraphError',
    'MissingVertexError',
    'NotFoundError',
    'from_adjacency_matrix',
    'to_adjacency_matrix',
    'HeightMethod',
    'height',
    'height_iterative',
    'height_recursive',
    'level_order',
]
