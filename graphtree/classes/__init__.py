"""
Core data classes for graph and tree representation.

This module contains the fundamental data structures used throughout
the graphtree library.
"""

from .node import TreeNode
from .exceptions import GraphError, MissingVertexError, NotFoundError

__all__ = [
    'TreeNode',
    'GraphError',
    'MissingVertexError',
    'NotFoundError',
]
