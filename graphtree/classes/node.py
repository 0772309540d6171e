"""
Binary tree node representation.

This module provides the node type consumed by the tree height routines.
"""

from typing import Any, List, Optional


class TreeNode:
    """
    A node of a rooted binary tree.

    Each node holds a payload and two optional child references. Nodes are
    built and wired together by the caller; the height routines only read them.
    """

    def __init__(self, data: Any, left: Optional["TreeNode"] = None, right: Optional["TreeNode"] = None):
        """
        Initialize a tree node.

        Args:
            data: Payload stored in the node
            left: Optional left child
            right: Optional right child
        """
        self.data = data
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def children(self) -> List["TreeNode"]:
        """Return the present children, left first."""
        return [child for child in (self.left, self.right) if child is not None]

    def __repr__(self) -> str:
        return f"TreeNode({self.data!r})"
