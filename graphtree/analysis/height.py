"""
Height and level-order analysis for binary trees.

Height counts levels on the longest root-to-leaf path: an empty tree has
height 0 and a lone root has height 1. The recursive and iterative forms
return the same value for every finite tree; the iterative form is
preferable for very deep trees since it does not consume call stack.

Cyclic node structures are not detected and will not terminate.
"""

import logging
from collections import deque
from enum import Enum
from typing import Any, List, Optional, Union

from ..classes.node import TreeNode

logger = logging.getLogger(__name__)


class HeightMethod(Enum):
    """Available tree height algorithms."""
    RECURSIVE = "recursive"
    ITERATIVE = "iterative"


def height_recursive(node: Optional[TreeNode]) -> int:
    """Compute tree height with a depth-first recursion."""
    if node is None:
        return 0
    left_height = height_recursive(node.left)
    right_height = height_recursive(node.right)
    return max(left_height, right_height) + 1


def height_iterative(node: Optional[TreeNode]) -> int:
    """
    Compute tree height with a level-by-level breadth-first traversal.

    Args:
        node: Root of the tree, or None for an empty tree

    Returns:
        Number of levels in the tree
    """
    if node is None:
        return 0

    queue = deque([node])
    levels = 0

    while queue:
        # Drain exactly the nodes of the current level
        for _ in range(len(queue)):
            current = queue.popleft()
            if current.left is not None:
                queue.append(current.left)
            if current.right is not None:
                queue.append(current.right)
        levels += 1

    return levels


def height(node: Optional[TreeNode], method: Union[HeightMethod, str] = HeightMethod.ITERATIVE) -> int:
    """
    Compute tree height using the selected algorithm.

    Args:
        node: Root of the tree, or None
        method: HeightMethod member or its string value

    Returns:
        Number of levels in the tree

    Raises:
        ValueError: If the method is not recognised
    """
    method = HeightMethod(method)

    if method == HeightMethod.RECURSIVE:
        result = height_recursive(node)
    elif method == HeightMethod.ITERATIVE:
        result = height_iterative(node)
    else:
        raise ValueError(f"Unknown height method: {method}")

    logger.debug(f"Tree height {result} using {method.value} method")
    return result


def level_order(node: Optional[TreeNode]) -> List[List[Any]]:
    """
    Collect node payloads grouped by depth, left to right.

    Args:
        node: Root of the tree, or None

    Returns:
        One list of payloads per level; empty list for an empty tree
    """
    if node is None:
        return []

    levels = []
    queue = deque([node])

    while queue:
        level = []
        for _ in range(len(queue)):
            current = queue.popleft()
            level.append(current.data)
            queue.extend(current.children())
        levels.append(level)

    return levels
