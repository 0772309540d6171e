"""
Tree analysis modules.

This module contains the binary tree height algorithms and level-order
traversal.
"""

from .height import HeightMethod, height, height_iterative, height_recursive, level_order

__all__ = [
    'HeightMethod',
    'height',
    'height_iterative',
    'height_recursive',
    'level_order',
]
