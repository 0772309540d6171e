"""
Output formatting for graphs.
"""

from .display import format_adjacency_list, format_adjacency_matrix, print_graph

__all__ = [
    'format_adjacency_list',
    'format_adjacency_matrix',
    'print_graph',
]
