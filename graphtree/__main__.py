"""
Demonstration harness: the classroom 7-vertex graph and sample binary tree.

Run with ``python -m graphtree [--matrix] [--verbose]``.
"""

import argparse
import logging

from .analysis.height import height_iterative, height_recursive, level_order
from .classes.node import TreeNode
from .core.graph import AdjacencyGraph
from .formats.display import print_graph

logger = logging.getLogger(__name__)

CLASSROOM_EDGES = [(1, 2), (1, 3), (1, 4), (2, 3), (3, 5), (3, 6)]


def build_classroom_graph() -> AdjacencyGraph:
    """Vertices 1..7 with the six undirected classroom edges; 7 stays isolated."""
    graph = AdjacencyGraph(directed=False)
    for vertex in range(1, 8):
        graph.add_vertex(vertex)
    for source, destination in CLASSROOM_EDGES:
        graph.add_edge(source, destination)
    return graph


def build_sample_tree() -> TreeNode:
    """Eight-node tree of height 4."""
    return TreeNode(
        1,
        left=TreeNode(2, left=TreeNode(4, left=TreeNode(8)), right=TreeNode(5)),
        right=TreeNode(3, left=TreeNode(7), right=TreeNode(6)),
    )


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="graphtree", description="Classroom graph and binary tree demo")
    parser.add_argument("--matrix", action="store_true", help="also print the adjacency matrix")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    graph = build_classroom_graph()
    logger.debug(f"Built classroom graph with {graph.edge_count()} edges")
    print("Adjacency list:")
    print_graph(graph)
    if args.matrix:
        print()
        print("Adjacency matrix:")
        print_graph(graph, matrix=True)

    root = build_sample_tree()
    print()
    print(f"Level order: {level_order(root)}")
    print(f"Height (recursive): {height_recursive(root)}")
    print(f"Height (iterative): {height_iterative(root)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
