import pytest

from graphtree import AdjacencyGraph, TreeNode


@pytest.fixture
def classroom_graph():
    """Vertices 1..7 with six undirected edges; 7 is isolated."""
    graph = AdjacencyGraph()
    for vertex in range(1, 8):
        graph.add_vertex(vertex)
    for source, destination in [(1, 2), (1, 3), (1, 4), (2, 3), (3, 5), (3, 6)]:
        graph.add_edge(source, destination, directed=False)
    return graph


@pytest.fixture
def sample_tree():
    """root(1) -> left 2(4(8), 5), right 3(7, 6)."""
    return TreeNode(
        1,
        left=TreeNode(2, left=TreeNode(4, left=TreeNode(8)), right=TreeNode(5)),
        right=TreeNode(3, left=TreeNode(7), right=TreeNode(6)),
    )
