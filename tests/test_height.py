"""Binary tree height tests

The recursive and iterative algorithms must agree on every finite tree.
"""

import random

import pytest

from graphtree import HeightMethod, TreeNode, height, height_iterative, height_recursive, level_order

ALGORITHMS = [height_recursive, height_iterative]


def left_chain(n):
    root = None
    for value in range(n, 0, -1):
        root = TreeNode(value, left=root)
    return root


def right_chain(n):
    root = None
    for value in range(n, 0, -1):
        root = TreeNode(value, right=root)
    return root


def random_tree(rng, size):
    """Attach size nodes at random free child slots."""
    if size == 0:
        return None
    root = TreeNode(0)
    nodes = [root]
    for value in range(1, size):
        parent = rng.choice(nodes)
        child = TreeNode(value)
        if parent.left is None and (parent.right is not None or rng.random() < 0.5):
            parent.left = child
        elif parent.right is None:
            parent.right = child
        else:
            continue
        nodes.append(child)
    return root


class TestHeightEdgeCases:
    """Base cases shared by both algorithms."""

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_empty_tree(self, algorithm):
        assert algorithm(None) == 0

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_single_node(self, algorithm):
        assert algorithm(TreeNode(1)) == 1

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    @pytest.mark.parametrize("n", [1, 2, 5, 50])
    def test_degenerate_chains(self, algorithm, n):
        assert algorithm(left_chain(n)) == n
        assert algorithm(right_chain(n)) == n

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_sample_tree(self, algorithm, sample_tree):
        assert algorithm(sample_tree) == 4


class TestAlgorithmsAgree:
    """Recursive and iterative heights match."""

    def test_random_trees(self):
        rng = random.Random(1234)
        for size in range(60):
            root = random_tree(rng, size)
            assert height_recursive(root) == height_iterative(root)

    def test_iterative_handles_deep_chain(self):
        assert height_iterative(left_chain(5000)) == 5000

    def test_tree_not_mutated(self, sample_tree):
        height_iterative(sample_tree)
        height_recursive(sample_tree)
        assert level_order(sample_tree) == [[1], [2, 3], [4, 5, 7, 6], [8]]


class TestHeightDispatch:
    """height() selects the algorithm by name or enum."""

    def test_default_is_iterative(self, sample_tree):
        assert height(sample_tree) == 4

    @pytest.mark.parametrize("method", ["recursive", "iterative", HeightMethod.RECURSIVE])
    def test_methods(self, method, sample_tree):
        assert height(sample_tree, method) == 4

    def test_unknown_method(self, sample_tree):
        with pytest.raises(ValueError):
            height(sample_tree, "sideways")


class TestLevelOrder:
    """Payloads grouped per level."""

    def test_empty(self):
        assert level_order(None) == []

    def test_sample_tree(self, sample_tree):
        assert level_order(sample_tree) == [[1], [2, 3], [4, 5, 7, 6], [8]]

    def test_levels_match_height(self, sample_tree):
        assert len(level_order(sample_tree)) == height_iterative(sample_tree)


class TestTreeNode:
    def test_leaf_and_children(self):
        node = TreeNode(1, right=TreeNode(2))
        assert not node.is_leaf()
        assert [child.data for child in node.children()] == [2]
        assert node.right.is_leaf()
        assert repr(node) == "TreeNode(1)"
