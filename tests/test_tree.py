import random

import pytest

from dsakit.tree import (
    TreeNode,
    inorder,
    inorder_iterative,
    level_order,
    postorder,
    postorder_iterative,
    postorder_two_stacks,
    pre_in_post,
    preorder,
    preorder_iterative,
    zigzag_level_order,
)


def _sample_tree():
    root = TreeNode(1)
    root.left = TreeNode(2)
    root.right = TreeNode(3)
    root.left.left = TreeNode(4)
    root.left.right = TreeNode(5)
    root.right.left = TreeNode(6)
    root.right.right = TreeNode(7)
    root.left.left.left = TreeNode(8)
    root.left.left.right = TreeNode(9)
    root.left.right.left = TreeNode(10)
    root.left.right.right = TreeNode(11)
    return root


def _random_tree(seed, size):
    rng = random.Random(seed)
    root = TreeNode(rng.randint(-50, 50))
    for _ in range(size - 1):
        node = root
        while True:
            if rng.random() < 0.5:
                if node.left is None:
                    node.left = TreeNode(rng.randint(-50, 50))
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(rng.randint(-50, 50))
                    break
                node = node.right
    return root


def _left_chain(values):
    root = None
    for value in reversed(values):
        root = TreeNode(value, left=root)
    return root


def test_sample_preorder():
    assert preorder(_sample_tree()) == [1, 2, 4, 8, 9, 5, 10, 11, 3, 6, 7]


def test_sample_inorder():
    assert inorder(_sample_tree()) == [8, 4, 9, 2, 10, 5, 11, 1, 6, 3, 7]


def test_sample_postorder():
    assert postorder(_sample_tree()) == [8, 9, 4, 10, 11, 5, 2, 6, 7, 3, 1]


def test_empty_tree_traversals():
    assert preorder(None) == []
    assert inorder(None) == []
    assert postorder(None) == []
    assert level_order(None) == []
    assert preorder_iterative(None) == []
    assert inorder_iterative(None) == []
    assert postorder_iterative(None) == []
    assert postorder_two_stacks(None) == []
    assert zigzag_level_order(None) == []
    assert pre_in_post(None) == ([], [], [])


def test_single_node():
    node = TreeNode(5)
    assert preorder(node) == [5]
    assert inorder_iterative(node) == [5]
    assert postorder_iterative(node) == [5]
    assert level_order(node) == [[5]]


def test_left_chain_orders():
    root = _left_chain([1, 2, 3])
    assert preorder_iterative(root) == [1, 2, 3]
    assert inorder_iterative(root) == [3, 2, 1]
    assert postorder_iterative(root) == [3, 2, 1]
    assert level_order(root) == [[1], [2], [3]]


@pytest.mark.parametrize("seed", range(20))
def test_iterative_matches_recursive(seed):
    root = _random_tree(seed, 1 + seed * 3)
    assert preorder_iterative(root) == preorder(root)
    assert inorder_iterative(root) == inorder(root)
    assert postorder_iterative(root) == postorder(root)
    assert postorder_two_stacks(root) == postorder(root)


@pytest.mark.parametrize("seed", range(20))
def test_pre_in_post_matches_recursive(seed):
    root = _random_tree(seed, 2 + seed * 2)
    result = pre_in_post(root)
    assert result.preorder == preorder(root)
    assert result.inorder == inorder(root)
    assert result.postorder == postorder(root)


def test_pre_in_post_sample_preorder():
    root = _sample_tree()
    assert pre_in_post(root).preorder == preorder_iterative(root)


@pytest.mark.parametrize("seed", range(15))
def test_level_order_holds_every_value(seed):
    root = _random_tree(seed, 1 + seed * 4)
    flat = [value for level in level_order(root) for value in level]
    assert sorted(flat) == sorted(preorder(root))
    assert level_order(root)[0] == [root.data]


def test_sample_level_order_shape():
    levels = level_order(_sample_tree())
    assert [len(level) for level in levels] == [1, 2, 4, 4]
    assert levels[-1] == [8, 9, 10, 11]


@pytest.mark.parametrize("seed", range(15))
def test_zigzag_reverses_odd_levels(seed):
    root = _random_tree(seed, 1 + seed * 4)
    levels = level_order(root)
    zigzag = zigzag_level_order(root)
    assert len(zigzag) == len(levels)
    for depth, (plain, zz) in enumerate(zip(levels, zigzag)):
        expected = plain if depth % 2 == 0 else plain[::-1]
        assert zz == expected


def test_zigzag_sample():
    zigzag = zigzag_level_order(_sample_tree())
    assert zigzag[0] == [1]
    assert zigzag[1] == [3, 2]
    assert zigzag[2] == [4, 5, 6, 7]
    assert zigzag[3] == [11, 10, 9, 8]


def test_postorder_iterative_with_equal_values():
    root = TreeNode(0, TreeNode(0, TreeNode(0)), TreeNode(0, None, TreeNode(0)))
    assert postorder_iterative(root) == postorder(root)
    assert len(postorder_iterative(root)) == 5