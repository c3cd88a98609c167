"""Depth, diameter, balance and path-sum measures of binary trees."""

from __future__ import annotations

from collections import deque
from typing import Optional

from dsakit.tree import TreeNode


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def max_depth_level_order(root: Optional[TreeNode]) -> int:
    """Depth computed by counting breadth-first levels."""
    if root is None:
        return 0
    queue: deque[TreeNode] = deque([root])
    levels = 0
    while queue:
        for _ in range(len(queue)):
            node = queue.popleft()
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        levels += 1
    return levels


def diameter(root: Optional[TreeNode]) -> int:
    """Number of edges on the longest path between any two nodes."""
    best = 0

    def height(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    height(root)
    return best


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Check height balance by measuring every subtree (quadratic)."""
    if root is None:
        return True
    return (
        abs(max_depth(root.left) - max_depth(root.right)) <= 1
        and is_balanced(root.left)
        and is_balanced(root.right)
    )


def _balanced_height(node: Optional[TreeNode]) -> int:
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left == -1:
        return -1
    right = _balanced_height(node.right)
    if right == -1 or abs(left - right) > 1:
        return -1
    return 1 + max(left, right)


def is_balanced_fast(root: Optional[TreeNode]) -> bool:
    """Check height balance in a single linear pass."""
    return _balanced_height(root) != -1


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Largest sum along any path of connected nodes; the tree must not be empty."""
    if root is None:
        raise ValueError("an empty tree has no path")
    best = root.data

    def gain(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(gain(node.left), 0)
        right = max(gain(node.right), 0)
        best = max(best, node.data + left + right)
        return node.data + max(left, right)

    gain(root)
    return best


def are_identical(first: Optional[TreeNode], second: Optional[TreeNode]) -> bool:
    """True when both trees have the same shape and values."""
    if first is None or second is None:
        return first is second
    return (
        first.data == second.data
        and are_identical(first.left, second.left)
        and are_identical(first.right, second.right)
    )