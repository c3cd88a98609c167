"""Binary tree nodes and the classic traversals, recursive and iterative."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from typing import NamedTuple, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer value."""

    data: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


class Traversals(NamedTuple):
    """Preorder, inorder and postorder sequences of one tree."""

    preorder: list[int]
    inorder: list[int]
    postorder: list[int]


class _Visit(Enum):
    PRE = auto()
    IN = auto()
    POST = auto()


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Return values in root, left, right order."""
    result: list[int] = []

    def walk(node: Optional[TreeNode]) -> None:
        if node is None:
            return
        result.append(node.data)
        walk(node.left)
        walk(node.right)

    walk(root)
    return result


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Return values in left, root, right order."""
    result: list[int] = []

    def walk(node: Optional[TreeNode]) -> None:
        if node is None:
            return
        walk(node.left)
        result.append(node.data)
        walk(node.right)

    walk(root)
    return result


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Return values in left, right, root order."""
    result: list[int] = []

    def walk(node: Optional[TreeNode]) -> None:
        if node is None:
            return
        walk(node.left)
        walk(node.right)
        result.append(node.data)

    walk(root)
    return result


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the values level by level, each level left to right."""
    levels: list[list[int]] = []
    if root is None:
        return levels
    queue: deque[TreeNode] = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
            level.append(node.data)
        levels.append(level)
    return levels


def preorder_iterative(root: Optional[TreeNode]) -> list[int]:
    """Preorder traversal using a single explicit stack."""
    result: list[int] = []
    if root is None:
        return result
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder_iterative(root: Optional[TreeNode]) -> list[int]:
    """Inorder traversal using a single explicit stack."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while True:
        if node is not None:
            stack.append(node)
            node = node.left
        elif not stack:
            break
        else:
            node = stack.pop()
            result.append(node.data)
            node = node.right
    return result


def postorder_iterative(root: Optional[TreeNode]) -> list[int]:
    """Postorder traversal using a single explicit stack."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
            continue
        right = stack[-1].right
        if right is None:
            done = stack.pop()
            result.append(done.data)
            while stack and done is stack[-1].right:
                done = stack.pop()
                result.append(done.data)
        else:
            node = right
    return result


def postorder_two_stacks(root: Optional[TreeNode]) -> list[int]:
    """Postorder traversal using two stacks, the second only to reverse."""
    if root is None:
        return []
    pending = [root]
    collected: list[TreeNode] = []
    while pending:
        node = pending.pop()
        collected.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return [node.data for node in reversed(collected)]


def pre_in_post(root: Optional[TreeNode]) -> Traversals:
    """Compute preorder, inorder and postorder in one stack-driven pass."""
    traversals = Traversals([], [], [])
    if root is None:
        return traversals
    stack: list[tuple[TreeNode, _Visit]] = [(root, _Visit.PRE)]
    while stack:
        node, visit = stack.pop()
        if visit is _Visit.PRE:
            traversals.preorder.append(node.data)
            stack.append((node, _Visit.IN))
            if node.left is not None:
                stack.append((node.left, _Visit.PRE))
        elif visit is _Visit.IN:
            traversals.inorder.append(node.data)
            stack.append((node, _Visit.POST))
            if node.right is not None:
                stack.append((node.right, _Visit.PRE))
        else:
            traversals.postorder.append(node.data)
    return traversals


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Level order with the direction alternating, starting left to right."""
    levels: list[list[int]] = []
    if root is None:
        return levels
    queue: deque[TreeNode] = deque([root])
    left_to_right = True
    while queue:
        level: deque[int] = deque()
        for _ in range(len(queue)):
            node = queue.popleft()
            if left_to_right:
                level.append(node.data)
            else:
                level.appendleft(node.data)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        levels.append(list(level))
        left_to_right = not left_to_right
    return levels