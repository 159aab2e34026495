"""Binary tree nodes and binary-search-tree helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class TreeNode:
    """A binary tree node."""

    val: Any = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def bst_insert(root: TreeNode | None, key: Any) -> TreeNode:
    """Insert ``key`` into a binary search tree and return its root.

    Keys equal to a node's value go to its right.
    """
    node = TreeNode(key)
    if root is None:
        return node
    current = root
    while True:
        if key < current.val:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def inorder(root: TreeNode | None) -> list[Any]:
    """Return the node values in left-root-right order."""
    values: list[Any] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.val)
        node = node.right
    return values


def height(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    levels = 0
    level = [root] if root is not None else []
    while level:
        levels += 1
        level = [child for node in level for child in (node.left, node.right) if child]
    return levels


def count_nodes(root: TreeNode | None) -> int:
    """Return the number of nodes in the tree."""
    return len(inorder(root))