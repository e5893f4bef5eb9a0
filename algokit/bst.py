"""Binary search tree nodes and node deletion."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def _rightmost(node: TreeNode) -> TreeNode:
    while node.right is not None:
        node = node.right
    return node


def _splice(node: TreeNode) -> TreeNode | None:
    """Return the subtree that replaces ``node`` once it is removed."""
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    _rightmost(node.left).right = node.right
    return node.left


def delete_node(root: TreeNode | None, key: int) -> TreeNode | None:
    """Remove the node holding ``key`` from a binary search tree and return the new root.

    The tree is changed in place; a missing key leaves it as it was.
    """
    if root is None:
        return None
    if root.val == key:
        return _splice(root)
    node: TreeNode | None = root
    while node is not None:
        if node.left is not None and node.left.val == key:
            node.left = _splice(node.left)
            return root
        if node.right is not None and node.right.val == key:
            node.right = _splice(node.right)
            return root
        if node.left is not None and node.val > key:
            node = node.left
        else:
            node = node.right
    return root