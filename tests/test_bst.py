import pytest

from algokit.bst import TreeNode, delete_node

VALUES = [50, 30, 70, 20, 40, 60, 80, 35, 45, 65]


def _insert(root, value):
    if root is None:
        return TreeNode(value)
    node = root
    while True:
        if value < node.val:
            if node.left is None:
                node.left = TreeNode(value)
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = TreeNode(value)
                return root
            node = node.right


def _build(values):
    root = None
    for value in values:
        root = _insert(root, value)
    return root


def _inorder(node):
    if node is None:
        return []
    return _inorder(node.left) + [node.val] + _inorder(node.right)


def test_delete_from_empty_tree():
    assert delete_node(None, 5) is None


@pytest.mark.parametrize("key", VALUES)
def test_delete_each_key_keeps_order(key):
    root = delete_node(_build(VALUES), key)
    assert _inorder(root) == sorted(v for v in VALUES if v != key)


def test_delete_missing_key_leaves_tree():
    root = delete_node(_build(VALUES), 999)
    assert _inorder(root) == sorted(VALUES)


def test_delete_root_with_two_children_promotes_left():
    root = delete_node(_build(VALUES), 50)
    assert root.val == 30
    assert _inorder(root) == sorted(v for v in VALUES if v != 50)


def test_delete_leaf_root():
    assert delete_node(TreeNode(7), 7) is None


def test_delete_root_with_only_right_child():
    root = TreeNode(1, right=TreeNode(2))
    result = delete_node(root, 1)
    assert result.val == 2
    assert result.left is None and result.right is None


def test_delete_all_keys_empties_tree():
    root = _build(VALUES)
    for key in VALUES:
        root = delete_node(root, key)
    assert root is None


def test_tree_node_defaults():
    node = TreeNode()
    assert (node.val, node.left, node.right) == (0, None, None)