import pytest

from algosolve.trees import (
    TreeNode,
    bst_from_preorder,
    vertical_traversal,
    width_of_binary_tree,
)


def _preorder(node):
    if node is None:
        return []
    return [node.val] + _preorder(node.left) + _preorder(node.right)


def _inorder(node):
    if node is None:
        return []
    return _inorder(node.left) + [node.val] + _inorder(node.right)


def _perfect(depth):
    if depth == 0:
        return None
    return TreeNode(depth, _perfect(depth - 1), _perfect(depth - 1))


@pytest.mark.parametrize("preorder", [[8, 5, 1, 7, 10, 12], [1], [3, 2, 1], [1, 2, 3], [50, 30, 20, 40, 70, 60, 80]])
def test_bst_round_trip(preorder):
    root = bst_from_preorder(preorder)
    assert _preorder(root) == preorder
    assert _inorder(root) == sorted(preorder)


def test_bst_empty():
    assert bst_from_preorder([]) is None


def test_width_empty_and_single():
    assert width_of_binary_tree(None) == 0
    assert width_of_binary_tree(TreeNode(1)) == 1


@pytest.mark.parametrize("depth", [1, 2, 3, 5])
def test_width_perfect_tree(depth):
    assert width_of_binary_tree(_perfect(depth)) == 2 ** (depth - 1)


def test_width_chain_is_one():
    root = TreeNode(1, TreeNode(2, TreeNode(3, TreeNode(4))))
    assert width_of_binary_tree(root) == 1


def test_width_counts_gaps():
    root = TreeNode(1, TreeNode(2, TreeNode(4)), TreeNode(3, None, TreeNode(7)))
    assert width_of_binary_tree(root) == width_of_binary_tree(_perfect(3))


def test_vertical_single():
    assert vertical_traversal(TreeNode(9)) == [[9]]


def test_vertical_empty():
    assert vertical_traversal(None) == []


def test_vertical_ties_sorted_by_value():
    root = TreeNode(1, TreeNode(2, None, TreeNode(6)), TreeNode(3, TreeNode(5)))
    assert vertical_traversal(root) == [[2], [1, 5, 6], [3]]


def test_vertical_contains_all_values():
    root = bst_from_preorder([8, 5, 1, 7, 10, 12])
    columns = vertical_traversal(root)
    assert sorted(v for col in columns for v in col) == [1, 5, 7, 8, 10, 12]


def test_vertical_chain_columns_follow_order():
    root = bst_from_preorder([2, 1, 3])
    assert vertical_traversal(root) == [[1], [2], [3]]