import pytest

from algobox.binary_tree import TreeNode, inorder_traversal, is_balanced
from algobox.bst import (
    BSTIterator,
    balance_bst,
    delete_bst,
    increasing_bst,
    insert_into_bst,
    lowest_common_ancestor_bst,
    search_bst,
    sorted_array_to_bst,
)


def _chain_right(node):
    values = []
    while node is not None:
        assert node.left is None
        values.append(node.val)
        node = node.right
    return values


def _sample_tree():
    right31 = TreeNode(5)
    left31 = TreeNode(3)
    right22 = TreeNode(9)
    right21 = TreeNode(4, left31, right31)
    left22 = TreeNode(7)
    left21 = TreeNode(0)
    left1 = TreeNode(2, left21, right21)
    right1 = TreeNode(8, left22, right22)
    return TreeNode(6, left1, right1)


def test_sorted_array_to_bst_picks_upper_middle():
    root = sorted_array_to_bst([-10, -3, 0, 5, 9])
    assert root.val == 0
    assert inorder_traversal(root) == [-10, -3, 0, 5, 9]
    assert is_balanced(root)
    even = sorted_array_to_bst([1, 2])
    assert even.val == 2
    assert even.left.val == 1


def test_sorted_array_to_bst_empty():
    assert sorted_array_to_bst([]) is None


def test_balance_bst_chain():
    root = None
    for value in [1, 2, 3, 4]:
        root = insert_into_bst(root, value)
    balanced = balance_bst(root)
    assert inorder_traversal(balanced) == [1, 2, 3, 4]
    assert is_balanced(balanced)
    assert balanced.val == 2


def test_lowest_common_ancestor_bst_case():
    root = _sample_tree()
    node = lowest_common_ancestor_bst(root, TreeNode(2), TreeNode(8))
    assert node is root
    assert node.val == 6


def test_lowest_common_ancestor_bst_same_side():
    root = _sample_tree()
    node = lowest_common_ancestor_bst(root, TreeNode(3), TreeNode(5))
    assert node.val == 4


def test_lowest_common_ancestor_bst_missing_raises():
    with pytest.raises(ValueError):
        lowest_common_ancestor_bst(None, TreeNode(1), TreeNode(2))


def test_delete_only_node():
    assert delete_bst(TreeNode(1), 1) is None


def test_delete_node_with_two_children():
    root = TreeNode(5, TreeNode(3), TreeNode(6, None, TreeNode(7)))
    result = delete_bst(root, 5)
    assert result.val == 6
    assert inorder_traversal(result) == [3, 6, 7]


def test_delete_leaf_and_missing():
    root = _sample_tree()
    root = delete_bst(root, 9)
    assert inorder_traversal(root) == [0, 2, 3, 4, 5, 6, 7, 8]
    root = delete_bst(root, 100)
    assert inorder_traversal(root) == [0, 2, 3, 4, 5, 6, 7, 8]


def test_search_bst():
    root = _sample_tree()
    found = search_bst(root, 4)
    assert found.val == 4
    assert found.left.val == 3
    assert search_bst(root, 10) is None


def test_insert_into_bst_case():
    root = TreeNode(4)
    new_root = insert_into_bst(root, 7)
    next_root = insert_into_bst(new_root, 2)
    assert next_root.val == 4
    assert next_root.left.val == 2
    assert next_root.right.val == 7


def test_insert_into_empty():
    assert insert_into_bst(None, 3).val == 3


def test_increasing_bst_case():
    right21 = TreeNode(4)
    left21 = TreeNode(2)
    right1 = TreeNode(6, left21, right21)
    left1 = TreeNode(3, left21, right21)
    root = TreeNode(5, left1, right1)
    assert _chain_right(increasing_bst(root)) == [2, 3, 4, 5, 2, 6, 4]


def test_increasing_bst_empty():
    assert increasing_bst(None) is None


def test_bst_iterator():
    iterator = BSTIterator(TreeNode(7, TreeNode(3), TreeNode(15, TreeNode(9), TreeNode(20))))
    assert iterator.next() == 3
    assert iterator.next() == 7
    assert iterator.has_next() is True
    assert list(iterator) == [9, 15, 20]
    assert iterator.has_next() is False
    with pytest.raises(StopIteration):
        iterator.next()