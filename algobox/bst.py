"""Binary search tree construction, search, update and iteration."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional, Sequence

from algobox.binary_tree import TreeNode


def _inorder_values(root: Optional[TreeNode]) -> Iterator[int]:
    if root is None:
        return
    yield from _inorder_values(root.left)
    yield root.val
    yield from _inorder_values(root.right)


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from sorted values.

    When a range has an even length the upper of the two middle values
    becomes the subtree root.
    """

    def build(left: int, right: int) -> Optional[TreeNode]:
        if left > right:
            return None
        middle = left + ((right - left + 1) >> 1)
        return TreeNode(nums[middle], build(left, middle - 1), build(middle + 1, right))

    return build(0, len(nums) - 1)


def balance_bst(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return a new height-balanced search tree holding the same values.

    When a range has an even length the lower of the two middle values
    becomes the subtree root.
    """
    values = list(_inorder_values(root))

    def build(left: int, right: int) -> Optional[TreeNode]:
        if left > right:
            return None
        middle = left + ((right - left) >> 1)
        return TreeNode(values[middle], build(left, middle - 1), build(middle + 1, right))

    return build(0, len(values) - 1)


def lowest_common_ancestor_bst(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> TreeNode:
    """Return the node of a search tree that splits the values of p and q."""
    cur = root
    while cur is not None:
        if p.val < cur.val and q.val < cur.val:
            cur = cur.left
        elif p.val > cur.val and q.val > cur.val:
            cur = cur.right
        else:
            return cur
    raise ValueError("the tree holds no common ancestor for these values")


def delete_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Delete the node holding val and return the new root.

    A node with two children is replaced by its right subtree, with its
    left subtree hung under the leftmost node of that right subtree.
    """
    if root is None:
        return None
    if root.val == val:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        leftmost = root.right
        while leftmost.left is not None:
            leftmost = leftmost.left
        leftmost.left = root.left
        return root.right
    if val < root.val:
        root.left = delete_bst(root.left, val)
    else:
        root.right = delete_bst(root.right, val)
    return root


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the node holding val, or None."""
    cur = root
    while cur is not None:
        if val == cur.val:
            return cur
        cur = cur.left if val < cur.val else cur.right
    return None


def insert_into_bst(root: Optional[TreeNode], val: int) -> TreeNode:
    """Insert val as a new leaf and return the root."""
    node = TreeNode(val)
    if root is None:
        return node
    cur = root
    while True:
        if val < cur.val:
            if cur.left is None:
                cur.left = node
                return root
            cur = cur.left
        else:
            if cur.right is None:
                cur.right = node
                return root
            cur = cur.right


def increasing_bst(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return a new right-leaning chain holding the in-order values."""
    dummy = TreeNode()
    cur = dummy
    for value in _inorder_values(root):
        cur.right = TreeNode(value)
        cur = cur.right
    return dummy.right


class BSTIterator:
    """Yield the values of a search tree in ascending order."""

    def __init__(self, root: Optional[TreeNode]) -> None:
        self._values = deque(_inorder_values(root))

    def next(self) -> int:
        """Return the next smallest value."""
        if not self._values:
            raise StopIteration
        return self._values.popleft()

    def has_next(self) -> bool:
        """Return True while values remain."""
        return bool(self._values)

    def __iter__(self) -> "BSTIterator":
        return self

    def __next__(self) -> int:
        return self.next()