"""Binary tree nodes and classic binary tree algorithms."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


@dataclass(eq=False)
class ParentNode:
    """A binary tree node that also links to its parent."""

    val: int = 0
    left: Optional["ParentNode"] = None
    right: Optional["ParentNode"] = None
    parent: Optional["ParentNode"] = None


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Return True when both trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def _mirrored(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    return p.val == q.val and _mirrored(p.left, q.right) and _mirrored(p.right, q.left)


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Return True when the tree is a mirror image of itself."""
    return _mirrored(root, root)


def _levels(root: Optional[TreeNode]) -> Iterator[list[int]]:
    if root is None:
        return
    queue = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        yield level


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the node values grouped by depth, left to right."""
    return list(_levels(root))


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the values by depth, alternating left-to-right and right-to-left."""
    return [
        level[::-1] if depth % 2 == 1 else level
        for depth, level in enumerate(_levels(root))
    ]


def _depth(root: Optional[TreeNode]) -> int:
    if root is None:
        return 0
    return max(_depth(root.left), _depth(root.right)) + 1


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Return True when no node's subtrees differ in height by more than one."""
    if root is None:
        return True
    return (
        abs(_depth(root.left) - _depth(root.right)) <= 1
        and is_balanced(root.left)
        and is_balanced(root.right)
    )


def has_path_sum(root: Optional[TreeNode], target_sum: int) -> bool:
    """Return True when some root-to-leaf path adds up to target_sum."""
    if root is None:
        return False
    queue = deque([(root, root.val)])
    while queue:
        node, total = queue.popleft()
        if node.left is None and node.right is None and total == target_sum:
            return True
        for child in (node.left, node.right):
            if child is not None:
                queue.append((child, total + child.val))
    return False


def path_sum_paths(root: Optional[TreeNode], target_sum: int) -> list[list[int]]:
    """Return every root-to-leaf path whose values add up to target_sum."""
    found: list[list[int]] = []
    path: list[int] = []

    def walk(node: Optional[TreeNode], remaining: int) -> None:
        if node is None:
            return
        path.append(node.val)
        if node.left is None and node.right is None and remaining == node.val:
            found.append(list(path))
        walk(node.left, remaining - node.val)
        walk(node.right, remaining - node.val)
        path.pop()

    walk(root, target_sum)
    return found


def _preorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    if root is None:
        return
    yield root
    yield from _preorder(root.left)
    yield from _preorder(root.right)


def _inorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    if root is None:
        return
    yield from _inorder(root.left)
    yield root
    yield from _inorder(root.right)


def _postorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    if root is None:
        return
    yield from _postorder(root.left)
    yield from _postorder(root.right)
    yield root


def flatten(root: Optional[TreeNode]) -> None:
    """Rewire the tree in place into a right-leaning chain in preorder."""
    nodes = list(_preorder(root))
    for prev, cur in zip(nodes, nodes[1:]):
        prev.left, prev.right = None, cur


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the values in root, left, right order."""
    return [node.val for node in _preorder(root)]


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the values in left, root, right order."""
    return [node.val for node in _inorder(root)]


def postorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the values in left, right, root order."""
    return [node.val for node in _postorder(root)]


def binary_tree_paths(root: Optional[TreeNode]) -> list[str]:
    """Return every root-to-leaf path written as 'a->b->c'."""
    paths: list[str] = []
    path: list[str] = []

    def walk(node: Optional[TreeNode]) -> None:
        if node is None:
            return
        path.append(str(node.val))
        if node.left is None and node.right is None:
            paths.append("->".join(path))
        else:
            walk(node.left)
            walk(node.right)
        path.pop()

    walk(root)
    return paths


def _paths_from(node: Optional[TreeNode], remaining: int) -> int:
    if node is None:
        return 0
    count = 1 if node.val == remaining else 0
    rest = remaining - node.val
    return count + _paths_from(node.left, rest) + _paths_from(node.right, rest)


def count_path_sums(root: Optional[TreeNode], target_sum: int) -> int:
    """Count downward paths, starting at any node, that add up to target_sum."""
    if root is None:
        return 0
    return (
        _paths_from(root, target_sum)
        + count_path_sums(root.left, target_sum)
        + count_path_sums(root.right, target_sum)
    )


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the lowest node having nodes valued like p and q beneath it."""
    if root is None:
        return None
    if root.val == p.val or root.val == q.val:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return right if left is None else left


def lowest_common_ancestor_with_parents(
    p: Optional[ParentNode], q: Optional[ParentNode]
) -> Optional[ParentNode]:
    """Return the lowest common ancestor of p and q by following parent links."""
    cur_p, cur_q = p, q
    while cur_p is not cur_q:
        cur_p = q if cur_p is None else cur_p.parent
        cur_q = p if cur_q is None else cur_q.parent
    return cur_p