"""N-ary tree nodes and traversals."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(eq=False)
class NaryNode:
    """A tree node with any number of ordered children."""

    val: int = 0
    children: list["NaryNode"] = field(default_factory=list)


def _pre(node: Optional[NaryNode]) -> Iterator[int]:
    if node is None:
        return
    yield node.val
    for child in node.children:
        yield from _pre(child)


def _post(node: Optional[NaryNode]) -> Iterator[int]:
    if node is None:
        return
    for child in node.children:
        yield from _post(child)
    yield node.val


def preorder(root: Optional[NaryNode]) -> list[int]:
    """Return the values with each node before its children."""
    return list(_pre(root))


def postorder(root: Optional[NaryNode]) -> list[int]:
    """Return the values with each node after its children."""
    return list(_post(root))


def level_order(root: Optional[NaryNode]) -> list[list[int]]:
    """Return the node values grouped by depth."""
    levels: list[list[int]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.val for node in current])
        current = [child for node in current for child in node.children]
    return levels