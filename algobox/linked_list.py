"""Singly linked list nodes and classic linked list algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from algobox.binary_tree import TreeNode


@dataclass(eq=False)
class ListNode:
    """A singly linked list node."""

    val: int = 0
    next: Optional["ListNode"] = None


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding the given values and return its head."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list in order."""
    return [node.val for node in _nodes(head)]


def add_two_numbers(
    first: Optional[ListNode], second: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as reversed digit lists; return the reversed sum."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while first is not None or second is not None:
        total = carry
        if first is not None:
            total += first.val
            first = first.next
        if second is not None:
            total += second.val
            second = second.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    if carry > 0:
        tail.next = ListNode(carry)
    return dummy.next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Remove the n-th node counted from the end and return the new head."""
    dummy = ListNode(0, head)
    fast = head
    for _ in range(n):
        if fast is None:
            raise ValueError(f"list has fewer than {n} nodes")
        fast = fast.next
    if n < 1:
        raise ValueError("n must be at least 1")
    slow = dummy
    while fast is not None:
        fast = fast.next
        slow = slow.next
    slow.next = slow.next.next
    return dummy.next


def merge_two_lists(
    first: Optional[ListNode], second: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list; ties take from second."""
    dummy = ListNode()
    prev = dummy
    while first is not None and second is not None:
        if first.val < second.val:
            prev.next = first
            first = first.next
        else:
            prev.next = second
            second = second.next
        prev = prev.next
    prev.next = second if first is None else first
    return dummy.next


def _merge_preferring_first(
    first: Optional[ListNode], second: Optional[ListNode]
) -> Optional[ListNode]:
    dummy = ListNode()
    prev = dummy
    while first is not None and second is not None:
        if first.val <= second.val:
            prev.next = first
            first = first.next
        else:
            prev.next = second
            second = second.next
        prev = prev.next
    prev.next = second if first is None else first
    return dummy.next


def merge_k_lists(lists: list[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge any number of sorted lists into one sorted list."""
    if not lists:
        return None
    result = lists[0]
    for other in lists[1:]:
        result = _merge_preferring_first(result, other)
    return result


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse the list k nodes at a time; a short final group stays as is."""
    if k < 1:
        raise ValueError("k must be at least 1")
    dummy = ListNode(0, head)
    group_prev = dummy
    while True:
        kth = group_prev
        for _ in range(k):
            kth = kth.next
            if kth is None:
                return dummy.next
        group_next = kth.next
        first = group_prev.next
        prev, cur = group_next, first
        while cur is not group_next:
            cur.next, prev, cur = prev, cur, cur.next
        group_prev.next = kth
        group_prev = first


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list to the right by k places."""
    if k == 0 or head is None or head.next is None:
        return head
    length = 1
    last = head
    while last.next is not None:
        last = last.next
        length += 1
    steps = length - k % length
    if steps == length:
        return head
    last.next = head
    current = last
    for _ in range(steps):
        current = current.next
    result = current.next
    current.next = None
    return result


def delete_all_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop every value that occurs more than once in a sorted list."""
    dummy = ListNode(0, head)
    cur = dummy
    while cur.next is not None and cur.next.next is not None:
        if cur.next.val == cur.next.next.val:
            repeated = cur.next.val
            while cur.next is not None and cur.next.val == repeated:
                cur.next = cur.next.next
        else:
            cur = cur.next
    return dummy.next


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Keep one node per value in a sorted list."""
    cur = head
    while cur is not None:
        if cur.next is not None and cur.val == cur.next.val:
            cur.next = cur.next.next
        else:
            cur = cur.next
    return head


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    prev: Optional[ListNode] = None
    cur = head
    while cur is not None:
        cur.next, prev, cur = prev, cur, cur.next
    return prev


def reverse_between(
    head: Optional[ListNode], left: int, right: int
) -> Optional[ListNode]:
    """Reverse the nodes at 1-based positions left through right."""
    length = sum(1 for _ in _nodes(head))
    if not 1 <= left <= right <= length:
        raise ValueError(f"invalid range {left}..{right} for a list of {length}")
    dummy = ListNode(-1, head)
    pre = dummy
    for _ in range(left - 1):
        pre = pre.next
    right_node = pre
    for _ in range(right - left + 1):
        right_node = right_node.next
    left_node = pre.next
    after = right_node.next
    pre.next = None
    right_node.next = None
    reverse_list(left_node)
    pre.next = right_node
    left_node.next = after
    return dummy.next


def sorted_list_to_bst(head: Optional[ListNode]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from a sorted list (the list is cut up)."""
    if head is None:
        return None
    slow = fast = head
    before_slow: Optional[ListNode] = None
    while fast is not None and fast.next is not None:
        before_slow = slow
        slow = slow.next
        fast = fast.next.next
    root = TreeNode(slow.val)
    if before_slow is not None:
        before_slow.next = None
        root.left = sorted_list_to_bst(head)
    root.right = sorted_list_to_bst(slow.next)
    return root


def insertion_sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the list by insertion sort and return the new head."""
    if head is None:
        return None
    dummy = ListNode(0, head)
    last_sorted, cur = head, head.next
    while cur is not None:
        if last_sorted.val <= cur.val:
            last_sorted = last_sorted.next
        else:
            prev = dummy
            while prev.next.val <= cur.val:
                prev = prev.next
            last_sorted.next = cur.next
            cur.next = prev.next
            prev.next = cur
        cur = last_sorted.next
    return dummy.next


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the list by moving each out-of-order node back into place."""
    dummy = ListNode(0, head)
    cur = head
    while cur is not None and cur.next is not None:
        if cur.val <= cur.next.val:
            cur = cur.next
        else:
            moved = cur.next
            cur.next = moved.next
            prev = dummy
            while prev.next.val <= moved.val:
                prev = prev.next
            moved.next = prev.next
            prev.next = moved
    return dummy.next


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None."""
    p_a, p_b = head_a, head_b
    while p_a is not p_b:
        p_a = head_b if p_a is None else p_a.next
        p_b = head_a if p_b is None else p_b.next
    return p_a


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Return True when the values read the same in both directions."""
    values = list_values(head)
    return values == values[::-1]


def delete_node(node: ListNode) -> None:
    """Remove the given node from its list, given only that node."""
    if node.next is None:
        raise ValueError("cannot delete the last node this way")
    node.val = node.next.val
    node.next = node.next.next


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Group nodes at odd positions before nodes at even positions."""
    if head is None:
        return head
    even_head = head.next
    odd, even = head, even_head
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head


def split_list_to_parts(
    head: Optional[ListNode], k: int
) -> list[Optional[ListNode]]:
    """Split the list into k parts whose sizes differ by at most one."""
    if k < 1:
        raise ValueError("k must be at least 1")
    count = sum(1 for _ in _nodes(head))
    size, remain = divmod(count, k)
    parts: list[Optional[ListNode]] = [None] * k
    current = head
    for i in range(k):
        if current is None:
            break
        parts[i] = current
        part_size = size + 1 if i < remain else size
        for _ in range(part_size - 1):
            current = current.next
        current.next, current = None, current.next
    return parts