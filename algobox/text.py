"""String algorithms: character coverage, prefixes, substrings, partitions and a lock puzzle."""

from __future__ import annotations

import string
from collections import deque
from typing import Iterable, Iterator, Sequence

_LETTERS = string.ascii_uppercase + string.ascii_lowercase


def is_covered(cnt_s: Sequence[int], cnt_t: Sequence[int]) -> bool:
    """Return True when cnt_s has at least as many of every ASCII letter as cnt_t.

    Both arguments are letter counts indexed by character code point.
    """
    return all(cnt_s[ord(letter)] >= cnt_t[ord(letter)] for letter in _LETTERS)


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string; '' for no strings."""
    if not strs:
        return ""
    prefix_length = 0
    for chars in zip(*strs):
        if any(ch != chars[0] for ch in chars[1:]):
            break
        prefix_length += 1
    return strs[0][:prefix_length]


def length_of_longest_substring(s: str) -> int:
    """Length of the longest run of s without a repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    longest = 0
    for index, ch in enumerate(s):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = index
        longest = max(longest, index - start + 1)
    return longest


def _expand(s: str, left: int, right: int) -> tuple[int, int]:
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return left + 1, right


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring; the leftmost one on a tie."""
    best_start, best_end = 0, 0
    for center in range(len(s)):
        for start, end in (_expand(s, center, center), _expand(s, center, center + 1)):
            if end - start > best_end - best_start:
                best_start, best_end = start, end
    return s[best_start:best_end]


def partition_labels(s: str) -> list[int]:
    """Split s into as many parts as possible with each letter in one part; return their sizes."""
    last_index = {ch: index for index, ch in enumerate(s)}
    sizes: list[int] = []
    part_start = 0
    part_end = 0
    for index, ch in enumerate(s):
        part_end = max(part_end, last_index[ch])
        if index == part_end:
            sizes.append(index - part_start + 1)
            part_start = index + 1
    return sizes


def _neighbours(code: str) -> Iterator[str]:
    for position, digit in enumerate(code):
        value = int(digit)
        for turned in ((value + 1) % 10, (value + 9) % 10):
            yield code[:position] + str(turned) + code[position + 1 :]


def open_lock(deadends: Iterable[str], target: str) -> int:
    """Fewest wheel turns from '0000' to target avoiding deadends, or -1."""
    dead = set(deadends)
    visited: set[str] = set()
    queue = deque([("0000", 0)])
    while queue:
        code, steps = queue.popleft()
        if code == target:
            return steps
        if code in visited or code in dead:
            continue
        visited.add(code)
        queue.extend((nxt, steps + 1) for nxt in _neighbours(code))
    return -1