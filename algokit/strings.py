"""Algorithms over strings."""

from __future__ import annotations

from collections import Counter
from typing import Iterator, List, Sequence


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Longest string that starts every item of ``strs``."""
    if not strs:
        raise ValueError("strs must not be empty")
    prefix = []
    for column in zip(*strs):
        if len(set(column)) != 1:
            break
        prefix.append(column[0])
    return "".join(prefix)


def is_isomorphic(s: str, t: str) -> bool:
    """Whether characters of ``s`` map one-to-one onto those of ``t``."""
    if len(s) != len(t):
        return False
    last_s: dict[str, int] = {}
    last_t: dict[str, int] = {}
    for position, (a, b) in enumerate(zip(s, t), start=1):
        if last_s.get(a, 0) != last_t.get(b, 0):
            return False
        last_s[a] = position
        last_t[b] = position
    return True


def is_anagram(s: str, t: str) -> bool:
    """Whether ``t`` is a rearrangement of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def length_of_last_word(s: str) -> int:
    """Length of the last space-separated word in ``s``, or 0."""
    return len(s.rstrip(" ").rsplit(" ", 1)[-1])


def largest_box_string(word: str, num_friends: int) -> str:
    """Largest piece obtainable when ``word`` is split among ``num_friends`` people."""
    if num_friends == 1:
        return word
    length = max(len(word) - num_friends + 1, 0)
    return max((word[i : i + length] for i in range(len(word))), default="")


def _partitions(s: str) -> Iterator[List[str]]:
    if not s:
        yield []
        return
    for end in range(1, len(s) + 1):
        head = s[:end]
        if head == head[::-1]:
            for rest in _partitions(s[end:]):
                yield [head, *rest]


def palindrome_partitions(s: str) -> List[List[str]]:
    """Every way to cut ``s`` into palindromic pieces."""
    return list(_partitions(s))