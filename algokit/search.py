"""Binary searches over sorted sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Sequence, Tuple


def search_range(nums: Sequence[int], target: int) -> Tuple[int, int]:
    """First and last index of ``target`` in sorted ``nums``, or ``(-1, -1)``."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return (-1, -1)
    return (first, bisect_right(nums, target) - 1)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of the first item not less than ``target`` in sorted ``nums``."""
    return bisect_left(nums, target)