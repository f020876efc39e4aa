"""Sums over subarrays and tuples of integer sequences."""

from __future__ import annotations

from collections import Counter, defaultdict
from itertools import accumulate
from typing import Iterable, Iterator, List, Sequence, Tuple

_FIRST_YEAR = 1950
_LAST_YEAR = 2050


def _pairs_summing_to(arr: Sequence[int], start: int, target: int) -> Iterator[Tuple[int, int]]:
    """Yield distinct value pairs from sorted ``arr[start:]`` that sum to ``target``."""
    lo, hi = start, len(arr) - 1
    while lo < hi:
        total = arr[lo] + arr[hi]
        if total < target:
            lo += 1
        elif total > target:
            hi -= 1
        else:
            yield arr[lo], arr[hi]
            lo += 1
            hi -= 1
            while lo < hi and arr[lo] == arr[lo - 1]:
                lo += 1
            while lo < hi and arr[hi] == arr[hi + 1]:
                hi -= 1


def three_sum(nums: Sequence[int]) -> List[List[int]]:
    """All distinct sorted triples of values from ``nums`` that sum to zero."""
    arr = sorted(nums)
    result: List[List[int]] = []
    for i, first in enumerate(arr):
        if i > 0 and first == arr[i - 1]:
            continue
        result.extend([first, a, b] for a, b in _pairs_summing_to(arr, i + 1, -first))
    return result


def four_sum(nums: Sequence[int], target: int) -> List[List[int]]:
    """All distinct sorted quadruples of values from ``nums`` that sum to ``target``."""
    arr = sorted(nums)
    result: List[List[int]] = []
    for i, first in enumerate(arr):
        if i > 0 and first == arr[i - 1]:
            continue
        for j in range(i + 1, len(arr)):
            second = arr[j]
            if j > i + 1 and second == arr[j - 1]:
                continue
            rest = target - first - second
            result.extend(
                [first, second, a, b] for a, b in _pairs_summing_to(arr, j + 1, rest)
            )
    return result


def _count_prefix_matches(values: Iterable[int], k: int) -> int:
    """Number of contiguous runs of ``values`` whose sum is ``k``."""
    seen = Counter({0: 1})
    running = 0
    count = 0
    for value in values:
        running += value
        count += seen[running - k]
        seen[running] += 1
    return count


def nice_subarray_count(nums: Sequence[int], k: int) -> int:
    """Number of contiguous subarrays holding exactly ``k`` odd values."""
    return _count_prefix_matches((value % 2 for value in nums), k)


def subarray_sum_count(nums: Sequence[int], k: int) -> int:
    """Number of contiguous subarrays whose sum is ``k``."""
    return _count_prefix_matches(nums, k)


def longest_balanced_length(nums: Sequence[int]) -> int:
    """Length of the longest subarray with as many zeros as non-zeros."""
    first_seen = {0: 0}
    balance = 0
    best = 0
    for position, value in enumerate(nums, start=1):
        balance += -1 if value == 0 else 1
        if balance in first_seen:
            best = max(best, position - first_seen[balance])
        else:
            first_seen[balance] = position
    return best


def max_subarray_sum(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = nums[0]
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def maximum_population_year(logs: Iterable[Sequence[int]]) -> int:
    """Earliest year between 1950 and 2050 with the most people alive."""
    span = _LAST_YEAR - _FIRST_YEAR + 1
    deltas = [0] * span
    for birth, death in logs:
        if not _FIRST_YEAR <= birth <= _LAST_YEAR or not _FIRST_YEAR <= death <= _LAST_YEAR:
            raise ValueError(f"years must lie in {_FIRST_YEAR}..{_LAST_YEAR}")
        deltas[birth - _FIRST_YEAR] += 1
        deltas[death - _FIRST_YEAR] -= 1
    population = list(accumulate(deltas))
    peak = max(range(span), key=population.__getitem__)
    return _FIRST_YEAR + peak


def split_painting(segments: Iterable[Sequence[int]]) -> List[List[int]]:
    """Describe overlapping painted segments as ``[start, end, colour_sum]`` pieces."""
    deltas: defaultdict[int, int] = defaultdict(int)
    for start, end, colour in segments:
        deltas[start] += colour
        deltas[end] -= colour

    pieces: List[List[int]] = []
    current = 0
    previous = None
    for point in sorted(deltas):
        if previous is not None and current != 0:
            pieces.append([previous, point, current])
        current += deltas[point]
        previous = point
    return pieces