"""Algorithms over integer sequences."""

from __future__ import annotations

from collections import Counter
from functools import reduce
from itertools import chain, groupby
from operator import xor
from typing import Iterator, List, MutableSequence, Optional, Sequence


def two_sum(nums: Sequence[int], target: int) -> List[int]:
    """Return the indices of the first pair summing to ``target``, or ``[]``."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [partner, index]
        seen[value] = index
    return []


def _low_digits(num: Sequence[int], k: int) -> Iterator[int]:
    """Yield per-position digit sums from the least significant end."""
    for value in reversed(num):
        yield value + k % 10
        k //= 10
    while k > 0:
        yield k % 10
        k //= 10


def add_to_array_form(num: Sequence[int], k: int) -> List[int]:
    """Add ``k`` to the number whose decimal digits are ``num``."""
    result: List[int] = []
    carry = 0
    for column in _low_digits(num, k):
        carry, digit = divmod(column + carry, 10)
        result.append(digit)
    if carry:
        result.append(carry)
    result.reverse()
    return result


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one later sell."""
    if not prices:
        raise ValueError("prices must not be empty")
    lowest = prices[0]
    best = 0
    for price in prices:
        if price < lowest:
            lowest = price
        else:
            best = max(best, price - lowest)
    return best


def longest_consecutive(nums: Sequence[int]) -> int:
    """Length of the longest run of consecutive integers present in ``nums``."""
    values = set(nums)
    longest = 0
    for start in values:
        if start - 1 in values:
            continue
        end = start
        while end + 1 in values:
            end += 1
        longest = max(longest, end - start + 1)
    return longest


def single_number(nums: Sequence[int]) -> int:
    """The one value that appears an odd number of times when all others pair up."""
    return reduce(xor, nums, 0)


def majority_element(nums: Sequence[int]) -> int:
    """Candidate majority element by the Boyer-Moore voting scheme."""
    if not nums:
        raise ValueError("nums must not be empty")
    candidate = nums[0]
    votes = 1
    for value in nums[1:]:
        if votes == 0:
            candidate = value
        votes += 1 if value == candidate else -1
    return candidate


def is_sorted_and_rotated(nums: Sequence[int]) -> bool:
    """Whether ``nums`` is a non-decreasing sequence rotated by some amount."""
    if not nums:
        raise ValueError("nums must not be empty")
    drops = sum(1 for left, right in zip(nums, nums[1:]) if left > right)
    if nums[0] < nums[-1]:
        drops += 1
    return drops <= 1


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` places, in place."""
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = list(nums[-k:]) + list(nums[:-k])


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Whether any value occurs more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def rearrange_by_sign(nums: Sequence[int]) -> List[int]:
    """Interleave non-negatives (even slots) and negatives (odd slots), keeping order."""
    positives = [value for value in nums if value >= 0]
    negatives = [value for value in nums if value < 0]
    if len(positives) != (len(nums) + 1) // 2:
        raise ValueError("nums must hold alternating counts of signs")
    result: List[int] = [0] * len(nums)
    result[0::2] = positives
    result[1::2] = negatives
    return result


def majority_elements(nums: Sequence[int]) -> List[int]:
    """All values occurring more than ``len(nums) // 3`` times, sorted."""
    first: Optional[int] = None
    second: Optional[int] = None
    first_votes = second_votes = 0
    for value in nums:
        if first_votes == 0 and value != second:
            first, first_votes = value, 1
        elif second_votes == 0 and value != first:
            second, second_votes = value, 1
        elif value == first:
            first_votes += 1
        elif value == second:
            second_votes += 1
        else:
            first_votes -= 1
            second_votes -= 1

    threshold = len(nums) // 3 + 1
    counts = Counter(nums)
    return sorted(
        candidate
        for candidate in (first, second)
        if candidate is not None and counts[candidate] >= threshold
    )


def most_frequent_even(nums: Sequence[int]) -> int:
    """Most frequent even value, smallest on ties, or -1 if there is none."""
    counts = Counter(value for value in nums if value % 2 == 0)
    if not counts:
        return -1
    return min(counts, key=lambda value: (-counts[value], value))


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted list so its first ``k`` items are unique; return ``k``."""
    unique = [value for value, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def missing_number(nums: Sequence[int]) -> int:
    """The value in ``0..len(nums)`` absent from ``nums``."""
    return reduce(xor, chain(range(len(nums) + 1), nums), 0)


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Move every item not equal to ``val`` to the front; return how many there are."""
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move zeroes to the end in place, keeping the order of other items."""
    nonzero = [value for value in nums if value != 0]
    nums[:] = nonzero + [0] * (len(nums) - len(nonzero))


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` into its next lexicographic permutation, wrapping around."""
    size = len(nums)
    pivot = next(
        (i for i in range(size - 2, -1, -1) if nums[i] < nums[i + 1]),
        None,
    )
    if pivot is None:
        nums.reverse()
        return
    successor = next(i for i in range(size - 1, pivot, -1) if nums[i] > nums[pivot])
    nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1 :] = list(reversed(nums[pivot + 1 :]))


def maximum_happiness_sum(happiness: Sequence[int], k: int) -> int:
    """Greatest total from picking ``k`` values, each later pick losing one per turn."""
    ranked = sorted(happiness, reverse=True)[:k]
    return sum(max(value - turn, 0) for turn, value in enumerate(ranked))


def max_consecutive_ones(nums: Sequence[int]) -> int:
    """Length of the longest run of ones."""
    return max(
        (sum(1 for _ in run) for value, run in groupby(nums) if value == 1),
        default=0,
    )


def plus_one(digits: Sequence[int]) -> List[int]:
    """Digits of the number one greater than the one ``digits`` spells."""
    result = list(digits)
    for position in reversed(range(len(result))):
        if result[position] < 9:
            result[position] += 1
            return result
        result[position] = 0
    return [1] + result


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a list of 0, 1 and 2 in place in a single pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[high], nums[mid] = nums[mid], nums[high]
            high -= 1