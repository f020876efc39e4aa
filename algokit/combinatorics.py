"""Enumeration of combinatorial structures."""

from __future__ import annotations

from itertools import combinations
from typing import Iterable, List


def subsets_with_dup(nums: Iterable[int]) -> List[List[int]]:
    """Distinct sub-multisets of ``nums``, each sorted, in lexicographic order."""
    ordered = sorted(nums)
    unique = {
        subset
        for size in range(len(ordered) + 1)
        for subset in combinations(ordered, size)
    }
    return [list(subset) for subset in sorted(unique)]