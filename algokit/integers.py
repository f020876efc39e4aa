"""Number-theoretic helpers on integers."""

from __future__ import annotations

from collections import Counter
from functools import reduce
from operator import xor
from typing import Iterable, Sequence

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_BASE4_MASK = 0x55555555
_WORD_MASK = 0xFFFFFFFF


def fib(n: int) -> int:
    """The ``n``-th Fibonacci number, with ``fib(0) == 0``."""
    if n < 0:
        raise ValueError("n must not be negative")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def reverse_integer(x: int) -> int:
    """Digits of ``x`` reversed, or 0 if the result leaves the signed 32-bit range."""
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    if not _INT32_MIN <= result <= _INT32_MAX:
        return 0
    return result


def is_palindrome_number(x: int) -> bool:
    """Whether the decimal digits of ``x`` read the same both ways."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def is_power_of_four(n: int) -> bool:
    """Whether ``n`` is a power of four that fits in 32 bits."""
    return n > 0 and n & (n - 1) == 0 and n | _BASE4_MASK == _BASE4_MASK


def min_xor_operations(nums: Iterable[int], k: int) -> int:
    """Fewest single-bit flips that make the xor of ``nums`` equal ``k``."""
    difference = reduce(xor, nums, k) & _WORD_MASK
    return bin(difference).count("1")


def triangle_type(sides: Sequence[int]) -> str:
    """Classify three side lengths as a kind of triangle, or ``"none"``."""
    if len(sides) != 3:
        raise ValueError("a triangle needs exactly three sides")
    a, b, c = sorted(sides)
    if a + b <= c:
        return "none"
    if a == b == c:
        return "equilateral"
    if a == b or b == c:
        return "isosceles"
    return "scalene"


def find_judge(n: int, trust: Iterable[Sequence[int]]) -> int:
    """The person trusted by all others and trusting nobody, or -1."""
    trusting: Counter[int] = Counter()
    trusted: Counter[int] = Counter()
    for truster, trustee in trust:
        trusting[truster] += 1
        trusted[trustee] += 1
    return next(
        (
            person
            for person in range(n, 0, -1)
            if trusting[person] == 0 and trusted[person] == n - 1
        ),
        -1,
    )