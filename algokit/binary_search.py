"""Binary search and answer-space search routines."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from decimal import Decimal
from typing import Callable, Sequence


def first_occurrence(arr: Sequence[int], key: int) -> int:
    """Index of the first ``key`` in sorted ``arr``, or -1 if absent."""
    lo, hi = 0, len(arr) - 1
    answer = -1
    while lo <= hi:
        mid = (lo + hi) // 2
        if arr[mid] == key:
            answer = mid
            hi = mid - 1
        elif arr[mid] > key:
            hi = mid - 1
        else:
            lo = mid + 1
    return answer


def last_occurrence(arr: Sequence[int], key: int) -> int:
    """Index of the last ``key`` in sorted ``arr``, or -1 if absent."""
    lo, hi = 0, len(arr) - 1
    answer = -1
    while lo <= hi:
        mid = (lo + hi) // 2
        if arr[mid] == key:
            answer = mid
            lo = mid + 1
        elif arr[mid] > key:
            hi = mid - 1
        else:
            lo = mid + 1
    return answer


def square_root(n: int, precision: int) -> float:
    """Square root of ``n`` truncated to ``precision`` decimal places.

    The integer part is found by binary search and each decimal place by
    stepping upward; perfect squares are returned exactly.
    """
    if n < 0:
        raise ValueError(f"cannot take the square root of {n}")
    lo, hi = 0, n
    whole = 0
    while lo <= hi:
        mid = (lo + hi) // 2
        square = mid * mid
        if square == n:
            return float(mid)
        if square < n:
            whole = mid
            lo = mid + 1
        else:
            hi = mid - 1

    answer = Decimal(whole)
    step = Decimal("0.1")
    for _ in range(precision):
        while answer * answer <= n:
            answer += step
        answer -= step
        step /= 10
    return float(answer)


def min_pair_difference(a: Sequence[int], b: Sequence[int]) -> int:
    """Smallest absolute difference between an element of ``a`` and one of ``b``."""
    if not a or not b:
        raise ValueError("both sequences must be non-empty")
    ordered = sorted(b)
    best = None
    for x in a:
        pos = bisect_left(ordered, x)
        candidates = []
        if pos >= 1:
            candidates.append(x - ordered[pos - 1])
        if pos < len(ordered):
            candidates.append(ordered[pos] - x)
        local = min(candidates)
        if best is None or local < best:
            best = local
    return best


def can_partition(arr: Sequence[int], k: int, limit: int) -> bool:
    """True if ``arr`` splits greedily into at least ``k`` runs each summing to ``limit`` or more."""
    count = 0
    running = 0
    for value in arr:
        if running + value >= limit:
            count += 1
            running = 0
        else:
            running += value
    return count >= k


def k_partition(arr: Sequence[int], k: int) -> int:
    """Largest ``limit`` such that ``arr`` splits into ``k`` contiguous parts each worth at least ``limit``."""
    lo, hi = 0, sum(arr)
    answer = None
    while lo <= hi:
        mid = (lo + hi) // 2
        if can_partition(arr, k, mid):
            answer = mid
            lo = mid + 1
        else:
            hi = mid - 1
    if answer is None:
        raise ValueError(f"cannot divide {len(arr)} items among {k} parts")
    return answer


def rightmost_true(lo: int, hi: int, check: Callable[[int], bool]) -> int:
    """Last index in ``[lo, hi]`` where a true-then-false predicate holds, or -1."""
    answer = -1
    while lo <= hi:
        mid = (lo + hi) // 2
        if check(mid):
            answer = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return answer


def leftmost_true(lo: int, hi: int, check: Callable[[int], bool]) -> int:
    """First index in ``[lo, hi]`` where a false-then-true predicate holds, or -1."""
    answer = -1
    while lo <= hi:
        mid = (lo + hi + 1) // 2
        if check(mid):
            answer = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return answer


__all__ = [
    "first_occurrence",
    "last_occurrence",
    "square_root",
    "min_pair_difference",
    "can_partition",
    "k_partition",
    "rightmost_true",
    "leftmost_true",
    "bisect_left",
    "bisect_right",
]