"""Dynamic programming: counting, subsequences, palindromes, jumps and tours."""

from __future__ import annotations

from functools import lru_cache
from typing import Sequence

MOD = 10**9 + 7


def brick_colorings(n: int, m: int, k: int) -> int:
    """Ways to paint ``n`` bricks in ``m`` colours with exactly ``k`` colour changes.

    A colour change is a neighbouring pair of bricks with different colours.
    The count is taken modulo 10**9 + 7.
    """
    if n < 0 or k < 0:
        return 0
    if n == 0:
        return 1 if k == 0 else 0
    # ways[b]: completions from the current brick with b changes made so far.
    ways = [0] * (k + 2)
    ways[k] = 1
    for _ in range(n - 1):
        ways = [(ways[b] + (m - 1) * ways[b + 1]) % MOD for b in range(k + 1)] + [0]
    return m * ways[0] % MOD


def climbing_ways(n: int) -> int:
    """Ways to climb ``n`` stairs taking 1, 2 or 3 steps at a time."""
    if n < 0:
        return 0
    ways = [1] + [0] * n
    for i in range(1, n + 1):
        ways[i] = sum(ways[max(0, i - 3):i])
    return ways[n]


def count_bsts(n: int) -> int:
    """Number of structurally distinct search trees on ``n`` keys (Catalan number)."""
    if n < 0:
        raise ValueError(f"key count must be non-negative, got {n}")
    counts = [1] + [0] * n
    for i in range(1, n + 1):
        counts[i] = sum(counts[j] * counts[i - j - 1] for j in range(i))
    return counts[n]


def _palindrome_table(s: str) -> list[list[bool]]:
    n = len(s)
    table = [[False] * n for _ in range(n)]
    for gap in range(n):
        for start in range(n - gap):
            end = start + gap
            if gap == 0:
                table[start][end] = True
            elif gap == 1:
                table[start][end] = s[start] == s[end]
            else:
                table[start][end] = s[start] == s[end] and table[start + 1][end - 1]
    return table


def count_palindromic_substrings(s: str) -> int:
    """Number of (start, end) positions at which ``s`` holds a palindrome."""
    return sum(sum(row) for row in _palindrome_table(s))


def can_jump(nums: Sequence[int]) -> bool:
    """True if the last index is reachable from the first, ``nums[i]`` being the jump range."""
    reach = 0
    for i, step in enumerate(nums):
        if i <= reach:
            reach = max(reach, i + step)
    return reach >= len(nums) - 1


def min_jumps(nums: Sequence[int]) -> int:
    """Fewest jumps from the first index to the last."""
    n = len(nums)
    if n == 0:
        raise ValueError("need at least one position")
    best: list[int | None] = [None] * n
    best[0] = 0
    for i, step in enumerate(nums):
        here = best[i]
        if here is None:
            continue
        for j in range(i + 1, min(n, i + step + 1)):
            if best[j] is None or here + 1 < best[j]:
                best[j] = here + 1
    if best[-1] is None:
        raise ValueError("the last position cannot be reached")
    return best[-1]


def lcs3(a: str, b: str, c: str) -> int:
    """Length of the longest common subsequence of three strings."""
    n, m, l = len(a), len(b), len(c)
    # table[i][j][t]: answer for the suffixes a[i:], b[j:], c[t:].
    table = [[[0] * (l + 1) for _ in range(m + 1)] for _ in range(n + 1)]
    for i in reversed(range(n)):
        for j in reversed(range(m)):
            for t in reversed(range(l)):
                best = max(table[i + 1][j][t], table[i][j + 1][t], table[i][j][t + 1])
                if a[i] == b[j] == c[t]:
                    best = max(best, 1 + table[i + 1][j + 1][t + 1])
                table[i][j][t] = best
    return table[0][0][0]


def lis_length(values: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    lengths: list[int] = []
    for i, value in enumerate(values):
        lengths.append(
            1 + max((lengths[j] for j in range(i) if values[j] < value), default=0)
        )
    return max(lengths, default=0)


def lis(values: Sequence[int]) -> list[int]:
    """A longest strictly increasing subsequence, ending at its earliest possible end."""
    n = len(values)
    if n == 0:
        return []
    lengths = [1] * n
    parent = [-1] * n
    for i in range(n):
        for j in range(i):
            if values[j] < values[i] and lengths[i] < lengths[j] + 1:
                lengths[i] = lengths[j] + 1
                parent[i] = j
    pos = max(range(n), key=lambda i: (lengths[i], -i))
    result = []
    while pos != -1:
        result.append(values[pos])
        pos = parent[pos]
    result.reverse()
    return result


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring; the leftmost one wins a tie."""
    best_len, best_end = 0, -1
    table = _palindrome_table(s)
    n = len(s)
    for gap in range(n):
        for start in range(n - gap):
            end = start + gap
            if table[start][end] and gap + 1 > best_len:
                best_len, best_end = gap + 1, end
    return s[best_end - best_len + 1:best_end + 1]


def cut_rod(prices: Sequence[int]) -> int:
    """Best revenue from a rod of length ``len(prices)``; piece ``i+1`` sells for ``prices[i]``."""
    n = len(prices)
    best = [0] * (n + 1)
    for length in range(1, n + 1):
        best[length] = max(prices[cut - 1] + best[length - cut] for cut in range(1, length + 1))
    return best[n]


def tsp(dist: Sequence[Sequence[int]]) -> int:
    """Cost of the cheapest tour from city 0 through every city and back."""
    n = len(dist)
    if n == 0:
        raise ValueError("need at least one city")
    if any(len(row) != n for row in dist):
        raise ValueError("distance matrix must be square")
    full = (1 << n) - 1

    @lru_cache(maxsize=None)
    def visit(mask: int, city: int) -> int:
        if mask == full:
            return dist[city][0]
        return min(
            dist[city][nxt] + visit(mask | (1 << nxt), nxt)
            for nxt in range(n)
            if not mask & (1 << nxt)
        )

    return visit(1, 0)


__all__ = [
    "brick_colorings",
    "climbing_ways",
    "count_bsts",
    "count_palindromic_substrings",
    "can_jump",
    "min_jumps",
    "lcs3",
    "lis_length",
    "lis",
    "longest_palindrome",
    "cut_rod",
    "tsp",
]