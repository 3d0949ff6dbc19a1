"""Backtracking searches: balanced parentheses and queen placements."""

from __future__ import annotations

from collections.abc import Callable

_KNIGHT_STEPS = {(1, 2), (2, 1)}


def balanced_parentheses(n: int) -> list[str]:
    """All balanced strings of ``n // 2`` bracket pairs in lexicographic order."""
    if n < 0:
        raise ValueError(f"length must be non-negative, got {n}")
    results: list[str] = []
    current: list[str] = []

    def extend(open_left: int, close_left: int) -> None:
        if open_left == 0 and close_left == 0:
            results.append("".join(current))
            return
        if open_left > 0:
            current.append("(")
            extend(open_left - 1, close_left)
            current.pop()
        if close_left > open_left:
            current.append(")")
            extend(open_left, close_left - 1)
            current.pop()

    extend(n // 2, n // 2)
    return results


def _count_placements(n: int, conflicts: Callable[[int, int, int, int], bool]) -> int:
    if n < 0:
        raise ValueError(f"board size must be non-negative, got {n}")
    placed: list[tuple[int, int]] = []

    def place(row: int) -> int:
        if row == n:
            return 1
        ways = 0
        for col in range(n):
            if any(conflicts(r, c, row, col) for r, c in placed):
                continue
            placed.append((row, col))
            ways += place(row + 1)
            placed.pop()
        return ways

    return place(0)


def _queen_attacks(r: int, c: int, row: int, col: int) -> bool:
    return c == col or abs(r - row) == abs(c - col)


def _super_queen_attacks(r: int, c: int, row: int, col: int) -> bool:
    knight = (abs(r - row), abs(c - col)) in _KNIGHT_STEPS
    return _queen_attacks(r, c, row, col) or knight


def count_n_queens(n: int) -> int:
    """Number of ways to place ``n`` non-attacking queens on an ``n``x``n`` board."""
    return _count_placements(n, _queen_attacks)


def count_super_queens(n: int) -> int:
    """Like :func:`count_n_queens`, but queens also attack as knights."""
    return _count_placements(n, _super_queen_attacks)


__all__ = ["balanced_parentheses", "count_n_queens", "count_super_queens"]