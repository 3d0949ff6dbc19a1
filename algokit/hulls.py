"""Convex hulls by Graham scan and by Andrew's monotone chain."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable

Point = tuple[int, int]


def _cross(o: Point, a: Point, b: Point) -> int:
    """Cross product of o->a and o->b; positive for a counter-clockwise turn."""
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def _sq_dist(a: Point, b: Point) -> int:
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2


def _points(points: Iterable[Point]) -> list[Point]:
    return [(p[0], p[1]) for p in points]


def _nearest_first(pivot: Point):
    """Comparator by angle around ``pivot``; collinear points nearest first."""

    def compare(a: Point, b: Point) -> int:
        turn = _cross(pivot, a, b)
        if turn == 0:
            da, db = _sq_dist(pivot, a), _sq_dist(pivot, b)
            return (da > db) - (da < db)
        return -1 if turn > 0 else 1

    return cmp_to_key(compare)


def _scan(ordered: list[Point], seed: int, keep_collinear: bool) -> list[Point]:
    stack = ordered[:seed]
    for point in ordered[seed:]:
        while len(stack) > 1:
            turn = _cross(stack[-2], stack[-1], point)
            if turn < 0 or (turn == 0 and not keep_collinear):
                stack.pop()
            else:
                break
        stack.append(point)
    return stack[::-1]


def graham_scan(points: Iterable[Point]) -> list[Point]:
    """Graham scan pivoting on the lowest, then rightmost, point.

    Points are ordered counter-clockwise around the pivot with collinear
    points farthest first; collinear turns are kept. The hull is returned
    clockwise, ending at the pivot. Two or fewer points come back in pivot
    order.
    """
    pts = _points(points)
    if not pts:
        raise ValueError("need at least one point")
    pts.sort(key=lambda p: (p[1], -p[0]))
    pivot = pts[0]

    def compare(a: Point, b: Point) -> int:
        turn = _cross(pivot, a, b)
        if turn == 0:
            da, db = _sq_dist(pivot, a), _sq_dist(pivot, b)
            return (db > da) - (db < da)
        return -1 if turn > 0 else 1

    ordered = [pivot] + sorted(pts[1:], key=cmp_to_key(compare))
    if len(ordered) <= 2:
        return ordered
    return _scan(ordered, 2, keep_collinear=True)


def _lowest_leftmost_first(pts: list[Point]) -> tuple[Point, list[Point]]:
    pivot = min(pts, key=lambda p: (p[1], p[0]))
    rest = list(pts)
    rest.remove(pivot)
    return pivot, sorted(rest, key=_nearest_first(pivot))


def graham_scan_classic(points: Iterable[Point]) -> list[Point]:
    """Graham scan pivoting on the lowest, then leftmost, point.

    Only strict left turns survive. The hull is returned clockwise, ending
    at the pivot.
    """
    pts = _points(points)
    if len(pts) < 3:
        raise ValueError("need at least three points")
    pivot, rest = _lowest_leftmost_first(pts)
    return _scan([pivot, *rest], 3, keep_collinear=False)


def graham_scan_dedup(points: Iterable[Point]) -> list[Point]:
    """Graham scan that first keeps only the farthest point along each angle.

    Returns an empty list when fewer than three distinct directions remain.
    """
    pts = _points(points)
    if not pts:
        return []
    pivot, rest = _lowest_leftmost_first(pts)
    kept = [pivot]
    for current, following in zip(rest, rest[1:] + [None]):
        if following is not None and _cross(pivot, current, following) == 0:
            continue
        kept.append(current)
    if len(kept) < 3:
        return []
    return _scan(kept, 3, keep_collinear=False)


def monotone_chain(points: Iterable[Point]) -> list[Point]:
    """Andrew's monotone chain, counter-clockwise from the lowest-left point.

    Collinear points on the boundary are kept. Three or fewer points are
    returned unchanged.
    """
    pts = _points(points)
    if len(pts) <= 3:
        return pts
    pts.sort()
    hull: list[Point] = []
    for point in pts:
        while len(hull) >= 2 and _cross(hull[-2], hull[-1], point) < 0:
            hull.pop()
        hull.append(point)
    floor = len(hull) + 1
    for point in reversed(pts[:-1]):
        while len(hull) >= floor and _cross(hull[-2], hull[-1], point) < 0:
            hull.pop()
        hull.append(point)
    return hull[:-1]


def monotone_chain_set(points: Iterable[Point]) -> list[Point]:
    """Distinct points of the monotone-chain hull in ascending order.

    Fewer than three points are returned sorted, as given.
    """
    pts = sorted(_points(points))
    if len(pts) < 3:
        return pts
    hull: list[Point] = []
    for point in pts:
        while len(hull) > 1 and _cross(hull[-2], hull[-1], point) < 0:
            hull.pop()
        hull.append(point)
    floor = len(hull)
    for point in reversed(pts[:-1]):
        while len(hull) > floor and _cross(hull[-2], hull[-1], point) < 0:
            hull.pop()
        hull.append(point)
    return sorted(set(hull))


__all__ = [
    "graham_scan",
    "graham_scan_classic",
    "graham_scan_dedup",
    "monotone_chain",
    "monotone_chain_set",
]