"""Convex hulls by brute force and by divide and conquer with tangent merging."""

from __future__ import annotations

from functools import cmp_to_key
from itertools import combinations
from typing import Iterable, Iterator, Sequence

Point = tuple[int, int]


def cross(a: Point, b: Point) -> int:
    """Cross product of two vectors given as points."""
    return a[0] * b[1] - b[0] * a[1]


def _minus(a: Point, b: Point) -> Point:
    return a[0] - b[0], a[1] - b[1]


def orientation(a: Point, b: Point, c: Point) -> int:
    """1 if ``c`` lies left of ``a``->``b``, -1 if right, 0 if collinear."""
    value = cross(_minus(b, a), _minus(c, a))
    return (value > 0) - (value < 0)


def quadrant(point: Point) -> int:
    """Quadrant (1 to 4) of a point; points on an axis go to the lowest match."""
    x, y = point
    if x >= 0 and y >= 0:
        return 1
    if x <= 0 and y >= 0:
        return 2
    if x <= 0 and y <= 0:
        return 3
    return 4


def clockwise_order(points: Sequence[Point]) -> list[Point]:
    """Order points by angle around their centroid, quadrant by quadrant.

    Angles grow from the first quadrant onward, so a convex polygon comes
    out counter-clockwise.
    """
    pts = [tuple(p) for p in points]
    n = len(pts)
    if n == 0:
        return []
    cx = sum(x for x, _ in pts)
    cy = sum(y for _, y in pts)

    def relative(p: Point) -> Point:
        # Scaled by n so the centroid stays integral.
        return p[0] * n - cx, p[1] * n - cy

    def compare(p: Point, q: Point) -> int:
        rp, rq = relative(p), relative(q)
        qp, qq = quadrant(rp), quadrant(rq)
        if qp != qq:
            return -1 if qp < qq else 1
        lhs = rp[1] * rq[0]
        rhs = rq[1] * rp[0]
        return (lhs > rhs) - (lhs < rhs)

    return sorted(pts, key=cmp_to_key(compare))


def brute_force_hull(points: Iterable[Point]) -> list[Point]:
    """Hull points found by testing every pair as a supporting line."""
    pts = [tuple(p) for p in points]
    if len(pts) <= 2:
        return clockwise_order(pts)
    on_hull: set[Point] = set()
    for a, b in combinations(pts, 2):
        turns = [orientation(a, b, c) for c in pts]
        if all(t >= 0 for t in turns) or all(t <= 0 for t in turns):
            on_hull.update((a, b))
    return clockwise_order(sorted(on_hull))


def y_intercept(a: Point, b: Point, x: float) -> float:
    """Height at which the line through ``a`` and ``b`` crosses the vertical at ``x``.

    For a vertical segment, half its rise is returned.
    """
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    if dx == 0:
        return dy / 2.0
    return (dy * (x - a[0]) + a[1] * dx) / dx


def _cycle(start: int, stop: int, size: int) -> Iterator[int]:
    index = start
    while index != stop:
        yield index
        index = (index - 1) % size


def merge_hulls(left: Sequence[Point], right: Sequence[Point]) -> list[Point]:
    """Join two counter-clockwise hulls, ``left`` wholly left of ``right``.

    The tangents are found by walking both hulls while the crossing with the
    vertical midway between them rises (upper) or falls (lower). The merged
    hull is returned clockwise, starting at the left end of the upper tangent.
    """
    if not left or not right:
        raise ValueError("both hulls must be non-empty")
    n1, n2 = len(left), len(right)
    start_left = max(range(n1), key=lambda i: left[i][0])
    start_right = min(range(n2), key=lambda j: right[j][0])
    mid_x = (left[start_left][0] + right[start_right][0]) / 2.0

    up_l, up_r = start_left, start_right
    current = y_intercept(left[up_l], right[up_r], mid_x)
    while True:
        next_l = (up_l + 1) % n1
        next_r = (up_r - 1) % n2
        y1 = y_intercept(left[next_l], right[up_r], mid_x)
        y2 = y_intercept(left[up_l], right[next_r], mid_x)
        if not (y1 > current or y2 > current):
            break
        if y1 > y2:
            up_l = next_l
        else:
            up_r = next_r
        current = max(y1, y2)

    low_l, low_r = start_left, start_right
    current = y_intercept(left[low_l], right[low_r], mid_x)
    while True:
        next_l = (low_l - 1) % n1
        next_r = (low_r + 1) % n2
        y1 = y_intercept(left[next_l], right[low_r], mid_x)
        y2 = y_intercept(left[low_l], right[next_r], mid_x)
        if not (y1 < current or y2 < current):
            break
        if y1 < y2:
            low_l = next_l
        else:
            low_r = next_r
        current = min(y1, y2)

    merged = [left[up_l]]
    merged.extend(right[j] for j in _cycle(up_r, low_r, n2))
    merged.append(right[low_r])
    merged.extend(left[i] for i in _cycle(low_l, up_l, n1))
    return merged


def _divide(points: list[Point]) -> list[Point]:
    if len(points) <= 6:
        return brute_force_hull(points)
    half = len(points) // 2
    return merge_hulls(_divide(points[:half]), _divide(points[half:]))


def divide_and_conquer_hull(points: Iterable[Point]) -> list[Point]:
    """Hull of the points: split by x, solve small parts by brute force, then merge."""
    return _divide(sorted(tuple(p) for p in points))


__all__ = [
    "cross",
    "orientation",
    "quadrant",
    "clockwise_order",
    "brute_force_hull",
    "y_intercept",
    "merge_hulls",
    "divide_and_conquer_hull",
]