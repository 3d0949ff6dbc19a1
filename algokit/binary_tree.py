"""Binary tree construction, traversal and structural queries."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import pairwise
from typing import Iterable, Iterator, Optional

SENTINEL = -1


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree; nodes compare and hash by identity."""

    val: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


@dataclass(frozen=True)
class HeightDiameter:
    """Height of a subtree together with the longest path inside it, in edges."""

    height: int
    diameter: int


def build_preorder(values: Iterable[int]) -> Optional[TreeNode]:
    """Build a tree from preorder values where ``-1`` marks a missing child."""
    it = iter(values)

    def build() -> Optional[TreeNode]:
        value = next(it, None)
        if value is None:
            raise ValueError("preorder input ended before the tree was complete")
        if value == SENTINEL:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def build_level_order(values: Iterable[int]) -> Optional[TreeNode]:
    """Build a tree from the root value followed by child pairs in level order."""
    it = iter(values)
    first = next(it, None)
    if first is None:
        raise ValueError("level-order input is empty")
    if first == SENTINEL:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        current = queue.popleft()
        left = next(it, None)
        right = next(it, None)
        if left is None or right is None:
            raise ValueError("level-order input ended before the tree was complete")
        if left != SENTINEL:
            current.left = TreeNode(left)
            queue.append(current.left)
        if right != SENTINEL:
            current.right = TreeNode(right)
            queue.append(current.right)
    return root


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Values of the tree grouped by level, top to bottom, left to right."""
    levels: list[list[int]] = []
    queue = deque([root] if root else [])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            if node.left:
                queue.append(node.left)
            if node.right:
                queue.append(node.right)
        levels.append(level)
    return levels


def height(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def diameter(root: Optional[TreeNode]) -> int:
    """Longest distance between two nodes, computed naively in O(n^2)."""
    if root is None:
        return 0
    through_root = height(root.left) + height(root.right)
    return max(through_root, diameter(root.left), diameter(root.right))


def diameter_fast(root: Optional[TreeNode]) -> HeightDiameter:
    """Height and diameter computed together in a single pass."""
    if root is None:
        return HeightDiameter(0, 0)
    left = diameter_fast(root.left)
    right = diameter_fast(root.right)
    return HeightDiameter(
        height=1 + max(left.height, right.height),
        diameter=max(left.height + right.height, left.diameter, right.diameter),
    )


def replace_with_descendant_sum(root: Optional[TreeNode]) -> int:
    """Replace each inner node's value with the sum of its descendants.

    Leaves keep their values. Returns the original sum of the whole subtree.
    """
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return root.val
    original = root.val
    root.val = replace_with_descendant_sum(root.left) + replace_with_descendant_sum(
        root.right
    )
    return original + root.val


def _balance(root: Optional[TreeNode]) -> tuple[int, bool]:
    if root is None:
        return 0, True
    left_height, left_ok = _balance(root.left)
    right_height, right_ok = _balance(root.right)
    balanced = left_ok and right_ok and abs(left_height - right_height) <= 1
    return 1 + max(left_height, right_height), balanced


def is_height_balanced(root: Optional[TreeNode]) -> bool:
    """True when every node's subtrees differ in height by at most one."""
    return _balance(root)[1]


def _subset(root: Optional[TreeNode]) -> tuple[int, int]:
    if root is None:
        return 0, 0
    left_inc, left_exc = _subset(root.left)
    right_inc, right_exc = _subset(root.right)
    include = root.val + left_exc + right_exc
    exclude = max(left_inc, left_exc) + max(right_inc, right_exc)
    return include, exclude


def max_subset_sum(root: Optional[TreeNode]) -> int:
    """Largest sum over sets of nodes in which no node is adjacent to its parent."""
    return max(_subset(root))


def _collect_at_depth(
    node: Optional[TreeNode], k: int, out: list[int], blocker: Optional[TreeNode] = None
) -> None:
    if node is None or k < 0 or node is blocker:
        return
    if k == 0:
        out.append(node.val)
        return
    _collect_at_depth(node.left, k - 1, out, blocker)
    _collect_at_depth(node.right, k - 1, out, blocker)


def nodes_at_level(root: Optional[TreeNode], k: int) -> list[int]:
    """Values of the nodes exactly ``k`` levels below ``root``, left to right."""
    found: list[int] = []
    _collect_at_depth(root, k, found)
    return found


def nodes_at_distance_k(
    root: Optional[TreeNode], target: TreeNode, k: int
) -> list[int]:
    """Values of nodes ``k`` edges from ``target``: its subtree first, then outward."""
    if k < 0:
        raise ValueError(f"distance must be non-negative, got {k}")
    found: list[int] = []

    def walk(node: Optional[TreeNode]) -> int:
        # Returns one more than the distance from node to target, or -1.
        if node is None:
            return -1
        if node is target:
            _collect_at_depth(node, k, found)
            return 1
        for child in (node.left, node.right):
            dist = walk(child)
            if dist != -1:
                _collect_at_depth(node, k - dist, found, blocker=child)
                return dist + 1
        return -1

    walk(root)
    return found


def distance_k_bfs(root: Optional[TreeNode], target: TreeNode, k: int) -> list[int]:
    """Values of nodes ``k`` edges from ``target``, found by breadth-first search."""
    if k < 0:
        raise ValueError(f"distance must be non-negative, got {k}")
    parents: dict[TreeNode, TreeNode] = {}
    queue = deque([root] if root else [])
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child:
                parents[child] = node
                queue.append(child)

    visited = {target}
    frontier = deque([target])
    for _ in range(k):
        if not frontier:
            break
        for _ in range(len(frontier)):
            node = frontier.popleft()
            for neighbour in (node.left, node.right, parents.get(node)):
                if neighbour is not None and neighbour not in visited:
                    visited.add(neighbour)
                    frontier.append(neighbour)
    return [node.val for node in frontier]


def vertical_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Values grouped by horizontal distance from the root, leftmost column first."""
    columns: dict[int, list[int]] = {}

    def walk(node: Optional[TreeNode], offset: int) -> None:
        if node is None:
            return
        columns.setdefault(offset, []).append(node.val)
        walk(node.left, offset - 1)
        walk(node.right, offset + 1)

    walk(root, 0)
    return [columns[offset] for offset in sorted(columns)]


def flip_equivalent(first: Optional[TreeNode], second: Optional[TreeNode]) -> bool:
    """True if one tree can be turned into the other by swapping children."""
    if first is None and second is None:
        return True
    if first is None or second is None or first.val != second.val:
        return False
    return (
        flip_equivalent(first.left, second.right)
        and flip_equivalent(first.right, second.left)
    ) or (
        flip_equivalent(first.left, second.left)
        and flip_equivalent(first.right, second.right)
    )


def lowest_common_ancestor(
    root: Optional[TreeNode], a: int, b: int
) -> Optional[TreeNode]:
    """Deepest node having nodes valued ``a`` and ``b`` below or at it."""
    if root is None:
        return None
    if root.val in (a, b):
        return root
    left = lowest_common_ancestor(root.left, a, b)
    right = lowest_common_ancestor(root.right, a, b)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def depth_of(root: Optional[TreeNode], key: int) -> int:
    """Number of edges from ``root`` to the first node valued ``key``, or -1."""

    def search(node: Optional[TreeNode], level: int) -> int:
        if node is None:
            return -1
        if node.val == key:
            return level
        found = search(node.left, level + 1)
        return found if found != -1 else search(node.right, level + 1)

    return search(root, 0)


def shortest_distance(root: Optional[TreeNode], a: int, b: int) -> int:
    """Number of edges between the nodes valued ``a`` and ``b``."""
    ancestor = lowest_common_ancestor(root, a, b)
    if ancestor is None:
        raise ValueError(f"neither {a} nor {b} is in the tree")
    first = depth_of(ancestor, a)
    second = depth_of(ancestor, b)
    if first == -1 or second == -1:
        raise ValueError(f"{a} and {b} are not both in the tree")
    return first + second


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Largest sum along any path between two nodes."""
    if root is None:
        raise ValueError("an empty tree has no paths")
    best = root.val

    def gain(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        best = max(best, node.val + left + right)
        return node.val + max(left, right)

    gain(root)
    return best


def path_to(root: Optional[TreeNode], x: int) -> list[int]:
    """Values from the root down to the first node valued ``x``; empty if absent."""
    path: list[int] = []

    def walk(node: Optional[TreeNode]) -> bool:
        if node is None:
            return False
        path.append(node.val)
        if node.val == x or walk(node.left) or walk(node.right):
            return True
        path.pop()
        return False

    walk(root)
    return path


def _inorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.val
        yield from _inorder(node.right)


def minimum_difference(root: Optional[TreeNode]) -> int:
    """Smallest gap between consecutive values of a search tree's inorder walk."""
    gaps = [later - earlier for earlier, later in pairwise(_inorder(root))]
    if not gaps:
        raise ValueError("need at least two nodes")
    return min(gaps)


__all__ = [
    "TreeNode",
    "HeightDiameter",
    "build_preorder",
    "build_level_order",
    "level_order",
    "height",
    "diameter",
    "diameter_fast",
    "replace_with_descendant_sum",
    "is_height_balanced",
    "max_subset_sum",
    "nodes_at_level",
    "nodes_at_distance_k",
    "distance_k_bfs",
    "vertical_order",
    "flip_equivalent",
    "lowest_common_ancestor",
    "depth_of",
    "shortest_distance",
    "max_path_sum",
    "path_to",
    "minimum_difference",
]