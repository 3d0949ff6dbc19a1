"""Binary search tree operations on :class:`~algokit.binary_tree.TreeNode`."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

from algokit.binary_tree import TreeNode


def insert(
    root: Optional[TreeNode], key: int, duplicates: bool = True
) -> TreeNode:
    """Insert ``key`` and return the root.

    Equal keys go to the right subtree when ``duplicates`` is true and are
    ignored otherwise.
    """
    new = TreeNode(key)
    if root is None:
        return new
    node = root
    while True:
        if key == node.val and not duplicates:
            return root
        if key < node.val:
            if node.left is None:
                node.left = new
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new
                return root
            node = node.right


def insert_iterative(root: Optional[TreeNode], key: int) -> TreeNode:
    """Insert ``key`` by walking down to its parent; equal keys are ignored."""
    parent: Optional[TreeNode] = None
    current = root
    while current is not None:
        parent = current
        if current.val > key:
            current = current.left
        elif current.val < key:
            current = current.right
        else:
            return root  # type: ignore[return-value]
    new = TreeNode(key)
    if parent is None:
        return new
    if parent.val > key:
        parent.left = new
    else:
        parent.right = new
    return root  # type: ignore[return-value]


def search(root: Optional[TreeNode], key: int) -> bool:
    """True when ``key`` is in the tree."""
    node = root
    while node is not None:
        if node.val == key:
            return True
        node = node.left if node.val > key else node.right
    return False


def _successor_in_subtree(node: TreeNode) -> TreeNode:
    current = node.right
    assert current is not None
    while current.left is not None:
        current = current.left
    return current


def remove(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Delete one node holding ``key`` and return the new root.

    A node with two children takes its inorder successor's key.
    """
    if root is None:
        return None
    if root.val > key:
        root.left = remove(root.left, key)
    elif root.val < key:
        root.right = remove(root.right, key)
    elif root.left is None:
        return root.right
    elif root.right is None:
        return root.left
    else:
        succ = _successor_in_subtree(root)
        root.val = succ.val
        root.right = remove(root.right, succ.val)
    return root


def floor(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Node with the greatest key not above ``key``, or None."""
    result = None
    node = root
    while node is not None:
        if node.val == key:
            return node
        if node.val > key:
            node = node.left
        else:
            result = node
            node = node.right
    return result


def ceil(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Node with the smallest key not below ``key``, or None."""
    result = None
    node = root
    while node is not None:
        if node.val == key:
            return node
        if node.val < key:
            node = node.right
        else:
            result = node
            node = node.left
    return result


def _walk(node: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Keys in inorder, which is ascending for a search tree."""
    return [node.val for node in _walk(root)]


def sorted_to_bst(values: Sequence[int]) -> Optional[TreeNode]:
    """Build a balanced search tree from sorted ``values``."""

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        mid = (start + end) // 2
        node = TreeNode(values[mid])
        node.left = build(start, mid - 1)
        node.right = build(mid + 1, end)
        return node

    return build(0, len(values) - 1)


def closest(root: Optional[TreeNode], target: int) -> int:
    """Key nearest to ``target``; on a tie the one met first from the root wins."""
    if root is None:
        raise ValueError("an empty tree has no closest key")
    best = root.val
    best_diff = math.inf
    node: Optional[TreeNode] = root
    while node is not None:
        diff = abs(node.val - target)
        if diff == 0:
            return node.val
        if diff < best_diff:
            best_diff = diff
            best = node.val
        node = node.right if node.val < target else node.left
    return best


def to_linked_list(
    root: Optional[TreeNode],
) -> tuple[Optional[TreeNode], Optional[TreeNode]]:
    """Relink the tree's right pointers into a sorted chain.

    Returns the chain's head and tail. Left pointers are left untouched.
    """
    if root is None:
        return None, None
    if root.left is None and root.right is None:
        return root, root
    if root.right is None:
        head, tail = to_linked_list(root.left)
        assert tail is not None
        tail.right = root
        return head, root
    if root.left is None:
        head, tail = to_linked_list(root.right)
        root.right = head
        return root, tail
    left_head, left_tail = to_linked_list(root.left)
    right_head, right_tail = to_linked_list(root.right)
    assert left_tail is not None
    left_tail.right = root
    root.right = right_head
    return left_head, right_tail


def inorder_successor(
    root: Optional[TreeNode], target: TreeNode
) -> Optional[TreeNode]:
    """Node that follows ``target`` in inorder, or None if it is the last."""
    if target.right is not None:
        return _successor_in_subtree(target)
    succ = None
    node = root
    while node is not None:
        if node.val > target.val:
            succ = node
            node = node.left
        elif node.val < target.val:
            node = node.right
        else:
            break
    return succ


def is_bst(root: Optional[TreeNode]) -> bool:
    """True when the inorder keys are strictly increasing."""
    previous: Optional[int] = None
    for node in _walk(root):
        if previous is not None and node.val <= previous:
            return False
        previous = node.val
    return True


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """True when every key lies strictly between the bounds set by its ancestors."""

    def valid(node: Optional[TreeNode], low: float, high: float) -> bool:
        if node is None:
            return True
        if not low < node.val < high:
            return False
        return valid(node.left, low, node.val) and valid(node.right, node.val, high)

    return valid(root, -math.inf, math.inf)


def find_swapped(root: Optional[TreeNode]) -> Optional[tuple[TreeNode, TreeNode]]:
    """The two nodes whose keys were swapped, or None if the order is intact."""
    previous: Optional[TreeNode] = None
    first: Optional[TreeNode] = None
    second: Optional[TreeNode] = None
    for node in _walk(root):
        if previous is not None and node.val < previous.val:
            if first is None:
                first = previous
            second = node
        previous = node
    if first is None or second is None:
        return None
    return first, second


def recover(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Swap back the two misplaced keys in place and return the root."""
    pair = find_swapped(root)
    if pair is None:
        raise ValueError("no swapped nodes found")
    first, second = pair
    first.val, second.val = second.val, first.val
    return root


def _by_column(root: Optional[TreeNode]) -> Iterable[tuple[int, TreeNode]]:
    queue = deque([(root, 0)] if root is not None else [])
    while queue:
        node, offset = queue.popleft()
        yield offset, node
        if node.left is not None:
            queue.append((node.left, offset - 1))
        if node.right is not None:
            queue.append((node.right, offset + 1))


def vertical_traversal(root: Optional[TreeNode]) -> list[list[int]]:
    """Keys grouped by column, leftmost first, each column in level order."""
    columns: dict[int, list[int]] = {}
    for offset, node in _by_column(root):
        columns.setdefault(offset, []).append(node.val)
    return [columns[offset] for offset in sorted(columns)]


def top_view(root: Optional[TreeNode]) -> list[int]:
    """The first key met in each column, leftmost column first."""
    seen: dict[int, int] = {}
    for offset, node in _by_column(root):
        seen.setdefault(offset, node.val)
    return [seen[offset] for offset in sorted(seen)]


def bottom_view(root: Optional[TreeNode]) -> list[int]:
    """The last key met in each column, leftmost column first."""
    seen: dict[int, int] = {}
    for offset, node in _by_column(root):
        seen[offset] = node.val
    return [seen[offset] for offset in sorted(seen)]


@dataclass
class _RankedNode:
    key: int
    left: Optional["_RankedNode"] = None
    right: Optional["_RankedNode"] = None
    left_count: int = 0


class RankedBST:
    """Search tree whose nodes track the size of their left subtree."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self._root: Optional[_RankedNode] = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def __len__(self) -> int:
        return self._size

    def insert(self, key: int) -> None:
        """Add ``key``; keys already present are ignored."""
        if self._root is None:
            self._root = _RankedNode(key)
            self._size = 1
            return
        path: list[_RankedNode] = []
        node = self._root
        while True:
            if key == node.key:
                return
            path.append(node)
            if key < node.key:
                if node.left is None:
                    node.left = _RankedNode(key)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _RankedNode(key)
                    break
                node = node.right
        for ancestor in path:
            if key < ancestor.key:
                ancestor.left_count += 1
        self._size += 1

    def kth_smallest(self, k: int) -> int:
        """The ``k``-th smallest key, counting from 1."""
        node = self._root
        while node is not None:
            rank = node.left_count + 1
            if rank == k:
                return node.key
            if rank > k:
                node = node.left
            else:
                k -= rank
                node = node.right
        raise IndexError("there are fewer than k keys in the tree")


__all__ = [
    "RankedBST",
    "insert",
    "insert_iterative",
    "search",
    "remove",
    "floor",
    "ceil",
    "inorder",
    "sorted_to_bst",
    "closest",
    "to_linked_list",
    "inorder_successor",
    "is_bst",
    "is_valid_bst",
    "find_swapped",
    "recover",
    "vertical_traversal",
    "top_view",
    "bottom_view",
]