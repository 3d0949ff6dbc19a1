import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.binary_tree import TreeNode
from algokit.bst import (
    RankedBST,
    bottom_view,
    ceil,
    closest,
    find_swapped,
    floor,
    inorder,
    inorder_successor,
    insert,
    insert_iterative,
    is_bst,
    is_valid_bst,
    recover,
    remove,
    search,
    sorted_to_bst,
    to_linked_list,
    top_view,
    vertical_traversal,
)

KEYS = [8, 3, 10, 1, 6, 14, 4, 7, 13]


def build(keys, duplicates=True):
    root = None
    for key in keys:
        root = insert(root, key, duplicates)
    return root


def find_node(root, key):
    node = root
    while node is not None and node.val != key:
        node = node.left if key < node.val else node.right
    return node


def initialize_tree():
    root = TreeNode(10)
    root.left = TreeNode(5)
    root.right = TreeNode(15)
    root.right.left = TreeNode(12)
    root.right.right = TreeNode(18)
    return root


def test_inorder_is_sorted():
    assert inorder(build(KEYS)) == sorted(KEYS)


def test_insert_keeps_duplicates_when_asked():
    assert inorder(build([5, 3, 5, 5])) == [3, 5, 5, 5]
    assert inorder(build([5, 3, 5, 5], duplicates=False)) == [3, 5]


def test_search_and_iterative_insert():
    root = initialize_tree()
    assert not search(root, 16)
    root = insert_iterative(root, 16)
    assert search(root, 16)
    assert inorder(root) == [5, 10, 12, 15, 16, 18]
    assert inorder(insert_iterative(root, 12)) == [5, 10, 12, 15, 16, 18]


def test_insert_iterative_into_empty():
    root = insert_iterative(None, 7)
    assert inorder(root) == [7]


def test_remove_node_with_two_children():
    root = remove(initialize_tree(), 15)
    assert inorder(root) == [5, 10, 12, 18]
    assert is_bst(root)


def test_remove_missing_key_leaves_tree():
    root = remove(initialize_tree(), 99)
    assert inorder(root) == [5, 10, 12, 15, 18]


def test_floor_and_ceil():
    root = initialize_tree()
    assert floor(root, 14).val == 12
    assert floor(root, 15).val == 15
    assert floor(root, 4) is None
    assert ceil(root, 14).val == 15
    assert ceil(root, 19) is None


def test_sorted_to_bst_is_balanced_and_ordered():
    values = list(range(1, 8))
    root = sorted_to_bst(values)
    assert root.val == 4
    assert inorder(root) == values
    assert sorted_to_bst([]) is None


def test_closest():
    root = initialize_tree()
    assert closest(root, 12) == 12
    assert closest(root, 17) == 18
    with pytest.raises(ValueError):
        closest(None, 3)


def test_to_linked_list_chains_in_order():
    head, tail = to_linked_list(build(KEYS))
    values = []
    node = head
    while node is not None:
        values.append(node.val)
        node = node.right
    assert values == sorted(KEYS)
    assert tail.val == max(KEYS)
    assert to_linked_list(None) == (None, None)


def test_inorder_successor():
    root = build(KEYS)
    assert inorder_successor(root, find_node(root, 7)).val == 8
    assert inorder_successor(root, find_node(root, 3)).val == 4
    assert inorder_successor(root, find_node(root, 14)) is None


def test_is_bst_examples():
    root = TreeNode(4, TreeNode(2, TreeNode(1), TreeNode(3)), TreeNode(5))
    assert is_bst(root)
    assert is_valid_bst(root)
    bad = TreeNode(4, TreeNode(2, TreeNode(1), TreeNode(5)), TreeNode(6))
    assert not is_bst(bad)
    assert not is_valid_bst(bad)


def test_duplicates_are_not_a_strict_bst():
    root = build([5, 5])
    assert not is_bst(root)
    assert not is_valid_bst(root)


def test_recover_swapped_nodes():
    root = TreeNode(18)
    root.left = TreeNode(60, left=TreeNode(4))
    root.right = TreeNode(70, TreeNode(8), TreeNode(80))
    first, second = find_swapped(root)
    assert (first.val, second.val) == (60, 8)
    recover(root)
    assert inorder(root) == [4, 8, 18, 60, 70, 80]


def test_recover_without_swap_raises():
    with pytest.raises(ValueError):
        recover(initialize_tree())
    assert find_swapped(initialize_tree()) is None


def test_views():
    root = TreeNode(10)
    root.left = TreeNode(20, TreeNode(40), TreeNode(50))
    root.right = TreeNode(30)
    assert vertical_traversal(root) == [[40], [20], [10, 50], [30]]
    assert top_view(root) == [40, 20, 10, 30]
    assert bottom_view(root) == [40, 20, 50, 30]
    assert vertical_traversal(None) == []


def test_ranked_kth_smallest():
    tree = RankedBST([20, 8, 22, 4, 12, 10, 14])
    assert tree.kth_smallest(4) == 12
    assert len(tree) == 7


def test_ranked_out_of_range():
    tree = RankedBST([3, 1, 2])
    with pytest.raises(IndexError):
        tree.kth_smallest(4)
    with pytest.raises(IndexError):
        tree.kth_smallest(0)


@given(st.lists(st.integers(-50, 50)))
def test_ranked_matches_sorted(keys):
    tree = RankedBST(keys)
    distinct = sorted(set(keys))
    assert len(tree) == len(distinct)
    assert [tree.kth_smallest(k) for k in range(1, len(distinct) + 1)] == distinct


@given(st.lists(st.integers(-50, 50), unique=True))
def test_insert_gives_valid_bst(keys):
    root = build(keys)
    assert inorder(root) == sorted(keys)
    assert is_bst(root) == is_valid_bst(root)
    assert is_bst(root)


@given(st.lists(st.integers(-50, 50), unique=True, min_size=1), st.data())
def test_remove_drops_exactly_one(keys, data):
    victim = data.draw(st.sampled_from(keys))
    root = remove(build(keys), victim)
    assert inorder(root) == sorted(k for k in keys if k != victim)
    assert not search(root, victim)


@given(st.lists(st.integers(-50, 50), min_size=1), st.integers(-60, 60))
def test_floor_ceil_bound_key(keys, key):
    root = build(keys)
    low = floor(root, key)
    high = ceil(root, key)
    below = [k for k in keys if k <= key]
    above = [k for k in keys if k >= key]
    assert (low.val if low else None) == (max(below) if below else None)
    assert (high.val if high else None) == (min(above) if above else None)


@given(st.lists(st.integers(-50, 50), unique=True, min_size=1), st.integers(-60, 60))
def test_closest_is_nearest(keys, target):
    result = closest(build(keys), target)
    assert result in keys
    assert abs(result - target) == min(abs(k - target) for k in keys)


@given(st.lists(st.integers(-50, 50), unique=True, min_size=2), st.data())
def test_swap_and_recover_round_trip(keys, data):
    root = sorted_to_bst(sorted(keys))
    a, b = data.draw(st.lists(st.sampled_from(keys), min_size=2, max_size=2, unique=True))
    node_a, node_b = find_node(root, a), find_node(root, b)
    node_a.val, node_b.val = node_b.val, node_a.val
    assert not is_bst(root)
    recover(root)
    assert inorder(root) == sorted(keys)