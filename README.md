# algokit

A collection of classic algorithms in plain Python, with no dependencies
outside the standard library.

## Modules

- `algokit.bits`: reading, setting, clearing, updating and toggling bits
  (`get_ith_bit`, `set_ith_bit`, `clear_ith_bit`, `update_ith_bit`,
  `toggle_bit`), clearing or replacing ranges of bits, `is_power_of_two`,
  `is_power_of_four`, two ways of counting set bits, `fast_power`,
  `power_mod`, `decimal_to_binary` / `binary_to_decimal`, `binary_string`,
  `largest_power_of_two`, `lowest_set_bit`, `all_subsets`, `sort_by_bits`,
  `hamming_distance` and `xor_swap`.
- `algokit.binary_search`: `first_occurrence` and `last_occurrence` in a
  sorted sequence, `square_root` truncated to a given number of decimal
  places, `min_pair_difference`, `can_partition` and `k_partition`, and the
  generic `rightmost_true` / `leftmost_true` searches over monotone
  predicates.
- `algokit.binary_tree`: the `TreeNode` dataclass, `build_preorder` and
  `build_level_order` (with `-1` marking a missing child), `level_order`,
  `height`, `diameter` and `diameter_fast` (returning a `HeightDiameter`),
  `replace_with_descendant_sum`, `is_height_balanced`, `max_subset_sum`,
  `nodes_at_level`, `nodes_at_distance_k`, `distance_k_bfs`,
  `vertical_order`, `flip_equivalent`, `lowest_common_ancestor`,
  `depth_of`, `shortest_distance`, `max_path_sum`, `path_to` and
  `minimum_difference`.
- `algokit.bst`: search-tree operations on `TreeNode`: `insert`,
  `insert_iterative`, `search`, `remove`, `floor`, `ceil`, `inorder`,
  `sorted_to_bst`, `closest`, `to_linked_list`, `inorder_successor`,
  `is_bst`, `is_valid_bst`, `find_swapped`, `recover`,
  `vertical_traversal`, `top_view` and `bottom_view`; plus `RankedBST`, a
  tree that tracks left-subtree sizes and answers `kth_smallest`.
- `algokit.hull_merge`: `brute_force_hull`, `divide_and_conquer_hull` and
  the helpers they use (`cross`, `orientation`, `quadrant`,
  `clockwise_order`, `y_intercept`, `merge_hulls`).
- `algokit.hulls`: Graham scan variants (`graham_scan`,
  `graham_scan_classic`, `graham_scan_dedup`) and Andrew's monotone chain
  (`monotone_chain`, `monotone_chain_set`). Points are `(x, y)` tuples of
  integers.
- `algokit.backtracking`: `balanced_parentheses`, `count_n_queens` and
  `count_super_queens` (queens that also move as knights).
- `algokit.dp`: `brick_colorings`, `climbing_ways`, `count_bsts`,
  `count_palindromic_substrings`, `can_jump`, `min_jumps`, `lcs3`,
  `lis_length`, `lis`, `longest_palindrome`, `cut_rod` and `tsp`.

Invalid input is reported with exceptions (`ValueError`, `IndexError`,
`ZeroDivisionError`) rather than sentinel values, except where a function
documents a `-1` or `None` result for "not found".

## Examples

```python
from algokit import bits, binary_search, dp, hulls

bits.count_set_bits(23)                          # 4
binary_search.first_occurrence([1, 2, 2, 3], 2)  # 1
dp.count_bsts(3)                                 # 5
dp.tsp([[0, 20, 42, 25],
        [20, 0, 30, 34],
        [42, 30, 0, 10],
        [25, 34, 10, 0]])                        # 85
hulls.monotone_chain([(0, 0), (1, 1), (2, 0), (1, 3), (0, 2)])
```

```python
from algokit.bst import RankedBST

tree = RankedBST([20, 8, 22, 4, 12, 10, 14])
tree.kth_smallest(4)                             # 12
len(tree)                                        # 7
```

## What it does not do

This is a library only. It has no command-line program and reads nothing
from standard input; trees, point sets and other inputs are passed to the
functions as Python values.

## Running the tests

Install the test extra and run pytest:

```
pip install -e .[test]
pytest
```