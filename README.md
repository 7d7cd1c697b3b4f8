# algoset

A small library of well-known algorithms. Each one is a plain function that
works on ordinary Python data: lists, lists of lists, strings, integers and
lightweight node classes. It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Modules

- `algoset.nodes`: `TreeNode`, `NextNode` (a tree node with a `next` pointer)
  and `ListNode`, with `ListNode.from_values` (returns the head, or `None` for
  no values) and `ListNode.to_values`. Nodes compare by identity.
- `algoset.trees`: `bst_from_preorder`, `flatten`, `connect`,
  `lca_deepest_leaves`, `max_path_sum`, `lowest_common_ancestor`,
  `width_of_binary_tree`, `search_bst`, `is_valid_bst`.
- `algoset.linked_lists`: `reverse`, `is_palindrome` (leaves the list as it
  found it), `rotate_right`.
- `algoset.grids`: `oranges_rotting`, `num_enclaves`,
  `shortest_path_binary_matrix`, `capture_surrounded`, `minimum_effort_path`,
  `update_matrix`, `flood_fill`, `search_matrix`.
- `algoset.graphs`: `find_the_city`, `count_paths`, `find_order`,
  `find_circle_num`, `network_delay_time`, `is_bipartite`,
  `find_cheapest_price`, `eventual_safe_nodes`.
- `algoset.arrays`: `StockSpanner`, `longest_ones`, `number_of_subarrays`,
  `majority_element`, `subset_xor_sum`, `next_permutation`,
  `max_adjacent_distance`, `num_of_unplaced_fruits`, `sort_colors`,
  `largest_rectangle_area`, `total_fruit`, `sum_subarray_mins`,
  `num_subarrays_with_sum`.
- `algoset.strings_digits`: `maximum_69_number`, `number_of_substrings`,
  `largest_good_integer`, `min_max_difference`, `is_power_of_three`,
  `character_replacement`.
- `algoset.backtracking`: `combination_sum`, `combination_sum2`,
  `solve_n_queens`.

## Examples

```python
from algoset.nodes import ListNode
from algoset.linked_lists import rotate_right
from algoset.grids import oranges_rotting
from algoset.arrays import StockSpanner
from algoset.backtracking import solve_n_queens

rotate_right(ListNode.from_values([1, 2, 3, 4, 5]), 2).to_values()  # [4, 5, 1, 2, 3]
oranges_rotting([[2, 1, 1], [1, 1, 0], [0, 1, 1]])                 # 4

spanner = StockSpanner()
[spanner.next(p) for p in [100, 80, 60, 70, 60, 75, 85]]           # [1, 1, 1, 2, 1, 4, 6]

len(solve_n_queens(4))                                             # 2
```

## Behaviour worth knowing

- `flatten`, `connect`, `capture_surrounded`, `next_permutation` and
  `sort_colors` change their argument in place. `reverse` and `rotate_right`
  relink the nodes they are given.
- `flood_fill` returns a new image, except when the start pixel already has
  the requested colour: then the image passed in is returned unchanged.
- Where there is no answer, functions return a sentinel rather than raise:
  `-1` from `oranges_rotting`, `shortest_path_binary_matrix`,
  `majority_element`, `network_delay_time` and `find_cheapest_price`, `[]`
  from `find_order`, and `""` from `largest_good_integer`.
- `ValueError` is raised by `max_path_sum` for an empty tree, by
  `longest_ones` for a negative `k`, by `max_adjacent_distance` for an empty
  list, and by `number_of_substrings` for a character other than `a`, `b` or
  `c`.
- `count_paths` and `sum_subarray_mins` return their results modulo
  `10**9 + 7`.

## What it does not do

The package is a library only: it has no command-line program, and it reads
no input files. Each function takes its data as Python arguments.

## Running the tests

```
pip install ".[test]"
pytest
```