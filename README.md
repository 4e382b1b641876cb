# algosolve

A collection of plain-Python solutions to well-known algorithmic problems.
The solutions are grouped by the kind of data they work on. Each solution is an
ordinary function: you pass in lists, strings or trees and get the answer back.
The functions do not change their inputs.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

The package needs Python 3.10 or later. Its only runtime dependency is
`sortedcontainers`.

## Modules

- `algosolve.arrays` covers sequence problems:
  - `tuple_same_product`, `check_if_exist`, `min_number_operations`
  - `find_length_of_shortest_subarray`, `decrypt`, `is_sorted_and_rotated`
  - `max_ascending_sum`, `minimized_maximum`, `xor_all_nums`
  - `maximum_subarray_sum`, `max_count`, `find_the_prefix_common_array`
  - `does_valid_array_exist`, `lexicographically_smallest_array`
  - `longest_monotonic_subarray`, `is_array_special`, `results_array`
  - `count_valid_selections`
- `algosolve.text` covers string problems:
  - `repeated_string_match`, `word_subsets`, `max_num_of_substrings`
  - `are_almost_equal`, `can_be_valid`, `appeal_sum`
  - `shifting_letters`, `minimum_length`, `count_mentions`
- `algosolve.grids` covers matrix and grid problems:
  - `sliding_puzzle`, `largest_island`, `max_equal_rows_after_flips`
  - `count_servers`, `min_cost_to_valid_path`, `highest_peak`
  - `rotate_the_box`, `max_matrix_sum`, `minimum_obstacles`
  - `first_complete_index`, `find_max_fish`
- `algosolve.graphs` covers graph problems. It has a `UnionFind` disjoint-set
  structure with `find` and `unite`, and these functions:
  - `find_circle_num`, `find_redundant_connection`, `eventual_safe_nodes`
  - `check_if_prerequisite`, `maximum_invitations`, `magnificent_sets`
  - `find_champion`, `min_max_weight`
- `algosolve.trees` has a `TreeNode` dataclass with the fields `val`, `left`
  and `right`. It works with `width_of_binary_tree`, `vertical_traversal` and
  `bst_from_preorder`.
- `algosolve.optimization` covers dynamic-programming, greedy and bit problems:
  - `remove_boxes`, `min_cost_to_cut_stick`, `minimize_xor`
  - `count_non_decreasing_subarrays`

## Examples

```python
from algosolve.arrays import decrypt
from algosolve.grids import sliding_puzzle
from algosolve.graphs import UnionFind, find_circle_num
from algosolve.trees import bst_from_preorder, vertical_traversal

decrypt([5, 7, 1, 4], 3)                     # [12, 10, 16, 13]
sliding_puzzle([[1, 2, 3], [4, 0, 5]])       # 1
find_circle_num([[1, 1, 0], [1, 1, 0], [0, 0, 1]])  # 2

sets = UnionFind(4)
sets.unite(0, 1)
sets.find(0) == sets.find(1)                 # True

root = bst_from_preorder([8, 5, 1, 7, 10, 12])
vertical_traversal(root)                     # [[1], [5], [8, 7], [10], [12]]
```

## Results and errors

If a problem has no answer, the function returns the usual value for it. For
example, `sliding_puzzle`, `find_champion`, `min_max_weight`,
`magnificent_sets`, `repeated_string_match` and `first_complete_index` return
`-1`. `find_redundant_connection` returns an empty list when no edge closes a
cycle.

Some inputs make no sense for a function, and these raise `ValueError`:

| Function | Raises when |
| --- | --- |
| `sliding_puzzle` | the board is not 2 x 3 |
| `minimize_xor` | a number is negative |
| `min_number_operations` | the list is empty |
| `max_ascending_sum` | the list is empty |
| `results_array` | `k` is less than 1 |
| `can_be_valid` | the two strings differ in length |
| `find_the_prefix_common_array` | the two lists differ in length |
| `repeated_string_match` | `a` is empty and `b` is not |
| `count_mentions` | an `OFFLINE` event names an unknown user |

The `threshold` argument of `min_max_weight` is accepted but has no effect on
the result.

## What it does not do

The package is a library only. It has no command-line interface and does not
read or write input files. Call the functions from your own Python code.