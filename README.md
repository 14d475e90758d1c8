# algokit

Classic algorithms on sequences, matrices, graphs and binary trees, written in
plain Python with nothing beyond the standard library.

Most functions take their input by value and return a new result; the input is
left untouched. The exceptions are `rotate_matrix_in_place`, which rewrites the
matrix it is given, and `apply_children_sum`, which changes the tree's node
values. Invalid input (an empty sequence where one element is needed, a
non-square matrix, an unsolvable sudoku and so on) raises `ValueError`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algokit.sorting`

- `merge_sort`, `quick_sort`, `selection_sort`, `bubble_sort` return a sorted
  copy of any iterable.
- `sort_colors` (one-pass Dutch national flag) and `sort_colors_counting` sort a
  sequence of 0s, 1s and 2s.
- `merge_sorted_arrays`, `merge_sorted_arrays_swap` and `merge_sorted_arrays_gap`
  take two sorted sequences and return a pair of lists with the same lengths,
  the first holding the smallest elements.

### `algokit.arrays`

`move_zeroes`, `next_permutation`, `rearrange_by_sign` (equal counts of
non-negative and negative values), `rearrange_by_sign_uneven`,
`trapped_rain_water`, `max_profit`, `appear_once`, `single_number`,
`missing_number` and `repeating_and_missing` (returns `(repeating, missing)`).

### `algokit.subarrays`

`max_subarray_sum`, `max_subarray` (returns the sum and the run),
`longest_subarray_with_sum`, `longest_subarray_with_sum_nonnegative`,
`count_subarrays_with_xor`, `longest_zero_sum_subarray`, `count_reverse_pairs`
(pairs `i < j` with `values[i] > 2 * values[j]`), `three_sum` (distinct sorted
triplets as tuples) and `has_pair_with_sum`.

### `algokit.setops`

`sorted_union`, `sorted_intersection` (of two sorted sequences, keeping repeats)
and `unique_intersection`.

### `algokit.matrix`

`set_matrix_zeroes`, `rotate_matrix`, `rotate_matrix_in_place`,
`rotate_rings_by_one`, `pascal_value` (1-based row and column), `pascal_row`,
`pascal_triangle` and `unique_paths`.

### `algokit.searching`

`min_days_for_bouquets`, `smallest_divisor`, `floor_sqrt`,
`single_non_duplicate` and `power` (integer exponent by repeated squaring).

### `algokit.backtracking`

`permutations`, `permutations_by_swapping`, `palindrome_partitions`,
`solve_n_queens` (boards drawn with `Q` and `.`), `rat_in_maze` (paths as
strings of `D`, `L`, `R`, `U`), `subsets_with_duplicates`, `subset_sums`,
`solve_sudoku` (9 x 9 board of digit strings with `.` for empty cells) and
`subsequences`.

### `algokit.graphs`

`count_provinces` (square adjacency matrix), `oranges_rotting` (returns -1 when
a fresh orange is unreachable), `word_ladder_length` (0 when no ladder exists)
and `fill_surrounded_regions`.

### `algokit.binarytree`

The `Node` dataclass (`data`, `left`, `right`) and the traversals `top_view`,
`bottom_view`, `right_view`, `left_view`, `level_order`, `zigzag_level_order`,
`vertical_order` and `max_width`.

### `algokit.tree_properties`

`is_balanced`, `apply_children_sum`, `max_depth`, `max_path_sum`,
`has_path_sum`, `path_to`, `root_to_leaf_paths`, `is_identical` and
`is_symmetric`, all working on `algokit.binarytree.Node` trees.

## Examples

```python
from algokit.sorting import merge_sort
from algokit.arrays import trapped_rain_water
from algokit.backtracking import solve_n_queens
from algokit.binarytree import Node, level_order

merge_sort([5, 2, 9, 1])                                 # [1, 2, 5, 9]
trapped_rain_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])  # 6
len(solve_n_queens(4))                                   # 2

root = Node(1, Node(2), Node(3))
level_order(root)                                        # [[1], [2, 3]]
```

## What it does not do

algokit is a library only. It has no command-line program and reads no input
files; every algorithm is called from Python code.