# arraycraft

A small library of classic algorithms on lists of integers and on matrices. Most
problems come in more than one version. Some pairs are a brute-force version and an
optimal version. Other pairs are a version that changes the list in place and a
version that returns a new list. You can compare the versions against each other.
The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Contents

| Module | Contents |
| --- | --- |
| `arraycraft.basics` | `fib`, `frequency_sort`, `sanitize`, `is_palindrome` |
| `arraycraft.sorting` | `bubble_sort`, `bubble_sort_recursive`, `insertion_sort`, `insertion_sort_recursive`, `merge_sort`, `quick_sort`, `selection_sort`, `PartitionMethod` |
| `arraycraft.scans` | `max_profit`, `leaders`, `max_consecutive_ones`, `move_zeroes_in_place`, `move_zeroes_copy` |
| `arraycraft.intersection` | `intersection_sorted`, `intersection_hashed`, `multiset_intersection_sorted`, `multiset_intersection_hashed` |
| `arraycraft.longest_subarray` | `longest_subarray_brute_force`, `longest_subarray_prefix`, `longest_subarray_window` |
| `arraycraft.majority` | `majority_element_hashed`, `majority_element_moore` |
| `arraycraft.missing` | `missing_number_sum`, `missing_number_xor` |
| `arraycraft.merge_sorted` | `merge_into`, `merge_swap_sort`, `merge_gap` |
| `arraycraft.pascal` | `pascal_triangle`, `n_choose_r`, `pascal_row_brute_force`, `pascal_row`, `pascal_element` |
| `arraycraft.duplicates` | `remove_duplicates`, `single_number`, `set_mismatch_counting`, `set_mismatch_math` |
| `arraycraft.right_max` | `replace_elements` |
| `arraycraft.two_sum` | `two_sum_indices`, `two_sum_values` |
| `arraycraft.inversions` | `count_inversions_brute_force`, `count_inversions`, `reverse_pairs_brute_force`, `reverse_pairs`, `MODULUS` |
| `arraycraft.xor_subarrays` | `count_xor_subarrays_brute_force`, `count_xor_subarrays` |
| `arraycraft.k_sum` | `three_sum_hashed`, `three_sum`, `four_sum_hashed`, `four_sum` |
| `arraycraft.consecutive` | `longest_consecutive_sorted`, `longest_consecutive_set` |
| `arraycraft.majority_thirds` | `majority_thirds_hashed`, `majority_thirds_moore` |
| `arraycraft.subarray_extremes` | `max_product_brute_force`, `max_product`, `max_subarray`, `MaxSubarray` |
| `arraycraft.intervals` | `merge_intervals_brute_force`, `merge_intervals` |
| `arraycraft.permutation` | `next_permutation`, `next_permutation_of` |
| `arraycraft.rearrange` | `rearrange_by_sign`, `rearrange_by_sign_uneven`, `sort_colors` |
| `arraycraft.rotation` | `rotate_with_buffer`, `rotate_by_reversal` |
| `arraycraft.matrix` | `rotate_image_copy`, `rotate_image`, `set_zeroes_with_sets`, `set_zeroes`, `spiral_order` |
| `arraycraft.subarray_count` | `subarray_sum_count` |

## Examples

```python
import random

from arraycraft.sorting import PartitionMethod, merge_sort, quick_sort
from arraycraft.k_sum import three_sum
from arraycraft.matrix import spiral_order
from arraycraft.pascal import pascal_triangle
from arraycraft.subarray_extremes import max_subarray

data = [5, 2, 9, 1]
merge_sort(data)                                   # data is now [1, 2, 5, 9]
quick_sort(data, PartitionMethod.RANDOM, random.Random(0))

three_sum([-1, 0, 1, 2, -1, -4])                   # [[-1, -1, 2], [-1, 0, 1]]
spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])    # [1, 2, 3, 6, 9, 8, 7, 4, 5]
pascal_triangle(3)                                 # [[1], [1, 1], [1, 2, 1]]
max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4])      # MaxSubarray(total=6, start=3, end=6)
```

## Behaviour worth knowing

- The sorting functions, `move_zeroes_in_place`, `remove_duplicates`, `merge_into`,
  `merge_swap_sort`, `merge_gap`, `next_permutation`, `sort_colors`, the rotation
  functions and the matrix functions other than `spiral_order` change the sequence
  you pass in. They return `None`, except for `remove_duplicates`, which returns the
  count of distinct values, and `next_permutation`, which returns `False` when it
  wraps around to the first permutation. The other functions return new values.
- `quick_sort` defaults to `PartitionMethod.MEDIAN_OF_THREE`. If you pass a
  `random.Random` as `rng`, `PartitionMethod.RANDOM` uses it to choose pivots, so
  you can reproduce a run.
- `count_inversions` and `count_inversions_brute_force` return their counts modulo
  `MODULUS` (10**9 + 7).
- `two_sum_indices` and `two_sum_values` return `None` when no pair sums to the
  target. `set_mismatch_counting` and `set_mismatch_math` return a
  `(repeating, missing)` tuple.
- Several functions raise `ValueError` when the input has no meaningful answer.
  Examples are an empty list for `max_profit`, `max_subarray` or the majority
  functions, a non-square matrix for the image rotations, and a column past the end
  of the row for `pascal_element`.

## What the package does not do

The package is a library only. It installs no command and reads no input from the
terminal. To run an algorithm, call its function from your own code.