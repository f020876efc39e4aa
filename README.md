# algokit

Well-known algorithms over lists, strings, matrices and integers. Each one is
a plain function that takes and returns ordinary Python values. The package
has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Modules

- `algokit.arrays`: `two_sum`, `add_to_array_form`, `max_profit`,
  `longest_consecutive`, `single_number`, `majority_element`,
  `majority_elements`, `is_sorted_and_rotated`, `rotate`,
  `contains_duplicate`, `rearrange_by_sign`, `most_frequent_even`,
  `remove_duplicates`, `missing_number`, `remove_element`, `move_zeroes`,
  `next_permutation`, `maximum_happiness_sum`, `max_consecutive_ones`,
  `plus_one`, `sort_colors`.
- `algokit.search`: `search_range`, which returns a `(first, last)` tuple or
  `(-1, -1)`, and `search_insert`. Both work on sorted sequences.
- `algokit.matrix`: `pascal_triangle`, `rotate_image`, `spiral_order`,
  `set_zeroes`.
- `algokit.sums`: `three_sum`, `four_sum`, `nice_subarray_count`,
  `subarray_sum_count`, `longest_balanced_length`, `max_subarray_sum`,
  `maximum_population_year` (years 1950 to 2050), `split_painting`.
- `algokit.strings`: `longest_common_prefix`, `is_isomorphic`, `is_anagram`,
  `length_of_last_word`, `largest_box_string`, `palindrome_partitions`.
- `algokit.integers`: `fib`, `reverse_integer` (returns 0 when the result
  falls outside the signed 32-bit range), `is_palindrome_number`,
  `is_power_of_four`, `min_xor_operations`, `triangle_type`, `find_judge`.
- `algokit.combinatorics`: `subsets_with_dup`.

## Examples

```python
from algokit.arrays import two_sum, next_permutation
from algokit.matrix import spiral_order
from algokit.strings import palindrome_partitions

two_sum([2, 7, 11, 15], 9)          # [0, 1]

nums = [1, 2, 3]
next_permutation(nums)
nums                                  # [1, 3, 2]

spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
# [1, 2, 3, 6, 9, 8, 7, 4, 5]

palindrome_partitions("aab")          # [['a', 'a', 'b'], ['aa', 'b']]
```

## In-place functions

These functions change the list they are given:

- `rotate`, `move_zeroes`, `next_permutation`, `sort_colors`,
  `rotate_image` and `set_zeroes` return `None`.
- `remove_duplicates` and `remove_element` move the items they keep to the
  front of the list and return how many there are. Items after that count are
  left as they were.

## Errors

Invalid input raises `ValueError`. This covers the following cases:

- an empty sequence passed to `max_profit`, `majority_element`,
  `is_sorted_and_rotated`, `max_subarray_sum` or `longest_common_prefix`;
- a negative `n` passed to `fib`;
- anything other than three sides passed to `triangle_type`;
- years outside 1950 to 2050 passed to `maximum_population_year`;
- unbalanced sign counts passed to `rearrange_by_sign`.

## What it does not do

The package is a library only. It provides no command-line tool and keeps no
state between calls.

## Running the tests

```
pip install ".[test]"
pytest
```