# algokit

Classic algorithms in plain Python with no third-party dependencies:
searching, sorting, array puzzles, and bounded stack and queue structures.

## Installation

```
pip install algokit
```

To run the test suite, install the `test` extra and run pytest:

```
pip install "algokit[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.searching` | `first_and_last`, `values_equal_to_index`, `search_rotated`, `count_squares`, `min_max`, `find_repeating_and_missing`, `majority_element`, `search_adjacent_within_k`, `has_pair_with_difference`, `find_pivot`, `kth_of_two_sorted`, `in_sequence`, `trailing_zeros_of_factorial`, `smallest_factorial_number` |
| `algokit.arrays` | `four_sum`, `max_non_adjacent_sum`, `count_triplets_below`, `merge_sorted`, `count_zero_sum_subarrays`, `product_except_self`, `sort_by_set_bits`, `min_swaps_to_sort`, `max_job_profit`, `count_inversions` |
| `algokit.sorting` | `bubble_sort`, `insertion_sort`, `merge_sort`, `quick_sort` (random pivot), `selection_sort`; each returns a new sorted list |
| `algokit.problems` | `soldiers_beaten`, `merge_ranges`, `kth_smallest_in_ranges`, `largest_minimum_distance`, and `main` behind the `algokit` command |
| `algokit.stacks` | `Stack`, `BoundedQueue`, `TwoStacks`, `MiddleStack`, `KStacks`, and `CapacityError` |
| `algokit.stack_problems` | `evaluate_postfix`, `sort_stack_descending`, `merge_intervals`, `first_non_repeating`, `next_greater_elements` |

## Examples

```python
import random

from algokit.arrays import count_inversions, max_job_profit
from algokit.searching import first_and_last, majority_element, search_rotated
from algokit.sorting import merge_sort, quick_sort
from algokit.stack_problems import evaluate_postfix, first_non_repeating
from algokit.stacks import MiddleStack, Stack

first_and_last([1, 3, 5, 5, 5, 67, 123], 5)        # (2, 4)
search_rotated([4, 5, 6, 7, 0, 1, 2], 0)           # 4
majority_element([3, 1, 3, 3, 2])                  # 3

count_inversions([2, 4, 1, 3, 5])                  # 3
max_job_profit([1, 2, 3, 3], [3, 4, 5, 6], [50, 10, 40, 70])  # 120

merge_sort([5, 2, 6, 7, 2, 1, 0, 3])               # [0, 1, 2, 2, 3, 5, 6, 7]
quick_sort([5, 222, -6, 7, 2, 1, 0, 3], random.Random(0))
# [-6, 0, 1, 2, 3, 5, 7, 222]

evaluate_postfix("231*+9-")                        # -4
first_non_repeating("aabc")                        # "a#bb"

stack = Stack(3)
stack.push(10)
stack.push(20)
stack.peek()                                       # 20
stack.pop()                                        # 20

middle = MiddleStack()
for item in (1, 2, 3, 4, 5):
    middle.push(item)
middle.middle()                                    # 3
list(middle)                                       # [5, 4, 3, 2, 1], top first
```

## Errors

Containers raise exceptions rather than returning sentinel values:

- `Stack.push`, `BoundedQueue.enqueue`, `TwoStacks.push1`/`push2` and
  `KStacks.push` raise `CapacityError` when no room is left.
- Popping, peeking or reading from an empty container raises `IndexError`;
  `KStacks` also raises `IndexError` for a stack number out of range.

Functions raise `ValueError` for input they cannot answer, for example
`min_max` of an empty sequence, `kth_of_two_sorted` with `k` out of range,
or `smallest_factorial_number` when no factorial ends in exactly `n` zeros.
`evaluate_postfix` accepts single-digit operands and `+ - * /` (division
truncates toward zero) and raises `ValueError` on malformed expressions.

## Command line

The `algokit` command reads whitespace-separated integers from standard
input and prints one answer per line. Choose the problem with a subcommand:

```
algokit --help
algokit soldiers < input.txt
algokit kth < input.txt
algokit cows < input.txt
```

- `soldiers`: the number of soldiers, their powers, the number of queries,
  then one strength per query. Each query prints how many soldiers that
  strength beats and their summed power.
- `kth`: the number of test cases; each gives the number of ranges and of
  queries, the ranges as low/high pairs, then one `k` per query. Each query
  prints the k-th smallest number covered by the ranges, or `-1`.
- `cows`: the number of test cases; each gives the number of stalls and of
  cows, then the stall positions. Each case prints the largest minimum
  distance at which the cows can be placed.

Input that ends early or holds a non-integer is reported as a usage error.