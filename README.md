# cpkit

A collection of solved competitive-programming problems, each available as an
ordinary Python function or class. Inputs are regular Python lists, tuples and
strings; answers are returned rather than printed. The package has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `cpkit.leetcode` | `two_sum`, `merge_intervals`, `minimum_cost`, `CostTrie` (`insert`, `min_cost`), `minimum_concat_cost`, `heaviest_value` |
| `cpkit.ranges` | `CountIntervals` (`add`, `count`), `AndSparseTable` (`query`), `count_subarrays`, `axis_distance` |
| `cpkit.bst` | `BinarySearchTree` (`insert`, `inorder`, iteration, `in`, `len`) |
| `cpkit.problems_a` | `catch_the_coin`, `count_takahashi`, `only_pluses`, `sanitize_hands`, `soccer`, `stair_peak`, `subsegment_reverse`, `upload_more_ram` |
| `cpkit.problems_b` | `angry_monk`, `collatz_remainder`, `count_couples`, `k_sort_cost`, `nutrients_sufficient`, `min_superstring_length`, `normalize_case` |
| `cpkit.problems_c` | `upscaled_checkerboard`, `basil_garden`, `boring_day_rounds`, `gorilla_permutation`, `two_movies_rating`, `update_queries` |
| `cpkit.sorting` | `merge_sort` |
| `cpkit.dynamic` | `frog_min_cost`, `vacation_max_happiness`, `knapsack_max_value`, `array_description_count` (modulo `MOD = 10**9 + 7`) |
| `cpkit.subsets` | `count_key_combinations` |
| `cpkit.mountains` | `can_balance_mountains` |
| `cpkit.multiset` | `FenwickTree` (`add`, `prefix_sum`, `range_sum`, `kth_smallest`), `process_multiset` |
| `cpkit.bits` | `min_removals_for_full_mask` |

## Examples

```python
from cpkit.leetcode import two_sum, merge_intervals
from cpkit.bst import BinarySearchTree
from cpkit.dynamic import knapsack_max_value
from cpkit.ranges import CountIntervals
from cpkit.multiset import process_multiset

two_sum([2, 7, 11, 15], 9)                    # [0, 1]
merge_intervals([[1, 3], [2, 6], [8, 10]])    # [[1, 6], [8, 10]]

tree = BinarySearchTree([2, 4, 1, 3, 6, 5, 7])
tree.inorder()                                # [1, 2, 3, 4, 5, 6, 7]

knapsack_max_value([(3, 30), (4, 50), (5, 60)], 8)   # 90

intervals = CountIntervals()
intervals.add(2, 3)
intervals.add(7, 10)
intervals.count()                             # 6

# Insert 3, then remove the 1st smallest element; 2 is the smallest left.
process_multiset(5, [1, 2], [3, -1])          # 2
```

## Conventions

- Where a problem has no answer, the functions return a sentinel rather than
  raising: `two_sum` returns `[-1, -1]`, `minimum_cost` reports `-1` for a
  query between different components, and `CostTrie.min_cost` returns
  `cpkit.leetcode.INF` (`10**9`) when the target cannot be built.
- Input that cannot be processed at all (empty sequences where a value is
  needed, out-of-range indices, mismatched lengths) raises `ValueError`,
  `IndexError` or `ZeroDivisionError`, as documented on each function.
- Index conventions follow each problem: `FenwickTree` positions are 1-based,
  `count_key_combinations` takes 1-based key numbers, and `update_queries`
  takes 0-based indices.

## What this package does not do

There is no command-line program and nothing reads standard input or writes
answers to standard output. Parsing contest-style input and printing results
is left to the caller; every function here takes Python values and returns its
answer.