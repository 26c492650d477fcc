# arraydrills

A small library of classic array and matrix algorithms. Most problems come in
more than one form: a straightforward brute-force version next to the
efficient one, so results can be compared and the trade-offs studied. It has
no dependencies beyond the standard library.

## Installation

```
pip install arraydrills
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `arraydrills.inversions` | `count_inversions_brute`, `count_inversions` |
| `arraydrills.pascal` | `ncr`, `element_factorial`, `element`, `row_by_ncr`, `row`, `triangle_brute`, `triangle` |
| `arraydrills.stocks` | `max_profit_brute`, `max_profit` |
| `arraydrills.duplicates` | `find_duplicate_sorting`, `find_duplicate_set`, `find_duplicate`, `find_error_nums_set`, `find_error_nums` |
| `arraydrills.permutation` | `next_permutation` |
| `arraydrills.matrix` | `rotated`, `rotate_in_place`, `set_zeroes_brute`, `set_zeroes_marker`, `set_zeroes` |
| `arraydrills.subarray` | `SubarrayResult`, `max_subarray_brute`, `max_subarray_better`, `max_subarray`, `max_subarray_with_span` |
| `arraydrills.intervals` | `merge_intervals_brute`, `merge_intervals` |
| `arraydrills.colors` | `sort_colors_counting`, `sort_colors` |
| `arraydrills.merging` | `merge_sorted_copy`, `merge_sorted_in_place` |

Import from the modules directly; the package itself re-exports nothing.

## Examples

```python
from arraydrills.inversions import count_inversions
from arraydrills.pascal import element, row
from arraydrills.stocks import max_profit
from arraydrills.duplicates import find_duplicate, find_error_nums
from arraydrills.subarray import max_subarray, max_subarray_with_span
from arraydrills.intervals import merge_intervals
from arraydrills.matrix import rotated

count_inversions([5, 4, 3, 2, 1])              # 10
element(5, 3)                                  # 6
row(5)                                         # [1, 4, 6, 4, 1]
max_profit([7, 1, 5, 3, 6, 4])                 # 5
find_duplicate([3, 1, 3, 4, 2])                # 3
find_error_nums([1, 2, 2, 4])                  # (2, 3)
max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4])  # 6
max_subarray_with_span([-2, 1, -3, 4, -1, 2, 1, -5, 4])
# SubarrayResult(total=6, start=3, end=6, values=[4, -1, 2, 1])
merge_intervals([[1, 3], [2, 6], [8, 10], [15, 18]])
# [[1, 6], [8, 10], [15, 18]]
rotated([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
# [[7, 4, 1], [8, 5, 2], [9, 6, 3]]
```

## Behaviour worth knowing

- **Pascal's triangle.** `element(row, col)`, `element_factorial(row, col)`,
  `row(n)` and `row_by_ncr(n)` count rows and columns from one.
  `triangle_brute(n)` gives the first `n` rows. `triangle(n)` gives rows
  `0` through `n`; row 0 comes out as `[1]`, so the result holds `n + 1`
  lists and starts with `[1]` twice. `element_factorial` works from exact
  factorials and `ncr` from a running product.
- **Duplicates.** `find_duplicate_sorting` returns the smallest repeated
  value and `find_duplicate_set` the first value seen twice; both return
  `-1` when every value differs. `find_duplicate` uses cycle detection and
  expects `n + 1` values each in `1..n`. `find_error_nums_set` and
  `find_error_nums` return `(repeated, missing)` for values meant to be
  `1..n`; `find_error_nums` raises `ValueError` when the sum equals that of
  `1..n`.
- **Next permutation.** `next_permutation` returns a new list. Its pivot
  search never looks at the first position: when no pivot exists at
  position 1 or later, the reversed list is returned.
- **Maximum subarray.** `max_subarray` and `max_subarray_with_span` run
  Kadane's algorithm and raise `ValueError` on an empty list.
  `max_subarray_brute` and `max_subarray_better` only consider subarrays that
  end before the last element and raise `ValueError` for fewer than two
  elements. `SubarrayResult` holds `total`, the inclusive `start` and `end`,
  and the `values` of the subarray.
- **Intervals.** Both merge functions sort a copy of the input; intervals
  that merely touch are merged.
- **Colours.** `sort_colors` partitions in one pass and moves any value other
  than 0 or 1 to the end unchanged; `sort_colors_counting` rewrites every
  value other than 0 or 1 as 2.
- **Merging.** `merge_sorted_copy` and `merge_sorted_in_place` write the
  merged first `m` values of `nums1` and first `n` values of `nums2` into
  `nums1[:m + n]`, raising `ValueError` for negative counts or too little
  room.

## What changes its input

These functions modify the list they are given: `rotate_in_place`,
`set_zeroes_brute`, `set_zeroes_marker`, `set_zeroes` (the three
`set_zeroes` functions also return the same matrix), `sort_colors`,
`sort_colors_counting`, `merge_sorted_copy` and `merge_sorted_in_place`.
Everything else leaves its input alone and returns a new value.

## What it does not do

This is a library only. It installs no command-line program and reads no
input of its own; call the functions from Python.