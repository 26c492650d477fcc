from itertools import permutations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from arraydrills.permutation import next_permutation

_ALL_FOUR = list(permutations([1, 2, 3, 4]))


def test_worked_example():
    assert next_permutation([2, 1, 5, 4, 3, 0, 0]) == [2, 3, 0, 0, 1, 4, 5]


def test_last_permutation_wraps_to_first():
    nums = [5, 4, 3, 2, 1]
    assert next_permutation(nums) == sorted(nums)


def test_pivot_at_first_position_reverses():
    nums = [1, 3, 2]
    assert next_permutation(nums) == nums[::-1]


def test_input_not_modified():
    nums = [1, 2, 3, 4]
    snapshot = list(nums)
    next_permutation(nums)
    assert nums == snapshot


@pytest.mark.parametrize("nums", [[], [7]])
def test_short_inputs_unchanged(nums):
    assert next_permutation(nums) == nums


@pytest.mark.parametrize(
    "index",
    [
        k
        for k, perm in enumerate(_ALL_FOUR[:-1])
        if any(perm[i] < perm[i + 1] for i in range(1, len(perm) - 1))
    ],
)
def test_matches_lexicographic_order_when_pivot_after_first(index):
    assert next_permutation(list(_ALL_FOUR[index])) == list(_ALL_FOUR[index + 1])


@given(st.lists(st.integers(-10, 10), max_size=12))
def test_result_is_rearrangement(nums):
    assert sorted(next_permutation(nums)) == sorted(nums)