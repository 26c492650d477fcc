import pytest
from hypothesis import given
from hypothesis import strategies as st

from arraydrills.subarray import (
    max_subarray,
    max_subarray_better,
    max_subarray_brute,
    max_subarray_with_span,
)

EXAMPLE = [-2, 1, -3, 4, -1, 2, 1, -5, 4]

values = st.lists(st.integers(-20, 20), min_size=1, max_size=12)


def test_example_optimal():
    assert max_subarray(EXAMPLE) == 6


def test_example_span():
    result = max_subarray_with_span(EXAMPLE)
    assert (result.start, result.end) == (3, 6)
    assert result.values == [4, -1, 2, 1]


@pytest.mark.parametrize("func", [max_subarray_brute, max_subarray_better])
def test_quadratic_variants_example(func):
    assert func(EXAMPLE) == max_subarray(EXAMPLE)


@given(values, st.integers(-100, 100))
def test_brute_skips_last_element(nums, last):
    assert max_subarray_brute(nums + [last]) == max_subarray(nums)


@given(st.lists(st.integers(-20, 20), min_size=2, max_size=12))
def test_better_matches_brute(nums):
    assert max_subarray_better(nums) == max_subarray_brute(nums)


@given(values)
def test_span_is_consistent(nums):
    result = max_subarray_with_span(nums)
    assert result.total == max_subarray(nums)
    assert result.values == nums[result.start:result.end + 1]
    assert sum(result.values) == result.total
    assert 0 <= result.start <= result.end < len(nums)


@given(values)
def test_result_at_least_every_element(nums):
    assert max_subarray(nums) >= max(nums)


@pytest.mark.parametrize("func", [max_subarray, max_subarray_with_span])
def test_empty_raises(func):
    with pytest.raises(ValueError):
        func([])


@pytest.mark.parametrize("func", [max_subarray_brute, max_subarray_better])
def test_single_element_raises_for_quadratic(func):
    with pytest.raises(ValueError):
        func([7])