from hypothesis import given
from hypothesis import strategies as st

from arraydrills.colors import sort_colors, sort_colors_counting

colors = st.lists(st.integers(0, 2), max_size=30)


def test_example_counting():
    nums = [2, 0, 2, 1, 1, 0]
    assert sort_colors_counting(nums) is None
    assert nums == [0, 0, 1, 1, 2, 2]


def test_example_partition():
    nums = [2, 0, 2, 1, 1, 0]
    assert sort_colors(nums) is None
    assert nums == [0, 0, 1, 1, 2, 2]


@given(colors)
def test_matches_sorted(nums):
    expected = sorted(nums)
    counted = list(nums)
    partitioned = list(nums)
    sort_colors_counting(counted)
    sort_colors(partitioned)
    assert counted == expected
    assert partitioned == expected


def test_keeps_list_object():
    nums = [1, 0]
    alias = nums
    sort_colors_counting(nums)
    assert alias == [0, 1]

    nums = [1, 0]
    alias = nums
    sort_colors(nums)
    assert alias == [0, 1]


def test_counting_turns_other_values_into_two():
    nums = [5, 0]
    sort_colors_counting(nums)
    assert nums == [0, 2]


def test_partition_keeps_other_values():
    nums = [5, 0]
    sort_colors(nums)
    assert sorted(nums) == [0, 5]
    assert nums[0] == 0