import itertools
import random
from functools import reduce
from operator import xor

import pytest

from algoset.arrays import (
    MOD,
    StockSpanner,
    largest_rectangle_area,
    longest_ones,
    majority_element,
    max_adjacent_distance,
    next_permutation,
    num_of_unplaced_fruits,
    num_subarrays_with_sum,
    number_of_subarrays,
    sort_colors,
    subset_xor_sum,
    sum_subarray_mins,
    total_fruit,
)


def _slices(nums):
    return [nums[i:j] for i in range(len(nums)) for j in range(i + 1, len(nums) + 1)]


def _random_lists(seed, count, low, high, max_len=8):
    rng = random.Random(seed)
    return [[rng.randint(low, high) for _ in range(rng.randint(1, max_len))] for _ in range(count)]


def test_longest_ones_example():
    assert longest_ones([1, 1, 1, 0, 0, 0, 1, 1, 1, 1, 0], 2) == 6


def test_longest_ones_enough_flips_covers_everything():
    nums = [0, 1, 0, 0, 1]
    assert longest_ones(nums, nums.count(0)) == len(nums)


def test_longest_ones_without_flips_is_longest_window_of_ones():
    for nums in _random_lists(1, 30, 0, 1):
        result = longest_ones(nums, 0)
        windows = [s for s in _slices(nums) if all(v == 1 for v in s)]
        assert result == max((len(s) for s in windows), default=0)


def test_longest_ones_negative_k_raises():
    with pytest.raises(ValueError):
        longest_ones([1, 0], -1)


def test_number_of_subarrays_matches_definition():
    for nums in _random_lists(2, 40, 1, 6):
        for k in range(1, 4):
            expected = sum(1 for s in _slices(nums) if sum(v % 2 for v in s) == k)
            assert number_of_subarrays(nums, k) == expected


def test_majority_element_found():
    assert majority_element([2, 2, 1, 1, 1, 2, 2]) == 2


def test_majority_element_missing():
    assert majority_element([1, 2, 3]) == -1
    assert majority_element([]) == -1


def test_subset_xor_sum_matches_definition():
    for nums in _random_lists(3, 20, 0, 20, max_len=6):
        expected = sum(
            reduce(xor, subset, 0)
            for size in range(len(nums) + 1)
            for subset in itertools.combinations(nums, size)
        )
        assert subset_xor_sum(nums) == expected


def test_subset_xor_sum_single_and_empty():
    assert subset_xor_sum([5]) == 5
    assert subset_xor_sum([]) == 0


def test_next_permutation_walks_lexicographic_order():
    start = [1, 2, 3, 4]
    nums = list(start)
    for expected in itertools.permutations(start):
        assert tuple(nums) == expected
        next_permutation(nums)
    assert nums == start


def test_next_permutation_wraps_to_sorted():
    nums = [3, 2, 1]
    next_permutation(nums)
    assert nums == sorted([3, 2, 1])


def test_next_permutation_with_duplicates_stays_permutation():
    nums = [1, 1, 5]
    seen = set()
    for _ in range(3):
        seen.add(tuple(nums))
        next_permutation(nums)
    assert seen == set(itertools.permutations([1, 1, 5]))


def test_max_adjacent_distance_simple():
    assert max_adjacent_distance([5]) == 0
    assert max_adjacent_distance([0, 7]) == 7


def test_max_adjacent_distance_rotation_invariant():
    for nums in _random_lists(4, 20, -10, 10):
        base = max_adjacent_distance(nums)
        for shift in range(len(nums)):
            assert max_adjacent_distance(nums[shift:] + nums[:shift]) == base
        assert max_adjacent_distance(nums[::-1]) == base


def test_max_adjacent_distance_empty_raises():
    with pytest.raises(ValueError):
        max_adjacent_distance([])


def test_num_of_unplaced_fruits_bounds():
    fruits = [4, 2, 5]
    assert num_of_unplaced_fruits(fruits, [100, 100, 100]) == 0
    assert num_of_unplaced_fruits(fruits, [0, 0, 0]) == len(fruits)


def test_num_of_unplaced_fruits_leftmost_basket_used():
    # The large first basket goes to the small first fruit, so the big fruit is left out.
    assert num_of_unplaced_fruits([1, 9], [9, 1]) == 1


def test_sort_colors_sorts_in_place():
    for nums in _random_lists(5, 40, 0, 2, max_len=12):
        original = list(nums)
        sort_colors(nums)
        assert nums == sorted(original)


def test_largest_rectangle_example():
    assert largest_rectangle_area([2, 1, 5, 6, 2, 3]) == 10


def test_largest_rectangle_uniform_and_empty():
    assert largest_rectangle_area([4, 4, 4]) == 4 * 3
    assert largest_rectangle_area([7]) == 7
    assert largest_rectangle_area([]) == 0


def test_largest_rectangle_matches_definition():
    for heights in _random_lists(6, 30, 0, 9):
        expected = max(min(s) * len(s) for s in _slices(heights))
        assert largest_rectangle_area(heights) == expected


def test_stock_spanner_example():
    spanner = StockSpanner()
    spans = [spanner.next(p) for p in [100, 80, 60, 70, 60, 75, 85]]
    assert spans == [1, 1, 1, 2, 1, 4, 6]


def test_stock_spanner_rising_and_falling():
    rising = StockSpanner()
    assert [rising.next(p) for p in range(10, 15)] == list(range(1, 6))
    falling = StockSpanner()
    assert [falling.next(p) for p in range(15, 10, -1)] == [1] * 5


def test_total_fruit_two_kinds_take_all():
    fruits = [1, 2, 1, 2, 2]
    assert total_fruit(fruits) == len(fruits)
    assert total_fruit([3, 3, 3]) == 3


def test_total_fruit_matches_definition():
    for fruits in _random_lists(7, 30, 0, 3):
        expected = max(len(s) for s in _slices(fruits) if len(set(s)) <= 2)
        assert total_fruit(fruits) == expected


def test_sum_subarray_mins_example():
    assert sum_subarray_mins([3, 1, 2, 4]) == 17


def test_sum_subarray_mins_matches_definition():
    for nums in _random_lists(8, 30, 1, 50):
        expected = sum(min(s) for s in _slices(nums)) % MOD
        assert sum_subarray_mins(nums) == expected


def test_num_subarrays_with_sum_matches_definition():
    for nums in _random_lists(9, 40, 0, 1, max_len=10):
        for goal in range(3):
            expected = sum(1 for s in _slices(nums) if sum(s) == goal)
            assert num_subarrays_with_sum(nums, goal) == expected