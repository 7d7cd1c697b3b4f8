"""Array algorithms: sliding windows, prefix counts, monotonic stacks and in-place reorderings."""

from __future__ import annotations

from collections import Counter
from typing import List, MutableSequence, Sequence, Tuple

MOD = 10**9 + 7


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Return the longest run of 1s obtainable by flipping at most k zeros."""
    if k < 0:
        raise ValueError("k must not be negative")
    left = 0
    zeros = 0
    best = 0
    for right, value in enumerate(nums):
        if value == 0:
            zeros += 1
        while zeros > k:
            if nums[left] == 0:
                zeros -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def number_of_subarrays(nums: Sequence[int], k: int) -> int:
    """Count contiguous subarrays holding exactly k odd numbers."""
    seen = Counter({0: 1})
    odd = 0
    total = 0
    for value in nums:
        if value % 2 != 0:
            odd += 1
        total += seen[odd - k]
        seen[odd] += 1
    return total


def majority_element(nums: Sequence[int]) -> int:
    """Return the element occurring more than half the time, or -1 if there is none."""
    candidate = None
    count = 0
    for value in nums:
        if count == 0:
            candidate, count = value, 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    if candidate is not None and sum(1 for value in nums if value == candidate) > len(nums) // 2:
        return candidate
    return -1


def subset_xor_sum(nums: Sequence[int]) -> int:
    """Return the sum of the XOR totals of every subset of nums."""
    if not nums:
        return 0
    combined = 0
    for value in nums:
        combined |= value
    return combined << (len(nums) - 1)


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange nums in place into the next permutation in lexicographic order.

    The last permutation wraps round to the first (ascending order).
    """
    size = len(nums)
    pivot = next((i for i in range(size - 2, -1, -1) if nums[i] < nums[i + 1]), -1)
    if pivot >= 0:
        swap_with = next(i for i in range(size - 1, pivot, -1) if nums[i] > nums[pivot])
        nums[pivot], nums[swap_with] = nums[swap_with], nums[pivot]
    nums[pivot + 1:] = list(reversed(nums[pivot + 1:]))


def max_adjacent_distance(nums: Sequence[int]) -> int:
    """Return the largest absolute difference between neighbours in a circular array."""
    if not nums:
        raise ValueError("nums must not be empty")
    rotated = list(nums[1:]) + [nums[0]]
    return max(abs(a - b) for a, b in zip(nums, rotated))


def num_of_unplaced_fruits(fruits: Sequence[int], baskets: Sequence[int]) -> int:
    """Place each fruit in the leftmost free basket that holds it; count fruits left over."""
    free: List[int | None] = list(baskets[: len(fruits)])
    unplaced = 0
    for fruit in fruits:
        for index, capacity in enumerate(free):
            if capacity is not None and capacity >= fruit:
                free[index] = None
                break
        else:
            unplaced += 1
    return unplaced


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place in a single pass."""
    low, current, high = 0, 0, len(nums) - 1
    while current <= high:
        if nums[current] == 0:
            nums[current], nums[low] = nums[low], nums[current]
            current += 1
            low += 1
        elif nums[current] == 2:
            nums[current], nums[high] = nums[high], nums[current]
            high -= 1
        else:
            current += 1


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle in a histogram; 0 when it is empty."""
    size = len(heights)
    previous_smaller = [-1] * size
    next_smaller = [size] * size
    stack: List[int] = []
    for index, height in enumerate(heights):
        while stack and height <= heights[stack[-1]]:
            stack.pop()
        previous_smaller[index] = stack[-1] if stack else -1
        stack.append(index)
    stack.clear()
    for index in reversed(range(size)):
        while stack and heights[index] <= heights[stack[-1]]:
            stack.pop()
        next_smaller[index] = stack[-1] if stack else size
        stack.append(index)
    return max(
        (
            (after - before - 1) * height
            for height, before, after in zip(heights, previous_smaller, next_smaller)
        ),
        default=0,
    )


class StockSpanner:
    """Report, for each new price, how many consecutive days up to today were at most that price."""

    def __init__(self) -> None:
        self._stack: List[Tuple[int, int]] = []

    def next(self, price: int) -> int:
        """Record today's price and return its span."""
        span = 1
        while self._stack and price >= self._stack[-1][0]:
            span += self._stack.pop()[1]
        self._stack.append((price, span))
        return span


def total_fruit(fruits: Sequence[int]) -> int:
    """Return the longest contiguous stretch holding at most two kinds of fruit."""
    counts: Counter[int] = Counter()
    left = 0
    best = 0
    for right, fruit in enumerate(fruits):
        counts[fruit] += 1
        if len(counts) > 2:
            dropped = fruits[left]
            counts[dropped] -= 1
            if counts[dropped] == 0:
                del counts[dropped]
            left += 1
        best = max(best, right - left + 1)
    return best


def sum_subarray_mins(nums: Sequence[int]) -> int:
    """Return the sum of the minimum of every contiguous subarray, modulo 10**9 + 7."""
    size = len(nums)
    left = [-1] * size
    right = [size] * size
    stack: List[int] = []
    for index, value in enumerate(nums):
        while stack and nums[stack[-1]] >= value:
            stack.pop()
        if stack:
            left[index] = stack[-1]
        stack.append(index)
    stack = []
    for index in reversed(range(size)):
        while stack and nums[stack[-1]] > nums[index]:
            stack.pop()
        if stack:
            right[index] = stack[-1]
        stack.append(index)
    total = 0
    for index, value in enumerate(nums):
        total = (total + (index - left[index]) * (right[index] - index) * value % MOD) % MOD
    return total


def num_subarrays_with_sum(nums: Sequence[int], goal: int) -> int:
    """Count contiguous subarrays whose sum equals goal."""
    seen: Counter[int] = Counter()
    running = 0
    total = 0
    for value in nums:
        running += value
        if running == goal:
            total += 1
        total += seen[running - goal]
        seen[running] += 1
    return total