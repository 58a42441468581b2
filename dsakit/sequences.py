"""Algorithms over integer sequences: subarrays, subsequences and counting."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence
from itertools import accumulate, pairwise


def max_turbulence_size(arr: Sequence[int]) -> int:
    """Return the length of the longest subarray whose comparisons alternate."""
    if not arr:
        raise ValueError("sequence must not be empty")
    best = run = 1
    previous = 0
    for a, b in pairwise(arr):
        sign = (b > a) - (b < a)
        if sign and sign == -previous:
            run += 1
        else:
            run = 2 if sign else 1
        previous = sign
        best = max(best, run)
    return best


def count_bits(n: int) -> list[int]:
    """Return the number of set bits of every integer from 0 to ``n``."""
    return [i.bit_count() for i in range(n + 1)]


def number_of_arithmetic_slices(nums: Sequence[int]) -> int:
    """Count contiguous arithmetic slices of length at least three."""
    total = run = 0
    for a, b, c in zip(nums, nums[1:], nums[2:]):
        run = run + 1 if c - b == b - a else 0
        total += run
    return total


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map holds."""
    if not height:
        return 0
    left_max, right_max = height[0], height[-1]
    left, right = 1, len(height) - 2
    water = 0
    while left <= right:
        if height[left] >= left_max:
            left_max = height[left]
            left += 1
        elif height[right] >= right_max:
            right_max = height[right]
            right -= 1
        elif left_max <= right_max:
            water += left_max - height[left]
            left += 1
        else:
            water += right_max - height[right]
            right -= 1
    return water


def number_of_arithmetic_subsequences(nums: Sequence[int]) -> int:
    """Count arithmetic subsequences of length at least three."""
    tails: list[defaultdict[int, int]] = []
    total = 0
    for x in nums:
        here: defaultdict[int, int] = defaultdict(int)
        for prev, earlier in zip(nums, tails):
            diff = x - prev
            count = earlier.get(diff, 0)
            here[diff] += count + 1
            total += count
        tails.append(here)
    return total


def jump(nums: Sequence[int]) -> int:
    """Return the fewest jumps from the first index to the last."""
    if not nums:
        raise ValueError("sequence must not be empty")
    reach = list(accumulate((step + i for i, step in enumerate(nums)), max))
    last = len(nums) - 1
    jumps = position = 0
    while position < last:
        nxt = reach[position]
        if nxt <= position:
            raise ValueError("the last index cannot be reached")
        jumps += 1
        position = nxt
    return jumps


def max_sub_array(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("sequence must not be empty")
    best = current = nums[0]
    for x in nums[1:]:
        current = max(x, current + x)
        best = max(best, current)
    return best


def find_number_of_lis(nums: Sequence[int]) -> int:
    """Count the longest strictly increasing subsequences."""
    lengths: list[int] = []
    counts: list[int] = []
    for x in nums:
        best, ways = 1, 1
        for y, length, count in zip(nums, lengths, counts):
            if y < x:
                if length + 1 > best:
                    best, ways = length + 1, count
                elif length + 1 == best:
                    ways += count
        lengths.append(best)
        counts.append(ways)
    if not lengths:
        return 0
    longest = max(lengths)
    return sum(count for length, count in zip(lengths, counts) if length == longest)


def find_length(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Return the length of the longest subarray common to both sequences."""
    best = 0
    previous = [0] * (len(nums2) + 1)
    for a in nums1:
        current = [0]
        for j, b in enumerate(nums2):
            current.append(previous[j] + 1 if a == b else 0)
        best = max(best, max(current))
        previous = current
    return best


def largest_divisible_subset(nums: Sequence[int]) -> list[int]:
    """Return a largest subset in which every pair divides one another, ascending."""
    if not nums:
        raise ValueError("sequence must not be empty")
    values = sorted(nums)
    sizes: list[int] = []
    links: list[int] = []
    for i, x in enumerate(values):
        size, link = 1, i
        for j, (y, prior) in enumerate(zip(values, sizes)):
            if x % y == 0 and prior + 1 > size:
                size, link = prior + 1, j
        sizes.append(size)
        links.append(link)
    index = max(range(len(sizes)), key=sizes.__getitem__)
    chain = [values[index]]
    while links[index] != index:
        index = links[index]
        chain.append(values[index])
    chain.reverse()
    return chain


def max_profit(prices: Sequence[int], fee: int) -> int:
    """Return the best trading profit when every sale costs ``fee``."""
    free = holding = 0
    for price in reversed(prices):
        free, holding = max(free, holding - price), max(holding, price - fee + free)
    return free


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb ``n`` steps taking one or two at a time."""
    if n < 0:
        raise ValueError("step count must be non-negative")
    a, b = 1, 1
    for _ in range(n):
        a, b = b, a + b
    return a