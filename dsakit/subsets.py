"""Counting and feasibility problems over choices of items and moves."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

MOD = 10**9 + 7


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Return the fewest coins that make ``amount``, or -1 if it cannot be made."""
    if not coins:
        raise ValueError("at least one coin denomination is required")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin denominations must be positive")
    if amount < 0:
        raise ValueError("amount must be non-negative")
    unreachable = amount + 1
    best = [0] + [unreachable] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            best[total] = min(best[total], best[total - coin] + 1)
    return -1 if best[amount] >= unreachable else best[amount]


def combination_sum4(nums: Sequence[int], target: int) -> int:
    """Count the ordered sequences of ``nums`` (with repetition) summing to ``target``."""
    if target < 0:
        raise ValueError("target must be non-negative")
    if any(num <= 0 for num in nums):
        raise ValueError("numbers must be positive")
    ways = [1] + [0] * target
    for total in range(1, target + 1):
        ways[total] = sum(ways[total - num] for num in nums if num <= total)
    return ways[target]


def can_partition(nums: Sequence[int]) -> bool:
    """Return whether ``nums`` splits into two parts of equal sum."""
    if not nums:
        raise ValueError("sequence must not be empty")
    if any(num < 0 for num in nums):
        raise ValueError("numbers must be non-negative")
    total = sum(nums)
    if total % 2:
        return False
    reachable = 1  # bit s is set when some subset sums to s
    for num in nums:
        reachable |= reachable << num
    return bool(reachable >> (total // 2) & 1)


def can_partition_k_subsets(nums: Sequence[int], k: int) -> bool:
    """Return whether ``nums`` splits into ``k`` groups of equal sum."""
    if k < 1:
        raise ValueError("k must be positive")
    total = sum(nums)
    if total % k:
        return False
    target = total // k
    values = sorted(nums, reverse=True)
    used = [False] * len(values)

    def fill(current: int, remaining: int, start: int) -> bool:
        if remaining == 1:
            return True
        if start >= len(values):
            return False
        if current == target:
            return fill(0, remaining - 1, 0)
        for i, value in enumerate(values[start:], start):
            if used[i] or current + value > target:
                continue
            used[i] = True
            if fill(current + value, remaining, i + 1):
                return True
            used[i] = False
        return False

    return fill(0, k, 0)


def ways_to_reach_target(target: int, types: Sequence[Sequence[int]]) -> int:
    """Count ways to score exactly ``target`` from ``[count, marks]`` question types."""
    if target < 0:
        raise ValueError("target must be non-negative")
    ways = [1] + [0] * target
    for count, marks in types:
        if marks <= 0:
            raise ValueError("marks must be positive")
        ways = [
            sum(ways[total - taken * marks] for taken in range(min(count, total // marks) + 1))
            % MOD
            for total in range(target + 1)
        ]
    return ways[target]


def can_cross(stones: Sequence[int]) -> bool:
    """Return whether the frog can reach the last stone."""
    if len(stones) < 2:
        raise ValueError("at least two stones are required")
    if stones[1] - stones[0] != 1:
        return False
    jumps: dict[int, set[int]] = {stone: set() for stone in stones}
    jumps[stones[1]].add(1)
    for stone in stones[1:]:
        for size in jumps[stone]:
            for step in (size - 1, size, size + 1):
                if step > 0 and stone + step in jumps:
                    jumps[stone + step].add(step)
    return bool(jumps[stones[-1]])


def predict_the_winner(nums: Sequence[int]) -> bool:
    """Return whether the first player can score at least as much as the second."""
    n = len(nums)
    # margins[i]: best score margin for the player to move on nums[i:i + length]
    margins = list(nums)
    for length in range(2, n + 1):
        margins = [
            max(nums[i] - margins[i + 1], nums[i + length - 1] - margins[i])
            for i in range(n - length + 1)
        ]
    return (margins[0] if margins else 0) >= 0


def remove_boxes(boxes: Sequence[int]) -> int:
    """Return the most points from removing runs of equal boxes (k boxes score k*k)."""
    colours = tuple(boxes)

    @lru_cache(maxsize=None)
    def solve(i: int, j: int, carried: int) -> int:
        if i > j:
            return 0
        while i + 1 <= j and colours[i] == colours[i + 1]:
            i += 1
            carried += 1
        best = (carried + 1) ** 2 + solve(i + 1, j, 0)
        for k in range(i + 1, j + 1):
            if colours[k] == colours[i]:
                best = max(best, solve(i + 1, k - 1, 0) + solve(k, j, carried + 1))
        return best

    return solve(0, len(colours) - 1, 0)