"""Dynamic programming and greedy optimisation problems."""

from __future__ import annotations

from functools import lru_cache
from itertools import accumulate
from typing import Sequence

from sortedcontainers import SortedList


def remove_boxes(boxes: Sequence[int]) -> int:
    """Maximum points from removing runs of equal boxes, a run of k scoring k*k."""
    boxes = tuple(boxes)

    @lru_cache(maxsize=None)
    def best(left: int, right: int, count: int) -> int:
        if left > right:
            return 0
        end, run = left, count
        while end + 1 <= right and boxes[end + 1] == boxes[left]:
            end += 1
            run += 1
        result = best(end + 1, right, 0) + (run + 1) ** 2
        for mid in range(end + 1, right + 1):
            if boxes[mid] == boxes[left]:
                result = max(result, best(end + 1, mid - 1, 0) + best(mid, right, run + 1))
        return result

    value = best(0, len(boxes) - 1, 0)
    best.cache_clear()
    return value


def min_cost_to_cut_stick(n: int, cuts: Sequence[int]) -> int:
    """Minimum total cost of making every cut, each cut costing the current piece length."""
    positions = sorted([0, *cuts, n])

    @lru_cache(maxsize=None)
    def cost(start: int, end: int) -> int:
        if start + 1 >= end:
            return 0
        length = positions[end] - positions[start]
        return min(length + cost(start, mid) + cost(mid, end) for mid in range(start + 1, end))

    value = cost(0, len(positions) - 1)
    cost.cache_clear()
    return value


def minimize_xor(num1: int, num2: int) -> int:
    """Integer with as many set bits as ``num2`` whose XOR with ``num1`` is smallest."""
    if num1 < 0 or num2 < 0:
        raise ValueError("numbers must be non-negative")
    have, want = num1.bit_count(), num2.bit_count()
    result = num1
    bit = 0
    while have < want:
        if not result & (1 << bit):
            result |= 1 << bit
            have += 1
        bit += 1
    while have > want:
        if result & (1 << bit):
            result ^= 1 << bit
            have -= 1
        bit += 1
    return result


def count_non_decreasing_subarrays(nums: Sequence[int], k: int) -> int:
    """Count subarrays that can be made non-decreasing with at most ``k`` increments."""
    size = len(nums)
    if size == 0:
        return 0

    next_greater = [-1] * size
    stack: list[int] = []
    for i, value in enumerate(nums):
        while stack and value > nums[stack[-1]]:
            next_greater[stack.pop()] = i
        stack.append(i)

    prefix = list(accumulate(nums))

    def ops(target: int, lo: int, hi: int) -> int:
        if not (0 <= lo < size and 0 <= hi < size) or hi < lo:
            return 0
        total = prefix[hi] - (prefix[lo - 1] if lo else 0)
        return target * (hi - lo + 1) - total

    result = operations = 0
    left = right = 0
    fixed = SortedList([0])
    while right < size:
        if right < size - 1:
            back = nums[fixed[-1]]
            following = nums[right + 1]
            expand = 0 if following >= back else back - following
            if operations + expand <= k:
                if following > back and right + 1 not in fixed:
                    fixed.add(right + 1)
                operations += expand
                right += 1
                continue
        result += right - left + 1

        if left == right:
            left += 1
            right += 1
            operations = 0
            fixed = SortedList([left])
            continue

        fixed.discard(left)
        second = fixed[0] if fixed else right + 1
        operations -= ops(nums[left], left + 1, second - 1)

        current = left + 1
        while 0 <= current < second:
            nxt = next_greater[current]
            stop = nxt - 1 if 0 <= nxt < second else second - 1
            operations += ops(nums[current], current + 1, stop)
            if current not in fixed:
                fixed.add(current)
            current = nxt

        left += 1
    return result