"""Array algorithms: counting, sliding windows, prefix sums and simulations."""

from __future__ import annotations

from collections import Counter
from functools import reduce
from itertools import combinations, pairwise
from operator import xor
from typing import Iterable, Sequence

_MAX_QUANTITY = 100_000


def tuple_same_product(nums: Sequence[int]) -> int:
    """Count tuples ``(a, b, c, d)`` of distinct elements with ``a * b == c * d``."""
    products = Counter(a * b for a, b in combinations(nums, 2))
    return sum(4 * count * (count - 1) for count in products.values())


def check_if_exist(arr: Iterable[int]) -> bool:
    """Whether some element is exactly twice another element."""
    seen: set[int] = set()
    for num in arr:
        if num * 2 in seen or (num % 2 == 0 and num // 2 in seen):
            return True
        seen.add(num)
    return False


def min_number_operations(target: Sequence[int]) -> int:
    """Fewest subarray increments that turn an all-zero array into ``target``."""
    if not target:
        raise ValueError("target must not be empty")
    return target[0] + sum(max(0, b - a) for a, b in pairwise(target))


def find_length_of_shortest_subarray(arr: Sequence[int]) -> int:
    """Length of the shortest subarray whose removal leaves ``arr`` non-decreasing."""
    n = len(arr)
    if n == 0:
        return 0
    left = 0
    while left + 1 < n and arr[left] <= arr[left + 1]:
        left += 1
    if left == n - 1:
        return 0
    right = n - 1
    while right > left and arr[right - 1] <= arr[right]:
        right -= 1

    result = min(n - left - 1, right)
    i, j = 0, right
    while i <= left and j < n:
        if arr[i] <= arr[j]:
            result = min(result, j - i - 1)
            i += 1
        else:
            j += 1
    return result


def decrypt(code: Sequence[int], k: int) -> list[int]:
    """Replace each element of the circular ``code`` by the sum of its ``k`` neighbours.

    A positive ``k`` sums the following elements, a negative one the preceding ones,
    and zero gives all zeros.
    """
    n = len(code)
    if k == 0:
        return [0] * n
    step = 1 if k > 0 else -1
    return [
        sum(code[(i + step * distance) % n] for distance in range(1, abs(k) + 1))
        for i in range(n)
    ]


def is_sorted_and_rotated(nums: Sequence[int]) -> bool:
    """Whether ``nums`` is a rotation of a non-decreasing sequence."""
    rotated = [*nums[1:], *nums[:1]]
    drops = sum(1 for a, b in zip(nums, rotated) if a > b)
    return drops <= 1


def max_ascending_sum(nums: Sequence[int]) -> int:
    """Largest sum of a strictly ascending contiguous run."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = 0
    current = nums[0]
    for prev, value in pairwise(nums):
        if value > prev:
            current += value
        else:
            best = max(best, current)
            current = value
    return max(best, current)


def minimized_maximum(stores: int, quantities: Iterable[int]) -> int:
    """Smallest possible largest share when products are split among ``stores``."""
    quantities = list(quantities)
    low, high = 1, _MAX_QUANTITY
    while low < high:
        mid = (low + high) // 2
        needed = sum(-(-quantity // mid) for quantity in quantities)
        if needed <= stores:
            high = mid
        else:
            low = mid + 1
    return low


def xor_all_nums(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """XOR of ``a ^ b`` over every pairing of ``a`` in ``nums1`` and ``b`` in ``nums2``."""
    result = 0
    if len(nums1) % 2:
        result ^= reduce(xor, nums2, 0)
    if len(nums2) % 2:
        result ^= reduce(xor, nums1, 0)
    return result


def maximum_subarray_sum(nums: Sequence[int], k: int) -> int:
    """Largest sum of a length-``k`` window whose elements are all distinct, else 0."""
    counts: Counter[int] = Counter()
    best = current = 0
    start = 0
    for end, value in enumerate(nums):
        current += value
        counts[value] += 1
        if end - start + 1 == k:
            if len(counts) == k:
                best = max(best, current)
            old = nums[start]
            current -= old
            counts[old] -= 1
            if counts[old] == 0:
                del counts[old]
            start += 1
    return best


def max_count(banned: Iterable[int], n: int, max_sum: int) -> int:
    """Most integers from 1..n, none banned, picked smallest first within ``max_sum``."""
    excluded = set(banned)
    total = count = 0
    for num in range(1, n + 1):
        if num in excluded:
            continue
        if total + num > max_sum:
            break
        total += num
        count += 1
    return count


def find_the_prefix_common_array(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """For each prefix length, count elements of ``a``'s prefix present in ``b``'s prefix."""
    if len(a) != len(b):
        raise ValueError("arrays must have the same length")
    seen_in_b: set[int] = set()
    result = []
    for i, value in enumerate(b):
        seen_in_b.add(value)
        result.append(sum(1 for item in a[: i + 1] if item in seen_in_b))
    return result


def does_valid_array_exist(derived: Iterable[int]) -> bool:
    """Whether a binary array exists whose circular neighbour XORs equal ``derived``."""
    return reduce(xor, derived, 0) == 0


def lexicographically_smallest_array(nums: Sequence[int], limit: int) -> list[int]:
    """Smallest arrangement reachable by swapping elements that differ by at most ``limit``.

    Returns a new list; ``nums`` is left unchanged.
    """
    result = list(nums)
    if not result:
        return result
    order = sorted(range(len(result)), key=result.__getitem__)
    groups: list[list[int]] = [[order[0]]]
    for prev, index in pairwise(order):
        if result[index] - result[prev] <= limit:
            groups[-1].append(index)
        else:
            groups.append([index])

    original = list(result)
    for group in groups:
        values = [original[index] for index in group]
        for index, value in zip(sorted(group), values):
            result[index] = value
    return result


def longest_monotonic_subarray(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing or strictly decreasing run."""
    best = rising = falling = 1
    for prev, value in pairwise(nums):
        if value > prev:
            rising += 1
            falling = 1
        elif value < prev:
            falling += 1
            rising = 1
        else:
            rising = falling = 1
        best = max(best, rising, falling)
    return best


def is_array_special(nums: Sequence[int]) -> bool:
    """Whether every pair of adjacent elements differs in parity."""
    return all((a & 1) != (b & 1) for a, b in pairwise(nums))


def results_array(nums: Sequence[int], k: int) -> list[int]:
    """Power of every length-``k`` window: its maximum if consecutive ascending, else -1."""
    if k < 1:
        raise ValueError("k must be at least 1")
    powers = []
    for start in range(len(nums) - k + 1):
        window = nums[start : start + k]
        consecutive = all(b == a + 1 for a, b in pairwise(window))
        powers.append(window[-1] if consecutive else -1)
    return powers


def _clears_all(nums: Sequence[int], start: int, go_right: bool) -> bool:
    """Simulate the bouncing walk from ``start`` and report whether every value hits zero."""
    remaining = list(nums)
    position = start
    while 0 <= position < len(remaining):
        if remaining[position] > 0:
            remaining[position] -= 1
            go_right = not go_right
        position += 1 if go_right else -1
    return sum(remaining) == 0


def count_valid_selections(nums: Sequence[int]) -> int:
    """Count (zero position, direction) starts whose walk reduces every element to zero."""
    return sum(
        _clears_all(nums, position, True) + _clears_all(nums, position, False)
        for position, value in enumerate(nums)
        if value == 0
    )