import pytest

from algosolve.optimization import (
    count_non_decreasing_subarrays,
    min_cost_to_cut_stick,
    minimize_xor,
    remove_boxes,
)


def test_remove_boxes_worked_example():
    assert remove_boxes([1, 3, 2, 2, 2, 3, 4, 3, 1]) == 23


def test_remove_boxes_empty():
    assert remove_boxes([]) == 0


@pytest.mark.parametrize("count", [1, 2, 3, 6])
def test_remove_boxes_all_same(count):
    assert remove_boxes([5] * count) == count * count


def test_remove_boxes_all_distinct():
    boxes = [1, 2, 3, 4, 5]
    assert remove_boxes(boxes) == len(boxes)


def test_remove_boxes_at_least_box_count():
    boxes = [2, 1, 2, 1, 2, 3, 1]
    assert remove_boxes(boxes) >= len(boxes)


def test_cut_single_cut_costs_length():
    assert min_cost_to_cut_stick(10, [4]) == 10


def test_cut_no_cuts():
    assert min_cost_to_cut_stick(10, []) == 0


def test_cut_order_independent():
    assert min_cost_to_cut_stick(9, [5, 6, 1, 4, 2]) == min_cost_to_cut_stick(9, [1, 2, 4, 5, 6])


def test_cut_more_cuts_cost_more():
    assert min_cost_to_cut_stick(9, [1, 2, 4, 5, 6]) > min_cost_to_cut_stick(9, [1, 2, 4])


@pytest.mark.parametrize("num1,num2", [(3, 5), (1, 12), (25, 72), (0, 7), (255, 1), (12, 0)])
def test_minimize_xor_bit_count(num1, num2):
    assert minimize_xor(num1, num2).bit_count() == num2.bit_count()


def test_minimize_xor_same_count_returns_num1():
    assert minimize_xor(3, 5) == 3


def test_minimize_xor_zero_target_bits():
    assert minimize_xor(12, 0) == 0


def test_minimize_xor_negative_raises():
    with pytest.raises(ValueError):
        minimize_xor(-1, 3)


def test_count_worked_examples():
    assert count_non_decreasing_subarrays([6, 3, 1, 2, 4, 4], 7) == 17
    assert count_non_decreasing_subarrays([6, 3, 1, 3, 6], 4) == 12


def test_count_sorted_array_all_subarrays():
    nums = [1, 2, 2, 5, 7, 9]
    n = len(nums)
    assert count_non_decreasing_subarrays(nums, 0) == n * (n + 1) // 2


def test_count_decreasing_with_zero_budget():
    nums = [9, 7, 5, 3, 1]
    assert count_non_decreasing_subarrays(nums, 0) == len(nums)


def test_count_huge_budget_all_subarrays():
    nums = [5, 1, 4, 2, 3, 1]
    n = len(nums)
    assert count_non_decreasing_subarrays(nums, 10**9) == n * (n + 1) // 2


def test_count_monotone_in_budget():
    nums = [4, 1, 3, 2, 5, 1, 2]
    counts = [count_non_decreasing_subarrays(nums, k) for k in range(12)]
    assert counts == sorted(counts)


def test_count_empty():
    assert count_non_decreasing_subarrays([], 3) == 0