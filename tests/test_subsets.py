import pytest

from dsakit.subsets import (
    MOD,
    can_cross,
    can_partition,
    can_partition_k_subsets,
    coin_change,
    combination_sum4,
    predict_the_winner,
    remove_boxes,
    ways_to_reach_target,
)


def test_coin_change_known_example():
    assert coin_change([1, 2, 5], 11) == 3


def test_coin_change_single_unit_coin_uses_amount_coins():
    assert coin_change([1], 7) == 7


def test_coin_change_impossible_returns_minus_one():
    assert coin_change([2], 3) == -1


def test_coin_change_zero_amount():
    assert coin_change([5, 1], 0) == 0


@pytest.mark.parametrize("amount", range(0, 30))
def test_coin_change_never_worse_than_unit_coins(amount):
    result = coin_change([1, 4, 6], amount)
    assert 0 <= result <= amount
    assert result * 6 >= amount


def test_coin_change_rejects_empty_coins():
    with pytest.raises(ValueError):
        coin_change([], 3)


def test_combination_sum4_known_example():
    assert combination_sum4([1, 2, 3], 4) == 7


def test_combination_sum4_zero_target():
    assert combination_sum4([3, 5], 0) == 1


def test_combination_sum4_unit_only():
    assert combination_sum4([1], 12) == 1


@pytest.mark.parametrize("target", range(2, 20))
def test_combination_sum4_follows_step_recurrence(target):
    assert combination_sum4([1, 2], target) == (
        combination_sum4([1, 2], target - 1) + combination_sum4([1, 2], target - 2)
    )


def test_combination_sum4_rejects_non_positive():
    with pytest.raises(ValueError):
        combination_sum4([0, 1], 3)


def test_can_partition_cases():
    assert can_partition([1, 5, 11, 5])
    assert can_partition([3, 3])
    assert not can_partition([1, 2, 3, 5])
    assert not can_partition([1, 2, 4])


def test_can_partition_rejects_empty():
    with pytest.raises(ValueError):
        can_partition([])


def test_can_partition_k_subsets_cases():
    assert can_partition_k_subsets([4, 3, 2, 3, 5, 2, 1], 4)
    assert not can_partition_k_subsets([1, 2, 3, 4], 3)
    assert can_partition_k_subsets([9, 1, 4], 1)


def test_can_partition_k_subsets_two_groups_agrees_with_can_partition():
    for nums in ([1, 5, 11, 5], [1, 2, 3, 5], [2, 2, 3, 5], [6, 1, 1, 4]):
        assert can_partition_k_subsets(nums, 2) == can_partition(nums)


def test_can_partition_k_subsets_rejects_zero_groups():
    with pytest.raises(ValueError):
        can_partition_k_subsets([1, 1], 0)


def test_ways_to_reach_target_known_example():
    assert ways_to_reach_target(6, [[6, 1], [3, 2], [2, 3]]) == 7


def test_ways_to_reach_target_zero_target():
    assert ways_to_reach_target(0, [[2, 3]]) == 1


def test_ways_to_reach_target_single_unit_type():
    assert ways_to_reach_target(4, [[10, 1]]) == 1
    assert ways_to_reach_target(4, [[3, 1]]) == 0


def test_ways_to_reach_target_stays_reduced():
    result = ways_to_reach_target(1000, [[50, 1], [50, 2], [50, 3], [50, 5]])
    assert 0 <= result < MOD


def test_ways_to_reach_target_rejects_negative_target():
    with pytest.raises(ValueError):
        ways_to_reach_target(-1, [[1, 1]])


def test_can_cross_cases():
    assert can_cross([0, 1, 3, 5, 6, 8, 12, 17])
    assert not can_cross([0, 1, 2, 3, 4, 8, 9, 11])
    assert not can_cross([0, 2])
    assert can_cross([0, 1])


def test_can_cross_rejects_single_stone():
    with pytest.raises(ValueError):
        can_cross([0])


def test_predict_the_winner_cases():
    assert not predict_the_winner([1, 5, 2])
    assert predict_the_winner([1, 5, 233, 7])
    assert predict_the_winner([4])


@pytest.mark.parametrize("nums", [[3, 9, 1, 2], [1, 100, 1, 1, 100, 1], [7, 7]])
def test_predict_the_winner_even_length_first_player_never_loses(nums):
    assert predict_the_winner(nums)


def test_remove_boxes_single_colour_scores_square():
    boxes = [7] * 5
    assert remove_boxes(boxes) == len(boxes) * len(boxes)


def test_remove_boxes_distinct_colours_score_one_each():
    boxes = [1, 2, 3, 4, 5, 6]
    assert remove_boxes(boxes) == len(boxes)


def test_remove_boxes_empty():
    assert remove_boxes([]) == 0


def test_remove_boxes_bounds():
    boxes = [1, 3, 2, 2, 2, 3, 4, 3, 1]
    result = remove_boxes(boxes)
    assert len(boxes) < result <= len(boxes) ** 2
    assert result >= remove_boxes(boxes[:-1])