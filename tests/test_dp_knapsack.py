import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.dp_knapsack import (
    knapsack_memo,
    knapsack_recursive,
    knapsack_table,
    knapsack_unbounded,
    min_partition_difference,
    rod_cutting,
    target_subset_sum,
)

VALUES = [15, 14, 10, 45, 30]
WEIGHTS = [2, 5, 1, 3, 4]

items = st.lists(
    st.tuples(st.integers(min_value=0, max_value=50), st.integers(min_value=1, max_value=10)),
    max_size=7,
)


def test_knapsack_source_example():
    assert knapsack_recursive(VALUES, WEIGHTS, 7) == 75
    assert knapsack_memo(VALUES, WEIGHTS, 7) == 75
    assert knapsack_table(VALUES, WEIGHTS, 7) == 75


def test_zero_capacity_holds_nothing():
    assert knapsack_recursive(VALUES, WEIGHTS, 0) == 0
    assert knapsack_memo(VALUES, WEIGHTS, 0) == 0
    assert knapsack_table(VALUES, WEIGHTS, 0) == 0
    assert knapsack_unbounded(VALUES, WEIGHTS, 0) == 0


def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError):
        knapsack_recursive([1, 2], [1], 3)
    with pytest.raises(ValueError):
        knapsack_memo([1, 2], [1], 3)
    with pytest.raises(ValueError):
        knapsack_table([1, 2], [1], 3)
    with pytest.raises(ValueError):
        knapsack_unbounded([1, 2], [1], 3)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        knapsack_recursive(VALUES, WEIGHTS, -1)
    with pytest.raises(ValueError):
        knapsack_memo(VALUES, WEIGHTS, -1)
    with pytest.raises(ValueError):
        knapsack_table(VALUES, WEIGHTS, -1)


@given(items, st.integers(min_value=0, max_value=30))
def test_bounded_variants_agree(pairs, capacity):
    values = [v for v, _ in pairs]
    weights = [w for _, w in pairs]
    value = knapsack_table(values, weights, capacity)
    assert knapsack_recursive(values, weights, capacity) == value
    assert knapsack_memo(values, weights, capacity) == value
    assert 0 <= value <= sum(values)


@given(items)
def test_everything_fits(pairs):
    values = [v for v, _ in pairs]
    weights = [w for _, w in pairs]
    assert knapsack_table(values, weights, sum(weights)) == sum(values)


@given(items, st.integers(min_value=0, max_value=30))
def test_unbounded_not_worse_than_bounded(pairs, capacity):
    values = [v for v, _ in pairs]
    weights = [w for _, w in pairs]
    assert knapsack_unbounded(values, weights, capacity) >= knapsack_table(
        values, weights, capacity
    )


def test_unbounded_rejects_zero_weight():
    with pytest.raises(ValueError):
        knapsack_unbounded([5], [0], 4)


@given(st.integers(min_value=1, max_value=20), st.integers(min_value=0, max_value=40))
def test_unbounded_single_unit_item_repeats(price, capacity):
    assert knapsack_unbounded([price], [1], capacity) == price * capacity


def test_target_subset_sum_source_example():
    assert target_subset_sum([4, 2, 7, 1, 3], 7)


def test_target_subset_sum_unreachable():
    assert not target_subset_sum([2, 4, 6], 5)


@given(st.lists(st.integers(min_value=0, max_value=20), max_size=8))
def test_target_subset_sum_whole_and_empty(nums):
    assert target_subset_sum(nums, sum(nums))
    assert target_subset_sum(nums, 0)
    assert not target_subset_sum(nums, sum(nums) + 1)


def test_target_subset_sum_negative_target_rejected():
    with pytest.raises(ValueError):
        target_subset_sum([1, 2], -3)


def test_rod_cutting_source_example():
    prices = [1, 5, 8, 9, 10, 17, 17, 20]
    lengths = [1, 2, 3, 4, 5, 6, 7, 8]
    assert rod_cutting(prices, lengths, 8) == 22


@given(st.lists(st.integers(min_value=0, max_value=30), min_size=1, max_size=8))
def test_rod_cutting_at_least_uncut_price(prices):
    lengths = list(range(1, len(prices) + 1))
    rod = len(prices)
    assert rod_cutting(prices, lengths, rod) >= prices[-1]


def test_rod_cutting_mismatched_lengths_rejected():
    with pytest.raises(ValueError):
        rod_cutting([1, 5], [1], 2)


def test_min_partition_source_example():
    assert min_partition_difference([2, 3, 1, 4, 9]) == 1


@given(st.lists(st.integers(min_value=0, max_value=30), max_size=8))
def test_min_partition_invariants(nums):
    diff = min_partition_difference(nums)
    assert 0 <= diff <= sum(nums)
    assert (sum(nums) - diff) % 2 == 0


@given(st.lists(st.integers(min_value=0, max_value=30), max_size=5))
def test_min_partition_doubled_list_splits_evenly(nums):
    assert min_partition_difference(nums + nums) == 0


def test_min_partition_rejects_negative():
    with pytest.raises(ValueError):
        min_partition_difference([3, -1])