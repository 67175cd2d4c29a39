import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.dp_sequences import (
    catalan_memo,
    catalan_recursive,
    catalan_table,
    fibonacci_memo,
    fibonacci_recursive,
    fibonacci_table,
    matrix_chain_memo,
    matrix_chain_recursive,
    matrix_chain_table,
)


def test_fibonacci_base_cases():
    assert fibonacci_recursive(0) == 0
    assert fibonacci_recursive(1) == 1
    assert fibonacci_memo(0) == 0
    assert fibonacci_memo(1) == 1
    assert fibonacci_table(0) == 0
    assert fibonacci_table(1) == 1


def test_fibonacci_tenth():
    assert fibonacci_recursive(10) == 55
    assert fibonacci_memo(10) == 55
    assert fibonacci_table(10) == 55


@given(st.integers(min_value=2, max_value=18))
def test_fibonacci_variants_agree_and_follow_recurrence(n):
    value = fibonacci_table(n)
    assert fibonacci_recursive(n) == value
    assert fibonacci_memo(n) == value
    assert value == fibonacci_table(n - 1) + fibonacci_table(n - 2)


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        fibonacci_recursive(-1)
    with pytest.raises(ValueError):
        fibonacci_memo(-1)
    with pytest.raises(ValueError):
        fibonacci_table(-1)
    with pytest.raises(ValueError):
        catalan_recursive(-1)
    with pytest.raises(ValueError):
        catalan_memo(-1)
    with pytest.raises(ValueError):
        catalan_table(-1)


def test_catalan_source_example():
    assert catalan_recursive(4) == 14
    assert catalan_memo(4) == 14
    assert catalan_table(4) == 14


def test_catalan_base_cases():
    assert catalan_recursive(0) == 1
    assert catalan_recursive(1) == 1
    assert catalan_memo(0) == 1
    assert catalan_memo(1) == 1
    assert catalan_table(0) == 1
    assert catalan_table(1) == 1


@given(st.integers(min_value=0, max_value=10))
def test_catalan_variants_agree(n):
    value = catalan_table(n)
    assert catalan_recursive(n) == value
    assert catalan_memo(n) == value


@given(st.integers(min_value=1, max_value=25))
def test_catalan_satisfies_recurrence(n):
    expected = sum(catalan_table(i) * catalan_table(n - 1 - i) for i in range(n))
    assert catalan_table(n) == expected


def test_matrix_chain_source_example():
    dims = [1, 2, 3, 4, 3]
    assert matrix_chain_recursive(dims) == 30
    assert matrix_chain_memo(dims) == 30
    assert matrix_chain_table(dims) == 30


def test_matrix_chain_single_matrix_costs_nothing():
    assert matrix_chain_recursive([7, 9]) == 0
    assert matrix_chain_memo([7, 9]) == 0
    assert matrix_chain_table([7, 9]) == 0


def test_matrix_chain_two_matrices():
    assert matrix_chain_recursive([2, 3, 4]) == 24
    assert matrix_chain_memo([2, 3, 4]) == 24
    assert matrix_chain_table([2, 3, 4]) == 24


def test_matrix_chain_too_short():
    with pytest.raises(ValueError):
        matrix_chain_recursive([5])
    with pytest.raises(ValueError):
        matrix_chain_memo([5])
    with pytest.raises(ValueError):
        matrix_chain_table([5])


@given(st.lists(st.integers(min_value=1, max_value=20), min_size=2, max_size=7))
def test_matrix_chain_variants_agree(dims):
    value = matrix_chain_table(dims)
    assert matrix_chain_recursive(dims) == value
    assert matrix_chain_memo(dims) == value


@given(st.lists(st.integers(min_value=1, max_value=20), min_size=3, max_size=7))
def test_matrix_chain_not_worse_than_left_to_right(dims):
    left_to_right = sum(dims[0] * dims[k] * dims[k + 1] for k in range(1, len(dims) - 1))
    assert matrix_chain_table(dims) <= left_to_right