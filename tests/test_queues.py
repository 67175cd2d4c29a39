from collections import deque

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.queues import (
    CircularQueue,
    DequeQueue,
    DequeStack,
    LinkedQueue,
    TwoQueueStack,
    TwoStackQueue,
    first_non_repeating,
    interleave,
    reverse_queue,
)

ints = st.lists(st.integers(), max_size=30)


@given(values=ints)
def test_queue_is_fifo(values):
    for q in (LinkedQueue(), TwoStackQueue(), DequeQueue()):
        for value in values:
            q.push(value)
        assert len(q) == len(values)
        drained = []
        while q:
            assert q.front() == values[len(drained)]
            drained.append(q.pop())
        assert drained == values


def test_empty_queue_raises():
    for q in (LinkedQueue(), TwoStackQueue(), DequeQueue()):
        with pytest.raises(IndexError):
            q.pop()
        with pytest.raises(IndexError):
            q.front()


@given(values=ints)
def test_stack_is_lifo(values):
    for s in (TwoQueueStack(), DequeStack()):
        for value in values:
            s.push(value)
        assert len(s) == len(values)
        drained = []
        while s:
            top = s.top()
            assert s.pop() == top
            drained.append(top)
        assert drained == values[::-1]


def test_empty_stack_raises():
    for s in (TwoQueueStack(), DequeStack()):
        with pytest.raises(IndexError):
            s.pop()
        with pytest.raises(IndexError):
            s.top()


def test_circular_queue_source_example():
    q = CircularQueue(4)
    for value in [1, 2, 3, 4]:
        q.push(value)
    with pytest.raises(OverflowError):
        q.push(5)
    assert q.front() == 1
    assert q.pop() == 1
    assert q.front() == 2
    q.push(5)
    assert q.front() == 2
    assert [q.pop() for _ in range(4)] == [2, 3, 4, 5]
    with pytest.raises(IndexError):
        q.front()


def test_circular_queue_rejects_bad_capacity():
    with pytest.raises(ValueError):
        CircularQueue(0)


@given(
    st.integers(1, 6),
    st.lists(st.one_of(st.integers(), st.none()), max_size=60),
)
def test_circular_queue_matches_model(capacity, ops):
    q = CircularQueue(capacity)
    model: deque = deque()
    for op in ops:
        if op is None:
            if model:
                assert q.pop() == model.popleft()
            else:
                with pytest.raises(IndexError):
                    q.pop()
        elif len(model) == capacity:
            with pytest.raises(OverflowError):
                q.push(op)
        else:
            q.push(op)
            model.append(op)
        assert len(q) == len(model)
        if model:
            assert q.front() == model[0]


def test_first_non_repeating_source_example():
    assert first_non_repeating("aabccxb") == ["a", None, "b", "b", "b", "b", "x"]


@given(st.text(alphabet="abcde", max_size=30))
def test_first_non_repeating_invariants(text):
    answers = first_non_repeating(text)
    assert len(answers) == len(text)
    for end, answer in enumerate(answers, 1):
        prefix = text[:end]
        if answer is None:
            assert all(prefix.count(ch) > 1 for ch in prefix)
        else:
            assert prefix.count(answer) == 1
            before = prefix[: prefix.index(answer)]
            assert all(prefix.count(ch) > 1 for ch in before)


def test_interleave_source_example():
    assert interleave(range(1, 9)) == [1, 5, 2, 6, 3, 7, 4, 8]


@given(st.lists(st.integers(), max_size=15).map(lambda xs: xs + xs[::-1]))
def test_interleave_halves(values):
    result = interleave(values)
    half = len(values) // 2
    assert result[::2] == values[:half]
    assert result[1::2] == values[half:]


def test_interleave_rejects_odd_size():
    with pytest.raises(ValueError):
        interleave([1, 2, 3])


@given(ints)
def test_reverse_queue(values):
    assert reverse_queue(deque(values)) == values[::-1]
    assert reverse_queue(reverse_queue(values)) == values