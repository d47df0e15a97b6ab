from collections import deque

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.queues import (
    ArrayQueue,
    CircularQueue,
    LinkedQueue,
    QueueEmptyError,
    QueueFullError,
    StackQueue,
)


def test_circular_queue_demo_sequence():
    q = CircularQueue(3)
    q.enqueue(10)
    q.enqueue(20)
    q.enqueue(30)
    assert q.is_full()
    assert q.peek_front() == 10
    assert q.dequeue() == 10
    assert q.peek_front() == 20
    q.enqueue(40)
    assert q.peek_rear() == 40
    assert len(q) == 3


def test_circular_queue_full_raises():
    q = CircularQueue(2)
    q.enqueue(1)
    q.enqueue(2)
    with pytest.raises(QueueFullError):
        q.enqueue(3)


def test_circular_queue_empty_raises():
    q = CircularQueue(2)
    with pytest.raises(QueueEmptyError):
        q.dequeue()
    with pytest.raises(QueueEmptyError):
        q.peek_front()
    with pytest.raises(QueueEmptyError):
        q.peek_rear()


def test_circular_queue_rejects_zero_capacity():
    with pytest.raises(ValueError):
        CircularQueue(0)


def test_circular_queue_wraps_around_many_times():
    q = CircularQueue(3)
    for value in range(50):
        q.enqueue(value)
        assert q.dequeue() == value
    assert q.is_empty()


@given(
    st.integers(min_value=1, max_value=6),
    st.lists(st.one_of(st.integers(), st.none()), max_size=60),
)
def test_circular_queue_matches_bounded_model(capacity, ops):
    q = CircularQueue(capacity)
    model = deque()
    for op in ops:
        if op is None:
            if model:
                assert q.dequeue() == model.popleft()
            else:
                with pytest.raises(QueueEmptyError):
                    q.dequeue()
        elif len(model) == capacity:
            with pytest.raises(QueueFullError):
                q.enqueue(op)
        else:
            q.enqueue(op)
            model.append(op)
        assert len(q) == len(model)
        if model:
            assert q.peek_front() == model[0]
            assert q.peek_rear() == model[-1]


def test_array_queue_demo_sequence():
    q = ArrayQueue()
    q.enqueue(10)
    q.enqueue(20)
    q.enqueue(30)
    assert q.peek() == 10
    assert q.dequeue() == 10
    assert q.peek() == 20
    q.dequeue()
    q.dequeue()
    assert q.is_empty()


def test_array_queue_default_capacity():
    assert ArrayQueue().capacity == 1000


def test_array_queue_does_not_reuse_slots():
    q = ArrayQueue(2)
    q.enqueue("a")
    q.enqueue("b")
    assert q.dequeue() == "a"
    assert len(q) == 1
    with pytest.raises(QueueFullError):
        q.enqueue("c")


def test_array_queue_underflow():
    q = ArrayQueue(3)
    with pytest.raises(QueueEmptyError):
        q.dequeue()
    with pytest.raises(QueueEmptyError):
        q.peek()


def test_linked_queue_demo_sequence():
    q = LinkedQueue()
    for value in (10, 20, 30):
        q.enqueue(value)
    assert list(q) == [10, 20, 30]
    assert q.dequeue() == 10
    assert q.peek() == 20
    assert q.dequeue() == 20
    assert q.peek() == 30
    assert q.dequeue() == 30
    assert q.is_empty()
    assert len(q) == 0


def test_linked_queue_empty_raises():
    q = LinkedQueue()
    with pytest.raises(QueueEmptyError):
        q.dequeue()
    with pytest.raises(QueueEmptyError):
        q.peek()


def test_linked_queue_reusable_after_draining():
    q = LinkedQueue()
    q.enqueue(1)
    q.dequeue()
    q.enqueue(2)
    q.enqueue(3)
    assert list(q) == [2, 3]


@given(st.lists(st.integers()))
def test_linked_queue_preserves_order(values):
    q = LinkedQueue()
    for v in values:
        q.enqueue(v)
    assert list(q) == values
    assert [q.dequeue() for _ in values] == values


def test_stack_queue_demo_sequence():
    q = StackQueue()
    q.push(10)
    q.push(20)
    q.push(30)
    assert q.peek() == 10
    assert q.pop() == 10
    assert q.pop() == 20
    assert q.peek() == 30
    assert q.pop() == 30
    assert q.is_empty()


def test_stack_queue_empty_raises():
    q = StackQueue()
    with pytest.raises(QueueEmptyError):
        q.pop()
    with pytest.raises(QueueEmptyError):
        q.peek()


@given(st.lists(st.one_of(st.integers(), st.none()), max_size=60))
def test_stack_queue_matches_fifo_model(ops):
    q = StackQueue()
    model = deque()
    for op in ops:
        if op is None:
            if model:
                assert q.pop() == model.popleft()
            else:
                with pytest.raises(QueueEmptyError):
                    q.pop()
        else:
            q.push(op)
            model.append(op)
        assert len(q) == len(model)
        assert q.is_empty() == (not model)