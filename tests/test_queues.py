import pytest

from dsaworks.queues import (
    ArrayQueue,
    LinkedQueue,
    QueueEmptyError,
    QueueFullError,
    TwoStackQueue,
)

VALUES = [1, 3, 5, 7, 9]


def _drain(queue, count):
    return [queue.dequeue() for _ in range(count)]


@pytest.mark.parametrize("factory", [lambda: ArrayQueue(5), LinkedQueue, TwoStackQueue])
def test_fifo_order(factory):
    queue = factory()
    for x in VALUES:
        queue.enqueue(x)
    assert len(queue) == len(VALUES)
    assert _drain(queue, len(VALUES)) == VALUES
    assert queue.is_empty()


@pytest.mark.parametrize("factory", [lambda: ArrayQueue(5), LinkedQueue, TwoStackQueue])
def test_dequeue_empty_raises(factory):
    queue = factory()
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


@pytest.mark.parametrize("factory", [lambda: ArrayQueue(5), LinkedQueue, TwoStackQueue])
def test_underflow_after_draining(factory):
    queue = factory()
    for x in VALUES:
        queue.enqueue(x)
    _drain(queue, len(VALUES))
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


def test_array_queue_overflow():
    queue = ArrayQueue(len(VALUES))
    for x in VALUES:
        queue.enqueue(x)
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(10)
    assert list(queue) == VALUES


def test_array_queue_does_not_reuse_freed_slots():
    queue = ArrayQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.dequeue() == 1
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(3)
    assert list(queue) == [2]


def test_array_queue_negative_size():
    with pytest.raises(ValueError):
        ArrayQueue(-1)


def test_linked_queue_iteration_and_reuse():
    queue = LinkedQueue()
    for x in VALUES:
        queue.enqueue(x)
    assert list(queue) == VALUES
    _drain(queue, len(VALUES))
    queue.enqueue(42)
    assert list(queue) == [42]
    assert len(queue) == 1


def test_two_stack_queue_interleaved():
    queue = TwoStackQueue()
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.dequeue() == 1
    queue.enqueue(3)
    assert _drain(queue, 2) == [2, 3]
    assert len(queue) == 0