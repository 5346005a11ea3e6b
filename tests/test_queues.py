import pytest

from dslab.queues import CircularQueue, LinearQueue, QueueEmpty, QueueFull


def test_linear_queue_keeps_arrival_order():
    queue = LinearQueue()
    for item in [7, 8, 9]:
        queue.enqueue(item)
    assert list(queue) == [7, 8, 9]
    assert len(queue) == 3


def test_linear_queue_overflows_at_capacity():
    queue = LinearQueue(5)
    for item in range(5):
        queue.enqueue(item)
    with pytest.raises(QueueFull):
        queue.enqueue(5)
    assert list(queue) == [0, 1, 2, 3, 4]


def test_circular_queue_scenario():
    queue = CircularQueue(5)
    assert list(queue) == []
    queue.enqueue(1)
    queue.enqueue(2)
    assert list(queue) == [1, 2]
    for item in [3, 4, 5]:
        queue.enqueue(item)
    assert list(queue) == [1, 2, 3, 4, 5]
    with pytest.raises(QueueFull):
        queue.enqueue(6)
    assert queue.dequeue() == 1
    assert list(queue) == [2, 3, 4, 5]
    assert queue.dequeue() == 2
    assert list(queue) == [3, 4, 5]
    queue.enqueue(31)
    queue.enqueue(41)
    with pytest.raises(QueueFull):
        queue.enqueue(51)
    assert list(queue) == [3, 4, 5, 31, 41]
    assert len(queue) == 5


def test_circular_queue_dequeue_on_empty():
    queue = CircularQueue(3)
    with pytest.raises(QueueEmpty):
        queue.dequeue()


def test_circular_queue_drains_in_order_after_wrapping():
    queue = CircularQueue(3)
    received = []
    for item in range(10):
        queue.enqueue(item)
        if len(queue) == 3:
            received.append(queue.dequeue())
    while len(queue):
        received.append(queue.dequeue())
    assert received == list(range(10))


def test_circular_queue_empties_completely():
    queue = CircularQueue(2)
    queue.enqueue("a")
    assert queue.dequeue() == "a"
    assert len(queue) == 0
    with pytest.raises(QueueEmpty):
        queue.dequeue()


@pytest.mark.parametrize("cls", [LinearQueue, CircularQueue])
def test_capacity_must_be_positive(cls):
    with pytest.raises(ValueError):
        cls(0)