import pytest

from grafo.priority_queue import PriorityQueue, QueueItem


def test_pop_returns_items_in_distance_order():
    distances = [5.0, 1.5, 9.0, 0.5, 3.25, 7.0]
    queue = PriorityQueue(len(distances))
    for vertex, distance in enumerate(distances):
        queue.push(vertex, distance)
    popped = [queue.pop() for _ in distances]
    assert [item.distance for item in popped] == sorted(distances)


def test_pop_keeps_vertex_with_its_distance():
    queue = PriorityQueue(4)
    queue.push(7, 2.0)
    queue.push(3, 1.0)
    assert queue.pop() == QueueItem(3, 1.0)
    assert queue.pop() == QueueItem(7, 2.0)


def test_length_and_truthiness_follow_contents():
    queue = PriorityQueue(3)
    assert not queue
    queue.push(0, 1.0)
    queue.push(1, 2.0)
    assert len(queue) == 2
    assert queue
    queue.pop()
    queue.pop()
    assert len(queue) == 0
    assert not queue


def test_pop_from_empty_raises():
    with pytest.raises(IndexError):
        PriorityQueue(1).pop()


def test_push_beyond_capacity_raises():
    queue = PriorityQueue(1)
    queue.push(0, 0.0)
    with pytest.raises(OverflowError):
        queue.push(1, 1.0)
    assert len(queue) == 1


def test_unbounded_queue_accepts_many_items():
    queue = PriorityQueue()
    for vertex in range(1000):
        queue.push(vertex, float(1000 - vertex))
    assert len(queue) == 1000
    assert queue.pop().vertex == 999


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        PriorityQueue(-1)