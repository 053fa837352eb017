import pytest

from labkit.fifo import ObjectQueue


def test_enqueue_find_dequeue_sequence():
    queue = ObjectQueue()
    queue.enqueue("A", 15213)
    assert queue.find("A") == 15213
    queue.enqueue("B", 15122)
    assert queue.find("B") == 15122

    assert queue.dequeue() == 15213
    assert queue.find("A") is None
    assert queue.dequeue() == 15122
    assert queue.find("A") is None
    assert len(queue) == 0


def test_fifo_order():
    queue = ObjectQueue()
    items = [("x", b"one"), ("y", b"two"), ("z", b"three")]
    for ident, data in items:
        queue.enqueue(ident, data)
    assert len(queue) == len(items)
    assert [queue.dequeue() for _ in items] == [data for _, data in items]


def test_find_returns_first_match():
    queue = ObjectQueue()
    queue.enqueue("dup", "first")
    queue.enqueue("dup", "second")
    assert queue.find("dup") == "first"
    queue.dequeue()
    assert queue.find("dup") == "second"


def test_find_on_empty_queue():
    assert ObjectQueue().find("missing") is None


def test_dequeue_empty_raises():
    queue = ObjectQueue()
    with pytest.raises(IndexError):
        queue.dequeue()


def test_iteration_matches_contents():
    queue = ObjectQueue()
    queue.enqueue("a", 1)
    queue.enqueue("b", 2)
    assert list(queue) == [("a", 1), ("b", 2)]