import pytest

from ventas.priority_queue import NO_PRIORITY, EmptyError, PriorityQueue


def test_plain_enqueue_is_fifo():
    queue = PriorityQueue()
    for value in ["a", "b", "c"]:
        queue.enqueue(value)
    assert [queue.dequeue() for _ in range(3)] == ["a", "b", "c"]
    assert queue.is_empty()


def test_lower_priority_number_served_first():
    queue = PriorityQueue()
    queue.enqueue_priority("a", 5)
    queue.enqueue_priority("b", 1)
    queue.enqueue_priority("c", 5)
    queue.enqueue_priority("d", 3)
    assert list(queue) == ["b", "d", "a", "c"]


def test_equal_priorities_keep_arrival_order():
    queue = PriorityQueue()
    for value in range(5):
        queue.enqueue_priority(value, 2)
    assert list(queue) == list(range(5))


def test_negative_priorities():
    queue = PriorityQueue()
    queue.enqueue_priority("small", -10)
    queue.enqueue_priority("large", -500)
    assert queue.peek() == "large"


def test_priority_at_limit_goes_to_back():
    queue = PriorityQueue()
    queue.enqueue_priority("late", NO_PRIORITY)
    queue.enqueue_priority("later", NO_PRIORITY * 2)
    queue.enqueue_priority("early", 1)
    assert list(queue) == ["early", "late", "later"]


def test_prioritised_entry_goes_before_plain_ones():
    queue = PriorityQueue()
    queue.enqueue("plain")
    queue.enqueue_priority("urgent", NO_PRIORITY - 1)
    assert queue.dequeue() == "urgent"
    assert queue.dequeue() == "plain"


def test_peek_does_not_remove():
    queue = PriorityQueue()
    queue.enqueue_priority("x", 4)
    assert queue.peek() == "x"
    assert len(queue) == 1


def test_empty_errors():
    queue = PriorityQueue()
    with pytest.raises(EmptyError):
        queue.dequeue()
    with pytest.raises(EmptyError):
        queue.peek()


def test_empty_error_is_index_error():
    with pytest.raises(IndexError):
        PriorityQueue().dequeue()


def test_len_tracks_contents():
    queue = PriorityQueue()
    queue.enqueue(1)
    queue.enqueue_priority(2, 7)
    assert len(queue) == 2
    queue.dequeue()
    assert len(queue) == 1


def test_copy_is_independent():
    queue = PriorityQueue()
    queue.enqueue_priority(("city", 10.0), -10)
    queue.enqueue_priority(("town", 5.0), -5)
    clone = queue.copy()
    drained = [clone.dequeue() for _ in range(len(clone))]
    assert drained == list(queue)
    assert clone.is_empty()
    assert len(queue) == 2


def test_dequeue_order_sorted_by_priority():
    queue = PriorityQueue()
    priorities = [9, 3, 7, 3, 1, 8]
    for index, priority in enumerate(priorities):
        queue.enqueue_priority((priority, index), priority)
    served = [queue.dequeue() for _ in range(len(priorities))]
    assert served == sorted(served)