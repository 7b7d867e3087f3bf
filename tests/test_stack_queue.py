import pytest

from ventas.priority_queue import EmptyError
from ventas.stack_queue import Queue, Stack


def test_stack_is_lifo():
    stack = Stack()
    for value in ["a", "b", "c"]:
        stack.push(value)
    assert [stack.pop(), stack.pop(), stack.pop()] == ["c", "b", "a"]
    assert stack.is_empty()


def test_stack_len_tracks_pushes_and_pops():
    stack = Stack()
    stack.push(1)
    stack.push(2)
    assert len(stack) == 2
    stack.pop()
    assert len(stack) == 1
    assert not stack.is_empty()


def test_stack_pop_empty_raises():
    stack = Stack()
    with pytest.raises(EmptyError):
        stack.pop()


def test_stack_iterates_top_first():
    stack = Stack()
    for value in [1, 2, 3]:
        stack.push(value)
    assert list(stack) == [3, 2, 1]
    assert len(stack) == 3


def test_queue_is_fifo():
    queue = Queue()
    for value in [1, 2, 3]:
        queue.enqueue(value)
    assert [queue.dequeue() for _ in range(3)] == [1, 2, 3]
    assert queue.is_empty()


def test_queue_peek_does_not_remove():
    queue = Queue()
    queue.enqueue("x")
    queue.enqueue("y")
    assert queue.peek() == "x"
    assert len(queue) == 2
    assert queue.dequeue() == "x"
    assert queue.peek() == "y"


def test_queue_empty_errors():
    queue = Queue()
    with pytest.raises(EmptyError):
        queue.dequeue()
    with pytest.raises(EmptyError):
        queue.peek()


def test_queue_reusable_after_emptying():
    queue = Queue()
    queue.enqueue(1)
    queue.dequeue()
    queue.enqueue(2)
    assert queue.peek() == 2
    assert list(queue) == [2]