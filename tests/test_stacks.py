import pytest

from algobox.stacks import MaxStack, MinStack, QueueStack, StackQueue


def test_min_stack_source_sequence():
    stack = MinStack()
    stack.push(-2)
    stack.push(0)
    stack.push(-3)
    assert stack.get_min() == -3
    stack.pop()
    assert stack.top() == 0
    assert stack.get_min() == -2


def test_min_stack_empty_behaviour():
    stack = MinStack()
    stack.pop()
    assert stack.top() == 0
    assert stack.get_min() == 0
    assert len(stack) == 0


def test_min_stack_duplicate_minimums():
    stack = MinStack()
    for value in (3, 1, 1):
        stack.push(value)
    stack.pop()
    assert stack.get_min() == 1
    stack.pop()
    assert stack.get_min() == 3


def test_queue_stack_source_sequence():
    stack = QueueStack()
    stack.push(1)
    stack.push(2)
    stack.push(3)
    assert stack.pop() == 3
    assert stack.top() == 2
    assert stack.empty() is False


def test_queue_stack_empty_errors():
    stack = QueueStack()
    assert stack.empty() is True
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.top()


def test_stack_queue_source_sequence():
    queue = StackQueue()
    queue.push(1)
    queue.push(2)
    queue.push(3)
    assert queue.peek() == 1
    assert queue.pop() == 1
    assert queue.empty() is False


def test_stack_queue_interleaved_order():
    queue = StackQueue()
    queue.push(1)
    queue.push(2)
    assert queue.pop() == 1
    queue.push(3)
    assert [queue.pop(), queue.pop()] == [2, 3]
    assert queue.empty() is True
    with pytest.raises(IndexError):
        queue.peek()


def test_max_stack_source_sequence():
    stack = MaxStack()
    stack.push(5)
    stack.push(1)
    stack.push(5)
    assert stack.top() == 5
    assert stack.pop_max() == 5
    assert stack.top() == 1
    assert stack.peek_max() == 5
    assert stack.pop() == 1
    assert stack.top() == 5


def test_max_stack_pop_max_keeps_order():
    stack = MaxStack()
    for value in (2, 9, 4, 3):
        stack.push(value)
    assert stack.pop_max() == 9
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 4, 2]


def test_max_stack_empty_errors():
    stack = MaxStack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.pop_max()