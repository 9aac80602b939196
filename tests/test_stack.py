import pytest

from algokit.data_structures.stack import Stack, StackEmptyError


def test_basics():
    stack = Stack()
    with pytest.raises(StackEmptyError, match="Stack is empty"):
        stack.pop()

    stack.push(1)
    stack.push(2)
    stack.push(3)
    assert stack.pop() == 3
    assert stack.pop() == 2

    stack.push(4)
    stack.push(5)
    assert stack.is_empty() is False
    assert stack.pop() == 5
    assert stack.pop() == 4
    assert stack.pop() == 1
    with pytest.raises(StackEmptyError):
        stack.pop()
    assert stack.is_empty() is True


def test_peek():
    stack = Stack()
    assert stack.peek() is None
    stack.push(1)
    stack.push(2)
    stack.push(3)
    assert stack.peek() == 3
    assert stack.replace_top(42) == 3
    assert stack.peek() == 42
    assert stack.pop() == 42


def test_replace_top_on_empty_raises():
    with pytest.raises(StackEmptyError):
        Stack().replace_top(1)


def test_drain():
    stack = Stack()
    for value in (1, 2, 3):
        stack.push(value)
    drained = stack.drain()
    assert next(drained) == 3
    assert next(drained) == 2
    assert next(drained) == 1
    assert next(drained, None) is None
    assert stack.is_empty()


def test_iter():
    stack = Stack()
    for value in (1, 2, 3):
        stack.push(value)
    assert list(stack) == [3, 2, 1]
    assert len(stack) == 3


def test_empty_error_is_index_error():
    with pytest.raises(IndexError):
        Stack().pop()