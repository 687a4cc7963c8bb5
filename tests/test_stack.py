import pytest

from smartcity.stack import Stack, StackNode


def test_lifo_order():
    stack = Stack()
    for item in ["R1", "R2", "R3"]:
        stack.push(item)
    assert [stack.pop().data for _ in range(3)] == ["R3", "R2", "R1"]
    assert stack.is_empty()


def test_peek_does_not_remove():
    stack = Stack()
    stack.push("Stop1", extra="info")
    assert stack.peek() == StackNode("Stop1", "info")
    assert len(stack) == 1


@pytest.mark.parametrize("method", ["pop", "peek"])
def test_empty_access_raises(method):
    with pytest.raises(IndexError):
        getattr(Stack(3), method)()


def test_grows_past_capacity():
    stack = Stack(2)
    stack.push("a")
    stack.push("b")
    assert stack.is_full()
    stack.push("c")
    assert stack.capacity == 4
    assert len(stack) == 3
    assert not stack.is_full()


def test_iter_is_bottom_to_top():
    stack = Stack()
    for item in ["x", "y", "z"]:
        stack.push(item)
    assert [node.data for node in stack] == ["x", "y", "z"]


def test_contains_and_clear():
    stack = Stack()
    stack.push("Stop5")
    assert "Stop5" in stack
    assert "Stop6" not in stack
    stack.clear()
    assert len(stack) == 0
    assert "Stop5" not in stack


def test_invalid_capacity():
    with pytest.raises(ValueError):
        Stack(0)


def test_format_empty():
    stack = Stack()
    assert stack.format_top_down() == "Stack is empty."
    assert stack.format_chronological() == "Stack is empty."


def test_format_top_down():
    stack = Stack()
    stack.push("A")
    stack.push("B")
    assert stack.format_top_down() == (
        "Stack Contents (Top to Bottom, Size: 2):\n[1] B\n[0] A"
    )


def test_format_chronological():
    stack = Stack()
    stack.push("A")
    stack.push("B")
    assert stack.format_chronological() == (
        "Stack Contents (Bottom to Top, Chronological, Size: 2):\n[0] A -> [1] B"
    )