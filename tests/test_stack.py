import pytest

from adtlab.stack import Stack, StackEmptyError


def test_lifo_order():
    s = Stack()
    for item in ("a", "b", "c"):
        s.push(item)
    assert [s.pop(), s.pop(), s.pop()] == ["c", "b", "a"]
    assert not s


def test_top_does_not_remove():
    s = Stack()
    s.push(1)
    s.push(2)
    assert s.top() == 2
    assert len(s) == 2


def test_pop_empty_raises():
    with pytest.raises(StackEmptyError):
        Stack().pop()


def test_top_empty_raises():
    with pytest.raises(StackEmptyError):
        Stack().top()


def test_push_none_rejected():
    s = Stack()
    with pytest.raises(ValueError):
        s.push(None)
    assert not s


def test_len_and_bool():
    s = Stack()
    assert len(s) == 0
    assert not s
    s.push("x")
    assert len(s) == 1
    assert s


def test_grows_beyond_initial_capacity():
    s = Stack()
    for i in range(1000):
        s.push(i)
    assert len(s) == 1000
    assert [s.pop() for _ in range(1000)] == list(range(999, -1, -1))


def test_iter_top_to_bottom():
    s = Stack()
    for item in (1, 2, 3):
        s.push(item)
    assert list(s) == [3, 2, 1]
    assert len(s) == 3


def test_format_top_first():
    s = Stack()
    for item in ("x", "y"):
        s.push(item)
    assert s.format(str) == "y\nx\n"


def test_format_empty():
    assert Stack().format(str) == ""