import pytest

from cfoundry import trycontext
from cfoundry.trycontext import ContextStack


def test_push_starts_without_exception():
    stack = ContextStack()
    stack.push()
    assert stack.pop() == 0


def test_top_records_throw():
    stack = ContextStack()
    pushed = stack.push()
    context = stack.top(5, "a.c", 10)
    assert context is pushed
    assert (context.exception, context.file, context.line) == (5, "a.c", 10)
    assert stack.pop() == 5
    assert len(stack) == 0


def test_nested_contexts_are_lifo():
    stack = ContextStack()
    stack.push()
    stack.top(1, "outer.c", 1)
    stack.push()
    stack.top(2, "inner.c", 2)
    assert stack.pop() == 2
    assert stack.pop() == 1


def test_top_without_push_raises():
    with pytest.raises(RuntimeError):
        ContextStack().top(1, "x.c", 1)


def test_pop_without_push_raises():
    with pytest.raises(RuntimeError):
        ContextStack().pop()


def test_module_level_stack():
    trycontext.push()
    trycontext.top(7, "m.c", 3)
    assert trycontext.pop() == 7