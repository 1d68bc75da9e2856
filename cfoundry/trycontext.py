"""A stack of try contexts recording which exception was thrown and where."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class Context:
    """One try block: the exception number thrown in it and its location."""

    exception: int = 0
    file: Optional[str] = None
    line: int = 0


class ContextStack:
    """Nested try contexts, innermost last."""

    def __init__(self) -> None:
        self._contexts: List[Context] = []

    def __len__(self) -> int:
        return len(self._contexts)

    def push(self) -> Context:
        """Open a new innermost context."""
        context = Context()
        self._contexts.append(context)
        return context

    def top(self, exception: int, file: Optional[str], line: int) -> Context:
        """Record a throw in the innermost context and return it."""
        if not self._contexts:
            raise RuntimeError("throw without an enclosing try")
        context = self._contexts[-1]
        context.exception = exception
        context.file = file
        context.line = line
        return context

    def pop(self) -> int:
        """Close the innermost context and return its exception number."""
        if not self._contexts:
            raise RuntimeError("catch without an enclosing try")
        return self._contexts.pop().exception


_default = ContextStack()


def push() -> Context:
    """Open a context on the shared stack."""
    return _default.push()


def top(exception: int, file: Optional[str], line: int) -> Context:
    """Record a throw on the shared stack."""
    return _default.top(exception, file, line)


def pop() -> int:
    """Close a context on the shared stack and return its exception number."""
    return _default.pop()