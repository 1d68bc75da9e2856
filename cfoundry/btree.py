"""An in-memory B-tree mapping non-zero integer keys to values."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, List, Optional, Tuple


@dataclass(eq=False)
class _Node:
    keys: List[int] = field(default_factory=list)
    values: List[Any] = field(default_factory=list)
    children: List["_Node"] = field(default_factory=list)

    @property
    def leaf(self) -> bool:
        return not self.children


class BTree:
    """A B-tree of the given order.

    Every node holds at most ``2 * order`` keys and, except for the root,
    at least ``order`` keys. Keys are non-zero integers and must be unique.
    """

    def __init__(
        self, order: int, destructor: Optional[Callable[[Any], None]] = None
    ) -> None:
        if order < 2:
            raise ValueError("a B-tree needs an order of at least 2")
        self._order = order
        self._maxkeys = order * 2
        self._root: Optional[_Node] = None
        self.destructor = destructor

    @staticmethod
    def _check_key(key: int) -> None:
        if key == 0:
            raise ValueError("key must be non-zero")

    def _insert(
        self, node: _Node, key: int, data: Any
    ) -> Optional[Tuple[int, Any, _Node]]:
        i = bisect_left(node.keys, key)
        if i < len(node.keys) and node.keys[i] == key:
            raise KeyError(key)
        if node.leaf:
            node.keys.insert(i, key)
            node.values.insert(i, data)
        else:
            split = self._insert(node.children[i], key, data)
            if split is None:
                return None
            up_key, up_value, right = split
            node.keys.insert(i, up_key)
            node.values.insert(i, up_value)
            node.children.insert(i + 1, right)

        if len(node.keys) <= self._maxkeys:
            return None

        m = self._order
        right = _Node(node.keys[m + 1:], node.values[m + 1:], node.children[m + 1:])
        up_key, up_value = node.keys[m], node.values[m]
        del node.keys[m:]
        del node.values[m:]
        del node.children[m + 1:]
        return up_key, up_value, right

    def store(self, key: int, data: Any) -> None:
        """Store ``data`` under ``key``; a key already present raises KeyError."""
        self._check_key(key)
        if self._root is None:
            self._root = _Node([key], [data])
            return
        split = self._insert(self._root, key, data)
        if split is not None:
            up_key, up_value, right = split
            self._root = _Node([up_key], [up_value], [self._root, right])

    def _merge(self, parent: _Node, i: int) -> None:
        left, right = parent.children[i], parent.children[i + 1]
        left.keys.append(parent.keys.pop(i))
        left.values.append(parent.values.pop(i))
        left.keys.extend(right.keys)
        left.values.extend(right.values)
        left.children.extend(right.children)
        del parent.children[i + 1]

    def _rebalance(self, parent: _Node, i: int) -> None:
        child = parent.children[i]
        left = parent.children[i - 1] if i > 0 else None
        right = parent.children[i + 1] if i < len(parent.keys) else None

        if right is not None and len(right.keys) > self._order:
            child.keys.append(parent.keys[i])
            child.values.append(parent.values[i])
            parent.keys[i] = right.keys.pop(0)
            parent.values[i] = right.values.pop(0)
            if right.children:
                child.children.append(right.children.pop(0))
        elif left is not None and len(left.keys) > self._order:
            child.keys.insert(0, parent.keys[i - 1])
            child.values.insert(0, parent.values[i - 1])
            parent.keys[i - 1] = left.keys.pop()
            parent.values[i - 1] = left.values.pop()
            if left.children:
                child.children.insert(0, left.children.pop())
        elif right is not None:
            self._merge(parent, i)
        else:
            self._merge(parent, i - 1)

    def _delete(self, node: _Node, key: int) -> Any:
        i = bisect_left(node.keys, key)
        found = i < len(node.keys) and node.keys[i] == key
        if node.leaf:
            if not found:
                raise KeyError(key)
            del node.keys[i]
            return node.values.pop(i)

        if found:
            # Swap with the largest key of the left subtree so that the key
            # to delete ends up in a leaf.
            leaf = node.children[i]
            while not leaf.leaf:
                leaf = leaf.children[-1]
            node.keys[i], leaf.keys[-1] = leaf.keys[-1], node.keys[i]
            node.values[i], leaf.values[-1] = leaf.values[-1], node.values[i]

        value = self._delete(node.children[i], key)
        if len(node.children[i].keys) < self._order:
            self._rebalance(node, i)
        return value

    def delete(self, key: int) -> None:
        """Remove ``key``; a missing key raises KeyError."""
        self._check_key(key)
        if self._root is None:
            raise KeyError(key)
        value = self._delete(self._root, key)
        if not self._root.keys:
            self._root = self._root.children[0] if self._root.children else None
        if self.destructor is not None:
            self.destructor(value)

    def restore(self, key: int) -> Any:
        """Return the value stored under ``key``, or None if absent."""
        self._check_key(key)
        node = self._root
        while node is not None:
            i = bisect_left(node.keys, key)
            if i < len(node.keys) and node.keys[i] == key:
                return node.values[i]
            node = node.children[i] if node.children else None
        return None

    def iterate(self, consumer: Callable[[Any], bool]) -> bool:
        """Pass each value to ``consumer`` until it returns a false value.

        Returns True if every value was consumed.
        """
        return all(consumer(value) for value in self)

    def __iter__(self) -> Iterator[Any]:
        """Yield values node by node: a node's values, then its subtrees."""
        if self._root is None:
            return
        stack = [self._root]
        while stack:
            node = stack.pop()
            yield from node.values
            stack.extend(reversed(node.children))