"""Mutable list handle over a node chain.

``LinkedList`` keeps a head and a tail reference so that push, pop and
append are O(1). Nodes that may be reachable from outside the handle (a
chain passed to ``from_node``, shared through ``copy``, or handed out by
``head``, ``tail``, ``node_at`` and ``insert``) are duplicated before the
first operation that would rewrite one of their links. A node obtained
before such a copy keeps its old chain and is no longer part of the list.
"""
from __future__ import annotations

import logging
from typing import Generic, Iterable, Iterator, Optional, TypeVar

from chainlist.config import ChainConfig
from chainlist.cycle import check_acyclic
from chainlist.exceptions import NodeNotInListError
from chainlist.node import Node, describe, traverse

T = TypeVar("T")

logger = logging.getLogger(__name__)


class LinkedList(Generic[T]):
    """Singly linked list with O(1) push, pop and append."""

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[Node[T]] = None
        self._tail: Optional[Node[T]] = None
        self._size = 0
        self._shared = False
        if values is not None:
            for value in values:
                self.append(value)

    @classmethod
    def from_node(cls, head: Optional[Node[T]]) -> LinkedList[T]:
        """Wrap an existing chain without copying it."""
        check_acyclic(head)
        lst: LinkedList[T] = cls()
        if head is None:
            return lst
        lst._head = head
        lst._tail = head.tail()
        lst._size = len(head)
        lst._shared = True
        return lst

    # -- inspection --

    @property
    def head(self) -> Optional[Node[T]]:
        return self._expose(self._head)

    @property
    def tail(self) -> Optional[Node[T]]:
        return self._expose(self._tail)

    @property
    def is_empty(self) -> bool:
        return self._head is None

    def node_at(self, index: int) -> Optional[Node[T]]:
        """Return the node at ``index``, or None when out of range."""
        return self._expose(self._node_at(index))

    def _node_at(self, index: int) -> Optional[Node[T]]:
        if index < 0:
            return None
        node = self._head
        i = 0
        while node is not None and i < index:
            node = node._next
            i += 1
        return node

    # -- insertion --

    def push(self, value: T) -> None:
        """Insert at the front."""
        self._head = Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def append(self, value: T) -> None:
        """Insert at the back."""
        if self._tail is None:
            self.push(value)
            return
        self._detach()
        node = Node(value)
        self._tail._next = node
        self._tail = node
        self._size += 1

    def insert(self, value: T, after: Node[T]) -> Node[T]:
        """Insert ``value`` right after ``after`` and return the new node."""
        self._require_member(after)
        if after is self._tail:
            self.append(value)
            return self._expose(self._tail)
        anchor = self._detach(after)
        anchor._next = Node(value, anchor._next)
        self._size += 1
        return self._expose(anchor._next)

    # -- removal --

    def pop(self) -> Optional[T]:
        """Remove and return the front value, or None when empty."""
        if self._head is None:
            return None
        value = self._head._value
        self._head = self._head._next
        self._size -= 1
        if self._head is None:
            self._tail = None
        return value

    def remove_last(self) -> Optional[T]:
        """Remove and return the back value, or None when empty."""
        if self._head is None:
            return None
        if self._head is self._tail:
            return self.pop()
        self._detach()
        prev = self._head
        current = prev._next
        while current._next is not None:
            prev = current
            current = current._next
        prev._next = None
        self._tail = prev
        self._size -= 1
        return current._value

    def remove_after(self, node: Node[T]) -> Optional[T]:
        """Remove and return the value following ``node``.

        Returns None when ``node`` is the tail.
        """
        self._require_member(node)
        if node is self._tail:
            return None
        anchor = self._detach(node)
        removed = anchor._next
        if removed is self._tail:
            self._tail = anchor
        anchor._next = removed._next
        self._size -= 1
        return removed._value

    # -- whole-list operations --

    def reverse(self) -> None:
        """Reverse the list in place."""
        if self._head is None or self._head is self._tail:
            return
        self._detach()
        prev: Optional[Node[T]] = None
        current = self._head
        self._tail = current
        while current is not None:
            nxt = current._next
            current._next = prev
            prev = current
            current = nxt
        self._head = prev

    def copy(self) -> LinkedList[T]:
        """Return a handle that shares nodes until either side mutates."""
        other: LinkedList[T] = LinkedList()
        other._head = self._head
        other._tail = self._tail
        other._size = self._size
        if self._head is not None:
            other._shared = self._shared = True
        return other

    def describe(
        self,
        check_cycles: Optional[bool] = None,
        config: Optional[ChainConfig] = None,
    ) -> str:
        return describe(self._head, check_cycles=check_cycles, config=config)

    # -- copy-on-write --

    def _expose(self, node: Optional[Node[T]]) -> Optional[Node[T]]:
        """Hand a node to a caller; later link rewrites copy first."""
        if node is not None:
            self._shared = True
        return node

    def _require_member(self, node: Node[T]) -> None:
        current = self._head
        while current is not None:
            if current is node:
                return
            current = current._next
        raise NodeNotInListError(f"node with value {node.value!r} is not in this list")

    def _detach(self, anchor: Optional[Node[T]] = None) -> Optional[Node[T]]:
        """Give this handle private nodes; return the copy of ``anchor``."""
        if not self._shared:
            return anchor
        mapped = None
        head = tail = None
        node = self._head
        while node is not None:
            dup = Node(node._value)
            if tail is None:
                head = dup
            else:
                tail._next = dup
            tail = dup
            if node is anchor:
                mapped = dup
            node = node._next
        self._head, self._tail = head, tail
        self._shared = False
        logger.debug("detached %d shared nodes before mutation", self._size)
        return mapped

    # -- collection protocol --

    def __iter__(self) -> Iterator[T]:
        return traverse(self._head, check_cycles=False)

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> T:
        if not isinstance(index, int):
            raise TypeError(f"linked list indices must be integers, not {type(index).__name__}")
        if index < 0:
            index += self._size
        node = self._node_at(index)
        if node is None:
            raise IndexError("linked list index out of range")
        return node.value

    def __contains__(self, value: object) -> bool:
        return any(v == value for v in self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"
