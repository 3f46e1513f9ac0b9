"""Classic chain exercises.

All functions take a head node and leave the input chain untouched; any
chain they return is built from fresh nodes.
"""
from __future__ import annotations

from typing import Any, Callable, List, Optional, TypeVar

from chainlist.node import Node, traverse

T = TypeVar("T")


def reversed_values(head: Optional[Node[T]]) -> List[T]:
    """Values from tail to head."""
    values = list(traverse(head))
    values.reverse()
    return values


def middle(head: Optional[Node[T]]) -> Optional[Node[T]]:
    """Middle node via the runner technique (second middle for even lengths)."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def reverse(head: Optional[Node[T]]) -> Optional[Node[T]]:
    """New chain holding the values of ``head`` in reverse order."""
    out: Optional[Node[T]] = None
    for value in traverse(head):
        out = Node(value, out)
    return out


def merge_sorted(
    left: Optional[Node[T]],
    right: Optional[Node[T]],
    key: Optional[Callable[[T], Any]] = None,
) -> Optional[Node[T]]:
    """Merge two sorted chains into one sorted chain.

    Stable: on ties the value from ``left`` comes first.
    """
    if key is None:
        key = lambda v: v  # noqa: E731
    merged: List[T] = []
    a, b = left, right
    while a is not None and b is not None:
        if key(b.value) < key(a.value):
            merged.append(b.value)
            b = b.next
        else:
            merged.append(a.value)
            a = a.next
    merged.extend(traverse(a))
    merged.extend(traverse(b))
    return Node.from_iterable(merged)


def remove_all(head: Optional[Node[T]], value: T) -> Optional[Node[T]]:
    """New chain without any occurrence of ``value``."""
    return Node.from_iterable(v for v in traverse(head) if v != value)
