"""Immutable singly linked nodes.

A chain is represented by its head node; ``None`` is the empty chain.
Successor links are fixed at construction, so prepending with
``construct(value, head)`` shares the old chain without touching it.
"""
from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

from chainlist.config import ChainConfig, get_config
from chainlist.cycle import check_acyclic

T = TypeVar("T")


class Node(Generic[T]):
    """One element of a chain: a value and the node after it."""

    __slots__ = ("_value", "_next")

    def __init__(self, value: T, next: Optional[Node[T]] = None) -> None:
        self._value = value
        self._next = next

    @property
    def value(self) -> T:
        return self._value

    @property
    def next(self) -> Optional[Node[T]]:
        return self._next

    @property
    def is_tail(self) -> bool:
        return self._next is None

    @classmethod
    def from_iterable(cls, values: Iterable[T]) -> Optional[Node[T]]:
        """Build a chain holding ``values`` in order. Empty input gives None."""
        head: Optional[Node[T]] = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def tail(self) -> Node[T]:
        node = self
        while node._next is not None:
            node = node._next
        return node

    def __iter__(self) -> Iterator[T]:
        return traverse(self)

    def __len__(self) -> int:
        return sum(1 for _ in traverse(self))

    def __str__(self) -> str:
        return describe(self)

    def __repr__(self) -> str:
        return f"Node({list(traverse(self))!r})"


def construct(value: T, next: Optional[Node[T]] = None) -> Node[T]:
    """Build a single node. Without ``next`` it is a standalone tail."""
    return Node(value, next)


def _resolve(config: Optional[ChainConfig]) -> ChainConfig:
    return config if config is not None else get_config()


def traverse(
    head: Optional[Node[T]],
    check_cycles: Optional[bool] = None,
    config: Optional[ChainConfig] = None,
) -> Iterator[T]:
    """Yield values from ``head`` to the tail.

    Each call returns a fresh generator, so a chain can be walked any number
    of times. With cycle checks on, a looping chain raises CycleError before
    the first value is produced.
    """
    if check_cycles is None:
        check_cycles = _resolve(config).check_cycles
    if check_cycles:
        check_acyclic(head)
    node = head
    while node is not None:
        yield node._value
        node = node._next


def describe(
    head: Optional[Node[T]],
    check_cycles: Optional[bool] = None,
    config: Optional[ChainConfig] = None,
) -> str:
    """Render a chain as ``1 -> 2 -> 3 ``.

    A single node renders as its bare value and the empty chain as ``""``.
    Longer chains end with one trailing space unless ``trim_trailing`` is set.
    """
    cfg = _resolve(config)
    parts = [str(v) for v in traverse(head, check_cycles=check_cycles, config=cfg)]
    text = cfg.render.separator.join(parts)
    if len(parts) > 1 and not cfg.render.trim_trailing:
        text += " "
    return text
