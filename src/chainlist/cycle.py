"""Cycle checks for node chains.

The public construction API cannot close a loop, but a chain whose private
links were rewired by hand can. Floyd's tortoise/hare runs in O(n) time
with O(1) extra memory and never follows a link more than twice per node.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from chainlist.exceptions import CycleError

if TYPE_CHECKING:
    from chainlist.node import Node

logger = logging.getLogger(__name__)


def _meeting_point(head: Optional[Node]) -> Optional[Node]:
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return slow
    return None


def has_cycle(head: Optional[Node]) -> bool:
    """True if following ``next`` from ``head`` never reaches the tail."""
    return _meeting_point(head) is not None


def cycle_start(head: Optional[Node]) -> Optional[Node]:
    """Return the first node of the loop, or None for an acyclic chain."""
    meet = _meeting_point(head)
    if meet is None:
        return None
    a, b = head, meet
    while a is not b:
        a = a.next
        b = b.next
    return a


def check_acyclic(head: Optional[Node]) -> None:
    """Raise CycleError if the chain starting at ``head`` loops."""
    start = cycle_start(head)
    if start is not None:
        logger.warning("cycle detected in chain, loop starts at value %r", start.value)
        raise CycleError(f"chain loops back to node with value {start.value!r}")
