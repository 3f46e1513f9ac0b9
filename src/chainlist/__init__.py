"""chainlist: singly linked lists.

- ``Node`` / ``construct``: immutable chain nodes with O(1) prepend
- ``traverse`` / ``describe``: lazy iteration and ``1 -> 2 -> 3 `` rendering
- ``LinkedList``: mutable handle with push/append/insert/pop/remove/reverse
- cycle checks and the classic chain exercises
"""
from chainlist.config import ChainConfig, RenderConfig, get_config, set_config
from chainlist.exceptions import ChainListError, ConfigError, CycleError, NodeNotInListError
from chainlist.node import Node, construct, describe, traverse
from chainlist.cycle import check_acyclic, cycle_start, has_cycle
from chainlist.linked_list import LinkedList
from chainlist.algorithms import merge_sorted, middle, remove_all, reverse, reversed_values

__all__ = [
    "ChainConfig", "RenderConfig", "get_config", "set_config",
    "ChainListError", "ConfigError", "CycleError", "NodeNotInListError",
    "Node", "construct", "describe", "traverse",
    "check_acyclic", "cycle_start", "has_cycle",
    "LinkedList",
    "merge_sorted", "middle", "remove_all", "reverse", "reversed_values",
]
