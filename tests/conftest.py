from __future__ import annotations

import pytest

from chainlist import Node, construct, set_config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    monkeypatch.delenv("CHAINLIST_TRIM_TRAILING", raising=False)
    monkeypatch.delenv("CHAINLIST_CHECK_CYCLES", raising=False)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def one_two_three():
    return construct(1, construct(2, construct(3)))


@pytest.fixture
def make_cycle():
    """Factory for a chain of ``values`` whose tail links back to index ``loop_to``."""
    def _make(values, loop_to: int):
        head = Node.from_iterable(values)
        nodes = []
        node = head
        while node is not None:
            nodes.append(node)
            node = node.next
        nodes[-1]._next = nodes[loop_to]
        return head, nodes[loop_to]
    return _make
