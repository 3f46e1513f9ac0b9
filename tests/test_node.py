"""Tests for node construction, traversal and rendering."""
import pytest

from chainlist import Node, construct, describe, traverse


class TestConstruct:
    def test_standalone_tail(self):
        node = construct(5)
        assert node.value == 5
        assert node.next is None
        assert node.is_tail

    def test_with_successor(self):
        tail = construct(2)
        head = construct(1, tail)
        assert head.next is tail
        assert not head.is_tail

    def test_links_are_read_only(self):
        node = construct(1)
        with pytest.raises(AttributeError):
            node.next = construct(2)

    def test_from_iterable(self):
        head = Node.from_iterable(["a", "b", "c"])
        assert list(head) == ["a", "b", "c"]
        assert head.tail().value == "c"

    def test_from_empty_iterable(self):
        assert Node.from_iterable([]) is None


class TestTraverse:
    @pytest.mark.parametrize("n", [0, 1, 2, 10, 500])
    def test_yields_n_values_in_order(self, n):
        head = Node.from_iterable(range(n))
        assert list(traverse(head)) == list(range(n))

    def test_empty(self):
        assert list(traverse(None)) == []

    def test_restartable(self, one_two_three):
        assert list(one_two_three) == [1, 2, 3]
        assert list(one_two_three) == [1, 2, 3]

    def test_lazy(self, one_two_three):
        it = traverse(one_two_three)
        assert next(it) == 1
        assert next(it) == 2

    def test_len(self, one_two_three):
        assert len(one_two_three) == 3


class TestDescribe:
    def test_single_node(self):
        assert describe(construct(5)) == "5"
        assert str(construct(5)) == "5"

    def test_three_nodes(self, one_two_three):
        assert describe(one_two_three) == "1 -> 2 -> 3 "
        assert str(one_two_three) == "1 -> 2 -> 3 "

    def test_two_nodes(self):
        assert describe(construct("a", construct("b"))) == "a -> b "

    def test_empty(self):
        assert describe(None) == ""

    def test_long_chain_does_not_recurse(self):
        head = Node.from_iterable(range(50_000))
        text = describe(head)
        assert text.startswith("0 -> 1 -> ")
        assert text.endswith("49999 ")

    def test_repr(self, one_two_three):
        assert repr(one_two_three) == "Node([1, 2, 3])"


class TestStructuralSharing:
    def test_prepend_leaves_old_chain_intact(self, one_two_three):
        old_second = one_two_three.next
        new_head = construct(0, one_two_three)
        assert list(new_head) == [0, 1, 2, 3]
        assert list(one_two_three) == [1, 2, 3]
        assert one_two_three.next is old_second

    def test_two_heads_share_a_tail(self):
        shared = construct(9)
        a = construct(1, shared)
        b = construct(2, shared)
        assert describe(a) == "1 -> 9 "
        assert describe(b) == "2 -> 9 "
        assert a.next is b.next
