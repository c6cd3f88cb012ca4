"""Tests for ItemOrder and range resolution."""

import pytest

from selectable.core.item_order import ItemOrder, resolve_range


class TestItemOrderCreation:
    def test_from_items_list(self):
        order = ItemOrder.from_items(["a", "b", "c"])
        assert order.size == 3
        assert list(order.items) == ["a", "b", "c"]

    def test_from_generator(self):
        order = ItemOrder.from_items(x for x in "xyz")
        assert order.size == 3

    def test_empty_allowed(self):
        order = ItemOrder.from_items([])
        assert order.size == 0
        assert order.resolve_range("a", "b") == []

    def test_duplicates_raise(self):
        with pytest.raises(ValueError, match="unique"):
            ItemOrder.from_items(["a", "b", "a"])


class TestItemOrderIndex:
    def test_index_of_existing(self):
        order = ItemOrder.from_items(["a", "b", "c"])
        assert order.index_of("a") == 0
        assert order.index_of("c") == 2

    def test_index_of_missing(self):
        order = ItemOrder.from_items(["a", "b", "c"])
        assert order.index_of("z") is None
        assert order.index_of(None) is None

    def test_contains(self):
        order = ItemOrder.from_items(["a", "b"])
        assert "a" in order
        assert "z" not in order


class TestResolveRange:
    def test_forward_excludes_endpoints(self):
        order = ItemOrder.from_items(["a", "b", "c", "d", "e"])
        assert order.resolve_range("a", "d") == ["b", "c"]

    def test_backward_is_symmetric(self):
        order = ItemOrder.from_items(["a", "b", "c", "d", "e"])
        assert order.resolve_range("d", "a") == ["b", "c"]

    def test_adjacent_is_empty(self):
        order = ItemOrder.from_items(["a", "b", "c"])
        assert order.resolve_range("a", "b") == []
        assert order.resolve_range("b", "a") == []

    def test_same_item_is_empty(self):
        order = ItemOrder.from_items(["a", "b", "c"])
        assert order.resolve_range("b", "b") == []

    def test_missing_anchor_is_empty(self):
        order = ItemOrder.from_items(["a", "b", "c"])
        assert order.resolve_range(None, "c") == []
        assert order.resolve_range("gone", "c") == []

    def test_missing_target_is_empty(self):
        order = ItemOrder.from_items(["a", "b", "c"])
        assert order.resolve_range("a", "hidden") == []

    def test_function_form(self):
        assert resolve_range(["a", "b", "c", "d"], "d", "a") == ["b", "c"]
