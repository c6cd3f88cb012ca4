"""Tests for SelectionStore."""

import pytest

from selectable.core.store import SelectionStore


@pytest.fixture
def store(listing, recorder):
    s = SelectionStore(listing)
    s.on_change(recorder)
    return s


class TestQueries:
    def test_selectable_items_in_order(self, store, names):
        assert names(store.selectable_items()) == ["a", "b", "c", "d"]

    def test_eligible_skips_hidden(self, store, items, names):
        items["b"].visible = False
        assert names(store.eligible_items()) == ["a", "c", "d"]

    def test_selected_in_container_order(self, store, items, names):
        store.select(items["d"], silent=True)
        store.select(items["a"], silent=True)
        assert names(store.selected_items()) == ["a", "d"]
        assert len(store) == 2


class TestSelectDeselect:
    def test_select_marks_host(self, store, items, recorder):
        assert store.select(items["a"]) is True
        assert "selected" in items["a"].classes
        assert recorder.last == (["a"], ["a"], [])

    def test_select_idempotent(self, store, items, recorder):
        store.select(items["a"])
        assert store.select(items["a"]) is False
        assert recorder.last == (["a"], [], [])

    def test_deselect(self, store, items, recorder):
        store.select(items["a"])
        assert store.deselect(items["a"]) is True
        assert "selected" not in items["a"].classes
        assert recorder.last == ([], [], ["a"])

    def test_silent_does_not_notify(self, store, items, recorder):
        store.select(items["a"], silent=True)
        store.deselect(items["a"], silent=True)
        assert len(recorder) == 0


class TestSelectAllAndClear:
    def test_select_all_visible_only(self, store, items, recorder, names):
        items["c"].visible = False
        store.select(items["a"], silent=True)
        changed = store.select_all("evt")
        assert names(changed) == ["b", "d"]
        assert not store.is_selected(items["c"])
        event, selection, selected, deselected = recorder.calls[-1]
        assert event == "evt"
        assert names(selection) == ["a", "b", "d"]
        assert names(selected) == ["b", "d"]
        assert deselected == []

    def test_clear_reports_changed(self, store, items, recorder, names):
        store.select(items["b"], silent=True)
        store.select(items["c"], silent=True)
        changed = store.clear()
        assert names(changed) == ["b", "c"]
        assert recorder.last == ([], [], ["b", "c"])

    def test_clear_silent(self, store, items, recorder):
        store.select(items["b"], silent=True)
        store.clear(silent=True)
        assert store.selected_items() == []
        assert len(recorder) == 0


class TestTransaction:
    def test_single_net_notification(self, store, items, recorder):
        store.select(items["a"], silent=True)
        with store.transaction("evt"):
            store.clear(silent=True)
            store.select(items["c"])
            store.select(items["d"])
        assert len(recorder) == 1
        assert recorder.last == (["c", "d"], ["c", "d"], ["a"])

    def test_notifies_even_without_change(self, store, recorder):
        with store.transaction():
            pass
        assert recorder.last == ([], [], [])

    def test_exception_suppresses_notification(self, store, items, recorder):
        with pytest.raises(RuntimeError):
            with store.transaction():
                store.select(items["a"])
                raise RuntimeError("boom")
        assert len(recorder) == 0
        # Later mutations notify again
        store.select(items["b"])
        assert len(recorder) == 1


class TestStaleItems:
    def test_removed_item_is_ignored(self, store, listing, items):
        store.select(items["b"], silent=True)
        listing.node.remove(items["b"])
        assert store.selected_items() == []
        assert store.clear() == []

    def test_prune(self, store, listing, items):
        store.select(items["b"], silent=True)
        store.select(items["c"], silent=True)
        listing.node.remove(items["b"])
        assert store.prune() == [items["b"]]
        assert not store.is_selected(items["b"])
        assert store.is_selected(items["c"])
