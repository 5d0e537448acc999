"""
Item Service — ItemStore Unit Tests
=====================================

What:  Tests for identity, ordering, validation and locking in ItemStore.
How:   Exercises the store directly, without HTTP.

What we test:
    ✅ Ids are distinct and never reused after delete
    ✅ List returns creation order; update keeps position; delete keeps the rest
    ✅ Missing ids raise NotFoundError for get/update/delete
    ✅ Empty / non-string names raise InvalidInputError
    ✅ Parallel creates and updates from many threads lose nothing
"""

import itertools
from concurrent.futures import ThreadPoolExecutor

import pytest

from itemservice.exceptions import InternalError, InvalidInputError, NotFoundError
from itemservice.models.item import MAX_ITEM_ID, Item
from itemservice.services.item_store import ItemStore


class TestItemStoreCreate:
    """Tests for create()."""

    def test_create_returns_item_with_name(self, store):
        item = store.create("pen")
        assert isinstance(item, Item)
        assert item.name == "pen"
        assert isinstance(item.id, int)

    def test_create_assigns_distinct_ids(self, store):
        ids = [store.create(f"item-{i}").id for i in range(100)]
        assert len(set(ids)) == 100

    def test_create_ids_are_increasing(self, store):
        ids = [store.create(name).id for name in ("a", "b", "c")]
        assert ids == sorted(ids)

    def test_create_same_name_twice_makes_two_items(self, store):
        first = store.create("pen")
        second = store.create("pen")
        assert first.id != second.id
        assert store.count() == 2

    @pytest.mark.parametrize("bad_name", ["", None, 42, ["pen"]])
    def test_create_rejects_invalid_name(self, store, bad_name):
        with pytest.raises(InvalidInputError) as exc_info:
            store.create(bad_name)
        assert exc_info.value.field == "name"
        assert store.count() == 0

    def test_create_after_id_space_exhausted_raises_internal(self, store):
        store._ids = itertools.count(MAX_ITEM_ID + 1)
        with pytest.raises(InternalError):
            store.create("overflow")
        assert store.count() == 0


class TestItemStoreRead:
    """Tests for list() and get()."""

    def test_list_empty(self, store):
        assert store.list() == []

    def test_list_returns_creation_order(self, store):
        names = ["pen", "pencil", "eraser", "ruler"]
        for name in names:
            store.create(name)
        assert [item.name for item in store.list()] == names

    def test_list_returns_a_copy(self, store):
        store.create("pen")
        listed = store.list()
        listed.clear()
        assert store.count() == 1

    def test_items_are_immutable(self, store):
        item = store.create("pen")
        with pytest.raises(AttributeError):
            item.name = "marker"
        assert store.get(item.id).name == "pen"

    def test_get_after_create_returns_same_name(self, store):
        created = store.create("pen")
        fetched = store.get(created.id)
        assert fetched == created

    def test_get_missing_raises_not_found(self, store):
        with pytest.raises(NotFoundError) as exc_info:
            store.get(999)
        assert exc_info.value.resource_id == 999
        assert "999" in exc_info.value.message


class TestItemStoreUpdate:
    """Tests for update()."""

    def test_update_changes_name_keeps_id(self, store):
        item = store.create("pen")
        updated = store.update(item.id, "marker")
        assert updated.id == item.id
        assert updated.name == "marker"
        assert store.get(item.id).name == "marker"

    def test_update_keeps_list_position(self, store):
        first = store.create("a")
        store.create("b")
        store.create("c")
        store.update(first.id, "z")
        assert [item.name for item in store.list()] == ["z", "b", "c"]

    def test_update_does_not_alter_earlier_snapshot(self, store):
        item = store.create("pen")
        store.update(item.id, "marker")
        assert item.name == "pen"

    def test_update_missing_raises_not_found(self, store):
        with pytest.raises(NotFoundError):
            store.update(999, "marker")

    def test_update_missing_with_empty_name_is_still_not_found(self, store):
        with pytest.raises(NotFoundError):
            store.update(999, "")

    def test_update_empty_name_rejected(self, store):
        item = store.create("pen")
        with pytest.raises(InvalidInputError):
            store.update(item.id, "")
        assert store.get(item.id).name == "pen"


class TestItemStoreDelete:
    """Tests for delete()."""

    def test_delete_returns_removed_item(self, store):
        item = store.create("pen")
        removed = store.delete(item.id)
        assert removed == item

    def test_delete_then_get_raises_not_found(self, store):
        item = store.create("pen")
        store.delete(item.id)
        with pytest.raises(NotFoundError):
            store.get(item.id)

    def test_delete_shrinks_list_by_one_and_keeps_order(self, store):
        items = [store.create(name) for name in ("a", "b", "c")]
        store.delete(items[1].id)
        assert [item.name for item in store.list()] == ["a", "c"]

    def test_delete_twice_raises_not_found(self, store):
        item = store.create("pen")
        store.delete(item.id)
        with pytest.raises(NotFoundError):
            store.delete(item.id)

    def test_deleted_id_is_not_reused(self, store):
        item = store.create("pen")
        store.delete(item.id)
        assert store.create("pen").id != item.id


class TestItemStoreConcurrency:
    """Parallel access from many threads."""

    def test_parallel_creates_lose_nothing(self):
        store = ItemStore()
        n = 500
        with ThreadPoolExecutor(max_workers=32) as pool:
            created = list(pool.map(lambda i: store.create(f"item-{i}"), range(n)))

        assert len({item.id for item in created}) == n
        listed = store.list()
        assert len(listed) == n
        assert {item.name for item in listed} == {f"item-{i}" for i in range(n)}

    def test_parallel_updates_and_reads_never_see_partial_records(self):
        store = ItemStore()
        item = store.create("name-0")
        valid_names = {f"name-{i}" for i in range(200)}

        def rename(i):
            store.update(item.id, f"name-{i}")

        def read(_):
            return store.get(item.id)

        with ThreadPoolExecutor(max_workers=16) as pool:
            writes = [pool.submit(rename, i) for i in range(200)]
            reads = [pool.submit(read, i) for i in range(200)]
            for future in writes:
                future.result()
            snapshots = [future.result() for future in reads]

        assert all(snap.id == item.id for snap in snapshots)
        assert all(snap.name in valid_names for snap in snapshots)
        assert store.count() == 1
