"""Tests for the in-memory EntityStore table."""

from models.author import Author
from models.entity_store import EntityStore


def make(store, *ids):
    for record_id in ids:
        store.insert(Author(id=record_id, name=f"author {record_id}"))


class TestNextId:
    def test_empty_store_starts_at_one(self):
        assert EntityStore().next_id() == 1

    def test_max_plus_one(self):
        store = EntityStore()
        make(store, 3, 1, 7)
        assert store.next_id() == 8

    def test_deleting_the_max_frees_its_id(self):
        store = EntityStore()
        make(store, 1, 2)
        store.remove(2)
        assert store.next_id() == 2

    def test_deleting_a_lower_id_does_not_reuse_it(self):
        store = EntityStore()
        make(store, 1, 2, 3)
        store.remove(2)
        assert store.next_id() == 4


class TestLookups:
    def test_find_by_id(self):
        store = EntityStore()
        make(store, 1, 2)
        assert store.find_by_id(2).name == "author 2"
        assert store.find_by_id(9) is None

    def test_remove_returns_record(self):
        store = EntityStore()
        make(store, 1, 2)
        removed = store.remove(1)
        assert removed.id == 1
        assert [r.id for r in store.all()] == [2]

    def test_remove_missing_returns_none(self):
        store = EntityStore()
        make(store, 1)
        assert store.remove(5) is None
        assert len(store) == 1

    def test_all_keeps_insertion_order(self):
        store = EntityStore()
        make(store, 5, 2, 9)
        assert [r.id for r in store.all()] == [5, 2, 9]

    def test_all_returns_a_copy(self):
        store = EntityStore()
        make(store, 1)
        rows = store.all()
        rows.clear()
        assert len(store) == 1

    def test_records_are_shared_objects(self):
        store = EntityStore()
        make(store, 1)
        store.all()[0].name = "renamed"
        assert store.find_by_id(1).name == "renamed"
