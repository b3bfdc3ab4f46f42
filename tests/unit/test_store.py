"""Unit tests for the in-memory PriceStore."""

from __future__ import annotations

import threading

import pytest

from budgetapi.exceptions import ItemNotFoundError
from budgetapi.models import PriceItem
from budgetapi.store import PriceStore, default_items


def names(store: PriceStore) -> list[str]:
    return [item.name for item in store.list()]


class TestSeed:
    def test_default_items(self):
        assert [item.model_dump() for item in default_items()] == [
            {"name": "apple", "price": 50},
            {"name": "orange", "price": 90},
            {"name": "banana", "price": 25},
        ]

    def test_seeded_store(self, store):
        assert names(store) == ["apple", "orange", "banana"]
        assert len(store) == 3

    def test_empty_store(self):
        assert PriceStore().list() == []


class TestList:
    def test_returns_copies(self, store):
        """Mutating a listed item does not reach the store."""
        listed = store.list()
        listed[0].price = 1
        listed.clear()

        assert store.find_by_name("apple").price == 50
        assert len(store) == 3


class TestAppend:
    def test_appends_at_end_with_rounded_price(self, store):
        stored = store.append(PriceItem(name="kiwi", price=33.336))

        assert stored.model_dump() == {"name": "kiwi", "price": 33.34}
        assert names(store)[-1] == "kiwi"
        assert store.find_by_name("kiwi").price == 33.34

    def test_duplicate_names_allowed(self, store):
        store.append(PriceItem(name="apple", price=1))
        assert names(store) == ["apple", "orange", "banana", "apple"]


class TestFind:
    def test_find_index(self, store):
        assert store.find_index("orange") == 1
        assert store.find_index("mango") is None

    def test_match_is_exact_and_case_sensitive(self, store):
        assert store.find_by_name("Apple") is None
        assert store.find_by_name("apple ") is None

    def test_first_match_wins(self, store):
        store.append(PriceItem(name="apple", price=1))
        assert store.find_by_name("apple").price == 50
        assert store.find_index("apple") == 0


class TestUpdatePrice:
    def test_updates_only_price(self, store):
        store.append(PriceItem.model_validate({"name": "kiwi", "price": 1, "origin": "NZ"}))

        updated = store.update_price("kiwi", 2.499)

        assert updated.model_dump() == {"name": "kiwi", "price": 2.5, "origin": "NZ"}
        assert store.find_by_name("kiwi").price == 2.5

    def test_updates_first_duplicate_only(self, store):
        store.append(PriceItem(name="apple", price=1))
        store.update_price("apple", 7)

        assert [item.price for item in store.list() if item.name == "apple"] == [7, 1]

    def test_missing_name_raises(self, store):
        with pytest.raises(ItemNotFoundError):
            store.update_price("mango", 10)
        assert [item.price for item in store.list()] == [50, 90, 25]


class TestReplace:
    def test_replaces_whole_record(self, store):
        store.append(PriceItem.model_validate({"name": "kiwi", "price": 1, "origin": "NZ"}))

        replaced = store.replace("kiwi", PriceItem(name="kiwi", price=3.336))

        assert replaced.model_dump() == {"name": "kiwi", "price": 3.34}
        assert store.find_by_name("kiwi").model_dump() == {"name": "kiwi", "price": 3.34}

    def test_replace_can_rename_in_place(self, store):
        store.replace("orange", PriceItem(name="mandarin", price=70))
        assert names(store) == ["apple", "mandarin", "banana"]

    def test_missing_name_raises(self, store):
        with pytest.raises(ItemNotFoundError):
            store.replace("mango", PriceItem(name="mango", price=1))
        assert names(store) == ["apple", "orange", "banana"]


class TestRemove:
    def test_removes_item(self, store):
        store.remove("banana")
        assert names(store) == ["apple", "orange"]

    def test_removes_only_first_duplicate(self, store):
        store.append(PriceItem(name="apple", price=1))
        store.remove("apple")

        assert names(store) == ["orange", "banana", "apple"]
        assert store.find_by_name("apple").price == 1

    def test_missing_name_raises(self, store):
        with pytest.raises(ItemNotFoundError) as exc_info:
            store.remove("mango")

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Item not found"
        assert len(store) == 3


class TestConcurrency:
    def test_concurrent_appends_are_not_lost(self):
        store = PriceStore()

        def worker(prefix: str):
            for i in range(200):
                store.append(PriceItem(name=f"{prefix}-{i}", price=i))

        threads = [threading.Thread(target=worker, args=(f"t{n}",)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(store) == 8 * 200
