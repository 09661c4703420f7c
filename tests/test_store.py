"""
Unit tests for the in-memory record store.
"""

import threading

from catalog_api.app.core.store import RecordStore, Stores, init_stores


class TestRecordStoreIds:
    """Id assignment."""

    def test_empty_store_starts_at_one(self):
        store = RecordStore("things")
        assert store.insert({"name": "a"})["id"] == 1
        assert store.insert({"name": "b"})["id"] == 2

    def test_seeded_store_continues_after_last_id(self, product_store):
        assert product_store.count() == 8
        assert product_store.insert({"name": "Tablet", "price": 10.0})["id"] == 9

    def test_deleted_max_id_is_not_reused(self, product_store):
        assert product_store.delete(8) is not None
        assert product_store.insert({"name": "Tablet", "price": 10.0})["id"] == 9

    def test_supplied_id_is_ignored(self):
        store = RecordStore("things")
        assert store.insert({"id": 42, "name": "a"})["id"] == 1

    def test_concurrent_inserts_get_unique_ids(self):
        store = RecordStore("things")

        def worker():
            for _ in range(200):
                store.insert({"name": "x"})

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ids = [r["id"] for r in store.all()]
        assert len(ids) == 1600
        assert len(set(ids)) == 1600


class TestRecordStoreAccess:
    """Reads, updates and deletes."""

    def test_all_preserves_insertion_order(self, user_store):
        assert [u["name"] for u in user_store.all()] == [
            "Juan Pérez",
            "María González",
            "Carlos López",
        ]

    def test_get_returns_copy(self, user_store):
        user = user_store.get(1)
        user["name"] = "changed"
        assert user_store.get(1)["name"] == "Juan Pérez"

    def test_get_unknown_returns_none(self, user_store):
        assert user_store.get(999) is None

    def test_find(self, user_store):
        found = user_store.find(lambda u: u["email"] == "maria@example.com")
        assert found["id"] == 2
        assert user_store.find(lambda u: u["age"] > 100) is None

    def test_update_merges_fields(self, user_store):
        updated = user_store.update(1, {"age": 31, "id": 77})
        assert updated == {"id": 1, "name": "Juan Pérez", "email": "juan@example.com", "age": 31}

    def test_update_unknown_returns_none(self, user_store):
        assert user_store.update(999, {"age": 1}) is None
        assert user_store.count() == 3

    def test_delete(self, user_store):
        removed = user_store.delete(2)
        assert removed["email"] == "maria@example.com"
        assert len(user_store) == 2
        assert user_store.delete(2) is None
        assert len(user_store) == 2

    def test_transaction_allows_nested_calls(self, user_store):
        with user_store.transaction() as store:
            if store.find(lambda u: u["email"] == "new@example.com") is None:
                store.insert({"name": "New", "email": "new@example.com", "age": 1})
        assert user_store.count() == 4


class TestInitStores:
    def test_seeded(self):
        stores = init_stores(seed=True)
        assert stores.products.count() == 8
        assert stores.users.count() == 3

    def test_unseeded(self):
        stores = init_stores(seed=False)
        assert isinstance(stores, Stores)
        assert stores.products.count() == 0
        assert stores.users.count() == 0

    def test_each_call_is_independent(self):
        first, second = init_stores(), init_stores()
        first.users.delete(1)
        assert second.users.get(1) is not None
