"""
Unit tests for the in‑memory stores.
"""

from concurrent.futures import ThreadPoolExecutor

from products_api.app.core.store import AppendLog, Product, ProductStore


class TestProductStore:
    def test_starts_empty(self):
        store = ProductStore()
        assert len(store) == 0
        assert store.next_id == 1
        assert store.list() == []

    def test_create_assigns_increasing_ids(self):
        store = ProductStore()
        assert store.create("A", 1) == Product(id=1, name="A", price=1)
        assert store.create("B", 2).id == 2
        assert store.next_id == 3

    def test_keys_match_record_ids(self):
        store = ProductStore()
        for i in range(5):
            store.create(f"P{i}", i)
        store.delete(2)
        store.replace(4, "Four", 4)
        for product in store.list():
            assert store.get(product.id) == product

    def test_replace_unknown_id_leaves_store_untouched(self):
        store = ProductStore()
        store.create("A", 1)
        assert store.replace(5, "X", 9) is None
        assert store.list() == [Product(id=1, name="A", price=1)]
        assert store.next_id == 2

    def test_delete_does_not_rewind_counter(self):
        store = ProductStore()
        store.create("A", 1)
        store.create("B", 2)
        assert store.delete(2) is True
        assert store.delete(2) is False
        assert store.create("C", 3).id == 3

    def test_concurrent_creates_get_distinct_ids(self):
        store = ProductStore()
        workers = 50

        with ThreadPoolExecutor(max_workers=8) as pool:
            products = list(pool.map(lambda i: store.create(f"P{i}", i), range(workers)))

        ids = sorted(p.id for p in products)
        assert ids == list(range(1, workers + 1))
        assert len(store) == workers
        assert store.next_id == workers + 1


class TestAppendLog:
    def test_keeps_insertion_order(self):
        log = AppendLog()
        for entry in ("a", "b", "c"):
            log.append(entry)
        assert log.entries() == ["a", "b", "c"]
        assert len(log) == 3

    def test_entries_returns_a_copy(self):
        log = AppendLog()
        log.append(1)
        log.entries().append(2)
        assert log.entries() == [1]
