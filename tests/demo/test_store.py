"""Tests for the in-memory todo store."""

import threading

from htmxkit.demo.store import Todo, TodoStore


class TestTodoStore:
    def test_ids_start_at_one(self):
        store = TodoStore()
        assert store.add("a") == Todo(1, "a")
        assert store.add("b") == Todo(2, "b")

    def test_list_is_snapshot(self):
        store = TodoStore()
        store.add("a")
        snapshot = store.list()
        store.add("b")
        assert [todo.text for todo in snapshot] == ["a"]

    def test_remove(self):
        store = TodoStore()
        store.add("a")
        assert store.remove(1) is True
        assert store.remove(1) is False
        assert len(store) == 0

    def test_clear_keeps_counter(self):
        store = TodoStore()
        store.add("a")
        store.add("b")
        assert store.clear() == 2
        assert store.add("c").id == 3

    def test_concurrent_adds_get_unique_ids(self):
        store = TodoStore()

        def worker() -> None:
            for _ in range(100):
                store.add("x")

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ids = [todo.id for todo in store.list()]
        assert len(ids) == 800
        assert sorted(ids) == list(range(1, 801))
