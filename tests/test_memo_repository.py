"""Tests for InMemoryMemoRepository."""

import threading

from memo_api.app.models import Memo
from memo_api.app.repositories.memo_repository import InMemoryMemoRepository


class TestAdd:
    """Tests for adding memos."""

    def test_first_id_is_one(self, repository: InMemoryMemoRepository):
        memo = repository.add("buy milk")
        assert memo == Memo(id=1, content="buy milk")

    def test_ids_increase_by_one(self, repository: InMemoryMemoRepository):
        ids = [repository.add(f"memo {i}").id for i in range(5)]
        assert ids == [1, 2, 3, 4, 5]

    def test_empty_content_is_accepted(self, repository: InMemoryMemoRepository):
        memo = repository.add("")
        assert memo.content == ""
        assert repository.count() == 1

    def test_concurrent_adds_get_unique_ids(self, repository: InMemoryMemoRepository):
        """Adds from many threads never hand out the same id twice."""
        per_thread = 200
        threads = [
            threading.Thread(target=lambda: [repository.add("x") for _ in range(per_thread)])
            for _ in range(8)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        ids = sorted(memo.id for memo in repository.list())
        assert ids == list(range(1, 8 * per_thread + 1))


class TestList:
    """Tests for listing memos."""

    def test_empty(self, repository: InMemoryMemoRepository):
        assert repository.list() == []

    def test_insertion_order(self, repository: InMemoryMemoRepository):
        repository.add("a")
        repository.add("b")
        repository.add("c")
        assert [memo.content for memo in repository.list()] == ["a", "b", "c"]

    def test_returns_a_copy(self, repository: InMemoryMemoRepository):
        """Changing the returned list does not change the store."""
        repository.add("a")
        snapshot = repository.list()
        snapshot.clear()
        assert repository.count() == 1


class TestFindById:
    """Tests for lookups."""

    def test_found(self, repository: InMemoryMemoRepository):
        repository.add("a")
        second = repository.add("b")
        assert repository.find_by_id(2) is second

    def test_missing(self, repository: InMemoryMemoRepository):
        repository.add("a")
        assert repository.find_by_id(42) is None


class TestUpdateContent:
    """Tests for in-place updates."""

    def test_replaces_content_only(self, repository: InMemoryMemoRepository):
        repository.add("a")
        repository.add("b")
        updated = repository.update_content(1, "z")
        assert updated == Memo(id=1, content="z")
        assert [(m.id, m.content) for m in repository.list()] == [(1, "z"), (2, "b")]

    def test_missing(self, repository: InMemoryMemoRepository):
        repository.add("a")
        assert repository.update_content(2, "z") is None
        assert [(m.id, m.content) for m in repository.list()] == [(1, "a")]


class TestDeleteById:
    """Tests for deletion."""

    def test_removes_one_record(self, repository: InMemoryMemoRepository):
        repository.add("a")
        repository.add("b")
        assert repository.delete_by_id(1) is True
        assert repository.find_by_id(1) is None
        assert [m.id for m in repository.list()] == [2]

    def test_missing(self, repository: InMemoryMemoRepository):
        repository.add("a")
        assert repository.delete_by_id(7) is False
        assert repository.count() == 1

    def test_deleted_id_is_not_reused(self, repository: InMemoryMemoRepository):
        repository.add("a")
        repository.add("b")
        repository.delete_by_id(2)
        assert repository.add("c").id == 3


class TestConcurrentMutation:
    """Adds, updates and deletes racing on one repository."""

    def test_mixed_operations_keep_store_consistent(self, repository: InMemoryMemoRepository):
        seeded = [repository.add("seed").id for _ in range(100)]
        barrier = threading.Barrier(12)
        delete_results = []

        def adder():
            barrier.wait()
            for _ in range(100):
                repository.add("added")

        def updater():
            barrier.wait()
            for memo_id in seeded:
                repository.update_content(memo_id, "updated")

        def deleter(ids):
            barrier.wait()
            for memo_id in ids:
                delete_results.append(repository.delete_by_id(memo_id))

        threads = [threading.Thread(target=adder) for _ in range(4)]
        threads += [threading.Thread(target=updater) for _ in range(4)]
        threads += [threading.Thread(target=deleter, args=(seeded[i::4],)) for i in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert delete_results == [True] * 100
        memos = repository.list()
        ids = [memo.id for memo in memos]
        assert repository.count() == 400
        assert len(set(ids)) == len(ids)
        assert sorted(ids) == list(range(101, 501))
        assert ids == sorted(ids)
        assert all(memo.content == "added" for memo in memos)
