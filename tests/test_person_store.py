# =============================================================================
# tests/test_person_store.py - Person Store Tests
# =============================================================================
# Tests for core/services/person_store.py:
#   - create / get / list / delete / clear
#   - Insertion order and id uniqueness
#   - Concurrent creates from many threads
#
# Run with: pytest tests/test_person_store.py -v
# =============================================================================

from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest

from app.exceptions import NotFoundError, PersonNotFoundError
from core.services import PersonStore


@pytest.fixture
def empty_store():
    return PersonStore()


@pytest.fixture
def filled_store():
    store = PersonStore()
    store.create("Ada Lovelace", date(1815, 12, 10))
    store.create("Alan Turing", date(1912, 6, 23))
    store.create("Grace Hopper", date(1906, 12, 9))
    return store


class TestCreate:
    """Tests for PersonStore.create()."""

    def test_create_assigns_id_and_created_at(self, empty_store):
        person = empty_store.create("Ada Lovelace", date(1815, 12, 10))

        assert person.id
        assert person.name == "Ada Lovelace"
        assert person.birth_date == date(1815, 12, 10)
        assert person.created_at.tzinfo is not None
        assert len(empty_store) == 1

    def test_create_then_get_returns_equal_person(self, empty_store):
        created = empty_store.create("Alan Turing", date(1912, 6, 23))

        assert empty_store.get_by_id(created.id) == created

    def test_ids_are_unique(self, empty_store):
        ids = {empty_store.create(f"p{i}", date(2000, 1, 1)).id for i in range(200)}
        assert len(ids) == 200

    def test_deleted_id_is_not_reused(self, empty_store):
        first = empty_store.create("Ada", date(2000, 1, 1))
        empty_store.delete_by_id(first.id)

        later = [empty_store.create(f"p{i}", date(2000, 1, 1)).id for i in range(50)]
        assert first.id not in later


class TestReadOperations:
    """Tests for list() and get_by_id()."""

    def test_list_preserves_insertion_order(self, filled_store):
        names = [p.name for p in filled_store.list()]
        assert names == ["Ada Lovelace", "Alan Turing", "Grace Hopper"]

    def test_list_is_a_snapshot(self, filled_store):
        snapshot = filled_store.list()
        filled_store.clear()
        assert len(snapshot) == 3

    def test_get_unknown_id_raises(self, filled_store):
        with pytest.raises(PersonNotFoundError) as exc_info:
            filled_store.get_by_id("unknown-id")

        assert isinstance(exc_info.value, NotFoundError)
        assert exc_info.value.person_id == "unknown-id"


class TestDelete:
    """Tests for delete_by_id() and clear()."""

    def test_delete_removes_exactly_that_person(self, filled_store):
        target = filled_store.list()[1]

        removed = filled_store.delete_by_id(target.id)

        assert removed == target
        assert [p.name for p in filled_store.list()] == ["Ada Lovelace", "Grace Hopper"]
        with pytest.raises(PersonNotFoundError):
            filled_store.get_by_id(target.id)

    def test_delete_unknown_id_raises(self, filled_store):
        with pytest.raises(PersonNotFoundError):
            filled_store.delete_by_id("unknown-id")
        assert len(filled_store) == 3

    def test_delete_twice_raises(self, filled_store):
        target = filled_store.list()[0]
        filled_store.delete_by_id(target.id)

        with pytest.raises(PersonNotFoundError):
            filled_store.delete_by_id(target.id)

    def test_clear_returns_previous_size(self, filled_store):
        assert filled_store.clear() == 3
        assert filled_store.list() == []
        assert filled_store.clear() == 0

    def test_count_tracks_creates_and_deletes(self, empty_store):
        people = [empty_store.create(f"p{i}", date(2000, 1, 1)) for i in range(5)]
        empty_store.delete_by_id(people[0].id)
        empty_store.delete_by_id(people[3].id)

        assert empty_store.count() == 3
        assert len(empty_store.list()) == 3


class TestConcurrency:
    """Concurrent access from many threads."""

    def test_concurrent_creates_get_distinct_ids(self, empty_store):
        def create(i: int):
            return empty_store.create(f"person-{i}", date(2000, 1, 1)).id

        with ThreadPoolExecutor(max_workers=16) as pool:
            ids = list(pool.map(create, range(500)))

        assert len(set(ids)) == 500
        assert len(empty_store.list()) == 500

    def test_concurrent_creates_and_deletes(self, empty_store):
        seeded = [empty_store.create(f"seed-{i}", date(2000, 1, 1)) for i in range(100)]

        def delete(person):
            empty_store.delete_by_id(person.id)

        def create(i):
            empty_store.create(f"new-{i}", date(2000, 1, 1))

        with ThreadPoolExecutor(max_workers=16) as pool:
            deletes = [pool.submit(delete, p) for p in seeded]
            creates = [pool.submit(create, i) for i in range(100)]
            for future in deletes + creates:
                future.result()

        assert len(empty_store) == 100
        assert all(p.name.startswith("new-") for p in empty_store.list())
