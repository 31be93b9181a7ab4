"""Tests for InMemoryBookDAO — same contract as BookDAO, no database."""

import asyncio
import inspect

import pytest

from bookshelf.dao.book_dao import BookDAO
from bookshelf.dao.memory_book_dao import InMemoryBookDAO
from bookshelf.models.book import Book


def _book(title: str = "Dune", **overrides) -> Book:
    defaults = {"title": title, "year": 1965, "number_of_pages": 412}
    defaults.update(overrides)
    return Book(**defaults)


@pytest.fixture
def dao():
    return InMemoryBookDAO()


class TestSeed:
    async def test_seed_books_get_sequential_ids(self):
        dao = InMemoryBookDAO([_book("A", id=50), _book("B")])
        books = await dao.list_all(None)
        assert [(b.id, b.title) for b in books] == [(1, "A"), (2, "B")]


class TestReads:
    async def test_empty(self, dao):
        assert await dao.list_all(None) == []

    async def test_find_missing(self, dao):
        assert await dao.find_by_id(None, 1) is None

    async def test_returned_records_are_copies(self, dao):
        new_id = await dao.insert(None, _book())
        fetched = await dao.find_by_id(None, new_id)
        fetched.title = "mutated"
        assert (await dao.find_by_id(None, new_id)).title == "Dune"

    async def test_stored_record_is_a_copy_of_input(self, dao):
        book = _book()
        new_id = await dao.insert(None, book)
        book.title = "mutated"
        assert (await dao.find_by_id(None, new_id)).title == "Dune"
        assert book.id is None


class TestWrites:
    async def test_insert_ignores_client_id(self, dao):
        assert await dao.insert(None, _book(id=99)) == 1
        assert await dao.find_by_id(None, 99) is None

    async def test_update_keeps_path_id(self, dao):
        new_id = await dao.insert(None, _book())
        assert await dao.update_by_id(None, new_id, _book("X", id=7, year=2000)) == 1
        book = await dao.find_by_id(None, new_id)
        assert (book.id, book.title, book.year) == (new_id, "X", 2000)

    async def test_update_missing(self, dao):
        assert await dao.update_by_id(None, 5, _book()) == 0

    async def test_delete_twice(self, dao):
        new_id = await dao.insert(None, _book())
        assert await dao.delete_by_id(None, new_id) == 1
        assert await dao.delete_by_id(None, new_id) == 0

    async def test_ids_not_reused_after_delete(self, dao):
        first = await dao.insert(None, _book("A"))
        await dao.delete_by_id(None, first)
        assert await dao.insert(None, _book("B")) == first + 1

    async def test_concurrent_inserts_get_unique_ids(self, dao):
        ids = await asyncio.gather(*(dao.insert(None, _book(f"b{i}")) for i in range(20)))
        assert sorted(ids) == list(range(1, 21))


class TestContract:
    @pytest.mark.parametrize(
        "name", ["list_all", "find_by_id", "insert", "update_by_id", "delete_by_id"]
    )
    def test_same_parameters_as_sql_dao(self, name):
        def params(cls):
            return [
                (p.name, p.default is inspect.Parameter.empty)
                for p in inspect.signature(getattr(cls, name)).parameters.values()
            ]

        assert params(InMemoryBookDAO) == params(BookDAO)
