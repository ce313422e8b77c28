import unittest
from datetime import date
from unittest.mock import AsyncMock, patch

from db.gateway import InMemoryGateway
from exceptions.exceptions import ErrorAuthorNotFound, ErrorAuthorUpdate
from models.author import Author, AuthorCandidate
from services.service_authors import AuthorService


class TestBaseAuthorService(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.gateway = InMemoryGateway(
            {
                "authors": [
                    {"id": "a1", "first_name": "Leo", "family_name": "Tolstoy",
                     "date_of_birth": date(1828, 9, 9), "date_of_death": date(1910, 11, 20)},
                    {"id": "a2", "first_name": "Anton", "family_name": "Chekhov"},
                ],
                "books": [
                    {"id": "b1", "title": "War and Peace", "summary": "Long", "isbn": "1",
                     "author": "a1", "genre": []},
                ],
            }
        )
        self.service = AuthorService(self.gateway)


class TestReadAuthorService(TestBaseAuthorService):
    async def test_authors_sorted_by_family_name(self):
        authors = await self.service.read_all_authors()

        self.assertEqual([author.family_name for author in authors], ["Chekhov", "Tolstoy"])

    async def test_author_detail_with_books(self):
        author, books = await self.service.read_author_detail("a1")

        self.assertEqual(author.name, "Tolstoy, Leo")
        self.assertEqual(author.url, "/catalog/author/a1")
        self.assertEqual(author.lifespan, "Sep 09, 1828 - Nov 20, 1910")
        self.assertEqual([book.title for book in books], ["War and Peace"])

    async def test_author_detail_not_found(self):
        with self.assertRaises(ErrorAuthorNotFound) as context:
            await self.service.read_author_detail("missing")

        self.assertEqual(context.exception.status_code, 404)
        self.assertEqual(context.exception.detail, "Author not found")

    async def test_read_author_not_found(self):
        with self.assertRaises(ErrorAuthorNotFound):
            await self.service.read_author("missing")


class TestWriteAuthorService(TestBaseAuthorService):
    async def test_create_author_round_trip(self):
        created = await self.service.create_author(AuthorCandidate(first_name="Jane", family_name="Doe"))

        author, books = await self.service.read_author_detail(created.id)

        self.assertEqual(author.first_name, "Jane")
        self.assertEqual(author.family_name, "Doe")
        self.assertIsNone(author.date_of_birth)
        self.assertIsNone(author.date_of_death)
        self.assertEqual(books, [])

    async def test_update_author_keeps_id(self):
        updated = await self.service.update_author("a2", AuthorCandidate(id="a2", first_name="A", family_name="Chekhov"))

        self.assertEqual(updated, Author(id="a2", first_name="A", family_name="Chekhov"))

    async def test_update_author_failure(self):
        patcher = patch.object(self.service.authors, "update_author_by_id", new=AsyncMock(side_effect=Exception("boom")))
        self.addCleanup(patcher.stop)
        patcher.start()

        with self.assertRaises(ErrorAuthorUpdate) as context:
            await self.service.update_author("a2", AuthorCandidate(first_name="A", family_name="B"))

        self.assertIn("Failed update author with details", context.exception.detail)


class TestDeleteAuthorService(TestBaseAuthorService):
    async def test_author_with_books_is_kept(self):
        author, books, deleted = await self.service.delete_author("a1")

        self.assertFalse(deleted)
        self.assertEqual(author.id, "a1")
        self.assertEqual(len(books), 1)
        self.assertIsNotNone(await self.gateway.find_by_id("authors", "a1"))

    async def test_author_without_books_is_removed(self):
        author, books, deleted = await self.service.delete_author("a2")

        self.assertTrue(deleted)
        self.assertEqual(books, [])
        self.assertIsNone(await self.gateway.find_by_id("authors", "a2"))

    async def test_missing_author(self):
        author, _, deleted = await self.service.delete_author("missing")

        self.assertIsNone(author)
        self.assertFalse(deleted)


if __name__ == "__main__":
    unittest.main()
