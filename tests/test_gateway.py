import os
import tempfile
import unittest

from db.gateway import DESCENDING, InMemoryGateway
from db.sqlite_gateway import SqliteDictGateway


class GatewayContract:
    """Shared checks run against every gateway implementation."""

    def make_gateway(self):
        raise NotImplementedError

    async def asyncSetUp(self):
        self.gateway = self.make_gateway()
        self.addCleanup(self.gateway.close)
        await self.gateway.save("books", {"id": "b1", "title": "Beta", "summary": "x", "genre": ["g1", "g2"]})
        await self.gateway.save("books", {"id": "b2", "title": "Alpha", "summary": "y", "genre": ["g2"]})

    async def test_save_generates_id(self):
        saved = await self.gateway.save("genres", {"name": "Poetry"})

        self.assertTrue(saved["id"])
        self.assertEqual(await self.gateway.find_by_id("genres", saved["id"]), saved)

    async def test_filter_matches_list_membership(self):
        found = await self.gateway.find_all("books", {"genre": "g1"})

        self.assertEqual([doc["id"] for doc in found], ["b1"])

    async def test_projection_and_sort(self):
        found = await self.gateway.find_all("books", None, ["title"], [("title", DESCENDING)])

        self.assertEqual(found, [{"id": "b1", "title": "Beta"}, {"id": "b2", "title": "Alpha"}])

    async def test_find_one(self):
        self.assertEqual((await self.gateway.find_one("books", {"title": "Alpha"}))["id"], "b2")
        self.assertIsNone(await self.gateway.find_one("books", {"title": "Gamma"}))

    async def test_update_replaces_record(self):
        updated = await self.gateway.update_by_id("books", "b1", {"title": "Beta 2"})

        self.assertEqual(updated, {"id": "b1", "title": "Beta 2"})
        self.assertEqual(await self.gateway.find_by_id("books", "b1"), updated)
        self.assertIsNone(await self.gateway.update_by_id("books", "missing", {"title": "?"}))

    async def test_remove_and_count(self):
        self.assertEqual(await self.gateway.count("books"), 2)

        self.assertIsNotNone(await self.gateway.remove_by_id("books", "b1"))
        self.assertIsNone(await self.gateway.remove_by_id("books", "b1"))
        self.assertEqual(await self.gateway.count("books"), 1)


class TestInMemoryGateway(GatewayContract, unittest.IsolatedAsyncioTestCase):
    def make_gateway(self):
        return InMemoryGateway()


class TestSqliteDictGateway(GatewayContract, unittest.IsolatedAsyncioTestCase):
    def make_gateway(self):
        directory = tempfile.TemporaryDirectory()
        self.addCleanup(directory.cleanup)
        return SqliteDictGateway(os.path.join(directory.name, "catalog.db"))

    async def test_documents_survive_reopening(self):
        filename = self.gateway.filename
        self.gateway.close()

        reopened = SqliteDictGateway(filename)
        self.addCleanup(reopened.close)

        self.assertEqual((await reopened.find_by_id("books", "b2"))["title"], "Alpha")


if __name__ == "__main__":
    unittest.main()
