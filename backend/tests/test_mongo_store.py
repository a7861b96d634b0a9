"""
ArticleHub Backend — MongoDB Store Unit Tests (Mocked)
========================================================

What:  Tests for MongoArticleStore against a mocked collection.
How:   `mock_connection` hands out `mock_collection`; each test checks the
       one driver call issued and how its result is mapped back.

What we test:
    ✅ Each operation issues the expected filter / update document
    ✅ Inserted documents carry a client-generated ObjectId and no description
    ✅ matched_count / deleted_count drive the boolean results
    ✅ Driver errors propagate unchanged
    ❌ Real MongoDB round-trips (integration territory)
"""

from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import AutoReconnect

from articlehub.models.article import Article
from articlehub.services.mongo_store import MongoArticleStore
from articlehub.services.store_base import ArticleStore


class TestMongoStoreReads:

    def setup_method(self):
        self.oid = ObjectId()

    def test_satisfies_store_protocol(self, mock_connection):
        assert isinstance(MongoArticleStore(mock_connection), ArticleStore)

    @pytest.mark.asyncio
    async def test_find_all_maps_documents_in_cursor_order(
        self, mock_connection, mock_collection, make_cursor
    ):
        second = ObjectId()
        mock_collection.find.return_value = make_cursor([
            {"_id": self.oid, "name": "Hello", "content": "Article Content"},
            {"_id": second, "name": "Hello 2", "content": "Article Content"},
        ])

        articles = await MongoArticleStore(mock_connection).find_all()

        mock_collection.find.assert_called_once_with({})
        assert [a.id for a in articles] == [self.oid, second]
        assert articles[1].name == "Hello 2"

    @pytest.mark.asyncio
    async def test_find_all_empty(self, mock_connection):
        assert await MongoArticleStore(mock_connection).find_all() == []

    @pytest.mark.asyncio
    async def test_find_one_found(self, mock_connection, mock_collection):
        mock_collection.find_one.return_value = {"_id": self.oid, "name": "N", "content": "C"}

        article = await MongoArticleStore(mock_connection).find_one(self.oid)

        mock_collection.find_one.assert_awaited_once_with({"_id": self.oid})
        assert article == Article(id=self.oid, name="N", content="C")

    @pytest.mark.asyncio
    async def test_find_one_missing(self, mock_connection, mock_collection):
        mock_collection.find_one.return_value = None
        assert await MongoArticleStore(mock_connection).find_one(self.oid) is None


class TestMongoStoreWrites:

    def setup_method(self):
        self.oid = ObjectId()

    @pytest.mark.asyncio
    async def test_insert_generates_id_and_drops_description(self, mock_connection, mock_collection):
        stored = await MongoArticleStore(mock_connection).insert_one(
            Article(name="Hello", content="Body", description="not persisted")
        )

        assert isinstance(stored.id, ObjectId)
        assert stored.description is None
        mock_collection.insert_one.assert_awaited_once_with(
            {"_id": stored.id, "name": "Hello", "content": "Body"}
        )

    @pytest.mark.asyncio
    async def test_update_sets_only_name_and_content(self, mock_connection, mock_collection):
        mock_collection.update_one.return_value = MagicMock(matched_count=1)

        matched = await MongoArticleStore(mock_connection).update_one(
            self.oid, {"name": "New", "content": "Text", "_id": ObjectId()}
        )

        assert matched is True
        mock_collection.update_one.assert_awaited_once_with(
            {"_id": self.oid},
            {"$set": {"name": "New", "content": "Text"}},
        )

    @pytest.mark.asyncio
    async def test_update_no_match(self, mock_connection, mock_collection):
        mock_collection.update_one.return_value = MagicMock(matched_count=0)
        assert await MongoArticleStore(mock_connection).update_one(self.oid, {"name": "x"}) is False

    @pytest.mark.asyncio
    async def test_delete(self, mock_connection, mock_collection):
        mock_collection.delete_one.return_value = MagicMock(deleted_count=1)

        assert await MongoArticleStore(mock_connection).delete_one(self.oid) is True
        mock_collection.delete_one.assert_awaited_once_with({"_id": self.oid})

    @pytest.mark.asyncio
    async def test_delete_no_match(self, mock_connection, mock_collection):
        mock_collection.delete_one.return_value = MagicMock(deleted_count=0)
        assert await MongoArticleStore(mock_connection).delete_one(self.oid) is False

    @pytest.mark.asyncio
    async def test_driver_error_propagates(self, mock_connection, mock_collection):
        mock_collection.find_one.side_effect = AutoReconnect("connection reset")

        with pytest.raises(AutoReconnect):
            await MongoArticleStore(mock_connection).find_one(self.oid)
