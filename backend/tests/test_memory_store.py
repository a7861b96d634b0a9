"""
ArticleHub Backend — In-Memory Store Unit Tests
=================================================

What we test:
    ✅ Seeding with the sample articles
    ✅ Insert assigns a fresh ObjectId and keeps description
    ✅ Update touches name/content only; delete reports misses
    ✅ Returned records are copies, not references into the store
"""

import pytest
from bson import ObjectId

from articlehub.models.article import Article
from articlehub.services.memory_store import InMemoryArticleStore
from articlehub.services.store_base import ArticleStore


class TestInMemoryStore:

    def test_satisfies_store_protocol(self, memory_store):
        assert isinstance(memory_store, ArticleStore)

    @pytest.mark.asyncio
    async def test_seeded_store_holds_sample_articles(self, seeded_store):
        articles = await seeded_store.find_all()
        assert [a.name for a in articles] == ["Hello", "Hello 2"]
        assert all(a.id is not None for a in articles)
        assert all(a.description == "Article Description" for a in articles)

    @pytest.mark.asyncio
    async def test_insert_assigns_unique_ids(self, memory_store):
        first = await memory_store.insert_one(Article(name="A", content="a"))
        second = await memory_store.insert_one(Article(name="B", content="b"))
        assert isinstance(first.id, ObjectId)
        assert first.id != second.id
        assert len(memory_store) == 2

    @pytest.mark.asyncio
    async def test_insert_replaces_caller_id(self, memory_store):
        supplied = ObjectId()
        stored = await memory_store.insert_one(Article(id=supplied, name="A", content="a"))
        assert stored.id != supplied

    @pytest.mark.asyncio
    async def test_find_one_missing_returns_none(self, memory_store):
        assert await memory_store.find_one(ObjectId()) is None

    @pytest.mark.asyncio
    async def test_update_changes_only_name_and_content(self, memory_store):
        stored = await memory_store.insert_one(
            Article(name="Old", content="old", description="keep me")
        )
        matched = await memory_store.update_one(
            stored.id, {"name": "New", "content": "new", "description": "ignored"}
        )
        assert matched is True

        updated = await memory_store.find_one(stored.id)
        assert updated.id == stored.id
        assert updated.name == "New"
        assert updated.content == "new"
        assert updated.description == "keep me"

    @pytest.mark.asyncio
    async def test_update_missing_reports_no_match(self, memory_store):
        assert await memory_store.update_one(ObjectId(), {"name": "x"}) is False

    @pytest.mark.asyncio
    async def test_delete(self, memory_store):
        stored = await memory_store.insert_one(Article(name="A", content="a"))
        assert await memory_store.delete_one(stored.id) is True
        assert await memory_store.find_one(stored.id) is None
        assert await memory_store.delete_one(stored.id) is False

    @pytest.mark.asyncio
    async def test_returned_records_are_copies(self, memory_store):
        stored = await memory_store.insert_one(Article(name="A", content="a"))
        fetched = await memory_store.find_one(stored.id)
        fetched.name = "mutated"
        assert (await memory_store.find_one(stored.id)).name == "A"

    @pytest.mark.asyncio
    async def test_ping_and_close(self, seeded_store):
        assert await seeded_store.ping() is True
        await seeded_store.close()
        assert await seeded_store.find_all() == []


def test_seeding_leaves_seed_records_untouched():
    seed = [Article(name="A", content="a")]
    store = InMemoryArticleStore(seed=seed)
    assert len(store) == 1
    assert seed[0].id is None
