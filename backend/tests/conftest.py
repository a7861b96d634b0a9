"""
ArticleHub Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── make_cursor:      Factory for async cursors over a list of documents
    ├── memory_store:     Empty InMemoryArticleStore
    ├── seeded_store:     InMemoryArticleStore holding the two sample articles
    ├── mock_collection:  MagicMock standing in for a pymongo AsyncCollection
    ├── mock_connection:  MongoConnection whose collection() returns mock_collection
    ├── mock_store:       AsyncMock satisfying the ArticleStore protocol
    └── test_client:      HTTPX AsyncClient against an app wired to memory_store
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Override settings for testing BEFORE any app imports
os.environ["STORE_BACKEND"] = "memory"
os.environ["MONGODB_URI"] = ""
os.environ["LOG_LEVEL"] = "WARNING"

from articlehub.database import MongoConnection  # noqa: E402
from articlehub.services.memory_store import SEED_ARTICLES, InMemoryArticleStore  # noqa: E402


class AsyncCursor:
    """Minimal stand-in for a pymongo async cursor: iterates a list of documents."""

    def __init__(self, docs):
        self._docs = list(docs)

    def __aiter__(self):
        self._iter = iter(self._docs)
        return self

    async def __anext__(self):
        try:
            return next(self._iter)
        except StopIteration:
            raise StopAsyncIteration


@pytest.fixture
def make_cursor():
    return AsyncCursor


@pytest.fixture
def memory_store():
    return InMemoryArticleStore()


@pytest.fixture
def seeded_store():
    return InMemoryArticleStore(seed=SEED_ARTICLES)


@pytest.fixture
def mock_collection():
    """
    A mock articles collection.

    Usage:
        mock_collection.find.return_value = AsyncCursor([doc1, doc2])
        mock_collection.find_one.return_value = doc1
    """
    collection = MagicMock()
    collection.find = MagicMock(return_value=AsyncCursor([]))
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock()
    collection.update_one = AsyncMock()
    collection.delete_one = AsyncMock()
    return collection


@pytest.fixture
def mock_connection(mock_collection):
    client = MagicMock()
    client.admin.command = AsyncMock(return_value={"ok": 1})
    client.close = AsyncMock()
    client.__getitem__.return_value.__getitem__.return_value = mock_collection
    return MongoConnection(client, "articlehub_test", "articles")


@pytest.fixture
def mock_store():
    store = AsyncMock()
    store.name = "mock"
    return store


@pytest.fixture
def app(memory_store):
    from articlehub.main import create_app
    return create_app(store=memory_store)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into the ASGI app (no server, no lifespan).

    Usage:
        async def test_home(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
