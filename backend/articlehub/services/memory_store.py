"""
ArticleHub Backend — In-Memory Article Store
==============================================

What:  A process-local ArticleStore backed by a dict.
How:   Articles are kept in insertion order, keyed by ObjectId. Mutations take
       an asyncio.Lock; reads copy the records so callers never hold a
       reference into the store.
Who:   Selected with STORE_BACKEND=memory; also the store the API tests run on.

Nothing is persisted: a restart loses every article except the seed data.
"""

import asyncio
import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from bson import ObjectId

from articlehub.models.article import UPDATABLE_FIELDS, Article

logger = logging.getLogger(__name__)

# The two sample articles the service has always started with.
SEED_ARTICLES = (
    Article(name="Hello", description="Article Description", content="Article Content"),
    Article(name="Hello 2", description="Article Description", content="Article Content"),
)


class InMemoryArticleStore:
    """ArticleStore over a plain dict. Safe for concurrent use on one event loop."""

    name = "memory"

    def __init__(self, seed: Iterable[Article] = ()):
        self._articles: Dict[ObjectId, Article] = {}
        self._lock = asyncio.Lock()
        for article in seed:
            stored = replace(article, id=ObjectId())
            self._articles[stored.id] = stored
        if self._articles:
            logger.info("In-memory store seeded with %d articles", len(self._articles))

    async def find_all(self) -> List[Article]:
        return [replace(a) for a in self._articles.values()]

    async def find_one(self, article_id: ObjectId) -> Optional[Article]:
        article = self._articles.get(article_id)
        return replace(article) if article is not None else None

    async def insert_one(self, article: Article) -> Article:
        async with self._lock:
            stored = replace(article, id=ObjectId())
            self._articles[stored.id] = stored
        return replace(stored)

    async def update_one(self, article_id: ObjectId, fields: Dict[str, str]) -> bool:
        changes = {k: v for k, v in fields.items() if k in UPDATABLE_FIELDS}
        async with self._lock:
            current = self._articles.get(article_id)
            if current is None:
                return False
            self._articles[article_id] = replace(current, **changes)
        return True

    async def delete_one(self, article_id: ObjectId) -> bool:
        async with self._lock:
            return self._articles.pop(article_id, None) is not None

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        self._articles.clear()

    def __len__(self) -> int:
        return len(self._articles)
