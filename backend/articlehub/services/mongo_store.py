"""
ArticleHub Backend — MongoDB Article Store
============================================

What:  ArticleStore implementation over the `articles` collection.
How:   Every operation fetches the collection from MongoConnection and issues
       exactly one driver call. The ObjectId for a new article is generated
       here, client-side, before the insert.
Who:   Selected with STORE_BACKEND=mongodb (the default).

Operation → driver call:
    find_all    → collection.find({})            (cursor order, no sort)
    find_one    → collection.find_one({"_id": id})
    insert_one  → collection.insert_one(doc)
    update_one  → collection.update_one({"_id": id}, {"$set": fields})
    delete_one  → collection.delete_one({"_id": id})
"""

import logging
from typing import Dict, List, Optional

from bson import ObjectId

from articlehub.database import MongoConnection
from articlehub.models.article import UPDATABLE_FIELDS, Article

logger = logging.getLogger(__name__)


class MongoArticleStore:
    """
    ArticleStore backed by MongoDB.

    Driver errors (PyMongoError and subclasses) are not caught here. They
    propagate to ArticleService, which logs them and raises DatabaseError.
    """

    name = "mongodb"

    def __init__(self, connection: MongoConnection):
        self.connection = connection

    async def find_all(self) -> List[Article]:
        collection = self.connection.collection()
        articles = []
        async for doc in collection.find({}):
            articles.append(Article.from_document(doc))
        return articles

    async def find_one(self, article_id: ObjectId) -> Optional[Article]:
        doc = await self.connection.collection().find_one({"_id": article_id})
        if doc is None:
            return None
        return Article.from_document(doc)

    async def insert_one(self, article: Article) -> Article:
        # description is not part of the persisted document
        stored = Article(id=ObjectId(), name=article.name, content=article.content)
        await self.connection.collection().insert_one(stored.to_document())
        logger.debug("Inserted article %s", stored.id)
        return stored

    async def update_one(self, article_id: ObjectId, fields: Dict[str, str]) -> bool:
        changes = {k: v for k, v in fields.items() if k in UPDATABLE_FIELDS}
        result = await self.connection.collection().update_one(
            {"_id": article_id},
            {"$set": changes},
        )
        return result.matched_count > 0

    async def delete_one(self, article_id: ObjectId) -> bool:
        result = await self.connection.collection().delete_one({"_id": article_id})
        return result.deleted_count > 0

    async def ping(self) -> bool:
        return await self.connection.ping()

    async def close(self) -> None:
        await self.connection.close()
