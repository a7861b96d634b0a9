"""
ArticleHub Backend — Article Service
======================================

What:  The glue between route handlers and the article store.
How:   Each method decodes its inputs, makes exactly one store call and
       returns a response model. Store failures are translated into the
       application exception hierarchy.
Who:   Called by the handlers in routes/articles.py; receives its store from
       the FastAPI dependency in articlehub.dependencies.

Error translation:
    malformed id                 → ValidationError  (400)
    get on an unknown id         → NotFoundError    (404)
    update/delete with no match  → NotFoundError    (404)
    any other store exception    → DatabaseError    (500)
"""

import logging
from typing import List

from articlehub.exceptions import ArticleHubError, DatabaseError, NotFoundError
from articlehub.models.article import parse_article_id
from articlehub.schemas.article import (
    ArticleCreate,
    ArticleResponse,
    ArticleUpdate,
)
from articlehub.services.store_base import ArticleStore

logger = logging.getLogger(__name__)


class ArticleService:
    """
    Request-scoped operations on articles.

    Holds no state besides the injected store, so a new instance per request
    costs nothing and tests can hand in any ArticleStore.
    """

    def __init__(self, store: ArticleStore):
        self.store = store

    async def list_articles(self) -> List[ArticleResponse]:
        """All articles, in the store's natural order."""
        logger.info("Endpoint hit: list_articles")
        try:
            articles = await self.store.find_all()
        except Exception as e:
            raise self._store_failure("list", e)
        return [ArticleResponse.from_article(a) for a in articles]

    async def get_article(self, raw_id: str) -> ArticleResponse:
        """
        Single article by id.

        Raises:
            ValidationError: raw_id is not a 24-character hex ObjectId
            NotFoundError:   no article carries this id
            DatabaseError:   the store failed
        """
        logger.info("Endpoint hit: get_article")
        article_id = parse_article_id(raw_id)
        try:
            article = await self.store.find_one(article_id)
        except Exception as e:
            raise self._store_failure("find", e, raw_id)
        if article is None:
            raise NotFoundError(resource="article", resource_id=raw_id)
        return ArticleResponse.from_article(article)

    async def create_article(self, payload: ArticleCreate) -> ArticleResponse:
        """Insert a new article; the store assigns its id."""
        logger.info("Endpoint hit: create_article")
        try:
            article = await self.store.insert_one(payload.to_article())
        except Exception as e:
            raise self._store_failure("insert", e)
        logger.info("Article %s created", article.id)
        return ArticleResponse.from_article(article)

    async def update_article(self, raw_id: str, payload: ArticleUpdate) -> ArticleUpdate:
        """
        Set name/content on an existing article.

        Returns the payload as submitted; the stored document is not re-read.
        """
        logger.info("Endpoint hit: update_article")
        article_id = parse_article_id(raw_id)
        try:
            matched = await self.store.update_one(article_id, payload.to_fields())
        except Exception as e:
            raise self._store_failure("update", e, raw_id)
        if not matched:
            raise NotFoundError(resource="article", resource_id=raw_id)
        return payload

    async def delete_article(self, raw_id: str) -> str:
        """Remove an article. Returns the id that was deleted."""
        logger.info("Endpoint hit: delete_article")
        article_id = parse_article_id(raw_id)
        try:
            deleted = await self.store.delete_one(article_id)
        except Exception as e:
            raise self._store_failure("delete", e, raw_id)
        if not deleted:
            raise NotFoundError(resource="article", resource_id=raw_id)
        logger.info("Article %s deleted", raw_id)
        return raw_id

    def _store_failure(self, operation: str, error: Exception, raw_id: str = "") -> ArticleHubError:
        """Map a store exception to the error the handler should raise."""
        if isinstance(error, ArticleHubError):
            return error
        logger.error(
            "Store %s failed on %s backend: %s",
            operation,
            getattr(self.store, "name", "unknown"),
            str(error),
            exc_info=True,
        )
        context = {"operation": operation, "error_type": type(error).__name__}
        if raw_id:
            context["article_id"] = raw_id
        return DatabaseError(
            message="Could not complete the article operation. Please try again.",
            context=context,
        )
