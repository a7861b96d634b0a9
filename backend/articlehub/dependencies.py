"""FastAPI dependency wiring: builds the configured store and injects the article service."""

import logging

from fastapi import Request

from articlehub.config import Settings
from articlehub.database import MongoConnection
from articlehub.exceptions import DatabaseError
from articlehub.services.article_service import ArticleService
from articlehub.services.memory_store import SEED_ARTICLES, InMemoryArticleStore
from articlehub.services.mongo_store import MongoArticleStore
from articlehub.services.store_base import ArticleStore

logger = logging.getLogger(__name__)


async def build_store(settings: Settings) -> ArticleStore:
    """
    Open the store selected by STORE_BACKEND.

    Raises ConfigurationError or StoreUnavailableError for the MongoDB
    backend; both are fatal at startup.
    """
    if settings.store_backend == "memory":
        seed = SEED_ARTICLES if settings.seed_articles else ()
        logger.info("Using in-memory article store")
        return InMemoryArticleStore(seed=seed)

    connection = await MongoConnection.connect(
        uri=settings.mongodb_uri,
        database_name=settings.mongodb_database,
        collection_name=settings.mongodb_collection,
        timeout_ms=settings.mongodb_timeout_ms,
    )
    return MongoArticleStore(connection)


def get_article_store(request: Request) -> ArticleStore:
    """The process-wide store held on app.state."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise DatabaseError(
            message="The article store is not initialized.",
            context={"state": "store_missing"},
        )
    return store


def get_article_service(request: Request) -> ArticleService:
    """Provides an ArticleService bound to the process-wide store."""
    return ArticleService(get_article_store(request))
