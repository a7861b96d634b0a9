"""
ArticleHub Backend — Document-Store Connection
================================================

What:  Owns the single MongoDB client for the process lifetime and hands out
       the articles collection on demand.
How:   `MongoConnection.connect()` builds an `AsyncMongoClient`, pings the
       server once and fails hard if it cannot. `collection()` is a plain
       attribute lookup on the client, so handlers can call it per request.
Who:   Built by `articlehub.dependencies.build_store` during app startup;
       used by `MongoArticleStore` for every operation.

Connection model:
    One client, shared by every in-flight request. The driver keeps its own
    connection pool and is safe for concurrent use from the event loop.
    There is no retry or backoff at this layer: a PyMongoError raised by an
    operation reaches the caller unchanged.
"""

import logging
from typing import Any

from pymongo import AsyncMongoClient
from pymongo.errors import ConfigurationError as MongoConfigurationError
from pymongo.errors import PyMongoError

from articlehub.exceptions import ConfigurationError, StoreUnavailableError

logger = logging.getLogger(__name__)


class MongoConnection:
    """
    Process-scoped handle on the backing MongoDB deployment.

    Attributes:
        client:          The long-lived AsyncMongoClient
        database_name:   Database holding the articles collection
        collection_name: Name of the articles collection
    """

    def __init__(
        self,
        client: AsyncMongoClient,
        database_name: str,
        collection_name: str = "articles",
    ):
        self.client = client
        self.database_name = database_name
        self.collection_name = collection_name

    @classmethod
    async def connect(
        cls,
        uri: str,
        database_name: str,
        collection_name: str = "articles",
        timeout_ms: int = 5000,
    ) -> "MongoConnection":
        """
        Open the session and verify the server answers.

        Raises:
            ConfigurationError:    The URI is empty or malformed
            StoreUnavailableError: No server answered the ping within timeout_ms
        """
        if not uri or not uri.strip():
            raise ConfigurationError(message="MONGODB_URI is not set")

        try:
            client: AsyncMongoClient = AsyncMongoClient(
                uri,
                serverSelectionTimeoutMS=timeout_ms,
                appname="articlehub",
            )
        except MongoConfigurationError as e:
            raise ConfigurationError(
                message=f"Invalid MONGODB_URI: {e}",
                context={"error_type": type(e).__name__},
            )

        connection = cls(client, database_name, collection_name)
        try:
            await client.admin.command("ping")
        except PyMongoError as e:
            await client.close()
            raise StoreUnavailableError(
                message="Could not reach MongoDB at startup",
                context={"error": str(e), "database": database_name},
            )

        logger.info(
            "Connected to MongoDB (database=%s, collection=%s)",
            database_name,
            collection_name,
        )
        return connection

    def collection(self) -> Any:
        """The articles collection. No I/O; safe to call once per request."""
        return self.client[self.database_name][self.collection_name]

    async def ping(self) -> bool:
        """Lightweight reachability probe for the health endpoint. Never raises."""
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning("MongoDB ping failed: %s", str(e))
            return False

    async def close(self) -> None:
        """Close the client and every pooled connection. Called on shutdown."""
        await self.client.close()
        logger.info("MongoDB connection closed")
