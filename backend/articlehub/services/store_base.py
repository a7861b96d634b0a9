"""
ArticleHub Backend — Article Store Capability
===============================================

What:  The storage contract every article backend satisfies.
How:   A `typing.Protocol`: implementations match it structurally and do not
       inherit from it. `InMemoryArticleStore` and `MongoArticleStore` are the
       two implementations; `STORE_BACKEND` picks one at startup.
Who:   Called by ArticleService, once per request.
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from bson import ObjectId

from articlehub.models.article import Article


@runtime_checkable
class ArticleStore(Protocol):
    """
    Contract:
        - Identifiers are ObjectIds, generated by the store on insert
        - find_all() returns the store's natural order (no explicit sort)
        - update_one()/delete_one() report whether a document matched;
          turning a miss into a 404 is the caller's job
        - Backend-specific failures propagate unchanged; ArticleService
          wraps them in DatabaseError
    """

    name: str

    async def find_all(self) -> List[Article]:
        """Every stored article."""
        ...

    async def find_one(self, article_id: ObjectId) -> Optional[Article]:
        """The article with this id, or None."""
        ...

    async def insert_one(self, article: Article) -> Article:
        """
        Persist a new article.

        Args:
            article: An article with id=None. Any id already set is replaced.

        Returns:
            The stored article, carrying its freshly generated ObjectId.
        """
        ...

    async def update_one(self, article_id: ObjectId, fields: Dict[str, str]) -> bool:
        """Set `fields` (name/content) on the matching article. True if one matched."""
        ...

    async def delete_one(self, article_id: ObjectId) -> bool:
        """Remove the matching article. True if one was removed."""
        ...

    async def ping(self) -> bool:
        """True if the backend is reachable. Must not raise."""
        ...

    async def close(self) -> None:
        """Release any resources held by the store."""
        ...
