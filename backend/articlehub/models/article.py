"""
ArticleHub Backend — Article Domain Model
===========================================

What:  The `Article` record shared by both stores, plus the identifier format
       and the mapping to and from MongoDB documents.
Who:   Produced by the stores, consumed by ArticleService and the schemas.

Document layout (collection `articles`):
    {
        "_id":     ObjectId,   # 12 bytes, assigned by the store on insert
        "name":    str,
        "content": str
    }

The optional `description` only lives in the in-memory store; it is not part
of the persisted document.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from bson import ObjectId
from bson.errors import InvalidId

from articlehub.exceptions import ValidationError

# Fields a PUT is allowed to change. `_id` is immutable once assigned.
UPDATABLE_FIELDS = ("name", "content")


@dataclass
class Article:
    """
    A single article.

    Lifecycle:
        1. Built from a create payload with id=None (not yet created)
        2. insert_one() assigns a fresh ObjectId (persisted)
        3. update_one() may change name/content; id never changes
        4. delete_one() removes it; no soft-delete, no versioning
    """

    name: str
    content: str
    id: Optional[ObjectId] = None
    description: Optional[str] = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def to_document(self) -> Dict[str, Any]:
        """Mongo document for this article. `_id` is omitted until assigned."""
        doc: Dict[str, Any] = {"name": self.name, "content": self.content}
        if self.id is not None:
            doc["_id"] = self.id
        return doc

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Article":
        """Builds an Article from a stored document; missing text fields read as ""."""
        return cls(
            id=doc.get("_id"),
            name=doc.get("name") or "",
            content=doc.get("content") or "",
        )

    def __repr__(self) -> str:
        return f"<Article(id={self.id}, name='{self.name}')>"


def parse_article_id(raw: str) -> ObjectId:
    """
    Decode a path identifier into an ObjectId.

    Accepts exactly 24 hexadecimal characters. Anything else, including the
    12-byte binary form, raises ValidationError so the route answers 400
    rather than 404.
    """
    if not isinstance(raw, str) or len(raw) != 24:
        raise ValidationError(
            message=f"'{raw}' is not a valid article ID",
            field="id",
        )
    try:
        return ObjectId(raw)
    except (InvalidId, TypeError):
        raise ValidationError(
            message=f"'{raw}' is not a valid article ID",
            field="id",
        )
