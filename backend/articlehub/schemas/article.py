"""
ArticleHub Backend — Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the JSON contract of the articles API.
How:   FastAPI validates request bodies against the input models and
       serializes the output models; both feed the OpenAPI docs.
Who:   Used by route handlers and by ArticleService.

Schemas are kept apart from the `Article` dataclass: the wire format uses a
hex string `id` and accepts a few legacy field names, while the domain model
carries a real ObjectId.
"""

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from articlehub.models.article import Article


# ══════════════════════════════════════════════════════════════════════════
# Request Models: what clients send
# ══════════════════════════════════════════════════════════════════════════


class ArticleCreate(BaseModel):
    """
    Body of POST /article.

    The identifier is never client-supplied; an `id` key in the body is
    ignored. `title`/`Title` and `desc` are accepted for name and description.
    """
    model_config = ConfigDict(extra="ignore")

    name: str = Field(
        validation_alias=AliasChoices("name", "title", "Title"),
        description="Article name / title",
    )
    content: str = Field(description="Article body text")
    description: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("description", "desc"),
        description="Short description (kept by the in-memory store only)",
    )

    def to_article(self) -> Article:
        return Article(name=self.name, content=self.content, description=self.description)


class ArticleUpdate(BaseModel):
    """
    Body of PUT /article/{id}.

    Only name and content can change. The response echoes this payload
    as submitted, not the stored document.
    """
    model_config = ConfigDict(extra="ignore")

    name: str = Field(
        validation_alias=AliasChoices("name", "title", "Title"),
        description="New article name",
    )
    content: str = Field(description="New article body text")

    def to_fields(self) -> dict:
        return {"name": self.name, "content": self.content}


# ══════════════════════════════════════════════════════════════════════════
# Response Models: what the API returns
# ══════════════════════════════════════════════════════════════════════════


class ArticleResponse(BaseModel):
    """
    Wire representation of an article.

    Routes serialize it with `response_model_exclude_none=True`, so `id` is
    omitted while unset and `description` is omitted for persisted articles.
    """
    id: Optional[str] = Field(default=None, description="24-character hex ObjectId")
    name: str = Field(description="Article name / title")
    content: str = Field(description="Article body text")
    description: Optional[str] = Field(default=None, description="Short description")

    @classmethod
    def from_article(cls, article: Article) -> "ArticleResponse":
        return cls(
            id=str(article.id) if article.id is not None else None,
            name=article.name,
            content=article.content,
            description=article.description,
        )


class ErrorResponse(BaseModel):
    """
    Standardized error body for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "article with ID '65f0c0ffee0000000000beef' was not found",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and container health checks."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    store_backend: str = Field(description="Active store: mongodb or memory")
    database: str = Field(description="Store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
