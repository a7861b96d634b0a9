"""
ArticleHub Backend — Article Route Handlers
=============================================

What:  The article CRUD endpoints.
How:   Each handler receives an ArticleService through Depends, makes one
       service call and writes the response. Errors are raised as
       application exceptions and turned into status codes by the global
       handlers in main.py.

Route Inventory:
    GET    /articles        list every article
    POST   /article         create an article (id generated server-side)
    GET    /article/{id}    fetch one article
    PUT    /article/{id}    replace name/content, echo the submitted payload
    DELETE /article/{id}    delete, plain-text confirmation
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from articlehub.dependencies import get_article_service
from articlehub.schemas.article import (
    ArticleCreate,
    ArticleResponse,
    ArticleUpdate,
    ErrorResponse,
)
from articlehub.services.article_service import ArticleService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Articles"])

_INVALID_ID = {"description": "Malformed article ID", "model": ErrorResponse}
_NOT_FOUND = {"description": "Article not found", "model": ErrorResponse}
_SERVER_ERROR = {"description": "Store error", "model": ErrorResponse}


@router.get(
    "/articles",
    response_model=List[ArticleResponse],
    response_model_exclude_none=True,
    responses={500: _SERVER_ERROR},
    summary="List all articles",
)
async def list_articles(
    service: ArticleService = Depends(get_article_service),
) -> List[ArticleResponse]:
    """Every article, in the store's natural order. No pagination."""
    return await service.list_articles()


@router.post(
    "/article",
    response_model=ArticleResponse,
    response_model_exclude_none=True,
    responses={
        400: {"description": "Malformed request body", "model": ErrorResponse},
        500: _SERVER_ERROR,
    },
    summary="Create an article",
)
async def create_article(
    payload: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """
    Create an article from `{"name": ..., "content": ...}`.

    The response is the stored article including its generated `id`.
    """
    return await service.create_article(payload)


@router.get(
    "/article/{article_id}",
    response_model=ArticleResponse,
    response_model_exclude_none=True,
    responses={400: _INVALID_ID, 404: _NOT_FOUND, 500: _SERVER_ERROR},
    summary="Get a single article by ID",
)
async def get_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    return await service.get_article(article_id)


@router.put(
    "/article/{article_id}",
    response_model=ArticleUpdate,
    responses={400: _INVALID_ID, 404: _NOT_FOUND, 500: _SERVER_ERROR},
    summary="Update an article's name and content",
)
async def update_article(
    article_id: str,
    payload: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleUpdate:
    """Echoes the submitted fields, not the stored document."""
    return await service.update_article(article_id, payload)


@router.delete(
    "/article/{article_id}",
    response_class=PlainTextResponse,
    responses={
        200: {"description": "Deletion confirmation", "content": {"text/plain": {}}},
        400: _INVALID_ID,
        404: _NOT_FOUND,
        500: _SERVER_ERROR,
    },
    summary="Delete an article",
)
async def delete_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> PlainTextResponse:
    deleted_id = await service.delete_article(article_id)
    return PlainTextResponse(f"Article with ID {deleted_id} deleted")
