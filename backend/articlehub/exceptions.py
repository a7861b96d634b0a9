"""
ArticleHub Backend — Custom Exception Hierarchy
=================================================

What:  Defines application-specific exceptions for different error scenarios.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by the article service, the stores and the startup code.

Exception Hierarchy:
    ArticleHubError (base)
    ├── ValidationError        → 400 Bad Request (malformed id or body)
    ├── NotFoundError          → 404 Not Found
    ├── DatabaseError          → 500 Internal Server Error
    ├── ConfigurationError     → fatal at startup (process cannot serve)
    └── StoreUnavailableError  → fatal at startup (store unreachable)
"""

from typing import Any, Dict, Optional


class ArticleHubError(Exception):
    """
    Base exception for all ArticleHub application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info; only ValidationError exposes it to clients
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ArticleHubError):
    """
    Raised when client input cannot be decoded.

    When:    The path identifier is not a valid ObjectId, or the request body
             is not valid JSON / does not match the article schema.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "'abc' is not a valid article ID",
            "details": {"field": "id"}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(ArticleHubError):
    """
    Raised when a requested resource does not exist.

    When:    GET, PUT or DELETE /article/{id} with a well-formed id that no
             document carries.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(ArticleHubError):
    """
    Raised when a store operation fails unexpectedly.

    When:    Network error, cursor iteration failure, decode failure.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic; the original
    driver error is logged server-side and kept in `context`.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ConfigurationError(ArticleHubError):
    """Raised at startup when required settings are missing or invalid."""

    def __init__(
        self,
        message: str = "Invalid configuration",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class StoreUnavailableError(ArticleHubError):
    """
    Raised at startup when the backing store cannot be reached.

    The lifespan re-raises it, so uvicorn aborts startup and the process
    never serves traffic against a dead store.
    """

    def __init__(
        self,
        message: str = "The article store is unreachable",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
