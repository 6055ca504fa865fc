"""
Goose Quotes Backend: Exception Hierarchy
==========================================

What:  Application-specific exceptions, one per outcome the API reports.
How:   Each exception carries a user-facing message and an optional context
       dict. The handlers registered in `main.py` map each type to a status
       code, so services raise and never build HTTP responses themselves.

Exception Hierarchy:
    GooseQuotesError (base)          → 500 Internal Server Error
    ├── ValidationError              → 400 Bad Request
    ├── NotFoundError                → 404 Not Found
    ├── LLMServiceError              → 503 Service Unavailable
    └── DatabaseError                → 500 Internal Server Error

Anything outside this hierarchy falls through to the catch-all handler (500).
"""

from typing import Any, Dict, Optional


class GooseQuotesError(Exception):
    """
    Base exception for all Goose Quotes application errors.

    Attributes:
        message:  User-facing error description (safe to return in a response)
        context:  Additional debug info (logged, not always returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(GooseQuotesError):
    """
    Client input that the request schema could not catch.

    Example: a non-numeric goose id in the path. Missing body fields are
    rejected earlier by FastAPI's own 422 handling.
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


class NotFoundError(GooseQuotesError):
    """
    Raised when a lookup by id finds no row.

    The message is returned verbatim as the 404 body:
        {"message": "Goose not found"}
    The id goes into the context only, keeping the body identical for every
    missing goose.
    """

    def __init__(
        self,
        resource: str = "Goose",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class LLMServiceError(GooseQuotesError):
    """
    The LLM provider failed or answered with something unusable.

    Covers network/auth/quota errors after retries are exhausted, responses
    without choices or content, image responses without a URL, and
    operations the configured provider does not support.
    HTTP: 503 Service Unavailable, with Retry-After when `retry_after` is set.
    """

    def __init__(
        self,
        message: str = "The goose generation service is temporarily unavailable",
        retry_after: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if retry_after:
            ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after


class DatabaseError(GooseQuotesError):
    """
    A query failed unexpectedly (connection lost, constraint violation, ...).

    The response message is always generic; query details stay in the logs.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
