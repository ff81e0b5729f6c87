"""
CashCard Service — Custom Exception Hierarchy
===============================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Custom exceptions let the service layer signal outcomes without knowing
       about HTTP; global handlers in main.py turn them into status codes.
How:   Each exception class carries a message and optional context dict.
       The message and context are logged server-side only: every error
       response of this API has an empty body.
Who:   Raised by services and route helpers; caught by global handlers.

Exception Hierarchy:
    CashCardError (base)
    ├── ValidationError  → 400 Bad Request
    ├── NotFoundError    → 404 Not Found
    └── DatabaseError    → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class CashCardError(Exception):
    """
    Base exception for all CashCard application errors.

    Attributes:
        message:  Human-readable error description (logged)
        context:  Additional debug info (logged, never returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(CashCardError):
    """
    Raised when client input fails validation beyond what pydantic checks.

    When:    Unknown sort field, bad sort direction, page size above the limit.
    HTTP:    400 Bad Request
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


class NotFoundError(CashCardError):
    """
    Raised when a requested cash card does not exist.

    When:    GET, PUT or DELETE /cashcards/{id} with an unknown id.
    HTTP:    404 Not Found

    The Record Store returns None (or False for delete) for missing records;
    the service layer converts that into this exception.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class DatabaseError(CashCardError):
    """
    Raised when the Record Store fails unexpectedly.

    When:    Connection lost mid-query, constraint violation, deadlock, etc.
    HTTP:    500 Internal Server Error

    Never used for a missing record: that is NotFoundError.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
