"""
Trainer API — Custom Exception Hierarchy
==========================================

What:  Application-specific exceptions for the failure modes of a request.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) translate them into
       response envelope variants. Context is logged, never sent to clients.
Who:   Raised by the data access layer, assemblers and services.

Exception Hierarchy:
    TrainerApiError (base)
    ├── QueryError               → 500, empty body
    ├── RelatedRowMissingError   → 500, empty body
    └── NotFoundError            → 404, empty body (strict_not_found only)
"""

from typing import Any, Dict, Optional


class TrainerApiError(Exception):
    """
    Base exception for all Trainer API application errors.

    Attributes:
        message:  Short description, used in server-side logs
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class QueryError(TrainerApiError):
    """
    Raised when the store rejects or fails a statement.

    When:    Connection lost mid-query, constraint violation, bad SQL, etc.
    HTTP:    500 Internal Server Error, no body.

    The statement text travels in `context["statement"]` so the handler can
    log it. It is never retried.
    """

    def __init__(
        self,
        message: str = "A database statement failed",
        statement: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if statement:
            ctx["statement"] = statement
        super().__init__(message=message, context=ctx)
        self.statement = statement


class RelatedRowMissingError(TrainerApiError):
    """
    Raised when an expected related row is absent during assembly.

    What:    A foreign key (region id, ability id, owned pokemon id) points at
             a row that does not exist.
    HTTP:    500 Internal Server Error, no body. The whole response is
             discarded; no partial data is returned.
    """

    def __init__(
        self,
        resource: str = "row",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"Expected {resource} row is missing"
        if resource_id is not None:
            message = f"Expected {resource} with ID '{resource_id}' is missing"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class NotFoundError(TrainerApiError):
    """
    Raised when a requested top-level resource does not exist.

    Only raised when `settings.strict_not_found` is enabled; by default a
    missing trainer yields an empty list and a zero-row delete succeeds.
    HTTP:    404 Not Found, no body.
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
