"""
Item Service — Custom Exception Hierarchy
===========================================

What:  Defines the closed set of failures an item operation can end in.
How:   Each exception class carries a message and optional context dict.
       The store raises them; the handlers registered in main.py are the only
       place they are turned into HTTP status codes and JSON error bodies.
Who:   Raised by ItemStore and the request handlers; caught by global handlers.

Exception Hierarchy:
    ItemServiceError (base)
    ├── InvalidInputError   → 400 Bad Request (malformed id, missing/empty name)
    ├── NotFoundError       → 404 Not Found (id absent from the store)
    └── InternalError       → 500 Internal Server Error (generic message only)
"""

from typing import Any, Dict, Optional


class ItemServiceError(Exception):
    """
    Base exception for all item service errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
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


class InvalidInputError(ItemServiceError):
    """
    Raised when client input fails shape checks.

    When:    Non-integer or out-of-range id in the path, missing body,
             missing, empty or non-string `name`.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Invalid input",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(ItemServiceError):
    """
    Raised when a requested item does not exist.

    When:    GET, PUT or DELETE /items/{id} with an id the store does not hold.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "item",
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


class InternalError(ItemServiceError):
    """
    Raised when the service itself cannot complete an operation.

    When:    The id counter ran past the 64-bit range, or a result could not
             be serialized.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic; `context` is
    logged server-side only.
    """

    def __init__(
        self,
        message: str = "An internal error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
