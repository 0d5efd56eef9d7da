"""
Noteful API — Custom Exception Hierarchy
=========================================

What:  Application-specific exceptions for the client- and server-caused
       failures a request can hit.
How:   Each exception carries a user-facing message and an optional context
       dict. Global exception handlers (registered in main.py) catch these and
       return the `{"error": {"message": ...}}` envelope with the right status.
Who:   Raised by routes, request validation helpers and resource services.

Exception Hierarchy:
    NotefulError (base)
    ├── ValidationError   → 400 Bad Request (required field missing / null)
    ├── NotFoundError     → 404 Not Found (id has no matching row)
    └── DatabaseError     → 500 Internal Server Error (storage failure)
"""

from typing import Any, Dict, Optional


class NotefulError(Exception):
    """
    Base exception for all Noteful application errors.

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


class ValidationError(NotefulError):
    """
    Raised when a request body fails validation.

    HTTP:    400 Bad Request
    Example: {"error": {"message": "Missing 'folder_title' in request body"}}
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


class NotFoundError(NotefulError):
    """
    Raised when a requested resource does not exist.

    HTTP:    404 Not Found
    Message: "<Resource> does not exist" (e.g. "Folder does not exist").

    Services return None for missing rows; the shared lookup dependencies in
    the routes turn that None into this exception.
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} does not exist", context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(NotefulError):
    """
    Raised when a database operation fails.

    HTTP:    500 Internal Server Error
    When:    Connection lost, constraint violation (e.g. unknown folder_id),
             deadlock, etc.

    The client only ever sees a generic message; the original error type and
    the operation are kept in `context` for the server-side log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
