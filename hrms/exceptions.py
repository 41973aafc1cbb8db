"""
HRMS Backend - Custom Exception Hierarchy
==========================================

What:  Defines application-specific exceptions for the failure families the
       API reports.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return the standard `{status: 0, message}` envelope with the matching
       HTTP status code.
Who:   Raised by the service layer and database helpers; caught by global handlers.

Exception Hierarchy:
    HRMSError (base)             → 500 Internal Server Error
    ├── ValidationError          → 400 Bad Request (malformed id, unparsable body)
    ├── NotFoundError            → 404 Not Found
    └── DatabaseError            → 500 Internal Server Error (store failure)
"""

from typing import Any, Dict, Optional


class HRMSError(Exception):
    """
    Base exception for all HRMS application errors.

    Attributes:
        message:  Error description returned in the envelope's `message` field
        context:  Additional debug info (logged, NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(HRMSError):
    """
    Raised when client input fails validation.

    When:    Identifier is not a 24-character hex ObjectId, or the request
             body cannot be parsed into an employee record.
    HTTP:    400 Bad Request

    Example response:
        {"status": 0, "message": "Bad Request"}
    """

    def __init__(
        self,
        message: str = "Bad Request",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(HRMSError):
    """
    Raised when the identifier matched no stored document.

    When:    PUT or DELETE /employee/{id} for an id the collection doesn't hold.
    HTTP:    404 Not Found

    The driver reports a miss as `None` / `deleted_count == 0` rather than
    raising; the service layer converts that into this exception.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message="Not Found", context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(HRMSError):
    """
    Raised when a MongoDB operation fails.

    When:    Server selection timeout, network error, write error, etc.
    HTTP:    500 Internal Server Error

    The message is the underlying driver error text; `context` records the
    operation and the driver exception type for the server-side log.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
