"""
Employee Service: Custom Exception Hierarchy
===============================================

What:  Application-specific exceptions for the employee CRUD endpoints.
Why:   Services raise typed errors; global handlers in main.py turn them into
       HTTP responses, so routes never build error responses by hand.
How:   Each exception carries a message, an optional context dict, and the
       HTTP status its handler answers with.

Exception Hierarchy:
    EmployeeServiceError (base)             → 500
    ├── ValidationError                     → 400 Bad Request
    │   └── InvalidIdentifierError          → 400, empty body
    ├── NotFoundError                       → 404 Not Found
    │   └── MissingWriteTargetError         → 400 Bad Request
    └── DatabaseError                       → 500 Internal Server Error

Not-found statuses:
    Reads answer 404; update and delete against an id with no document answer
    400. Both map from NotFoundError so the split lives in exactly one place
    (MissingWriteTargetError.status_code).
"""

from typing import Any, Dict, Optional


class EmployeeServiceError(Exception):
    """
    Base exception for all employee service errors.

    Attributes:
        message:     User-facing error description (safe to return in API response)
        context:     Additional debug info (logged but NOT returned to client)
        status_code: HTTP status the global handler responds with
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(EmployeeServiceError):
    """
    Raised when client input cannot be used as-is.

    When:    Malformed JSON body, wrongly typed fields.
    HTTP:    400 Bad Request
    """

    status_code = 400

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


class InvalidIdentifierError(ValidationError):
    """
    Raised when a path identifier is not a 24-character hex ObjectId.

    Always raised before any database call is issued.
    HTTP:    400 Bad Request with no body
    """

    def __init__(self, value: str):
        super().__init__(
            message=f"'{value}' is not a valid employee identifier",
            field="id",
            context={"value": value},
        )
        self.value = value


class NotFoundError(EmployeeServiceError):
    """
    Raised when no employee document matches an identifier.

    HTTP:    404 Not Found, message "not found"
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "employee",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message="not found", context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class MissingWriteTargetError(NotFoundError):
    """
    Raised when an update or delete matches no document.

    No document is created as a side effect (updates never upsert).
    HTTP:    400 Bad Request
    """

    status_code = 400


class DatabaseError(EmployeeServiceError):
    """
    Raised when a MongoDB operation fails unexpectedly.

    When:    Server unreachable, write concern failure, operation timeout.
    HTTP:    500 Internal Server Error

    Security Note:
        The driver's error text is kept in `context` for server-side logs
        and never returned to the client.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
