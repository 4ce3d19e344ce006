"""
Fashion Catalog API — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for the error taxonomy of the API.
How:   Each exception carries a client-safe message and an optional context
       dict. Global exception handlers (registered in main.py) map them to
       `{"error": <message>}` JSON responses with the right status code.
Who:   Raised by services, routes and the authentication gate.

Exception Hierarchy:
    CatalogError (base)
    ├── ValidationError       → 400 Bad Request
    ├── NotFoundError         → 404 Not Found
    ├── AuthenticationError   → 401 Unauthorized (+ WWW-Authenticate)
    └── DatabaseError         → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class CatalogError(Exception):
    """
    Base exception for all catalog application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(CatalogError):
    """
    Raised when client input fails validation.

    When:    Missing or mistyped fields, category outside the allowed set,
             duplicate unique value, non-integer path id.
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


class NotFoundError(CatalogError):
    """
    Raised when no entity carries the requested public id.

    The message is resource specific ("Product not found"); the id goes into
    the context for logging.
    """

    status_code = 404

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
        super().__init__(message=f"{resource} not found", context=ctx)


class AuthenticationError(CatalogError):
    """
    Raised by the Basic authentication gate.

    What:    Missing, malformed or incorrect credentials.
    HTTP:    401 Unauthorized, always with a `WWW-Authenticate: Basic` challenge.
    """

    status_code = 401

    def __init__(
        self,
        message: str = "Authentication required",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(CatalogError):
    """
    Raised when database operations fail unexpectedly.

    The message returned to the client is always generic; the driver error
    is logged server-side only.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
