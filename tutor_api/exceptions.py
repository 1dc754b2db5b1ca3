"""
Tutor API — Custom Exception Hierarchy
=======================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Custom exceptions enable targeted error handling with appropriate HTTP
       status codes, replacing generic exceptions that would surface as a
       bare server error.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by routes and repositories; caught by global handlers.

Exception Hierarchy:
    TutorApiError (base)          → 500 Internal Server Error
    ├── ValidationError           → 400 Bad Request (client can fix)
    │   └── BadRequestAlertError  → 400 Bad Request + X-<app>-error headers
    ├── NotFoundError             → 404 Not Found
    └── DatabaseError             → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class TutorApiError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(TutorApiError):
    """
    Raised when client input fails a request precondition.

    HTTP: 400 Bad Request. Schema-level problems (wrong JSON types) never
    reach this class; FastAPI answers those with 422.
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


class BadRequestAlertError(ValidationError):
    """
    A rejected request about a specific entity.

    Carries the entity name and a short error key (e.g. "idexists",
    "idnull") which the handler turns into the X-<app>-error and
    X-<app>-params response headers.

    Example response:
        HTTP/1.1 400 Bad Request
        X-tutorApp-error: error.idexists
        X-tutorApp-params: tutor

        {
            "error": "validation_error",
            "message": "A new tutor cannot already have an ID",
            "details": {"entity_name": "tutor", "error_key": "idexists"}
        }
    """

    def __init__(
        self,
        message: str,
        entity_name: str,
        error_key: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["entity_name"] = entity_name
        ctx["error_key"] = error_key
        super().__init__(message=message, context=ctx)
        self.entity_name = entity_name
        self.error_key = error_key


class NotFoundError(TutorApiError):
    """
    Raised when a requested resource does not exist.

    When:    GET /api/tutors/{id} or PUT /api/tutors with an unknown id.
    HTTP:    404 Not Found

    SQLAlchemy returns None for missing records; the route converts that
    into this exception.
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


class DatabaseError(TutorApiError):
    """
    Raised when database operations fail unexpectedly.

    When:    Connection lost mid-query, constraint violation, deadlock, etc.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. Details (statement,
    driver error) are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
