"""
Campus Web — Custom Exception Hierarchy
=========================================

What:  Application-specific exceptions for the error cases page handlers raise.
How:   Each exception carries a user-facing message, an HTTP status code and an
       optional context dict. Global handlers (registered in main.py) turn them
       into rendered error pages.
Who:   Raised by services and route dependencies; caught by global handlers.

Exception Hierarchy:
    CampusError (base)                → 500 error page
    ├── NotFoundError                 → 404 error page
    ├── DatabaseError                 → 500 error page
    └── AuthenticationRequiredError   → redirect to /login

Presentation code (greetings, themes, asset registry, locals) never raises;
these are for page-specific handlers only.
"""

from typing import Any, Dict, Optional


class CampusError(Exception):
    """
    Base exception for all Campus Web application errors.

    Attributes:
        message:      User-facing error description
        context:      Additional debug info (logged, never rendered in production)
        status_code:  HTTP status used for the error page
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


class NotFoundError(CampusError):
    """Raised when a course, faculty member or other record does not exist."""

    status_code = 404

    def __init__(
        self,
        resource: str = "page",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource.capitalize()} {resource_id} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(CampusError):
    """
    Raised when database operations fail unexpectedly.

    The rendered page always shows a generic message; the SQL error and
    statement details go to the server log only.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class AuthenticationRequiredError(CampusError):
    """Raised by the require_login dependency when no user is signed in."""

    status_code = 401

    def __init__(
        self,
        message: str = "Please log in to view that page.",
        next_path: Optional[str] = None,
    ):
        ctx = {"next": next_path} if next_path else {}
        super().__init__(message=message, context=ctx)
        self.next_path = next_path
