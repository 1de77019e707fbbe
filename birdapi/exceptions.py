"""
BirdAPI: Custom Exception Hierarchy
====================================

What:  Application-specific exceptions for the failures a request can hit.
How:   Each exception carries a message and an optional context dict.
       Global handlers registered in main.py turn them into JSON error
       responses with the right status code.
Who:   Raised by stores and form parsing; caught by the global handlers.

Exception Hierarchy:
    BirdAPIError (base)
    ├── FormParseError   → 500 Internal Server Error
    └── DatabaseError    → 500 Internal Server Error

    A malformed form is reported as 500 rather than 400 to keep the
    status the service has always returned for that case.
"""

from typing import Any, Dict, Optional


class BirdAPIError(Exception):
    """
    Base exception for all BirdAPI application errors.

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


class FormParseError(BirdAPIError):
    """
    Raised when a submitted form body cannot be decoded.

    When:    Invalid percent escape (`%zz`) or a `;` used as a separator,
             in the body or the query string. Invalid UTF-8 is not an
             error; undecodable bytes are replaced.
    HTTP:    500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "The submitted form could not be parsed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(BirdAPIError):
    """
    Raised when a store operation fails.

    What:    An insert or select against the relational store failed.
    When:    Connection lost, table missing, unreadable row, etc.
    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic. Driver
        errors and SQL text are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
