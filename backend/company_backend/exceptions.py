"""
Company Backend — Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions raised by the service layer.
How:   Each exception carries a message and an optional context dict.
       Handlers registered in main.py turn them into HTTP responses; the
       context is logged server-side and never sent to the client.

Exception Hierarchy:
    CompanyBackendError (base)
    ├── ValidationError     → 400 Bad Request (photo upload only)
    ├── FileStorageError    → 500 Internal Server Error
    └── DatabaseError       → 500 Internal Server Error (plain text body)

The CRUD handlers do not validate input and do not translate store errors
into client-facing codes: every store failure ends up as a generic 500.
"""

from typing import Any, Dict, Optional


class CompanyBackendError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Human-readable error description
        context:  Additional debug info (logged, not returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(CompanyBackendError):
    """
    Raised when an uploaded photo is rejected.

    When:    Unsupported extension, empty file, file larger than MAX_PHOTO_SIZE.
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


class FileStorageError(CompanyBackendError):
    """
    Raised when writing a photo to the photos directory fails.

    When:    Disk full, permission denied, directory not writable.
    HTTP:    500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "File storage operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(CompanyBackendError):
    """
    Raised when a statement against the store fails.

    When:    Store unreachable, constraint violation, malformed value.
    HTTP:    500 Internal Server Error, body "Internal Server Error".

    The operation name and driver exception type go into `context` for the
    server log; the client only ever sees the generic response.
    """

    def __init__(
        self,
        message: str = "A database error occurred.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
