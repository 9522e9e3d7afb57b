"""
Application exceptions with structured error context.

Every failure a component can report is one of the classes below. Each
carries the HTTP status it maps to, so the HTTP surface can render any of
them without knowing where it came from.

Exception Hierarchy:
    AppException (base)
    ├── ValidationError      400  missing/invalid request fields
    ├── UnauthorizedError    401  bad credentials or token
    ├── NotFoundError        404  missing entity or no matching notebook
    ├── ConflictError        409  duplicate email
    ├── UpstreamError        500  remote platform call failed or bad shape
    └── InternalError        500
        ├── DatabaseError         storage failure
        └── ConfigurationError    required setting missing
"""

from typing import Optional, Dict, Any
from datetime import datetime


class AppException(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message: Human-readable error message (safe to show to clients)
        context: Additional context information for logs only
        original_exception: The original exception that was caught (if any)
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        self.message = message
        self.context = context or {}
        self.original_exception = original_exception
        self.timestamp = datetime.utcnow()

        self.context["error_timestamp"] = self.timestamp.isoformat()

        super().__init__(message)
        if original_exception:
            self.__cause__ = original_exception

    def __str__(self) -> str:
        """Format error message with context."""
        base_msg = f"{self.__class__.__name__}: {self.message}"

        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg += f" | Context: {context_str}"

        if self.original_exception:
            base_msg += f" | Caused by: {type(self.original_exception).__name__}: {str(self.original_exception)}"

        return base_msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "original_error": str(self.original_exception) if self.original_exception else None
        }


class ValidationError(AppException):
    """
    Raised when a request is missing fields or carries invalid values.

    Context should include:
        - field_name: Name of the offending field (if known)
    """
    status_code = 400


class UnauthorizedError(AppException):
    """Raised for unknown emails, wrong passwords and invalid or revoked tokens."""
    status_code = 401


class NotFoundError(AppException):
    """
    Raised when an entity does not exist or no remote notebook matches.

    Context should include:
        - entity: Entity name (User, Organization, ...) or "notebook"
        - lookup: The id or search term that found nothing
    """
    status_code = 404


class ConflictError(AppException):
    """Raised when a write collides with existing data (duplicate email)."""
    status_code = 409


class UpstreamError(AppException):
    """
    Raised when the remote notebook platform call fails or returns an
    unexpected shape.

    Context should include:
        - url: The upstream endpoint
        - status_code: HTTP status code (if a response arrived)
    """
    status_code = 500


class InternalError(AppException):
    """Base exception for storage and unexpected failures."""
    status_code = 500


class DatabaseError(InternalError):
    """
    Raised when a database operation fails.

    Context should include:
        - operation: create, update, delete, query
        - entity: Model name
    """
    pass


class ConfigurationError(InternalError):
    """
    Raised when a required setting is missing at request time.

    Context should include:
        - missing: Names of the missing settings
    """
    pass
