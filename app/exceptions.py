"""
Custom Exception Classes for the Blog GraphQL API

This module defines the error taxonomy raised by services, the repository
and resolvers. Every error carries a machine-readable code which is copied
into the ``extensions`` of the GraphQL error returned to the client.
"""

import enum
from typing import Any

from fastapi import status


class ErrorCode(str, enum.Enum):
    """Machine-readable error codes exposed in GraphQL error extensions."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    DUPLICATE_RESOURCE = "DUPLICATE_RESOURCE"
    DATABASE_ERROR = "DATABASE_ERROR"
    INVARIANT_VIOLATION = "INVARIANT_VIOLATION"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class BlogAPIError(Exception):
    """Base exception class for all Blog API exceptions"""

    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    @property
    def extensions(self) -> dict[str, Any]:
        """Payload graphql-core attaches to the located GraphQL error."""
        extensions: dict[str, Any] = {"code": self.error_code.value, "statusCode": self.status_code}
        if self.details:
            extensions["details"] = self.details
        return extensions


# ============================================================================
# Validation Exceptions
# ============================================================================


class ValidationError(BlogAPIError):
    """Raised when input validation fails"""

    error_code = ErrorCode.VALIDATION_FAILED

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        error_details = details or {}
        if field:
            error_details["field"] = field
        super().__init__(message=message, status_code=status.HTTP_400_BAD_REQUEST, details=error_details)


class DuplicateResourceError(BlogAPIError):
    """Raised when attempting to create a duplicate resource"""

    error_code = ErrorCode.DUPLICATE_RESOURCE

    def __init__(self, resource_type: str, field: str, value: Any):
        super().__init__(
            message=f"{resource_type} with {field} '{value}' already exists",
            status_code=status.HTTP_409_CONFLICT,
            details={"resource_type": resource_type, "field": field, "value": value},
        )


# ============================================================================
# Resource Not Found Exceptions
# ============================================================================


class ResourceNotFoundError(BlogAPIError):
    """Base class for resource not found errors"""

    error_code = ErrorCode.RESOURCE_NOT_FOUND

    def __init__(self, resource_type: str, resource_id: Any | None = None):
        message = f"{resource_type} not found"
        if resource_id is not None:
            message = f"{resource_type} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details={"resource_type": resource_type, "resource_id": resource_id},
        )


class UserNotFoundError(ResourceNotFoundError):
    def __init__(self, user_id: Any | None = None):
        super().__init__(resource_type="User", resource_id=user_id)


class ProfileNotFoundError(ResourceNotFoundError):
    def __init__(self, profile_id: Any | None = None):
        super().__init__(resource_type="Profile", resource_id=profile_id)


class BlogNotFoundError(ResourceNotFoundError):
    def __init__(self, blog_id: Any | None = None):
        super().__init__(resource_type="Blog", resource_id=blog_id)


class BlogPostNotFoundError(ResourceNotFoundError):
    def __init__(self, blog_post_id: Any | None = None):
        super().__init__(resource_type="BlogPost", resource_id=blog_post_id)


class BlogCommentNotFoundError(ResourceNotFoundError):
    def __init__(self, blog_comment_id: Any | None = None):
        super().__init__(resource_type="BlogComment", resource_id=blog_comment_id)


NOT_FOUND_ERRORS: dict[str, type[ResourceNotFoundError]] = {
    "User": UserNotFoundError,
    "Profile": ProfileNotFoundError,
    "Blog": BlogNotFoundError,
    "BlogPost": BlogPostNotFoundError,
    "BlogComment": BlogCommentNotFoundError,
}


def not_found_error(resource_type: str, resource_id: Any | None = None) -> ResourceNotFoundError:
    """Build the most specific not-found error for an entity name."""
    error_class = NOT_FOUND_ERRORS.get(resource_type)
    if error_class is None:
        return ResourceNotFoundError(resource_type, resource_id)
    return error_class(resource_id)


# ============================================================================
# Database & Consistency Exceptions
# ============================================================================


class DatabaseError(BlogAPIError):
    """Raised when a database operation fails"""

    error_code = ErrorCode.DATABASE_ERROR

    def __init__(self, message: str = "A database error occurred", operation: str | None = None):
        details = {"operation": operation} if operation else {}
        if operation:
            message = f"{operation}: {message}"
        super().__init__(message=message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, details=details)


class UniqueConstraintError(DatabaseError):
    """Raised when a write collides with a unique constraint at commit time"""


class InvariantViolationError(BlogAPIError):
    """Raised when stored data breaks a relationship invariant"""

    error_code = ErrorCode.INVARIANT_VIOLATION

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message=message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, details=details or {})
