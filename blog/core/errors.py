"""Error hierarchy for the blog core.

Every failure the core can signal is a ``BlogError`` subclass carrying a
stable ``code``, a category and the HTTP status the handler layer maps it
to. Messages are safe to show to clients.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class ErrorCategory(str, Enum):
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    BUSINESS_RULE = "business_rule"
    INTERNAL = "internal"


class BlogError(Exception):
    """Base exception for all blog errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status
        self.timestamp = datetime.now(timezone.utc)

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "timestamp": self.timestamp.isoformat(),
            }
        }


class ValidationError(BlogError):
    """Malformed or out-of-range input."""
    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, "VALIDATION_ERROR", ErrorCategory.VALIDATION, 400)
        self.field = field

    def to_response(self) -> dict:
        response = super().to_response()
        if self.field:
            response["error"]["field"] = self.field
        return response


class NotFoundError(BlogError):
    """Referenced entity does not exist."""
    def __init__(self, resource_type: str, resource_id: Optional[object] = None):
        message = f"{resource_type} not found"
        if resource_id is not None:
            message = f"{resource_type} '{resource_id}' not found"
        super().__init__(message, "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, 404)
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConflictError(BlogError):
    """Duplicate user name or duplicate like."""
    def __init__(self, message: str):
        super().__init__(message, "CONFLICT", ErrorCategory.CONFLICT, 409)


class UnauthenticatedError(BlogError):
    """Missing, invalid or expired credentials."""
    def __init__(self, message: str = "Could not validate credentials", code: str = "UNAUTHENTICATED"):
        super().__init__(message, code, ErrorCategory.AUTHENTICATION, 401)


class InvalidCredentialsError(UnauthenticatedError):
    """Login failed. Same message whether the user or the password was wrong."""
    def __init__(self):
        super().__init__("Invalid username or password", "INVALID_CREDENTIALS")


class ForbiddenError(BlogError):
    """Authenticated caller is not allowed to touch the resource."""
    def __init__(self, message: str):
        super().__init__(message, "FORBIDDEN", ErrorCategory.AUTHORIZATION, 403)


class InvalidOperationError(BlogError):
    """Domain rule violation, such as liking your own post."""
    def __init__(self, message: str):
        super().__init__(message, "INVALID_OPERATION", ErrorCategory.BUSINESS_RULE, 400)


class InternalError(BlogError):
    """Unexpected store fault. The message never carries internals."""
    def __init__(self, message: str = "An unexpected error occurred"):
        super().__init__(message, "INTERNAL_ERROR", ErrorCategory.INTERNAL, 500)
